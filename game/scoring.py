"""
Silicon Wars - Scoring Module

Rates a computer configuration the way the test lab does:
- Per-segment fitness of each component (gaming, business, workstation)
- Weighted category score per segment
- Tier compatibility: synergies and bottlenecks between components
- Build quality, including the case
- Overall index across segments

Everything here is a pure function of its arguments. Unknown component names
never raise; they score with a conservative per-category default.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from config import (
    SEGMENT_WEIGHTS, BUILD_QUALITY_WEIGHTS,
    BUILD_QUALITY_COMPONENT_SHARE, BUILD_QUALITY_CASE_SHARE,
    CASE_QUALITY_MAX_POINTS, DEFAULT_CASE_QUALITY,
    CASE_PREMIUM_THRESHOLD, CASE_SOLID_THRESHOLD,
    COMPATIBILITY_BASE_SCORE, COMPATIBILITY_MIN_SCORE, COMPATIBILITY_MAX_SCORE,
    HIGH_END_MIN_TIERS, HIGH_END_BONUS,
    CPU_RAM_BALANCE_TOLERANCE, CPU_RAM_BALANCE_BONUS, CPU_RAM_GAP,
    RAM_LIMITED_PENALTY, RAM_UNDERUSED_PENALTY,
    CPU_GPU_MIN_TIER, CPU_GPU_BONUS, CPU_GPU_MAX_GAP, CPU_GPU_IMBALANCE_PENALTY,
    SOUND_GPU_MIN_TIERS, SOUND_GPU_BONUS,
    QUALITY_RATING_THRESHOLDS, OVERALL_WEIGHTS,
    TOP_CONFIGURATION_1988, TOP_CONFIGURATION_MIN_SEGMENT_SCORE,
    TOP_CONFIGURATION_MIN_OVERALL,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 up, the way the game always has (Python's round() doesn't)"""
    return int(math.floor(value + 0.5))


class Segment(Enum):
    """Buyer segments a configuration is rated for"""
    GAMING = "gaming"
    BUSINESS = "business"
    WORKSTATION = "workstation"


class QualityRating(Enum):
    """Stable rating keys. The UI translates them."""
    EXCELLENT = "excellent"
    OUTSTANDING = "outstanding"
    VERY_GOOD = "very_good"
    GOOD = "good"
    SATISFACTORY = "satisfactory"
    SUFFICIENT = "sufficient"
    WEAK = "weak"
    POOR = "poor"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()


# =============================================================================
# COMPONENT TABLES
# =============================================================================
# Fitness per segment plus tier. Tier drives compatibility only.

CPU_SCORES = {
    "MOS 6502": {"gaming": 25, "business": 15, "workstation": 5, "tier": 1},
    "Zilog Z80": {"gaming": 35, "business": 25, "workstation": 10, "tier": 2},
    "Intel 8086": {"gaming": 45, "business": 75, "workstation": 40, "tier": 3},
    "Motorola 68000": {"gaming": 75, "business": 85, "workstation": 75, "tier": 4},
    "Intel 80286": {"gaming": 65, "business": 90, "workstation": 85, "tier": 5},
    "Intel 80386": {"gaming": 80, "business": 95, "workstation": 90, "tier": 6},
    "Intel 80486": {"gaming": 90, "business": 98, "workstation": 95, "tier": 7},
}

GPU_SCORES = {
    "MOS VIC": {"gaming": 15, "business": 10, "workstation": 5, "tier": 1},
    "TI TMS9918": {"gaming": 45, "business": 30, "workstation": 25, "tier": 2},
    "Atari GTIA": {"gaming": 65, "business": 40, "workstation": 35, "tier": 3},
    "Commodore VIC-II": {"gaming": 80, "business": 50, "workstation": 45, "tier": 4},
    "VGA Graphics": {"gaming": 95, "business": 85, "workstation": 90, "tier": 5},
    "Super VGA": {"gaming": 98, "business": 90, "workstation": 95, "tier": 6},
}

RAM_SCORES = {
    "4KB RAM": {"gaming": 10, "business": 5, "workstation": 0, "tier": 1},
    "16KB RAM": {"gaming": 25, "business": 15, "workstation": 5, "tier": 2},
    "64KB RAM": {"gaming": 50, "business": 45, "workstation": 25, "tier": 3},
    "256KB RAM": {"gaming": 75, "business": 80, "workstation": 60, "tier": 4},
    "512KB RAM": {"gaming": 85, "business": 90, "workstation": 80, "tier": 5},
    "1MB RAM": {"gaming": 90, "business": 95, "workstation": 90, "tier": 6},
    "2MB RAM": {"gaming": 95, "business": 98, "workstation": 95, "tier": 7},
    "4MB RAM": {"gaming": 98, "business": 100, "workstation": 98, "tier": 8},
}

SOUND_SCORES = {
    "PC Speaker": {"gaming": 5, "business": 20, "workstation": 15, "tier": 1},
    "AY-3-8910": {"gaming": 60, "business": 30, "workstation": 25, "tier": 2},
    "SID 6581": {"gaming": 95, "business": 40, "workstation": 35, "tier": 3},
    "Yamaha YM2149": {"gaming": 80, "business": 45, "workstation": 40, "tier": 4},
    "AdLib Sound": {"gaming": 90, "business": 50, "workstation": 45, "tier": 5},
    "Sound Blaster": {"gaming": 95, "business": 55, "workstation": 50, "tier": 6},
}

# Unknown names. Deliberately different per category: changing them would
# shift game balance for every uncataloged part.
DEFAULT_CPU_SCORE = {"gaming": 30, "business": 30, "workstation": 30, "tier": 1}
DEFAULT_GPU_SCORE = {"gaming": 20, "business": 15, "workstation": 15, "tier": 1}
DEFAULT_RAM_SCORE = {"gaming": 15, "business": 10, "workstation": 5, "tier": 1}
DEFAULT_SOUND_SCORE = {"gaming": 10, "business": 15, "workstation": 10, "tier": 1}


def get_quality_rating(score: float) -> QualityRating:
    """Map a 0-100 score onto the rating ladder"""
    for threshold, key in QUALITY_RATING_THRESHOLDS:
        if score >= threshold:
            return QualityRating(key)
    return QualityRating.POOR


@dataclass(frozen=True)
class ComponentScore:
    score: int
    tier: int
    quality_rating: QualityRating

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "tier": self.tier,
            "qualityRating": self.quality_rating.value,
        }


def _evaluate(table: Dict, default: Dict, name: str, segment, slot: str) -> ComponentScore:
    segment = Segment(segment)
    data = table.get(name)
    if data is None:
        logger.debug(f"Unknown {slot} '{name}', scoring with defaults")
        data = default
    score = data[segment.value]
    return ComponentScore(score=score, tier=data["tier"], quality_rating=get_quality_rating(score))


def evaluate_cpu(cpu: str, segment: Segment) -> ComponentScore:
    return _evaluate(CPU_SCORES, DEFAULT_CPU_SCORE, cpu, segment, "cpu")


def evaluate_gpu(gpu: str, segment: Segment) -> ComponentScore:
    return _evaluate(GPU_SCORES, DEFAULT_GPU_SCORE, gpu, segment, "gpu")


def evaluate_ram(ram: str, segment: Segment) -> ComponentScore:
    return _evaluate(RAM_SCORES, DEFAULT_RAM_SCORE, ram, segment, "ram")


def evaluate_sound(sound: str, segment: Segment) -> ComponentScore:
    return _evaluate(SOUND_SCORES, DEFAULT_SOUND_SCORE, sound, segment, "sound")


def calculate_category_score(
    cpu: ComponentScore,
    gpu: ComponentScore,
    ram: ComponentScore,
    sound: ComponentScore,
    segment: Segment
) -> int:
    """Weighted score of one configuration for one segment"""
    weights = SEGMENT_WEIGHTS[Segment(segment).value]
    return round_half_up(
        cpu.score * weights["cpu"]
        + gpu.score * weights["gpu"]
        + ram.score * weights["ram"]
        + sound.score * weights["sound"]
    )


# =============================================================================
# COMPATIBILITY
# =============================================================================

@dataclass
class CompatibilityResult:
    score: int
    synergies: List[str] = field(default_factory=list)
    bottlenecks: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "synergies": list(self.synergies),
            "bottlenecks": list(self.bottlenecks),
        }


def evaluate_compatibility(
    cpu: ComponentScore,
    gpu: ComponentScore,
    ram: ComponentScore,
    sound: ComponentScore
) -> CompatibilityResult:
    """
    How well the component tiers fit together.

    Starts at COMPATIBILITY_BASE_SCORE. Every rule that applies adds its
    bonus or penalty and a message; the result is clamped to
    [COMPATIBILITY_MIN_SCORE, COMPATIBILITY_MAX_SCORE].
    """
    score = COMPATIBILITY_BASE_SCORE
    synergies = []
    bottlenecks = []

    if (cpu.tier >= HIGH_END_MIN_TIERS["cpu"]
            and gpu.tier >= HIGH_END_MIN_TIERS["gpu"]
            and ram.tier >= HIGH_END_MIN_TIERS["ram"]):
        synergies.append("Excellent high-end combination - every component at the top of its class")
        score += HIGH_END_BONUS

    if abs(cpu.tier - ram.tier) <= CPU_RAM_BALANCE_TOLERANCE:
        synergies.append("Balanced CPU and RAM make full use of the processor")
        score += CPU_RAM_BALANCE_BONUS
    elif cpu.tier > ram.tier + CPU_RAM_GAP:
        bottlenecks.append("Too little RAM holds back the powerful CPU")
        score -= RAM_LIMITED_PENALTY
    elif ram.tier > cpu.tier + CPU_RAM_GAP:
        bottlenecks.append("Oversized RAM goes unused by the weak CPU")
        score -= RAM_UNDERUSED_PENALTY

    if cpu.tier >= CPU_GPU_MIN_TIER and gpu.tier >= CPU_GPU_MIN_TIER:
        synergies.append("Strong CPU and GPU pairing for the most demanding software")
        score += CPU_GPU_BONUS
    elif abs(cpu.tier - gpu.tier) > CPU_GPU_MAX_GAP:
        bottlenecks.append("Severe imbalance between processor and graphics")
        score -= CPU_GPU_IMBALANCE_PENALTY

    if sound.tier >= SOUND_GPU_MIN_TIERS["sound"] and gpu.tier >= SOUND_GPU_MIN_TIERS["gpu"]:
        synergies.append("High-quality audio and video for a complete multimedia experience")
        score += SOUND_GPU_BONUS

    score = max(COMPATIBILITY_MIN_SCORE, min(COMPATIBILITY_MAX_SCORE, score))

    return CompatibilityResult(score=score, synergies=synergies, bottlenecks=bottlenecks)


# =============================================================================
# BUILD QUALITY
# =============================================================================

@dataclass
class BuildQuality:
    score: int
    rating: QualityRating
    components: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "rating": self.rating.value,
            "components": list(self.components),
        }


def _case_workmanship(case_quality: float) -> str:
    if case_quality >= CASE_PREMIUM_THRESHOLD:
        return "Premium"
    elif case_quality >= CASE_SOLID_THRESHOLD:
        return "Solid"
    return "Basic"


def evaluate_build_quality(
    cpu: ComponentScore,
    gpu: ComponentScore,
    ram: ComponentScore,
    sound: ComponentScore,
    case_quality: float = DEFAULT_CASE_QUALITY
) -> BuildQuality:
    """
    Blend of component scores (85%) and case quality (15%).

    The case term is scaled so a perfect case is worth CASE_QUALITY_MAX_POINTS.
    """
    weights = BUILD_QUALITY_WEIGHTS
    component_total = (
        cpu.score * weights["cpu"]
        + gpu.score * weights["gpu"]
        + ram.score * weights["ram"]
        + sound.score * weights["sound"]
    )
    scaled_case = (case_quality / 100) * CASE_QUALITY_MAX_POINTS
    total = component_total * BUILD_QUALITY_COMPONENT_SHARE + scaled_case * BUILD_QUALITY_CASE_SHARE

    case_rating = get_quality_rating(case_quality)
    lines = [
        f"CPU: {cpu.quality_rating.label} - premium-class processor",
        f"GPU: {gpu.quality_rating.label} - high-quality graphics",
        f"RAM: {ram.quality_rating.label} - professional memory modules",
        f"Sound: {sound.quality_rating.label} - audio component",
        f"Case: {case_rating.label} - {_case_workmanship(case_quality)} workmanship",
    ]

    # Rating uses the unrounded total
    return BuildQuality(
        score=round_half_up(total),
        rating=get_quality_rating(total),
        components=lines,
    )


# =============================================================================
# OVERALL INDEX
# =============================================================================

def calculate_overall_score(
    business_score: float,
    gaming_score: float,
    compatibility_score: float,
    build_quality_score: float
) -> int:
    return round_half_up(
        business_score * OVERALL_WEIGHTS["business"]
        + gaming_score * OVERALL_WEIGHTS["gaming"]
        + compatibility_score * OVERALL_WEIGHTS["compatibility"]
        + build_quality_score * OVERALL_WEIGHTS["build_quality"]
    )


@dataclass
class Configuration:
    """One component per slot, as picked in the model editor"""

    cpu: str
    gpu: str
    ram: str
    sound: str
    case_quality: float = DEFAULT_CASE_QUALITY
    accessories: List[str] = field(default_factory=list)
    case_price: Optional[float] = None

    def to_model_dict(self) -> dict:
        """Shape expected by hardware.calculate_model_cost()"""
        model = {
            "cpu": self.cpu,
            "gpu": self.gpu,
            "ram": self.ram,
            "sound": self.sound,
            "accessories": list(self.accessories),
        }
        if self.case_price is not None:
            model["case"] = {"price": self.case_price}
        return model

    @classmethod
    def from_dict(cls, data: dict) -> "Configuration":
        case = data.get("case") or {}
        case_quality = data.get("case_quality", data.get("caseQuality", case.get("quality")))
        return cls(
            cpu=data["cpu"],
            gpu=data["gpu"],
            ram=data["ram"],
            sound=data["sound"],
            case_quality=DEFAULT_CASE_QUALITY if case_quality is None else case_quality,
            accessories=list(data.get("accessories") or []),
            case_price=case.get("price"),
        )


@dataclass
class ConfigurationReport:
    """Full test-lab verdict on a configuration"""

    configuration: Configuration
    segment: Segment
    cpu: ComponentScore
    gpu: ComponentScore
    ram: ComponentScore
    sound: ComponentScore
    category_scores: Dict[Segment, int]
    compatibility: CompatibilityResult
    build_quality: BuildQuality

    @property
    def overall(self) -> int:
        return calculate_overall_score(
            self.category_scores[Segment.BUSINESS],
            self.category_scores[Segment.GAMING],
            self.compatibility.score,
            self.build_quality.score,
        )

    @property
    def rating(self) -> QualityRating:
        return get_quality_rating(self.overall)

    def get_breakdown_display(self) -> str:
        """Formatted test report"""
        lines = []
        lines.append("-" * 40)
        lines.append("           TEST REPORT")
        lines.append("-" * 40)
        lines.append("")
        lines.append(f"  CPU   {self.configuration.cpu}".ljust(32) + f"{self.cpu.score:>6}")
        lines.append(f"  GPU   {self.configuration.gpu}".ljust(32) + f"{self.gpu.score:>6}")
        lines.append(f"  RAM   {self.configuration.ram}".ljust(32) + f"{self.ram.score:>6}")
        lines.append(f"  Sound {self.configuration.sound}".ljust(32) + f"{self.sound.score:>6}")
        lines.append("")
        for segment in Segment:
            lines.append(f"  {segment.value.capitalize()}".ljust(32) + f"{self.category_scores[segment]:>6}")
        lines.append(f"  Compatibility".ljust(32) + f"{self.compatibility.score:>6}")
        lines.append(f"  Build quality".ljust(32) + f"{self.build_quality.score:>6}")
        lines.append("")
        lines.append("-" * 40)
        lines.append(f"  OVERALL ({self.rating.label})".ljust(32) + f"{self.overall:>6}")
        lines.append("-" * 40)
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "segment": self.segment.value,
            "components": {
                "cpu": self.cpu.to_dict(),
                "gpu": self.gpu.to_dict(),
                "ram": self.ram.to_dict(),
                "sound": self.sound.to_dict(),
            },
            "categoryScores": {segment.value: score for segment, score in self.category_scores.items()},
            "compatibility": self.compatibility.to_dict(),
            "buildQuality": self.build_quality.to_dict(),
            "overall": self.overall,
            "rating": self.rating.value,
        }


def evaluate_configuration(
    configuration: Configuration,
    segment: Segment = Segment.BUSINESS
) -> ConfigurationReport:
    """
    Run the whole test lab on a configuration.

    Component scores, compatibility and build quality use `segment`.
    Category scores are computed for every segment from that segment's own
    component scores.
    """
    segment = Segment(segment)

    category_scores = {}
    for each in Segment:
        category_scores[each] = calculate_category_score(
            evaluate_cpu(configuration.cpu, each),
            evaluate_gpu(configuration.gpu, each),
            evaluate_ram(configuration.ram, each),
            evaluate_sound(configuration.sound, each),
            each,
        )

    cpu = evaluate_cpu(configuration.cpu, segment)
    gpu = evaluate_gpu(configuration.gpu, segment)
    ram = evaluate_ram(configuration.ram, segment)
    sound = evaluate_sound(configuration.sound, segment)

    return ConfigurationReport(
        configuration=configuration,
        segment=segment,
        cpu=cpu,
        gpu=gpu,
        ram=ram,
        sound=sound,
        category_scores=category_scores,
        compatibility=evaluate_compatibility(cpu, gpu, ram, sound),
        build_quality=evaluate_build_quality(cpu, gpu, ram, sound, configuration.case_quality),
    )


def validate_top_configuration_1988_q2() -> dict:
    """
    Regression check: the best Q2/1988 build must score well.

    Both category scores use the business component scores, as the test lab
    always has.
    """
    top = TOP_CONFIGURATION_1988
    cpu = evaluate_cpu(top["cpu"], Segment.BUSINESS)
    gpu = evaluate_gpu(top["gpu"], Segment.BUSINESS)
    ram = evaluate_ram(top["ram"], Segment.BUSINESS)
    sound = evaluate_sound(top["sound"], Segment.BUSINESS)

    business = calculate_category_score(cpu, gpu, ram, sound, Segment.BUSINESS)
    gaming = calculate_category_score(cpu, gpu, ram, sound, Segment.GAMING)
    compatibility = evaluate_compatibility(cpu, gpu, ram, sound)
    build_quality = evaluate_build_quality(cpu, gpu, ram, sound, top["case_quality"])

    overall = calculate_overall_score(business, gaming, compatibility.score, build_quality.score)

    passed = (
        business >= TOP_CONFIGURATION_MIN_SEGMENT_SCORE
        and gaming >= TOP_CONFIGURATION_MIN_SEGMENT_SCORE
        and overall >= TOP_CONFIGURATION_MIN_OVERALL
    )
    if not passed:
        logger.warning(f"Top 1988 configuration regressed: business={business}, gaming={gaming}, overall={overall}")

    return {
        "passed": passed,
        "business": business,
        "gaming": gaming,
        "overall": overall,
        "details": (
            f"Business: {business}, Gaming: {gaming}, Overall: {overall}, "
            f"Rating: {get_quality_rating(overall).label}"
        ),
    }
