import pytest

from config import SEGMENT_WEIGHTS
from scoring import (
    ComponentScore,
    Configuration,
    QualityRating,
    Segment,
    calculate_category_score,
    calculate_overall_score,
    evaluate_build_quality,
    evaluate_compatibility,
    evaluate_configuration,
    evaluate_cpu,
    evaluate_gpu,
    evaluate_ram,
    evaluate_sound,
    get_quality_rating,
    round_half_up,
    validate_top_configuration_1988_q2,
)


def tiered(tier, score=50):
    return ComponentScore(score=score, tier=tier, quality_rating=get_quality_rating(score))


def test_segment_weights_sum_to_one():
    for segment in Segment:
        assert abs(sum(SEGMENT_WEIGHTS[segment.value].values()) - 1.0) < 1e-9


def test_top_1988_business_scores():
    cpu = evaluate_cpu("Intel 80486", Segment.BUSINESS)
    gpu = evaluate_gpu("VGA Graphics", Segment.BUSINESS)
    ram = evaluate_ram("2MB RAM", Segment.BUSINESS)
    sound = evaluate_sound("Yamaha YM2149", Segment.BUSINESS)
    assert (cpu.score, gpu.score, ram.score, sound.score) == (98, 85, 98, 45)
    assert calculate_category_score(cpu, gpu, ram, sound, Segment.BUSINESS) == 91


def test_unknown_cpu_uses_default():
    score = evaluate_cpu("Foobar9000", Segment.GAMING)
    assert score.score == 30
    assert score.tier == 1
    assert score.quality_rating == QualityRating.POOR


@pytest.mark.parametrize("evaluate,expected", [
    (evaluate_cpu, {"gaming": 30, "business": 30, "workstation": 30}),
    (evaluate_gpu, {"gaming": 20, "business": 15, "workstation": 15}),
    (evaluate_ram, {"gaming": 15, "business": 10, "workstation": 5}),
    (evaluate_sound, {"gaming": 10, "business": 15, "workstation": 10}),
])
def test_unknown_defaults_differ_per_category(evaluate, expected):
    for segment in Segment:
        score = evaluate("Not In Catalog", segment)
        assert score.score == expected[segment.value]
        assert score.tier == 1


def test_segment_accepts_plain_string():
    assert evaluate_cpu("Intel 80386", "workstation") == evaluate_cpu("Intel 80386", Segment.WORKSTATION)


def test_segment_typo_is_rejected():
    with pytest.raises(ValueError):
        evaluate_cpu("Intel 80386", "gamming")


def test_tiers_are_segment_independent():
    assert {evaluate_ram("1MB RAM", s).tier for s in Segment} == {6}


@pytest.mark.parametrize("score,rating", [
    (100, QualityRating.EXCELLENT),
    (95, QualityRating.EXCELLENT),
    (94.9, QualityRating.OUTSTANDING),
    (90, QualityRating.OUTSTANDING),
    (80, QualityRating.VERY_GOOD),
    (70, QualityRating.GOOD),
    (60, QualityRating.SATISFACTORY),
    (50, QualityRating.SUFFICIENT),
    (40, QualityRating.WEAK),
    (39, QualityRating.POOR),
    (0, QualityRating.POOR),
])
def test_quality_rating_ladder(score, rating):
    assert get_quality_rating(score) == rating


def test_quality_rating_labels():
    assert QualityRating.VERY_GOOD.label == "Very good"
    assert QualityRating.EXCELLENT.label == "Excellent"


def test_round_half_up():
    assert round_half_up(84.5) == 85
    assert round_half_up(85.5) == 86
    assert round_half_up(91.4) == 91


def test_gaming_category_score():
    cpu = evaluate_cpu("Motorola 68000", Segment.GAMING)
    gpu = evaluate_gpu("Commodore VIC-II", Segment.GAMING)
    ram = evaluate_ram("256KB RAM", Segment.GAMING)
    sound = evaluate_sound("SID 6581", Segment.GAMING)
    # 75*.25 + 80*.4 + 75*.2 + 95*.15 = 18.75 + 32 + 15 + 14.25 = 80
    assert calculate_category_score(cpu, gpu, ram, sound, Segment.GAMING) == 80


def test_compatibility_all_synergies_clamped():
    result = evaluate_compatibility(tiered(7), tiered(5), tiered(7), tiered(4))
    # 80 + 15 + 8 + 10 + 5 = 118 -> 100
    assert result.score == 100
    assert len(result.synergies) == 4
    assert result.bottlenecks == []


def test_compatibility_ram_limited_and_imbalanced():
    result = evaluate_compatibility(tiered(7), tiered(1), tiered(1), tiered(1))
    # 80 - 15 - 12 = 53
    assert result.score == 53
    assert result.synergies == []
    assert len(result.bottlenecks) == 2


def test_compatibility_ram_underused():
    result = evaluate_compatibility(tiered(1), tiered(1), tiered(5), tiered(1))
    # 80 - 8 = 72
    assert result.score == 72
    assert result.bottlenecks == ["Oversized RAM goes unused by the weak CPU"]


def test_compatibility_small_gap_is_neutral():
    # cpu/ram gap of exactly 2 fires neither balance nor bottleneck
    result = evaluate_compatibility(tiered(3), tiered(2), tiered(1), tiered(1))
    assert result.score == 80
    assert result.synergies == []
    assert result.bottlenecks == []


@pytest.mark.parametrize("cpu,gpu,ram,sound", [
    (cpu, gpu, ram, sound)
    for cpu in (1, 4, 8)
    for gpu in (1, 4, 6)
    for ram in (1, 5, 8)
    for sound in (1, 3, 6)
])
def test_compatibility_always_within_bounds(cpu, gpu, ram, sound):
    result = evaluate_compatibility(tiered(cpu), tiered(gpu), tiered(ram), tiered(sound))
    assert 20 <= result.score <= 100


def test_build_quality_top_configuration():
    cpu = evaluate_cpu("Intel 80486", Segment.BUSINESS)
    gpu = evaluate_gpu("VGA Graphics", Segment.BUSINESS)
    ram = evaluate_ram("2MB RAM", Segment.BUSINESS)
    sound = evaluate_sound("Yamaha YM2149", Segment.BUSINESS)
    quality = evaluate_build_quality(cpu, gpu, ram, sound, 95)
    # (86.8 * .85) + (80.75 * .15) = 73.78 + 12.1125 = 85.8925
    assert quality.score == 86
    assert quality.rating == QualityRating.VERY_GOOD
    assert len(quality.components) == 5
    assert quality.components[-1] == "Case: Excellent - Premium workmanship"


def test_build_quality_default_case():
    poor = tiered(1, score=0)
    quality = evaluate_build_quality(poor, poor, poor, poor)
    # only the case counts: 70/100 * 85 * .15 = 8.925
    assert quality.score == 9
    assert quality.rating == QualityRating.POOR
    assert quality.components[-1] == "Case: Good - Solid workmanship"


def test_overall_score():
    assert calculate_overall_score(91, 85, 100, 86) == 90


def test_validate_top_configuration():
    result = validate_top_configuration_1988_q2()
    assert result["passed"] is True
    assert result["business"] == 91
    assert result["gaming"] == 85
    assert result["overall"] == 90
    assert "Overall: 90" in result["details"]


def test_evaluate_configuration_report():
    config = Configuration(cpu="Intel 80486", gpu="VGA Graphics", ram="2MB RAM", sound="Yamaha YM2149", case_quality=95)
    report = evaluate_configuration(config)
    assert report.segment == Segment.BUSINESS
    assert report.cpu.score == 98
    assert report.category_scores[Segment.BUSINESS] == 91
    # gaming uses gaming component scores: 90*.25 + 95*.4 + 95*.2 + 80*.15 = 91.5
    assert report.category_scores[Segment.GAMING] == 92
    assert report.compatibility.score == 100
    assert report.build_quality.score == 86
    # 91*.4 + 92*.3 + 100*.15 + 86*.15 = 36.4 + 27.6 + 15 + 12.9 = 91.9
    assert report.overall == 92
    assert report.rating == QualityRating.OUTSTANDING

    data = report.to_dict()
    assert data["categoryScores"]["business"] == 91
    assert data["rating"] == "outstanding"
    assert "OVERALL" in report.get_breakdown_display()


def test_evaluate_configuration_unknown_parts():
    config = Configuration(cpu="Foobar9000", gpu="?", ram="?", sound="?")
    report = evaluate_configuration(config, Segment.GAMING)
    assert report.cpu.score == 30
    assert report.compatibility.score == 88  # cpu/ram balance only


def test_configuration_from_dict():
    config = Configuration.from_dict({
        "cpu": "Intel 8086",
        "gpu": "MOS VIC",
        "ram": "64KB RAM",
        "sound": "PC Speaker",
        "caseQuality": 40,
        "accessories": ["Cassette Drive"],
        "case": {"price": 60},
    })
    assert config.case_quality == 40
    assert config.to_model_dict()["case"] == {"price": 60}


def test_scoring_is_repeatable():
    config = Configuration(cpu="Intel 80286", gpu="EGA Graphics", ram="512KB RAM", sound="AdLib Sound")
    assert evaluate_configuration(config).to_dict() == evaluate_configuration(config).to_dict()
