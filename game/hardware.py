"""
Silicon Wars - Hardware Catalog Module

The historical hardware timeline every company builds from:
- Static component records per category, each unlocking at a (year, quarter)
- Player-exclusive custom chips coming out of research
- Name lookups and model cost calculation for pricing

The static catalog is defined once at import time and never mutated.
"""

import logging
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, List, Optional, Any

from config import FALLBACK_COSTS

logger = logging.getLogger(__name__)


class HardwareType(Enum):
    """Catalog categories"""
    CPU = "cpu"
    GPU = "gpu"
    MEMORY = "memory"
    SOUND = "sound"
    STORAGE = "storage"
    DISPLAY = "display"


@dataclass(frozen=True)
class HardwareRecord:
    """A single entry in the historical timeline"""

    name: str
    type: HardwareType
    performance: int  # 0-100
    cost: int
    description: str
    year: int
    quarter: int = 1

    def is_available_at(self, year: int, quarter: int) -> bool:
        """True from (year, quarter) on. Quarters are not validated."""
        return year > self.year or (year == self.year and quarter >= self.quarter)


@dataclass
class CustomChip:
    """
    A chip the player's own research produced.

    Always exclusive to the player and, once developed, always available.
    """

    id: str
    name: str
    type: HardwareType
    performance: int
    cost: int
    description: str
    developed_year: int
    developed_quarter: int
    exclusive_to_player: bool = True

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["type"] = self.type.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomChip":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            type=HardwareType(data["type"]),
            performance=int(data.get("performance", 0)),
            cost=int(data.get("cost", 0)),
            description=data.get("description", ""),
            developed_year=int(data.get("developed_year", data.get("developedYear", 0))),
            developed_quarter=int(data.get("developed_quarter", data.get("developedQuarter", 1))),
            exclusive_to_player=True,
        )


@dataclass
class HardwareComponent:
    """What catalog queries hand to the UI"""

    id: str
    name: str
    type: HardwareType
    performance: int
    cost: int
    description: str
    year: int
    quarter: int
    available: bool
    is_custom_chip: bool = False
    exclusive_to_player: bool = False

    @classmethod
    def from_record(cls, component_id: str, record: HardwareRecord, available: bool) -> "HardwareComponent":
        return cls(
            id=component_id,
            name=record.name,
            type=record.type,
            performance=record.performance,
            cost=record.cost,
            description=record.description,
            year=record.year,
            quarter=record.quarter,
            available=available,
        )

    @classmethod
    def from_custom_chip(cls, chip: CustomChip) -> "HardwareComponent":
        return cls(
            id=f"custom-{chip.id}",
            name=chip.name,
            type=chip.type,
            performance=chip.performance,
            cost=chip.cost,
            description=chip.description,
            year=chip.developed_year,
            quarter=chip.developed_quarter,
            available=True,
            is_custom_chip=True,
            exclusive_to_player=True,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the JSON API"""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "performance": self.performance,
            "cost": self.cost,
            "description": self.description,
            "year": self.year,
            "quarter": self.quarter,
            "available": self.available,
            "isCustomChip": self.is_custom_chip,
            "exclusiveToPlayer": self.exclusive_to_player,
        }


def _timeline(hw_type: HardwareType, rows: List[tuple]) -> List[HardwareRecord]:
    return [
        HardwareRecord(name, hw_type, performance, cost, description, year, quarter)
        for name, performance, cost, description, year, quarter in rows
    ]


# =============================================================================
# HISTORICAL TIMELINE
# =============================================================================
# (name, performance, cost, description, year, quarter)
# Listed per category in historical order.

BASE_COMPONENTS: Dict[HardwareType, List[HardwareRecord]] = {
    HardwareType.CPU: _timeline(HardwareType.CPU, [
        ("MOS 6502", 15, 25, "8-bit processor, 1 MHz - the classic", 1983, 1),
        ("Zilog Z80", 20, 35, "8-bit processor, 2.5 MHz - reliable and proven", 1983, 1),
        ("Intel 8086", 35, 85, "16-bit processor, 5 MHz - modern business power", 1984, 1),
        ("Motorola 68000", 45, 120, "16/32-bit processor, 8 MHz - premium performance", 1984, 2),
        ("Intel 80286", 65, 200, "16-bit processor, 12 MHz - high-end computing", 1985, 1),
        ("Intel 80386", 85, 350, "32-bit processor, 16 MHz - technology of the future", 1986, 1),
        ("Intel 80486", 100, 500, "32-bit processor, 25 MHz - cutting edge", 1988, 1),
    ]),
    HardwareType.GPU: _timeline(HardwareType.GPU, [
        ("MOS VIC", 10, 15, "160x200 pixels, 16 colors - simple graphics", 1983, 1),
        ("TI TMS9918", 25, 45, "256x192 pixels, 16 colors - solid gaming graphics", 1983, 2),
        ("Atari GTIA", 30, 60, "320x192 pixels, 256 colors - Atari technology", 1984, 1),
        ("Commodore VIC-II", 35, 70, "320x200 pixels, sprites - the C64 chip", 1984, 3),
        ("EGA Graphics", 45, 120, "640x350 pixels, 16 colors - enhanced graphics", 1985, 4),
        ("VGA Graphics", 55, 180, "640x480 pixels, 256 colors - the VGA standard", 1986, 2),
        ("Super VGA", 70, 250, "800x600 pixels, high-res gaming", 1987, 2),
    ]),
    HardwareType.MEMORY: _timeline(HardwareType.MEMORY, [
        ("4KB RAM", 5, 20, "4096 bytes of memory - the basics", 1983, 1),
        ("16KB RAM", 15, 60, "16384 bytes of memory - extended", 1983, 1),
        ("64KB RAM", 35, 150, "65536 bytes of memory - comfortable", 1984, 1),
        ("256KB RAM", 55, 300, "262144 bytes of memory - professional", 1985, 1),
        ("512KB RAM", 70, 500, "512KB of memory - high-end", 1986, 1),
        ("1MB RAM", 85, 800, "1 megabyte of memory - workstation grade", 1987, 1),
        ("2MB RAM", 95, 1200, "2 megabytes of memory - an extreme amount", 1988, 1),
    ]),
    HardwareType.SOUND: _timeline(HardwareType.SOUND, [
        ("PC Speaker", 5, 5, "Simple beeps - basic sound", 1983, 1),
        ("AY-3-8910", 25, 35, "3-channel synthesizer - classic arcade sound", 1983, 4),
        ("SID 6581", 45, 80, "3-channel synthesizer with filter - the legendary C64 sound", 1984, 3),
        ("Yamaha YM2149", 35, 50, "3-channel PSG synthesizer - Atari ST sound", 1985, 3),
        ("AdLib Sound", 60, 120, "FM synthesizer - PC gaming audio", 1986, 2),
        ("Sound Blaster", 75, 150, "Digital samples and FM - premium PC audio", 1987, 1),
        ("Sound Blaster Pro", 90, 200, "Stereo digital audio - professional sound", 1989, 3),
    ]),
    HardwareType.STORAGE: _timeline(HardwareType.STORAGE, [
        ("Cassette Drive", 10, 40, "Data on tape - cheap but slow", 1983, 2),
        ('Floppy Drive 5.25"', 35, 150, "160KB floppies - standard storage", 1983, 3),
        ('Floppy Drive 3.5"', 50, 120, "720KB floppies - modern disks", 1985, 3),
        ("Hard Disk 5MB", 60, 1500, "5 megabyte hard disk - permanent storage", 1985, 2),
        ("Hard Disk 10MB", 65, 1200, "10 megabyte hard disk - more capacity", 1986, 3),
        ("Hard Disk 20MB", 70, 1000, "20 megabyte hard disk - plenty of space", 1987, 2),
        ("CD-ROM Drive", 55, 800, "CD-ROM drive - the multimedia future", 1986, 4),
    ]),
    HardwareType.DISPLAY: _timeline(HardwareType.DISPLAY, [
        ("RF Modulator", 15, 25, "Connects to a TV set - the budget option", 1983, 3),
        ("Composite Monitor", 35, 200, "Monochrome monitor - sharp and clear", 1983, 4),
        ("RGB Monitor", 65, 500, "RGB color monitor - brilliant colors", 1984, 4),
        ("EGA Monitor", 75, 600, "Enhanced graphics monitor - professional", 1985, 4),
        ("VGA Monitor", 85, 750, "VGA high-resolution monitor - best picture quality", 1987, 1),
        ("Multisync Monitor", 95, 1200, "Multi-standard monitor - workstation class", 1988, 2),
    ]),
}


def iter_base_components():
    """All static records in catalog order (category by category)"""
    for records in BASE_COMPONENTS.values():
        yield from records


# Storage and display parts are sold as accessories
ACCESSORY_COSTS: Dict[str, int] = {
    record.name: record.cost
    for hw_type in (HardwareType.STORAGE, HardwareType.DISPLAY)
    for record in BASE_COMPONENTS[hw_type]
}


# =============================================================================
# LOOKUPS
# =============================================================================

def _find_record(hw_type: HardwareType, name: str) -> Optional[Dict[str, int]]:
    for record in BASE_COMPONENTS[hw_type]:
        if record.name == name:
            return {"performance": record.performance, "cost": record.cost}
    return None


def get_component_by_cpu(cpu: str) -> Optional[Dict[str, int]]:
    """Performance and cost of a catalog CPU, or None if unknown"""
    return _find_record(HardwareType.CPU, cpu)


def get_component_by_gpu(gpu: str) -> Optional[Dict[str, int]]:
    return _find_record(HardwareType.GPU, gpu)


def get_component_by_ram(ram: str) -> Optional[Dict[str, int]]:
    return _find_record(HardwareType.MEMORY, ram)


def get_component_by_sound(sound: str) -> Optional[Dict[str, int]]:
    return _find_record(HardwareType.SOUND, sound)


def _cost_or_fallback(data: Optional[Dict[str, int]], slot: str, name: Optional[str]) -> int:
    # A zero cost counts as missing, same as an unknown name
    if data and data["cost"]:
        return data["cost"]
    logger.debug(f"No catalog cost for {slot} '{name}', using {FALLBACK_COSTS[slot]}")
    return FALLBACK_COSTS[slot]


# Model slot -> (catalog category, lookup)
MODEL_SLOTS = {
    "cpu": (HardwareType.CPU, get_component_by_cpu),
    "gpu": (HardwareType.GPU, get_component_by_gpu),
    "ram": (HardwareType.MEMORY, get_component_by_ram),
    "sound": (HardwareType.SOUND, get_component_by_sound),
}


def get_component_costs(model: Dict[str, Any]) -> Dict[str, int]:
    """Catalog cost of each core component slot, with fallbacks applied"""
    return {
        slot: _cost_or_fallback(lookup(model.get(slot)), slot, model.get(slot))
        for slot, (_, lookup) in MODEL_SLOTS.items()
    }


def calculate_model_cost(model: Dict[str, Any]) -> int:
    """
    Bill of materials for a computer model.

    Args:
        model: dict with "cpu", "gpu", "ram", "sound" names, an optional
            "accessories" list and an optional "case" dict with a "price"

    Returns:
        Total cost. Unknown parts are priced with FALLBACK_COSTS.
    """
    total = sum(get_component_costs(model).values())

    for accessory in model.get("accessories") or []:
        total += ACCESSORY_COSTS.get(accessory) or FALLBACK_COSTS["accessory"]

    case = model.get("case") or {}
    total += case.get("price") or FALLBACK_COSTS["case"]

    return total
