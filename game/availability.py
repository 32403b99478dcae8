"""
Silicon Wars - Hardware Availability Module

Answers "what can be built right now":
- Time-gated availability of the historical catalog
- Player-exclusive custom chips (always available)
- Hardware unlocked between two quarters, for news announcements

get_available_hardware() is the single source of truth for availability.
Every other lookup goes through it.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from hardware import (
    CustomChip, HardwareComponent, HardwareType, iter_base_components
)

logger = logging.getLogger(__name__)


def get_available_components(
    year: int,
    quarter: int,
    custom_chips: Optional[Iterable[CustomChip]] = None
) -> List[HardwareComponent]:
    """
    Every catalog component, flagged with whether it is unlocked.

    Locked components are included so the UI can show what is coming.
    Custom chips follow the catalog and are always available.
    Quarter must be 1-4; other values are not rejected.
    """
    components = []

    for index, record in enumerate(iter_base_components()):
        components.append(HardwareComponent.from_record(
            f"hw-{index}", record, record.is_available_at(year, quarter)
        ))

    for chip in custom_chips or []:
        components.append(HardwareComponent.from_custom_chip(chip))

    return components


def get_available_hardware(
    year: int,
    quarter: int,
    custom_chips: Optional[Iterable[CustomChip]] = None
) -> List[HardwareComponent]:
    """Only the components that can be selected at (year, quarter)"""
    return [
        component for component in get_available_components(year, quarter, custom_chips)
        if component.available
    ]


def get_available_hardware_by_type(
    hw_type: HardwareType,
    year: int,
    quarter: int,
    custom_chips: Optional[Iterable[CustomChip]] = None
) -> List[HardwareComponent]:
    return [
        component for component in get_available_hardware(year, quarter, custom_chips)
        if component.type == hw_type
    ]


def is_hardware_available(
    name: str,
    year: int,
    quarter: int,
    custom_chips: Optional[Iterable[CustomChip]] = None
) -> bool:
    """Exact name match against the available set"""
    return any(
        component.name == name
        for component in get_available_hardware(year, quarter, custom_chips)
    )


def get_newly_available_hardware(
    previous_year: int,
    previous_quarter: int,
    year: int,
    quarter: int
) -> List[HardwareComponent]:
    """
    Catalog components locked at the previous quarter but unlocked now.

    Custom chips never show up here; they arrive through research.
    Going backwards in time unlocks nothing.
    """
    new_hardware = []

    for record in iter_base_components():
        was_available = record.is_available_at(previous_year, previous_quarter)
        is_available = record.is_available_at(year, quarter)
        if not was_available and is_available:
            new_hardware.append(HardwareComponent.from_record(
                f"new-hw-{len(new_hardware)}", record, True
            ))

    return new_hardware


@dataclass
class HardwareAnnouncements:
    """
    Tracks which hardware the news ticker has already announced.

    One instance per game session, owned by the caller. Nothing here is
    shared between sessions.
    """

    announced: Set[str] = field(default_factory=set)
    last_year: Optional[int] = None
    last_quarter: Optional[int] = None

    def advance(self, year: int, quarter: int) -> List[HardwareComponent]:
        """
        Move the session clock to (year, quarter).

        Returns hardware that became available since the last call and has
        not been announced yet. The first call only records the clock.
        """
        if self.last_year is None or self.last_quarter is None:
            self.last_year, self.last_quarter = year, quarter
            return []

        fresh = [
            component
            for component in get_newly_available_hardware(
                self.last_year, self.last_quarter, year, quarter
            )
            if component.name not in self.announced
        ]

        for component in fresh:
            self.announced.add(component.name)
            logger.info(f"New hardware in Q{quarter}/{year}: {component.name}")

        self.last_year, self.last_quarter = year, quarter
        return fresh

    def was_announced(self, name: str) -> bool:
        return name in self.announced

    def reset(self):
        """Forget everything (new game)"""
        self.announced.clear()
        self.last_year = None
        self.last_quarter = None

    def to_dict(self) -> Dict:
        return {
            "announced": sorted(self.announced),
            "last_year": self.last_year,
            "last_quarter": self.last_quarter,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "HardwareAnnouncements":
        return cls(
            announced=set(data.get("announced", [])),
            last_year=data.get("last_year"),
            last_quarter=data.get("last_quarter"),
        )
