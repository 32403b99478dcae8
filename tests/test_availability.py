import pytest

from availability import (
    HardwareAnnouncements,
    get_available_components,
    get_available_hardware,
    get_available_hardware_by_type,
    get_newly_available_hardware,
    is_hardware_available,
)
from hardware import CustomChip, HardwareType, iter_base_components


TIME_GRID = [(year, quarter) for year in range(1983, 1991) for quarter in (1, 2, 3, 4)]


def make_chip(chip_id="gpu-1", name="Vision GPU-1985", hw_type=HardwareType.GPU):
    return CustomChip(
        id=chip_id,
        name=name,
        type=hw_type,
        performance=60,
        cost=90,
        description="Home-grown graphics",
        developed_year=1985,
        developed_quarter=3,
    )


@pytest.mark.parametrize("year,quarter", TIME_GRID)
def test_available_iff_on_or_after_unlock(year, quarter):
    components = get_available_components(year, quarter)
    records = list(iter_base_components())
    assert len(components) == len(records)
    for component, record in zip(components, records):
        assert component.name == record.name
        assert component.available == ((year, quarter) >= (record.year, record.quarter))


@pytest.mark.parametrize("year,quarter", TIME_GRID)
def test_available_hardware_is_filtered_components(year, quarter):
    chips = [make_chip()]
    everything = get_available_components(year, quarter, chips)
    available = get_available_hardware(year, quarter, chips)
    assert available == [c for c in everything if c.available]


def test_locked_components_are_listed():
    components = get_available_components(1983, 1)
    locked = [c for c in components if not c.available]
    assert any(c.name == "Intel 80486" for c in locked)


def test_component_ids_follow_catalog_order():
    components = get_available_components(1983, 1)
    assert components[0].id == "hw-0"
    assert components[-1].id == f"hw-{len(components) - 1}"


def test_boundary_quarter():
    assert not is_hardware_available("Intel 80486", 1987, 4)
    assert is_hardware_available("Intel 80486", 1988, 1)


def test_custom_chips_always_available_and_exclusive():
    chip = make_chip()
    # before the chip's own development date, still available
    components = get_available_components(1983, 1, [chip])
    custom = components[-1]
    assert custom.id == "custom-gpu-1"
    assert custom.available
    assert custom.is_custom_chip
    assert custom.exclusive_to_player
    assert custom.year == 1985
    assert custom.quarter == 3
    assert is_hardware_available("Vision GPU-1985", 1983, 1, [chip])


def test_static_components_are_not_exclusive():
    assert not any(c.exclusive_to_player for c in get_available_components(1990, 4))


def test_by_type():
    cpus = get_available_hardware_by_type(HardwareType.CPU, 1984, 1)
    assert [c.name for c in cpus] == ["MOS 6502", "Zilog Z80", "Intel 8086"]


def test_by_type_includes_matching_custom_chips():
    chips = [make_chip(), make_chip("sound-1", "Sonic SOUND-1985", HardwareType.SOUND)]
    gpus = get_available_hardware_by_type(HardwareType.GPU, 1983, 1, chips)
    assert [c.name for c in gpus] == ["MOS VIC", "Vision GPU-1985"]


def test_is_hardware_available_requires_exact_name():
    assert is_hardware_available("MOS 6502", 1983, 1)
    assert not is_hardware_available("mos 6502", 1983, 1)
    assert not is_hardware_available("Foobar9000", 1990, 4)


def test_newly_available_between_quarters():
    new = get_newly_available_hardware(1987, 4, 1988, 1)
    assert [c.name for c in new] == ["Intel 80486", "2MB RAM"]
    assert [c.id for c in new] == ["new-hw-0", "new-hw-1"]
    assert all(c.available for c in new)


def test_newly_available_spanning_years():
    new = get_newly_available_hardware(1983, 1, 1984, 1)
    names = {c.name for c in new}
    assert {"TI TMS9918", "Intel 8086", "Atari GTIA", "64KB RAM", "AY-3-8910"} <= names
    assert "MOS 6502" not in names


@pytest.mark.parametrize("later,earlier", [
    ((1988, 1), (1987, 4)),
    ((1990, 4), (1983, 1)),
    ((1986, 2), (1986, 2)),
])
def test_no_time_travel_unlocks(later, earlier):
    assert get_newly_available_hardware(later[0], later[1], earlier[0], earlier[1]) == []


def test_pure_functions_are_repeatable():
    chips = [make_chip()]
    assert get_available_components(1986, 3, chips) == get_available_components(1986, 3, chips)
    assert get_newly_available_hardware(1985, 1, 1986, 1) == get_newly_available_hardware(1985, 1, 1986, 1)


def test_announcements_first_advance_only_sets_clock():
    announcements = HardwareAnnouncements()
    assert announcements.advance(1983, 1) == []
    assert announcements.last_year == 1983
    assert announcements.last_quarter == 1


def test_announcements_skip_already_announced():
    announcements = HardwareAnnouncements()
    announcements.advance(1987, 4)
    first = announcements.advance(1988, 1)
    assert [c.name for c in first] == ["Intel 80486", "2MB RAM"]
    assert announcements.was_announced("Intel 80486")

    # a reload to an earlier quarter and forward again announces nothing twice
    announcements.advance(1987, 4)
    assert announcements.advance(1988, 1) == []


def test_announcements_round_trip_and_reset():
    announcements = HardwareAnnouncements()
    announcements.advance(1983, 1)
    announcements.advance(1983, 2)
    restored = HardwareAnnouncements.from_dict(announcements.to_dict())
    assert restored == announcements

    restored.reset()
    assert restored.announced == set()
    assert restored.last_year is None
