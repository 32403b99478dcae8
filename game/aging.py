"""
Silicon Wars - Hardware Aging Module

Time wears hardware down in two ways:
- Component prices decay every quarter (down to a floor), which also
  makes a model cheaper to build over time
- Released computer models lose market appeal (obsolescence)
"""

import logging
from typing import Any, Dict, Tuple

from config import (
    START_YEAR, START_QUARTER, QUARTERS_PER_YEAR,
    PRICE_DECAY_RATES, PRICE_FLOOR_RATIO, ACCESSORY_PRICE_RETENTION_PER_QUARTER,
    OBSOLESCENCE_DECAY_PER_QUARTER, MIN_OBSOLESCENCE_APPEAL,
)
from hardware import HardwareType, MODEL_SLOTS, calculate_model_cost, get_component_costs
from scoring import round_half_up

logger = logging.getLogger(__name__)


def quarters_since(from_year: int, from_quarter: int, year: int, quarter: int) -> int:
    """Quarters elapsed between two turns (negative if going backwards)"""
    return (year - from_year) * QUARTERS_PER_YEAR + (quarter - from_quarter)


def quarters_since_start(year: int, quarter: int) -> int:
    return quarters_since(START_YEAR, START_QUARTER, year, quarter)


# =============================================================================
# PRICE DECAY
# =============================================================================

def get_current_component_price(
    hw_type: HardwareType,
    base_price: float,
    year: int,
    quarter: int
) -> float:
    """
    Launch price after quarterly decay, never below PRICE_FLOOR_RATIO of it.
    """
    quarters = quarters_since_start(year, quarter)
    rate = PRICE_DECAY_RATES[hw_type.value]
    decayed = base_price * (1 - rate) ** quarters
    return max(base_price * PRICE_FLOOR_RATIO, decayed)


def get_price_decay_stats(year: int, quarter: int) -> Dict:
    """Discount per hardware type since the game started (for debugging)"""
    quarters = quarters_since_start(year, quarter)

    discounts = {
        hw_type: (1 - (1 - rate) ** quarters) * 100
        for hw_type, rate in PRICE_DECAY_RATES.items()
    }

    return {
        "quarters_since_start": quarters,
        "average_discount": sum(discounts.values()) / len(discounts),
        "component_discounts": discounts,
    }


def calculate_bom_cost_with_decay(model: Dict[str, Any], year: int, quarter: int) -> int:
    """
    Bill of materials for a model built at (year, quarter).

    Each core component decays at its own rate down to the price floor.
    Accessories and the case together lose 2% per quarter.
    """
    quarters = quarters_since_start(year, quarter)
    base_cost = calculate_model_cost(model)
    component_costs = get_component_costs(model)

    total = 0.0
    for slot, cost in component_costs.items():
        hw_type, _ = MODEL_SLOTS[slot]
        total += get_current_component_price(hw_type, cost, year, quarter)

    extras = base_cost - sum(component_costs.values())
    total += extras * ACCESSORY_PRICE_RETENTION_PER_QUARTER ** quarters

    cost = round_half_up(total)
    logger.debug(f"BOM cost decay: {base_cost} -> {cost} after {quarters} quarters")
    return cost


# =============================================================================
# OBSOLESCENCE
# =============================================================================

def calculate_obsolescence_factor(
    release_year: int,
    release_quarter: int,
    year: int,
    quarter: int
) -> Tuple[float, int]:
    """
    Remaining appeal of a model released at (release_year, release_quarter).

    Returns:
        (factor, quarters since release). Factor is 1.0 at launch and
        bottoms out at MIN_OBSOLESCENCE_APPEAL.
    """
    quarters = quarters_since(release_year, release_quarter, year, quarter)
    factor = max(MIN_OBSOLESCENCE_APPEAL, 1.0 - quarters * OBSOLESCENCE_DECAY_PER_QUARTER)
    return factor, quarters


def apply_obsolescence_to_sales(
    base_sales: int,
    release_year: int,
    release_quarter: int,
    year: int,
    quarter: int
) -> int:
    factor, _ = calculate_obsolescence_factor(release_year, release_quarter, year, quarter)
    return round_half_up(base_sales * factor)
