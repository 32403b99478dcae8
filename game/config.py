"""
Silicon Wars - Configuration Module

All tunable game parameters live here. Adjust these to change game balance
without touching catalog or scoring logic.
"""

import os

# =============================================================================
# GAME CLOCK
# =============================================================================

# First playable turn. The hardware timeline starts here too.
START_YEAR = 1983
START_QUARTER = 1

QUARTERS_PER_YEAR = 4
VALID_QUARTERS = (1, 2, 3, 4)

# =============================================================================
# SEGMENT WEIGHTS
# =============================================================================

# How much each component counts toward a segment's category score.
# Each row must sum to 1.0.
SEGMENT_WEIGHTS = {
    "gaming": {"cpu": 0.25, "gpu": 0.40, "ram": 0.20, "sound": 0.15},
    "business": {"cpu": 0.50, "gpu": 0.10, "ram": 0.30, "sound": 0.10},
    "workstation": {"cpu": 0.60, "gpu": 0.15, "ram": 0.20, "sound": 0.05},
}

# =============================================================================
# BUILD QUALITY
# =============================================================================

BUILD_QUALITY_WEIGHTS = {"cpu": 0.35, "gpu": 0.25, "ram": 0.25, "sound": 0.15}

# Components make up 85% of build quality, the case the remaining 15%.
BUILD_QUALITY_COMPONENT_SHARE = 0.85
BUILD_QUALITY_CASE_SHARE = 0.15

# A perfect case (quality 100) is worth at most 85 points
CASE_QUALITY_MAX_POINTS = 85
DEFAULT_CASE_QUALITY = 70

# Case workmanship wording thresholds
CASE_PREMIUM_THRESHOLD = 80
CASE_SOLID_THRESHOLD = 60

# =============================================================================
# COMPATIBILITY
# =============================================================================

COMPATIBILITY_BASE_SCORE = 80
COMPATIBILITY_MIN_SCORE = 20
COMPATIBILITY_MAX_SCORE = 100

# Rule 1: everything top-of-the-line
HIGH_END_MIN_TIERS = {"cpu": 6, "gpu": 4, "ram": 6}
HIGH_END_BONUS = 15

# Rule 2: CPU / RAM balance
CPU_RAM_BALANCE_TOLERANCE = 1
CPU_RAM_BALANCE_BONUS = 8
CPU_RAM_GAP = 2
RAM_LIMITED_PENALTY = 15
RAM_UNDERUSED_PENALTY = 8

# Rule 3: CPU / GPU pairing
CPU_GPU_MIN_TIER = 4
CPU_GPU_BONUS = 10
CPU_GPU_MAX_GAP = 3
CPU_GPU_IMBALANCE_PENALTY = 12

# Rule 4: multimedia pairing
SOUND_GPU_MIN_TIERS = {"sound": 3, "gpu": 4}
SOUND_GPU_BONUS = 5

# =============================================================================
# QUALITY RATING LADDER
# =============================================================================

# Checked top-down, first match wins. Anything below the last step is "poor".
QUALITY_RATING_THRESHOLDS = [
    (95, "excellent"),
    (90, "outstanding"),
    (80, "very_good"),
    (70, "good"),
    (60, "satisfactory"),
    (50, "sufficient"),
    (40, "weak"),
]

# =============================================================================
# OVERALL INDEX
# =============================================================================

OVERALL_WEIGHTS = {
    "business": 0.40,
    "gaming": 0.30,
    "compatibility": 0.15,
    "build_quality": 0.15,
}

# Regression check for the best configuration buildable in Q2/1988
TOP_CONFIGURATION_1988 = {
    "cpu": "Intel 80486",
    "gpu": "VGA Graphics",
    "ram": "2MB RAM",
    "sound": "Yamaha YM2149",
    "case_quality": 95,
}
TOP_CONFIGURATION_MIN_SEGMENT_SCORE = 70
TOP_CONFIGURATION_MIN_OVERALL = 75

# =============================================================================
# MODEL COST FALLBACKS
# =============================================================================

# Used when a component name is not in the catalog. Existing save games were
# priced with these, so they must not change.
FALLBACK_COSTS = {
    "cpu": 50,
    "gpu": 30,
    "ram": 40,
    "sound": 5,
    "accessory": 50,
    "case": 80,
}

# =============================================================================
# HARDWARE AGING
# =============================================================================

# Quarterly price decay per hardware type
PRICE_DECAY_RATES = {
    "cpu": 0.03,
    "gpu": 0.04,
    "memory": 0.05,  # RAM gets cheap fast
    "sound": 0.02,
    "storage": 0.03,
    "display": 0.025,
}

# Prices never fall below 30% of the launch price
PRICE_FLOOR_RATIO = 0.3

# Accessories and the case lose 2% per quarter, with no floor
ACCESSORY_PRICE_RETENTION_PER_QUARTER = 0.98

# Models lose 15% appeal per quarter on the market, down to 20%
OBSOLESCENCE_DECAY_PER_QUARTER = 0.15
MIN_OBSOLESCENCE_APPEAL = 0.2

# =============================================================================
# PRICE RECOMMENDATIONS
# =============================================================================

# Average price/value score bands
PRICE_VALUE_STEEP_CUT_BELOW = 40
PRICE_VALUE_CUT_BELOW = 60
PRICE_VALUE_RAISE_ABOVE = 85

PRICE_STEEP_CUT = -0.20
PRICE_CUT = -0.10
PRICE_RAISE = 0.15

# Price a segment expects: (base price, rise per year, first year of the
# market). The workstation market opens in 1987.
EXPECTED_PRICE_BANDS = {
    "gaming": (600, 150, 1983),
    "business": (1200, 300, 1983),
    "workstation": (3000, 1000, 1987),
}

# =============================================================================
# SERVER SETTINGS
# =============================================================================

PORT = int(os.environ.get("PORT", 5000))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
DEBUG_MODE = os.environ.get("DEBUG_MODE", "").lower() == "true"
