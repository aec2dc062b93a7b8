"""
Business logic constants for the paint estimating engine.

These values are stable across environments and do not need env-var
overrides. Contractor-tunable numbers (labor rates, paint prices, coverage,
default door/window/trim dimensions) live in config.py via PricingSettings
and CalculationSettings.
"""

from paintquote.models.enums import PaintType

API_TITLE = "Paint Quote API"
API_VERSION = "0.1.0"

# --- Project defaults ---
DEFAULT_WALL_HEIGHT_FT = 8.0
DEFAULT_COATS = 2

# --- Paint consumption ---
# Coverage rates below this are treated as this (avoids division by zero)
MIN_COVERAGE_SQ_FT_PER_GALLON = 1.0
# Gallon figures are snapped to this many decimals before ceil() so float
# noise like 2.0000000001 does not buy an extra can
GALLON_PRECISION = 6
BUCKET_SIZE_GALLONS = 5
# Project primer estimate, as a share of wall + ceiling + trim gallons
PRIMER_GALLON_RATIO = 0.2
PRIMER_BASE_PAINT_TYPES: tuple[PaintType, ...] = (
    PaintType.WALL,
    PaintType.CEILING,
    PaintType.TRIM,
)

# --- Cathedral ceilings ---
# Used when the slope cannot be derived from width and peak height
CATHEDRAL_FALLBACK_MULTIPLIER = 1.3

# --- Staircases ---
STAIR_WIDTH_FT = 3.0
DEFAULT_RISER_HEIGHT_IN = 7.5
SPINDLE_AREA_SQ_FT = 0.5
HANDRAIL_AREA_PER_LF = 0.5
# Horizontal run of a stairwell wall (trapezoid base)
STAIRWELL_WALL_RUN_FT = 12.0
# Sloped ceiling over a stairwell: slope length by stairwell width
STAIRWELL_CEILING_SLOPE_FT = 15.0
STAIRWELL_CEILING_WIDTH_FT = 3.5

# --- Fireplaces ---
MANTEL_AREA_SQ_FT = 6.0
# Two legs, 6 ft tall by 8 in wide
LEGS_AREA_SQ_FT = 6.0 * (8.0 / 12.0) * 2
FIREPLACE_TRIM_AREA_PER_LF = 0.5

# --- Furniture moving ---
FURNITURE_MOVING_ITEM_ID = "furniture-moving"
FURNITURE_MOVING_ITEM_NAME = "Furniture Moving"

# --- Quotes ---
DEFAULT_QUOTE_ID = "quote-1"
DEFAULT_QUOTE_TITLE = "Quote 1"

# --- Paint tiers shown on proposals (Good / Better / Best) ---
DEFAULT_PAINT_OPTIONS: list[dict] = [
    {
        "id": "opt1",
        "name": "Standard Paint",
        "price_per_gallon": 40.0,
        "notes": "Quality interior paint with good coverage and durability.",
        "enabled": True,
    },
    {
        "id": "opt2",
        "name": "Premium Paint",
        "price_per_gallon": 60.0,
        "notes": "Premium paint with superior coverage and washability.",
        "enabled": False,
    },
    {
        "id": "opt3",
        "name": "Designer Paint",
        "price_per_gallon": 80.0,
        "notes": "Top-tier designer paint with the richest color depth.",
        "enabled": False,
    },
]

# --- Import quirks ---
# Older exports misspelled the cathedral ceiling type
CEILING_TYPE_ALIASES: dict[str, str] = {
    "cathhedral": "cathedral",
}
