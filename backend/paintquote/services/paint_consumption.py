"""
Paint consumption: area, coverage and coats to gallons and cans.

Gallons stay unrounded until the very end; a can count is ceil(gallons)
per paint type, taken once over the summed sub-surfaces of that type.
"""

import math

from paintquote.constants import GALLON_PRECISION, MIN_COVERAGE_SQ_FT_PER_GALLON
from paintquote.services.numeric import non_negative


def gallons_needed(area: float, coverage: float, coats: float = 1) -> float:
    """area / coverage x coats, with coverage floored so it never divides by zero."""
    coverage = max(MIN_COVERAGE_SQ_FT_PER_GALLON, non_negative(coverage))
    return non_negative(area) / coverage * non_negative(coats)


def cans_needed(gallons: float) -> int:
    """Whole gallons to buy."""
    return math.ceil(round(non_negative(gallons), GALLON_PRECISION))


def trim_surface_area(
    baseboard_lf: float,
    baseboard_width_in: float,
    crown_lf: float,
    crown_width_in: float,
    *casing_areas: float,
) -> float:
    """Total trim paint surface: baseboard and crown strips plus casings (sq ft)."""
    baseboard = non_negative(baseboard_lf) * non_negative(baseboard_width_in) / 12
    crown = non_negative(crown_lf) * non_negative(crown_width_in) / 12
    return baseboard + crown + sum(non_negative(a) for a in casing_areas)
