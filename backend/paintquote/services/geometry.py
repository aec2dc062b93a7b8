"""
Entity geometry calculators.

Pure function: compute_geometry(entity, calculation, wall_height) -> GeometryResult.
One dispatcher over the closed set of entity variants; every calculator
returns non-negative quantities and zero (never an exception) when the
inputs needed for a quantity are missing.

Physical conventions:
  - Deductions remove the opening itself (window, door, closet, pass-through)
    from the wall area; casings are their own trim surface.
  - Closet interiors (walls, ceiling, baseboard) are reported separately;
    the cost calculator adds them only when closet interiors are included.
  - Cathedral ceilings raise the effective wall height to the average of the
    wall height and the peak.
"""

import math

import structlog

from paintquote.constants import (
    CATHEDRAL_FALLBACK_MULTIPLIER,
    FIREPLACE_TRIM_AREA_PER_LF,
    HANDRAIL_AREA_PER_LF,
    LEGS_AREA_SQ_FT,
    MANTEL_AREA_SQ_FT,
    SPINDLE_AREA_SQ_FT,
    STAIR_WIDTH_FT,
    STAIRWELL_CEILING_SLOPE_FT,
    STAIRWELL_CEILING_WIDTH_FT,
    STAIRWELL_WALL_RUN_FT,
)
from paintquote.models.entities import (
    BrickWallSurface,
    BuiltIn,
    Fireplace,
    IrregularRoom,
    PaintableEntity,
    Room,
    Staircase,
)
from paintquote.models.enums import CeilingType
from paintquote.models.outputs import GeometryResult
from paintquote.models.settings import CalculationSettings
from paintquote.services.numeric import non_negative, safe_count

logger = structlog.get_logger(__name__)

INCHES_PER_FOOT = 12.0


def _ft(inches: float) -> float:
    return non_negative(inches) / INCHES_PER_FOOT


# ---------------------------------------------------------------------------
# Closets
# ---------------------------------------------------------------------------


def closet_interior_metrics(opening_width: float, depth: float, height: float) -> tuple[float, float, float]:
    """Interior of one closet: (wall area, ceiling area, baseboard LF).

    The cavity has a back wall as wide as the opening plus two side returns
    of `depth`; the front (opening) wall is not painted from inside.
    """
    opening_width = non_negative(opening_width)
    depth = non_negative(depth)
    height = non_negative(height)
    wall_area = (opening_width + 2 * depth) * height
    ceiling_area = opening_width * depth
    baseboard_lf = 2 * (opening_width + depth)
    return wall_area, ceiling_area, baseboard_lf


def cathedral_ceiling_multiplier(width: float, wall_height: float, peak_height: float) -> float:
    """Slope factor of a gable ceiling spanning `width`.

    A peak at or below the walls is a flat ceiling (1.0). Falls back to
    CATHEDRAL_FALLBACK_MULTIPLIER when the width or the peak is unknown.
    """
    width = non_negative(width)
    peak_height = non_negative(peak_height)
    if peak_height <= 0:
        return CATHEDRAL_FALLBACK_MULTIPLIER
    rise = peak_height - non_negative(wall_height)
    if rise <= 0:
        return 1.0
    if width <= 0:
        return CATHEDRAL_FALLBACK_MULTIPLIER
    return math.sqrt(1 + (rise / (width / 2)) ** 2)


def effective_wall_height(wall_height: float, ceiling_type: CeilingType, peak_height: float) -> float:
    wall_height = non_negative(wall_height)
    peak_height = non_negative(peak_height)
    if ceiling_type == CeilingType.CATHEDRAL and peak_height > wall_height:
        return (wall_height + peak_height) / 2
    return wall_height


# ---------------------------------------------------------------------------
# Rooms
# ---------------------------------------------------------------------------


def _openings_and_trim(
    room: Room | IrregularRoom,
    calc: CalculationSettings,
    wall_height: float,
    perimeter: float,
) -> dict:
    """Deductions, casings, closets and baseboard shared by every room shape."""
    doors = safe_count(room.door_count)
    windows = safe_count(room.window_count)
    single = safe_count(room.single_door_closets)
    double = safe_count(room.double_door_closets)

    door_h, door_w = calc.door_height, calc.door_width
    window_w, window_h = calc.window_width, calc.window_height
    single_w = _ft(calc.single_closet_width)
    double_w = _ft(calc.double_closet_width)

    opening_area = 0.0
    opening_width_total = 0.0
    opening_trim_area = 0.0
    for opening in room.openings:
        width = _ft(opening.width if opening.width is not None else calc.opening_width)
        height = _ft(opening.height if opening.height is not None else calc.opening_height)
        sides = int(opening.trim_interior) + int(opening.trim_exterior)
        opening_area += width * height
        opening_width_total += width
        opening_trim_area += sides * _ft(calc.opening_trim_width) * (2 * height + width)

    deductions = (
        windows * window_w * window_h
        + doors * door_h * door_w
        + single * single_w * wall_height
        + double * double_w * wall_height
        + opening_area
    )

    door_trim_ft = _ft(calc.door_trim_width)
    single_trim_ft = _ft(calc.single_closet_trim_width)
    double_trim_ft = _ft(calc.double_closet_trim_width)
    baseboard_lf = (
        perimeter
        - doors * (door_w + 2 * door_trim_ft)
        - single * (single_w + 2 * single_trim_ft)
        - double * (double_w + 2 * double_trim_ft)
        - opening_width_total
    )

    closet_wall = closet_ceiling = closet_baseboard = 0.0
    for count, width in ((single, single_w), (double, double_w)):
        wall, ceiling, base = closet_interior_metrics(width, calc.closet_cavity_depth, wall_height)
        closet_wall += count * wall
        closet_ceiling += count * ceiling
        closet_baseboard += count * base

    return {
        "deductions": deductions,
        "baseboard_lf": max(0.0, baseboard_lf),
        "window_trim_area": windows * _ft(calc.window_trim_width) * 2 * (window_w + window_h),
        "door_trim_area": doors * door_trim_ft * (2 * door_h + door_w),
        "closet_trim_area": (
            single * single_trim_ft * (2 * wall_height + single_w)
            + double * double_trim_ft * (2 * wall_height + double_w)
        ),
        "opening_trim_area": opening_trim_area,
        "jamb_area": doors * _ft(calc.door_jamb_width) * (2 * door_h + door_w),
        "door_face_area": doors * 2 * door_h * door_w,
        "closet_wall_area": closet_wall,
        "closet_ceiling_area": closet_ceiling,
        "closet_baseboard_lf": closet_baseboard,
        "door_count": doors,
        "window_count": windows,
        "closet_count": single + double,
    }


def _room_geometry(room: Room, calc: CalculationSettings, wall_height: float) -> GeometryResult:
    length = non_negative(room.length)
    width = non_negative(room.width)
    manual_area = non_negative(room.manual_area)

    if length > 0 and width > 0:
        perimeter = 2 * (length + width)
    elif manual_area > 0:
        # Square room of the same floor area
        perimeter = 4 * math.sqrt(manual_area)
    else:
        perimeter = 0.0
    floor_area = manual_area if manual_area > 0 else length * width

    height = effective_wall_height(wall_height, room.ceiling_type, room.cathedral_peak_height)
    shared = _openings_and_trim(room, calc, wall_height, perimeter)
    deductions = shared.pop("deductions")

    ceiling_area = floor_area
    if room.ceiling_type == CeilingType.CATHEDRAL and floor_area > 0:
        span = width if manual_area <= 0 else 0.0
        ceiling_area *= cathedral_ceiling_multiplier(span, wall_height, room.cathedral_peak_height)

    return GeometryResult(
        perimeter=perimeter,
        floor_area=floor_area,
        effective_wall_height=height,
        wall_area=max(0.0, perimeter * height - deductions),
        ceiling_area=ceiling_area,
        crown_moulding_lf=perimeter,
        **shared,
    )


def _irregular_room_geometry(room: IrregularRoom, calc: CalculationSettings, wall_height: float) -> GeometryResult:
    perimeter = 0.0
    gross_wall_area = 0.0
    for segment in room.walls:
        width = non_negative(segment.width)
        height = non_negative(segment.height if segment.height is not None else wall_height)
        perimeter += width
        gross_wall_area += segment.area if segment.area > 0 else width * height

    shared = _openings_and_trim(room, calc, wall_height, perimeter)
    deductions = shared.pop("deductions")

    ceiling_area = non_negative(room.ceiling_area)
    if room.ceiling_type == CeilingType.CATHEDRAL:
        # No single span to derive a slope from
        ceiling_area *= cathedral_ceiling_multiplier(0.0, wall_height, room.cathedral_peak_height)

    return GeometryResult(
        perimeter=perimeter,
        floor_area=non_negative(room.ceiling_area),
        effective_wall_height=wall_height,
        wall_area=max(0.0, gross_wall_area - deductions),
        ceiling_area=ceiling_area,
        crown_moulding_lf=perimeter,
        **shared,
    )


# ---------------------------------------------------------------------------
# Other structures
# ---------------------------------------------------------------------------


def _staircase_geometry(stairs: Staircase) -> GeometryResult:
    riser_area = safe_count(stairs.riser_count) * _ft(stairs.riser_height) * STAIR_WIDTH_FT
    spindle_area = safe_count(stairs.spindle_count) * SPINDLE_AREA_SQ_FT
    handrail_area = non_negative(stairs.handrail_length) * HANDRAIL_AREA_PER_LF
    wall_area = sum(
        (non_negative(wall.tall_height) + non_negative(wall.short_height)) / 2 * STAIRWELL_WALL_RUN_FT
        for wall in stairs.walls
    )
    # One sloped ceiling over the stairwell, whatever the number of walls
    ceiling_area = STAIRWELL_CEILING_SLOPE_FT * STAIRWELL_CEILING_WIDTH_FT if wall_area > 0 else 0.0
    return GeometryResult(
        riser_area=riser_area,
        spindle_area=spindle_area,
        handrail_area=handrail_area,
        stairwell_wall_area=wall_area,
        stairwell_ceiling_area=ceiling_area,
        wall_area=wall_area,
        ceiling_area=ceiling_area,
    )


def _fireplace_geometry(fireplace: Fireplace) -> GeometryResult:
    if fireplace.uses_parts:
        mantel = MANTEL_AREA_SQ_FT if fireplace.has_mantel else 0.0
        legs = LEGS_AREA_SQ_FT if fireplace.has_legs else 0.0
        over_mantel = (
            non_negative(fireplace.over_mantel_width) * non_negative(fireplace.over_mantel_height)
            if fireplace.has_over_mantel
            else 0.0
        )
        return GeometryResult(
            mantel_area=mantel,
            legs_area=legs,
            over_mantel_area=over_mantel,
            wall_area=mantel + legs + over_mantel,
        )

    width = non_negative(fireplace.width)
    height = non_negative(fireplace.height)
    depth = non_negative(fireplace.depth)
    face = width * height + 2 * depth * height
    trim = (
        non_negative(fireplace.trim_linear_feet) * FIREPLACE_TRIM_AREA_PER_LF
        if fireplace.has_trim
        else 0.0
    )
    return GeometryResult(
        fireplace_face_area=face,
        fireplace_trim_area=trim,
        wall_area=face + trim,
    )


def _built_in_geometry(built_in: BuiltIn) -> GeometryResult:
    w = non_negative(built_in.width)
    h = non_negative(built_in.height)
    d = non_negative(built_in.depth)
    # Front/back, sides, top/bottom, then one face per shelf
    area = 2 * w * h + 2 * w * d + 2 * h * d + safe_count(built_in.shelf_count) * w
    return GeometryResult(built_in_area=area)


def _brick_wall_geometry(brick: BrickWallSurface) -> GeometryResult:
    area = non_negative(brick.width) * non_negative(brick.height)
    return GeometryResult(
        brick_area=area,
        wall_area=area,
        primer_area=area if brick.include_primer else 0.0,
    )


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def compute_geometry(entity: PaintableEntity, calculation: CalculationSettings, wall_height: float) -> GeometryResult:
    """Quantities for any paintable entity.

    Args:
        entity: Any PaintableEntity variant
        calculation: Default dimensions for doors, windows, trim and closets
        wall_height: Resolved wall height (ft) for room-like entities
    """
    wall_height = non_negative(wall_height)
    if isinstance(entity, IrregularRoom):
        return _irregular_room_geometry(entity, calculation, wall_height)
    if isinstance(entity, Room):
        return _room_geometry(entity, calculation, wall_height)
    if isinstance(entity, Staircase):
        return _staircase_geometry(entity)
    if isinstance(entity, Fireplace):
        return _fireplace_geometry(entity)
    if isinstance(entity, BuiltIn):
        return _built_in_geometry(entity)
    if isinstance(entity, BrickWallSurface):
        return _brick_wall_geometry(entity)

    logger.warning("geometry_unknown_entity", entity_type=type(entity).__name__)
    return GeometryResult()
