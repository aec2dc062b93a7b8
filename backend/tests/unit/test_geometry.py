"""
Unit tests for the entity geometry calculators.

Golden tests: known dimensions -> expected areas and lengths.
Invariant tests: quantities never go negative, missing data yields zeros.
"""

import math

import pytest

from paintquote.constants import CATHEDRAL_FALLBACK_MULTIPLIER
from paintquote.models.entities import (
    Bathroom,
    BrickWallSurface,
    BuiltIn,
    Fireplace,
    IrregularRoom,
    Opening,
    Room,
    Staircase,
    StaircaseWall,
    WallSegment,
)
from paintquote.models.enums import CeilingType
from paintquote.models.settings import CalculationSettings
from paintquote.services.geometry import (
    cathedral_ceiling_multiplier,
    closet_interior_metrics,
    compute_geometry,
    effective_wall_height,
)

CALC = CalculationSettings()


# ---------------------------------------------------------------------------
# Rooms
# ---------------------------------------------------------------------------


class TestRectangularRoom:
    def test_bedroom_wall_area_deducts_door_and_window(self, bedroom: Room):
        geo = compute_geometry(bedroom, CALC, 8)
        # 44 ft perimeter x 8 ft = 352, minus 21 (door) and 15 (window)
        assert geo.perimeter == 44
        assert geo.wall_area == pytest.approx(316)

    def test_ceiling_is_floor_area(self, bedroom: Room):
        geo = compute_geometry(bedroom, CALC, 8)
        assert geo.ceiling_area == pytest.approx(120)
        assert geo.floor_area == pytest.approx(120)

    def test_baseboard_subtracts_doors_with_casing(self, bedroom: Room):
        geo = compute_geometry(bedroom, CALC, 8)
        assert geo.baseboard_lf == pytest.approx(44 - (3 + 2 * 3.5 / 12))

    def test_crown_equals_perimeter(self, bedroom: Room):
        assert compute_geometry(bedroom, CALC, 8).crown_moulding_lf == 44

    def test_trim_surfaces(self, bedroom: Room):
        geo = compute_geometry(bedroom, CALC, 8)
        casing_ft = 3.5 / 12
        assert geo.window_trim_area == pytest.approx(casing_ft * 2 * (3 + 5))
        assert geo.door_trim_area == pytest.approx(casing_ft * (2 * 7 + 3))
        assert geo.jamb_area == pytest.approx(4.5 / 12 * (2 * 7 + 3))
        assert geo.door_face_area == pytest.approx(42)

    def test_manual_area_overrides_dimensions(self):
        room = Room(id="r", length=12, width=10, manual_area=200)
        geo = compute_geometry(room, CALC, 8)
        assert geo.ceiling_area == pytest.approx(200)

    def test_manual_area_only_estimates_square_perimeter(self):
        room = Room(id="r", manual_area=144)
        geo = compute_geometry(room, CALC, 8)
        assert geo.perimeter == pytest.approx(48)
        assert geo.wall_area == pytest.approx(384)

    def test_no_dimensions_yields_zeros(self):
        geo = compute_geometry(Room(id="r"), CALC, 8)
        assert geo.wall_area == 0
        assert geo.ceiling_area == 0
        assert geo.baseboard_lf == 0

    def test_wall_area_never_negative(self):
        room = Room(id="r", length=2, width=2, door_count=10, window_count=10)
        geo = compute_geometry(room, CALC, 8)
        assert geo.wall_area == 0
        assert geo.baseboard_lf == 0

    def test_bathroom_uses_room_geometry(self):
        bath = Bathroom(id="b", length=8, width=5, height=8, door_count=1)
        geo = compute_geometry(bath, CALC, 8)
        assert geo.wall_area == pytest.approx(26 * 8 - 21)

    def test_custom_door_size(self, bedroom: Room):
        calc = CALC.update(door_height=6.5, door_width=2.5)
        geo = compute_geometry(bedroom, calc, 8)
        assert geo.wall_area == pytest.approx(352 - 6.5 * 2.5 - 15)


class TestOpenings:
    def test_opening_deducted_and_trimmed_on_interior_side(self):
        room = Room(id="r", length=12, width=10, openings=[Opening(width=48, height=84)])
        geo = compute_geometry(room, CALC, 8)
        assert geo.wall_area == pytest.approx(352 - 4 * 7)
        assert geo.baseboard_lf == pytest.approx(44 - 4)
        assert geo.opening_trim_area == pytest.approx(3.5 / 12 * (2 * 7 + 4))

    def test_both_sides_trimmed(self):
        room = Room(id="r", length=12, width=10, openings=[Opening(width=48, height=84, trim_exterior=True)])
        geo = compute_geometry(room, CALC, 8)
        assert geo.opening_trim_area == pytest.approx(2 * 3.5 / 12 * (2 * 7 + 4))

    def test_default_opening_size(self):
        room = Room(id="r", length=12, width=10, openings=[Opening()])
        geo = compute_geometry(room, CALC, 8)
        assert geo.wall_area == pytest.approx(352 - 3 * (80 / 12))


class TestClosets:
    def test_single_closet_interior_metrics(self):
        wall, ceiling, baseboard = closet_interior_metrics(2.5, 2, 8)
        assert wall == pytest.approx(52)
        assert ceiling == pytest.approx(5)
        assert baseboard == pytest.approx(9)

    def test_double_closet_interior_metrics(self):
        wall, ceiling, _ = closet_interior_metrics(5, 2, 8)
        assert wall == pytest.approx(72)
        assert ceiling == pytest.approx(10)

    def test_room_reports_closet_interior_separately(self, closet_room: Room):
        geo = compute_geometry(closet_room, CALC, 8)
        assert geo.closet_wall_area == pytest.approx(52)
        assert geo.closet_ceiling_area == pytest.approx(5)
        # Opening deducted from the room wall: 2.5 ft x 8 ft
        assert geo.wall_area == pytest.approx(352 - 20)
        assert geo.closet_count == 1

    def test_closet_trim(self, closet_room: Room):
        geo = compute_geometry(closet_room, CALC, 8)
        assert geo.closet_trim_area == pytest.approx(3.5 / 12 * (2 * 8 + 2.5))


class TestCathedral:
    def test_effective_height_is_average_with_peak(self):
        assert effective_wall_height(8, CeilingType.CATHEDRAL, 12) == 10

    def test_flat_ceiling_keeps_height(self):
        assert effective_wall_height(8, CeilingType.FLAT, 12) == 8

    def test_peak_below_walls_keeps_height(self):
        assert effective_wall_height(8, CeilingType.CATHEDRAL, 0) == 8

    def test_slope_multiplier_from_width(self):
        assert cathedral_ceiling_multiplier(10, 8, 12) == pytest.approx(math.sqrt(1.64))

    def test_fallback_multiplier_without_width(self):
        assert cathedral_ceiling_multiplier(0, 8, 12) == CATHEDRAL_FALLBACK_MULTIPLIER

    def test_fallback_multiplier_without_peak(self):
        assert cathedral_ceiling_multiplier(10, 8, 0) == CATHEDRAL_FALLBACK_MULTIPLIER

    def test_peak_not_above_walls_is_flat(self):
        assert cathedral_ceiling_multiplier(10, 8, 8) == 1.0
        assert cathedral_ceiling_multiplier(0, 8, 7) == 1.0

    def test_cathedral_room_with_peak_at_wall_height(self):
        room = Room(
            id="r", length=12, width=10, height=8,
            ceiling_type=CeilingType.CATHEDRAL, cathedral_peak_height=8,
        )
        geo = compute_geometry(room, CALC, 8)
        assert geo.ceiling_area == pytest.approx(120)
        assert geo.wall_area == pytest.approx(44 * 8)

    def test_cathedral_room(self):
        room = Room(
            id="r", length=12, width=10, ceiling_type=CeilingType.CATHEDRAL, cathedral_peak_height=12
        )
        geo = compute_geometry(room, CALC, 8)
        assert geo.wall_area == pytest.approx(44 * 10)
        assert geo.ceiling_area == pytest.approx(120 * math.sqrt(1.64))

    def test_cathedral_manual_area_uses_fallback(self):
        room = Room(id="r", manual_area=100, ceiling_type=CeilingType.CATHEDRAL, cathedral_peak_height=12)
        geo = compute_geometry(room, CALC, 8)
        assert geo.ceiling_area == pytest.approx(130)


class TestIrregularRoom:
    def test_segments_sum_with_area_override(self):
        room = IrregularRoom(
            id="i",
            walls=[WallSegment(width=10, height=8), WallSegment(width=12, height=8), WallSegment(area=50)],
            door_count=1,
            ceiling_area=100,
        )
        geo = compute_geometry(room, CALC, 8)
        assert geo.perimeter == 22
        assert geo.wall_area == pytest.approx(80 + 96 + 50 - 21)
        assert geo.ceiling_area == 100

    def test_segment_height_falls_back_to_wall_height(self):
        room = IrregularRoom(id="i", walls=[WallSegment(width=10)])
        assert compute_geometry(room, CALC, 9).wall_area == pytest.approx(90)


# ---------------------------------------------------------------------------
# Other structures
# ---------------------------------------------------------------------------


class TestStaircase:
    def test_trim_surfaces(self):
        stairs = Staircase(id="s", riser_count=14, spindle_count=20, handrail_length=12)
        geo = compute_geometry(stairs, CALC, 8)
        assert geo.riser_area == pytest.approx(14 * 7.5 / 12 * 3)
        assert geo.spindle_area == pytest.approx(10)
        assert geo.handrail_area == pytest.approx(6)

    def test_stairwell_wall_is_trapezoid(self):
        stairs = Staircase(id="s", walls=[StaircaseWall(tall_height=16, short_height=8)])
        assert compute_geometry(stairs, CALC, 8).stairwell_wall_area == pytest.approx(144)

    def test_stairwell_has_one_sloped_ceiling(self):
        walls = [StaircaseWall(tall_height=16, short_height=8), StaircaseWall(tall_height=12, short_height=8)]
        geo = compute_geometry(Staircase(id="s", walls=walls), CALC, 8)
        assert geo.stairwell_ceiling_area == pytest.approx(15 * 3.5)
        assert geo.ceiling_area == pytest.approx(15 * 3.5)

    def test_no_stairwell_no_ceiling(self):
        geo = compute_geometry(Staircase(id="s", riser_count=14), CALC, 8)
        assert geo.stairwell_ceiling_area == 0


class TestFireplace:
    def test_three_part_structure(self):
        fp = Fireplace(id="f", has_mantel=True, has_legs=True, has_over_mantel=True,
                       over_mantel_width=5, over_mantel_height=3)
        geo = compute_geometry(fp, CALC, 8)
        assert geo.mantel_area == pytest.approx(6)
        assert geo.legs_area == pytest.approx(8)
        assert geo.over_mantel_area == pytest.approx(15)
        assert geo.wall_area == pytest.approx(29)

    def test_legacy_face_with_trim(self):
        fp = Fireplace(id="f", width=5, height=4, depth=1, has_trim=True, trim_linear_feet=10)
        geo = compute_geometry(fp, CALC, 8)
        assert geo.fireplace_face_area == pytest.approx(28)
        assert geo.fireplace_trim_area == pytest.approx(5)
        assert geo.wall_area == pytest.approx(33)


class TestBuiltInAndBrick:
    def test_built_in_surface(self):
        geo = compute_geometry(BuiltIn(id="b", width=4, height=6, depth=1, shelf_count=4), CALC, 8)
        assert geo.built_in_area == pytest.approx(84)

    def test_brick_wall_with_primer(self):
        geo = compute_geometry(BrickWallSurface(id="w", width=10, height=8), CALC, 8)
        assert geo.brick_area == 80
        assert geo.primer_area == 80

    def test_brick_wall_without_primer(self):
        geo = compute_geometry(BrickWallSurface(id="w", width=10, height=8, include_primer=False), CALC, 8)
        assert geo.primer_area == 0


class TestNonNegativity:
    @pytest.mark.parametrize("entity", [
        Room(id="r", length=-5, width=float("nan"), door_count=3),
        IrregularRoom(id="i", walls=[WallSegment(width=-3, height=-8)], window_count=4),
        Staircase(id="s", riser_count=-2, handrail_length=float("inf")),
        Fireplace(id="f", width=-1, height=5, depth=-2),
        BuiltIn(id="b", width="abc", height=2, depth=1),
        BrickWallSurface(id="w", width=-10, height=8),
    ])
    def test_all_quantities_non_negative(self, entity):
        geo = compute_geometry(entity, CALC, 8)
        for name, value in geo.model_dump().items():
            assert value >= 0, name
