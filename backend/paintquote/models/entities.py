"""
Paintable entity models.

Every variant shares the same envelope (id, name, floor, included, snapshot
fields) and is selected by its `kind` discriminator:

  room / bathroom   - rectangular room (length x width x height)
  irregular_room    - room described as a list of wall segments
  staircase         - risers, spindles, handrail, optional stairwell walls
  fireplace         - three-part (mantel, legs, over-mantel) or legacy face
  built_in          - cabinet / bookcase with shelves
  brick_wall        - standalone brick surface with optional primer

Measurements come from people and imported files, so numeric fields are
coerced rather than rejected: garbage becomes 0 (or None for optional
values that fall back to project defaults).
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, BeforeValidator, Field

from paintquote.constants import DEFAULT_RISER_HEIGHT_IN
from paintquote.models.enums import CeilingType
from paintquote.models.outputs import GallonUsage
from paintquote.services.numeric import non_negative, safe_count, safe_number


def _coerce_optional_measurement(v: object) -> float | None:
    """Finite non-negative float, or None when missing or unusable."""
    number = safe_number(v, fallback=-1.0)
    return number if number >= 0 else None


def _coerce_optional_count(v: object) -> int | None:
    number = safe_number(v, fallback=-1.0)
    return int(number) if number >= 0 else None


def _flag(default: bool):
    """Boolean field where null (common in imported files) means the default."""

    def coerce(v: object) -> object:
        return default if v is None else v

    return Annotated[bool, BeforeValidator(coerce)]


# Lengths/areas: NaN, inf, negatives and junk strings -> 0
Measurement = Annotated[float, BeforeValidator(non_negative)]
# Missing -> None so the caller can fall back to a project default
OptionalMeasurement = Annotated[float | None, BeforeValidator(_coerce_optional_measurement)]
Count = Annotated[int, BeforeValidator(safe_count)]
OptionalCount = Annotated[int | None, BeforeValidator(_coerce_optional_count)]
FlagOn = _flag(True)
FlagOff = _flag(False)


# ---------------------------------------------------------------------------
# Shared pieces
# ---------------------------------------------------------------------------


class Opening(BaseModel):
    """Pass-through opening (no door). Sizes in inches; None uses the default."""

    width: OptionalMeasurement = Field(default=None, description="Opening width (in)")
    height: OptionalMeasurement = Field(default=None, description="Opening height (in)")
    trim_interior: FlagOn = True
    trim_exterior: FlagOff = False


class _EntityBase(BaseModel):
    id: str
    name: str = ""
    floor: int = Field(default=1, ge=1)
    included: FlagOn = Field(default=True, description="Entity-level master switch")
    notes: str = ""

    # Written by the save / import snapshot path only
    gallon_usage: GallonUsage | None = None
    labor_total: float | None = None
    materials_total: float | None = None
    grand_total: float | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.id


class _SurfaceRoomBase(_EntityBase):
    """Fields shared by rectangular and irregular rooms."""

    height: OptionalMeasurement = Field(default=None, description="Wall height (ft); None uses floor height")
    ceiling_type: CeilingType = CeilingType.FLAT
    cathedral_peak_height: Measurement = Field(default=0.0, description="Cathedral peak (ft)")

    window_count: Count = 0
    door_count: Count = 0
    single_door_closets: Count = 0
    double_door_closets: Count = 0
    include_closet_interior: bool | None = Field(
        default=None, description="None falls back to the project default, then True"
    )
    openings: list[Opening] = Field(default_factory=list)

    paint_walls: FlagOn = True
    paint_ceilings: FlagOn = True
    paint_trim: FlagOn = True
    paint_baseboard: FlagOn = True
    paint_windows: FlagOn = True
    paint_doors: FlagOn = True
    paint_jambs: FlagOff = False
    has_crown_moulding: FlagOff = False
    has_accent_wall: FlagOff = False

    coats_walls: OptionalCount = None
    coats_ceiling: OptionalCount = None
    coats_trim: OptionalCount = None
    coats_doors: OptionalCount = None


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class Room(_SurfaceRoomBase):
    """Rectangular room. A positive manual_area overrides length x width."""

    kind: Literal["room"] = "room"
    length: Measurement = 0.0
    width: Measurement = 0.0
    manual_area: Measurement = Field(default=0.0, description="Floor area override (sq ft)")


class Bathroom(Room):
    """Priced exactly like a room; kept as its own kind for proposals."""

    kind: Literal["bathroom"] = "bathroom"


class WallSegment(BaseModel):
    """One wall of an irregular room. A positive area overrides width x height."""

    width: Measurement = 0.0
    height: OptionalMeasurement = None
    area: Measurement = 0.0


class IrregularRoom(_SurfaceRoomBase):
    kind: Literal["irregular_room"] = "irregular_room"
    walls: list[WallSegment] = Field(default_factory=list)
    ceiling_area: Measurement = Field(default=0.0, description="Ceiling area (sq ft)")


class StaircaseWall(BaseModel):
    """Stairwell wall: a trapezoid between its tall and short ends (ft)."""

    tall_height: Measurement = 0.0
    short_height: Measurement = 0.0


class Staircase(_EntityBase):
    kind: Literal["staircase"] = "staircase"
    riser_count: Count = 0
    riser_height: Measurement = Field(default=DEFAULT_RISER_HEIGHT_IN, description="Riser height (in)")
    tread_depth: Measurement = Field(default=0.0, description="Tread depth (in), informational")
    handrail_length: Measurement = Field(default=0.0, description="Handrail length (LF)")
    spindle_count: Count = 0
    walls: list[StaircaseWall] = Field(default_factory=list)
    coats: OptionalCount = None


class Fireplace(_EntityBase):
    """Three-part fireplace when any part flag is set, else the legacy face model."""

    kind: Literal["fireplace"] = "fireplace"
    # Legacy face
    width: Measurement = 0.0
    height: Measurement = 0.0
    depth: Measurement = 0.0
    has_trim: FlagOff = False
    trim_linear_feet: Measurement = 0.0
    # Three-part structure
    has_mantel: FlagOff = False
    has_legs: FlagOff = False
    has_over_mantel: FlagOff = False
    over_mantel_width: Measurement = 0.0
    over_mantel_height: Measurement = 0.0
    coats: OptionalCount = None

    @property
    def uses_parts(self) -> bool:
        return self.has_mantel or self.has_legs or self.has_over_mantel


class BuiltIn(_EntityBase):
    """Built-in cabinet or bookcase, dimensions in feet."""

    kind: Literal["built_in"] = "built_in"
    width: Measurement = 0.0
    height: Measurement = 0.0
    depth: Measurement = 0.0
    shelf_count: Count = 0
    coats: OptionalCount = None


class BrickWallSurface(_EntityBase):
    kind: Literal["brick_wall"] = "brick_wall"
    width: Measurement = 0.0
    height: Measurement = 0.0
    include_primer: FlagOn = True
    coats: OptionalCount = None


SurfaceRoom = Union[Room, Bathroom, IrregularRoom]

PaintableEntity = Annotated[
    Union[Room, Bathroom, IrregularRoom, Staircase, Fireplace, BuiltIn, BrickWallSurface],
    Field(discriminator="kind"),
]
