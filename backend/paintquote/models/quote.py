"""
Quote configuration and project models.

A project holds entities and any number of quotes. Each quote carries its
own QuoteBuilder: which categories, floors and entities participate, and the
paint tiers offered on the proposal. Older projects have a single bare
quote_builder and no quotes; see services/project_migration.py.
"""

from pydantic import BaseModel, Field

from paintquote.constants import DEFAULT_PAINT_OPTIONS
from paintquote.models.entities import (
    Bathroom,
    BrickWallSurface,
    BuiltIn,
    Fireplace,
    FlagOff,
    FlagOn,
    IrregularRoom,
    OptionalCount,
    OptionalMeasurement,
    Room,
    Staircase,
)
from paintquote.models.enums import EntityKind


class PaintOption(BaseModel):
    """A paint tier. Its price replaces the standard wall paint price."""

    id: str
    name: str
    price_per_gallon: float = Field(ge=0)
    notes: str = ""
    enabled: FlagOn = True


def default_paint_options() -> list[PaintOption]:
    return [PaintOption(**option) for option in DEFAULT_PAINT_OPTIONS]


class QuoteBuilder(BaseModel):
    """Quote-level category toggles and entity/floor filters.

    A category is priced only when both the entity's own toggle and the
    matching include_* flag here are on.
    """

    include_walls: FlagOn = True
    include_ceilings: FlagOn = True
    include_trim: FlagOn = True
    include_doors: FlagOn = True
    include_windows: FlagOn = True
    include_baseboards: FlagOn = True
    include_closets: FlagOn = True
    include_staircases: FlagOn = True
    include_fireplaces: FlagOn = True
    include_built_ins: FlagOn = True
    include_brick_walls: FlagOn = True
    include_primer: FlagOn = True

    included_floors: set[int] | None = Field(default=None, description="None = every floor")
    included_entity_ids: set[str] | None = Field(default=None, description="None = every entity")

    show_paint_options_in_proposal: FlagOn = True
    paint_options: list[PaintOption] = Field(default_factory=default_paint_options)

    def includes_kind(self, kind: EntityKind) -> bool:
        """Kind-level gate. Rooms are gated per category instead."""
        gates = {
            EntityKind.STAIRCASE: self.include_staircases,
            EntityKind.FIREPLACE: self.include_fireplaces,
            EntityKind.BUILT_IN: self.include_built_ins,
            EntityKind.BRICK_WALL: self.include_brick_walls,
        }
        return gates.get(kind, True)


class QuoteTotals(BaseModel):
    labor_total: float = 0.0
    materials_total: float = 0.0
    grand_total: float = 0.0


class Quote(BaseModel):
    id: str
    title: str = ""
    quote_builder: QuoteBuilder = Field(default_factory=QuoteBuilder)
    totals: QuoteTotals | None = None


class Project(BaseModel):
    """A client project: entities, per-floor heights and quotes."""

    id: str
    client_name: str = ""
    address: str = ""

    rooms: list[Room] = Field(default_factory=list)
    bathrooms: list[Bathroom] = Field(default_factory=list)
    irregular_rooms: list[IrregularRoom] = Field(default_factory=list)
    staircases: list[Staircase] = Field(default_factory=list)
    fireplaces: list[Fireplace] = Field(default_factory=list)
    built_ins: list[BuiltIn] = Field(default_factory=list)
    brick_walls: list[BrickWallSurface] = Field(default_factory=list)

    floor_heights: list[OptionalMeasurement] = Field(
        default_factory=list, description="Wall height per floor (ft), index 0 = floor 1"
    )
    default_coats: OptionalCount = None
    include_closet_interior_default: bool | None = None
    include_furniture_moving: FlagOff = False

    quotes: list[Quote] = Field(default_factory=list)
    active_quote_id: str | None = None
    # Pre-quotes projects stored one bare builder here
    quote_builder: QuoteBuilder | None = None

    def all_entities(self) -> list:
        """Every entity, in proposal order."""
        return [
            *self.rooms,
            *self.bathrooms,
            *self.irregular_rooms,
            *self.staircases,
            *self.fireplaces,
            *self.built_ins,
            *self.brick_walls,
        ]
