"""
Quote filtering.

Two questions, answered separately:
  entity_participates()  does this entity appear on the quote at all?
  resolve_inclusions()   which of its categories are priced?

A category is priced only when the entity's own toggle AND the quote
builder's matching toggle are both on. Neither side can override the other.
"""

from pydantic import BaseModel, ConfigDict

from paintquote.models.entities import IrregularRoom, Room
from paintquote.models.enums import EntityKind
from paintquote.models.quote import Project, QuoteBuilder
from paintquote.services.resolution import resolve_closet_interior


class RoomInclusions(BaseModel):
    """Resolved per-category switches for a room-like entity."""

    model_config = ConfigDict(frozen=True)

    walls: bool = False
    ceilings: bool = False
    trim: bool = False
    baseboards: bool = False
    crown_moulding: bool = False
    windows: bool = False
    doors: bool = False
    jambs: bool = False
    closet_interiors: bool = False


def entity_participates(entity, quote_builder: QuoteBuilder) -> bool:
    """Entity switch, floor filter, entity-id filter and kind gate."""
    if not entity.included:
        return False
    if quote_builder.included_floors is not None and entity.floor not in quote_builder.included_floors:
        return False
    if quote_builder.included_entity_ids is not None and entity.id not in quote_builder.included_entity_ids:
        return False
    return quote_builder.includes_kind(EntityKind(entity.kind))


def resolve_inclusions(
    room: Room | IrregularRoom,
    quote_builder: QuoteBuilder,
    project: Project | None = None,
) -> RoomInclusions:
    """AND of entity toggles and quote toggles for every room category."""
    if not room.included:
        return RoomInclusions()

    qb = quote_builder
    doors = room.paint_doors and qb.include_doors
    return RoomInclusions(
        walls=room.paint_walls and qb.include_walls,
        ceilings=room.paint_ceilings and qb.include_ceilings,
        trim=room.paint_trim and qb.include_trim,
        baseboards=room.paint_baseboard and qb.include_baseboards,
        crown_moulding=room.has_crown_moulding and qb.include_trim,
        windows=room.paint_windows and qb.include_windows,
        doors=doors,
        jambs=room.paint_jambs and doors,
        closet_interiors=(
            resolve_closet_interior(room.include_closet_interior, project)
            and qb.include_closets
        ),
    )
