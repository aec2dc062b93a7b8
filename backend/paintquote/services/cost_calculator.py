"""
Deterministic cost calculator for paintable entities.

Pure function: compute_pricing_summary(entity, quote_builder, pricing, calculation, project)
    -> PricingSummary.

This is the only place an entity is priced. Live preview, the save snapshot
and the import pipeline all call it, so the three paths cannot disagree.

Pipeline per entity:
  geometry -> resolved inclusions -> labor lines + gallons -> cans -> totals
  -> displayed values (rounded last, half-up)

Labor rule: quantity x rate x coat multiplier, where the multiplier is 1.0
for a single coat and second_coat_labor_multiplier for two or more.
Materials rule: ceil(gallons) x price per gallon, per paint type.
"""

import structlog

from paintquote.constants import DEFAULT_COATS, DEFAULT_WALL_HEIGHT_FT
from paintquote.models.entities import (
    BrickWallSurface,
    BuiltIn,
    Fireplace,
    IrregularRoom,
    PaintableEntity,
    Room,
    Staircase,
)
from paintquote.models.enums import EntityKind, PaintType, SurfaceCategory, Unit
from paintquote.models.outputs import (
    GallonUsage,
    GeometryResult,
    LaborLineItem,
    MaterialLineItem,
    PricingSummary,
)
from paintquote.models.quote import Project, QuoteBuilder
from paintquote.models.settings import CalculationSettings, PricingSettings
from paintquote.services.geometry import compute_geometry
from paintquote.services.inclusion import RoomInclusions, resolve_inclusions
from paintquote.services.numeric import non_negative, round_cents, round_whole
from paintquote.services.paint_consumption import cans_needed, gallons_needed, trim_surface_area
from paintquote.services.resolution import resolve_coats, resolve_wall_height

logger = structlog.get_logger(__name__)


def coat_labor_multiplier(coats: int, pricing: PricingSettings) -> float:
    """1.0 for one coat (or none); the configured multiplier for two or more."""
    if coats <= 1:
        return 1.0
    return non_negative(pricing.second_coat_labor_multiplier, fallback=1.0)


def _labor(
    category: SurfaceCategory,
    quantity: float,
    unit: Unit,
    rate: float,
    multiplier: float = 1.0,
) -> LaborLineItem | None:
    quantity = non_negative(quantity)
    if quantity <= 0:
        return None
    rate = non_negative(rate)
    return LaborLineItem(
        category=category,
        quantity=quantity,
        unit=unit,
        rate=rate,
        coat_multiplier=multiplier,
        cost=quantity * rate * multiplier,
    )


def _material_items(
    gallons: GallonUsage,
    pricing: PricingSettings,
) -> list[MaterialLineItem]:
    items: list[MaterialLineItem] = []
    for paint_type in PaintType:
        needed = non_negative(gallons.get(paint_type))
        if needed <= 0:
            continue
        cans = cans_needed(needed)
        price = non_negative(pricing.price_per_gallon(paint_type))
        items.append(MaterialLineItem(
            paint_type=paint_type,
            gallons=needed,
            cans=cans,
            price_per_gallon=price,
            cost=cans * price,
        ))
    return items


class _Priced:
    """Intermediate result of one variant calculator."""

    def __init__(self) -> None:
        self.labor: list[LaborLineItem] = []
        self.gallons = GallonUsage()
        self.quantities: dict = {}
        self.inclusions: dict[str, bool] = {}

    def add_labor(self, item: LaborLineItem | None) -> None:
        if item is not None:
            self.labor.append(item)


# ---------------------------------------------------------------------------
# Rooms
# ---------------------------------------------------------------------------


def _price_room(
    room: Room | IrregularRoom,
    geo: GeometryResult,
    inc: RoomInclusions,
    pricing: PricingSettings,
    calc: CalculationSettings,
    project: Project | None,
    default_coats: int,
) -> _Priced:
    coats_walls = resolve_coats(room.coats_walls, project, default_coats)
    coats_ceiling = resolve_coats(room.coats_ceiling, project, default_coats)
    coats_trim = resolve_coats(room.coats_trim, project, default_coats)
    coats_doors = resolve_coats(room.coats_doors, project, default_coats)
    m_walls = coat_labor_multiplier(coats_walls, pricing)
    m_ceiling = coat_labor_multiplier(coats_ceiling, pricing)
    m_trim = coat_labor_multiplier(coats_trim, pricing)
    m_doors = coat_labor_multiplier(coats_doors, pricing)

    closets = inc.closet_interiors
    wall_area = geo.wall_area + (geo.closet_wall_area if closets else 0.0) if inc.walls else 0.0
    ceiling_area = (
        geo.ceiling_area + (geo.closet_ceiling_area if closets else 0.0) if inc.ceilings else 0.0
    )
    baseboard_lf = (
        geo.baseboard_lf + (geo.closet_baseboard_lf if closets else 0.0) if inc.baseboards else 0.0
    )
    crown_lf = geo.crown_moulding_lf if inc.crown_moulding else 0.0
    trim_area = trim_surface_area(
        baseboard_lf,
        calc.baseboard_width,
        crown_lf,
        calc.crown_moulding_width,
        geo.window_trim_area if inc.windows else 0.0,
        geo.door_trim_area if inc.trim else 0.0,
        geo.closet_trim_area if inc.trim else 0.0,
        geo.opening_trim_area if inc.trim else 0.0,
    )
    door_area = (geo.door_face_area if inc.doors else 0.0) + (geo.jamb_area if inc.jambs else 0.0)
    windows = geo.window_count if inc.windows else 0
    doors = geo.door_count if inc.doors else 0
    closet_units = geo.closet_count if closets else 0

    priced = _Priced()
    priced.inclusions = inc.model_dump()
    priced.add_labor(_labor(SurfaceCategory.WALLS, wall_area, Unit.SQ_FT, pricing.wall_labor_per_sq_ft, m_walls))
    priced.add_labor(_labor(
        SurfaceCategory.CEILINGS, ceiling_area, Unit.SQ_FT, pricing.ceiling_labor_per_sq_ft, m_ceiling
    ))
    priced.add_labor(_labor(
        SurfaceCategory.BASEBOARDS, baseboard_lf, Unit.LINEAR_FT, pricing.baseboard_labor_per_lf, m_trim
    ))
    priced.add_labor(_labor(
        SurfaceCategory.CROWN_MOULDING, crown_lf, Unit.LINEAR_FT, pricing.crown_moulding_labor_per_lf, m_trim
    ))
    priced.add_labor(_labor(SurfaceCategory.WINDOWS, windows, Unit.EACH, pricing.window_labor, m_trim))
    priced.add_labor(_labor(SurfaceCategory.DOORS, doors, Unit.EACH, pricing.door_labor, m_doors))
    priced.add_labor(_labor(SurfaceCategory.CLOSETS, closet_units, Unit.EACH, pricing.closet_labor, m_walls))

    if room.has_accent_wall and inc.walls:
        accent = non_negative(pricing.accent_wall_labor_multiplier, fallback=1.0)
        priced.labor = [
            item.model_copy(update={"adjustment": accent, "cost": item.cost * accent})
            for item in priced.labor
        ]

    priced.gallons = GallonUsage(
        wall=gallons_needed(wall_area, pricing.coverage_for(PaintType.WALL), coats_walls),
        ceiling=gallons_needed(ceiling_area, pricing.coverage_for(PaintType.CEILING), coats_ceiling),
        trim=gallons_needed(trim_area, pricing.coverage_for(PaintType.TRIM), coats_trim),
        door=gallons_needed(door_area, pricing.coverage_for(PaintType.DOOR), coats_doors),
    )
    priced.quantities = {
        "wall_area": wall_area,
        "ceiling_area": ceiling_area,
        "trim_area": trim_area,
        "door_area": door_area,
        "baseboard_lf": baseboard_lf,
        "door_count": doors,
        "window_count": windows,
        "closet_count": geo.closet_count,
        "closet_interiors_included": closets,
    }
    return priced


# ---------------------------------------------------------------------------
# Other structures
# ---------------------------------------------------------------------------


def _price_staircase(
    stairs: Staircase, geo: GeometryResult, pricing: PricingSettings, coats: int
) -> _Priced:
    m = coat_labor_multiplier(coats, pricing)
    trim_area = geo.riser_area + geo.spindle_area + geo.handrail_area

    priced = _Priced()
    priced.add_labor(_labor(SurfaceCategory.RISERS, stairs.riser_count, Unit.EACH, pricing.riser_labor, m))
    priced.add_labor(_labor(SurfaceCategory.SPINDLES, stairs.spindle_count, Unit.EACH, pricing.spindle_labor, m))
    priced.add_labor(_labor(
        SurfaceCategory.HANDRAIL, stairs.handrail_length, Unit.LINEAR_FT, pricing.handrail_labor_per_lf, m
    ))
    priced.add_labor(_labor(
        SurfaceCategory.STAIRWELL_WALLS, geo.stairwell_wall_area, Unit.SQ_FT, pricing.wall_labor_per_sq_ft, m
    ))
    priced.add_labor(_labor(
        SurfaceCategory.STAIRWELL_CEILING,
        geo.stairwell_ceiling_area,
        Unit.SQ_FT,
        pricing.ceiling_labor_per_sq_ft,
        m,
    ))
    priced.gallons = GallonUsage(
        wall=gallons_needed(geo.stairwell_wall_area, pricing.coverage_for(PaintType.WALL), coats),
        ceiling=gallons_needed(geo.stairwell_ceiling_area, pricing.coverage_for(PaintType.CEILING), coats),
        trim=gallons_needed(trim_area, pricing.coverage_for(PaintType.TRIM), coats),
    )
    priced.quantities = {
        "wall_area": geo.stairwell_wall_area,
        "ceiling_area": geo.stairwell_ceiling_area,
        "trim_area": trim_area,
    }
    return priced


def _price_fireplace(
    fireplace: Fireplace, geo: GeometryResult, pricing: PricingSettings, coats: int
) -> _Priced:
    m = coat_labor_multiplier(coats, pricing)

    priced = _Priced()
    if fireplace.uses_parts:
        priced.add_labor(_labor(
            SurfaceCategory.MANTEL, 1 if geo.mantel_area > 0 else 0, Unit.EACH, pricing.mantel_labor, m
        ))
        priced.add_labor(_labor(
            SurfaceCategory.FIREPLACE_LEGS, 1 if geo.legs_area > 0 else 0, Unit.EACH, pricing.legs_labor, m
        ))
        priced.add_labor(_labor(
            SurfaceCategory.OVER_MANTEL, geo.over_mantel_area, Unit.SQ_FT, pricing.wall_labor_per_sq_ft, m
        ))
    else:
        priced.add_labor(_labor(
            SurfaceCategory.FIREPLACE,
            1 if geo.fireplace_face_area > 0 else 0,
            Unit.EACH,
            pricing.fireplace_labor,
            m,
        ))
        trim_lf = fireplace.trim_linear_feet if fireplace.has_trim else 0.0
        priced.add_labor(_labor(
            SurfaceCategory.FIREPLACE_TRIM, trim_lf, Unit.LINEAR_FT, pricing.baseboard_labor_per_lf, m
        ))

    priced.gallons = GallonUsage(
        wall=gallons_needed(geo.wall_area, pricing.coverage_for(PaintType.WALL), coats),
    )
    priced.quantities = {"wall_area": geo.wall_area}
    return priced


def _price_built_in(geo: GeometryResult, pricing: PricingSettings, coats: int) -> _Priced:
    m = coat_labor_multiplier(coats, pricing)
    priced = _Priced()
    priced.add_labor(_labor(
        SurfaceCategory.BUILT_IN, geo.built_in_area, Unit.SQ_FT, pricing.built_in_labor_per_sq_ft, m
    ))
    priced.gallons = GallonUsage(
        trim=gallons_needed(geo.built_in_area, pricing.coverage_for(PaintType.TRIM), coats),
    )
    priced.quantities = {"trim_area": geo.built_in_area}
    return priced


def _price_brick_wall(
    brick: BrickWallSurface,
    geo: GeometryResult,
    pricing: PricingSettings,
    quote_builder: QuoteBuilder,
    coats: int,
) -> _Priced:
    primer = brick.include_primer and quote_builder.include_primer
    primer_area = geo.primer_area if primer else 0.0

    priced = _Priced()
    priced.inclusions = {"primer": primer}
    # Primer is a single coat
    priced.add_labor(_labor(SurfaceCategory.PRIMER, primer_area, Unit.SQ_FT, pricing.wall_labor_per_sq_ft))
    priced.add_labor(_labor(
        SurfaceCategory.BRICK,
        geo.brick_area,
        Unit.SQ_FT,
        pricing.wall_labor_per_sq_ft,
        coat_labor_multiplier(coats, pricing),
    ))
    priced.gallons = GallonUsage(
        wall=gallons_needed(geo.brick_area, pricing.coverage_for(PaintType.WALL), coats),
        primer=gallons_needed(primer_area, pricing.coverage_for(PaintType.PRIMER), 1),
    )
    priced.quantities = {"wall_area": geo.brick_area}
    return priced


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _entity_height(entity) -> float | None:
    return entity.height if isinstance(entity, (Room, IrregularRoom)) else None


def compute_pricing_summary(
    entity: PaintableEntity,
    quote_builder: QuoteBuilder,
    pricing: PricingSettings,
    calculation: CalculationSettings,
    project: Project | None = None,
    default_wall_height: float = DEFAULT_WALL_HEIGHT_FT,
    default_coats: int = DEFAULT_COATS,
) -> PricingSummary:
    """
    Price one entity under one quote configuration.

    Args:
        entity: Any PaintableEntity variant
        quote_builder: Category toggles; ANDed with the entity's own toggles
        pricing: Labor rates, paint prices and coverage
        calculation: Default physical dimensions
        project: Supplies floor heights and project-level defaults, if any
        default_wall_height: Height used when neither entity nor floor has one
        default_coats: Coats used when neither entity nor project has a count

    Returns:
        PricingSummary with raw and displayed totals. An excluded entity (or
        one whose kind the quote leaves out) prices at zero.
    """
    kind = EntityKind(entity.kind)
    summary = PricingSummary(
        entity_id=entity.id,
        entity_name=entity.display_name,
        kind=kind,
        floor=entity.floor,
    )
    if not entity.included or not quote_builder.includes_kind(kind):
        return summary

    wall_height = resolve_wall_height(_entity_height(entity), entity.floor, project, default_wall_height)
    geo = compute_geometry(entity, calculation, wall_height)

    if isinstance(entity, (Room, IrregularRoom)):
        inclusions = resolve_inclusions(entity, quote_builder, project)
        priced = _price_room(entity, geo, inclusions, pricing, calculation, project, default_coats)
    else:
        coats = resolve_coats(entity.coats, project, default_coats)
        if isinstance(entity, Staircase):
            priced = _price_staircase(entity, geo, pricing, coats)
        elif isinstance(entity, Fireplace):
            priced = _price_fireplace(entity, geo, pricing, coats)
        elif isinstance(entity, BuiltIn):
            priced = _price_built_in(geo, pricing, coats)
        else:
            priced = _price_brick_wall(entity, geo, pricing, quote_builder, coats)

    materials = _material_items(priced.gallons, pricing)
    labor_cost = sum(item.cost for item in priced.labor)
    materials_cost = sum(item.cost for item in materials)
    total_cost = labor_cost + materials_cost
    wall_cans = cans_needed(priced.gallons.wall)

    result = summary.model_copy(update={
        "inclusions": priced.inclusions,
        "labor_items": priced.labor,
        "material_items": materials,
        **priced.quantities,
        "gallons": priced.gallons,
        "wall_cans": wall_cans,
        "wall_materials_cost": wall_cans * non_negative(pricing.price_per_gallon(PaintType.WALL)),
        "labor_cost": labor_cost,
        "materials_cost": materials_cost,
        "total_cost": total_cost,
        "labor_displayed": round_cents(labor_cost),
        "materials_displayed": round_cents(materials_cost),
        "total_displayed": round_whole(total_cost),
    })

    logger.debug(
        "pricing_summary_computed",
        entity_id=entity.id,
        kind=kind.value,
        labor=result.labor_displayed,
        materials=result.materials_displayed,
        total=result.total_displayed,
    )
    return result
