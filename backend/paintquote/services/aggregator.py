"""
Project aggregation.

build_project_summary() prices every participating entity once through the
canonical cost calculator and sums the displayed values, so the grand total
always equals the sum of the itemized prices shown to the client.
"""

import structlog

from paintquote.constants import (
    DEFAULT_COATS,
    DEFAULT_WALL_HEIGHT_FT,
    FURNITURE_MOVING_ITEM_ID,
    FURNITURE_MOVING_ITEM_NAME,
    PRIMER_BASE_PAINT_TYPES,
    PRIMER_GALLON_RATIO,
)
from paintquote.models.enums import PaintType
from paintquote.models.outputs import (
    ClosetStats,
    GallonUsage,
    ItemizedPrice,
    PricingSummary,
    ProjectSummary,
)
from paintquote.models.quote import Project, QuoteBuilder
from paintquote.models.settings import CalculationSettings, PricingSettings
from paintquote.services.cost_calculator import compute_pricing_summary
from paintquote.services.inclusion import entity_participates
from paintquote.services.numeric import non_negative, round_cents, round_whole
from paintquote.services.paint_options import compute_paint_option_results
from paintquote.services.purchase_planner import plan_purchase
from paintquote.services.resolution import resolve_quote_builder, resolve_quote_id

logger = structlog.get_logger(__name__)


def project_primer_gallons(gallons: GallonUsage, quote_builder: QuoteBuilder) -> float:
    """Primer estimate: a share of wall, ceiling and trim gallons, when the quote includes primer."""
    if not quote_builder.include_primer:
        return 0.0
    base = sum(non_negative(gallons.get(t)) for t in PRIMER_BASE_PAINT_TYPES)
    return base * PRIMER_GALLON_RATIO


def _itemize(summary: PricingSummary) -> ItemizedPrice:
    return ItemizedPrice(
        id=summary.entity_id,
        name=summary.entity_name,
        kind=summary.kind,
        price=summary.total_displayed,
        labor_cost=summary.labor_displayed,
        materials_cost=summary.materials_displayed,
    )


def build_project_summary(
    project: Project,
    pricing: PricingSettings,
    calculation: CalculationSettings,
    quote_builder: QuoteBuilder | None = None,
    default_wall_height: float = DEFAULT_WALL_HEIGHT_FT,
    default_coats: int = DEFAULT_COATS,
) -> ProjectSummary:
    """
    Aggregate the project under one quote configuration.

    Args:
        project: Project with its entities
        pricing: Labor rates, paint prices and coverage
        calculation: Default physical dimensions
        quote_builder: Explicit configuration; None resolves the project's
            active quote the same way the save and import paths do

    Returns:
        ProjectSummary whose grand_total is the sum of itemized prices.
    """
    qb = quote_builder if quote_builder is not None else resolve_quote_builder(project)

    summaries: list[PricingSummary] = []
    for entity in project.all_entities():
        if not entity_participates(entity, qb):
            continue
        summaries.append(compute_pricing_summary(
            entity,
            qb,
            pricing,
            calculation,
            project=project,
            default_wall_height=default_wall_height,
            default_coats=default_coats,
        ))

    itemized = [_itemize(s) for s in summaries]
    total_labor = sum(s.labor_displayed for s in summaries)
    total_materials = sum(s.materials_displayed for s in summaries)
    grand_total = sum(s.total_displayed for s in summaries)

    if project.include_furniture_moving:
        fee = round_whole(pricing.furniture_moving_fee)
        itemized.append(ItemizedPrice(
            id=FURNITURE_MOVING_ITEM_ID,
            name=FURNITURE_MOVING_ITEM_NAME,
            price=fee,
            labor_cost=fee,
            materials_cost=0.0,
        ))
        total_labor += fee
        grand_total += fee

    gallons = GallonUsage()
    for s in summaries:
        gallons = gallons + s.gallons
    gallons = gallons.model_copy(update={
        PaintType.PRIMER.value: project_primer_gallons(gallons, qb) + gallons.primer,
    })

    closet_stats = ClosetStats(
        included_interiors=sum(s.closet_count for s in summaries if s.closet_interiors_included),
        excluded_interiors=sum(s.closet_count for s in summaries if not s.closet_interiors_included),
    )

    project_summary = ProjectSummary(
        project_id=project.id,
        quote_id=resolve_quote_id(project) if quote_builder is None else None,
        itemized_prices=itemized,
        entity_summaries=summaries,
        gallons=gallons,
        total_wall_sq_ft=sum(s.wall_area for s in summaries),
        total_ceiling_sq_ft=sum(s.ceiling_area for s in summaries),
        total_trim_sq_ft=sum(s.trim_area for s in summaries),
        total_door_sq_ft=sum(s.door_area for s in summaries),
        total_doors=sum(s.door_count for s in summaries),
        total_windows=sum(s.window_count for s in summaries),
        closets=closet_stats,
        total_labor_cost=round_cents(total_labor),
        total_materials_cost=round_cents(total_materials),
        grand_total=round_whole(grand_total),
        purchase_plan=plan_purchase(gallons, pricing),
    )

    if qb.show_paint_options_in_proposal:
        project_summary.paint_option_results = compute_paint_option_results(
            project_summary, qb.paint_options
        )

    logger.info(
        "project_summary_built",
        project_id=project.id,
        entities=len(summaries),
        grand_total=project_summary.grand_total,
        paint_options=len(project_summary.paint_option_results),
    )
    return project_summary
