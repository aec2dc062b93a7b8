"""
Save-path snapshots.

When an entity is saved its price is frozen onto it (gallon usage, labor,
materials and grand total) so lists and proposals can show it without
recomputing. The values come from compute_pricing_summary, the same call the
live preview makes, under the quote builder the project resolves to.
"""

import structlog

from paintquote.constants import DEFAULT_COATS, DEFAULT_WALL_HEIGHT_FT
from paintquote.models.entities import PaintableEntity
from paintquote.models.outputs import GallonUsage, PricingSummary
from paintquote.models.quote import Project, QuoteBuilder, QuoteTotals
from paintquote.models.settings import CalculationSettings, PricingSettings
from paintquote.services.aggregator import build_project_summary
from paintquote.services.cost_calculator import compute_pricing_summary
from paintquote.services.resolution import resolve_quote_builder, resolve_quote_id

logger = structlog.get_logger(__name__)

_ENTITY_LISTS = (
    "rooms",
    "bathrooms",
    "irregular_rooms",
    "staircases",
    "fireplaces",
    "built_ins",
    "brick_walls",
)


def snapshot_fields(summary: PricingSummary) -> dict:
    """Fields written onto an entity from its pricing summary."""
    gallons = summary.gallons
    return {
        "gallon_usage": GallonUsage(
            wall=gallons.wall,
            ceiling=gallons.ceiling,
            trim=gallons.trim,
            door=gallons.door,
            primer=gallons.primer,
        ),
        "labor_total": summary.labor_displayed,
        "materials_total": summary.materials_displayed,
        "grand_total": summary.total_displayed,
    }


def snapshot_entity(
    entity: PaintableEntity,
    pricing: PricingSettings,
    calculation: CalculationSettings,
    project: Project | None = None,
    quote_builder: QuoteBuilder | None = None,
    default_wall_height: float = DEFAULT_WALL_HEIGHT_FT,
    default_coats: int = DEFAULT_COATS,
) -> PaintableEntity:
    """Return a copy of the entity carrying its current price.

    quote_builder defaults to the project's resolved builder (or a default
    builder when there is no project).
    """
    if quote_builder is None:
        quote_builder = resolve_quote_builder(project) if project is not None else QuoteBuilder()
    summary = compute_pricing_summary(
        entity,
        quote_builder,
        pricing,
        calculation,
        project=project,
        default_wall_height=default_wall_height,
        default_coats=default_coats,
    )
    return entity.model_copy(update=snapshot_fields(summary))


def snapshot_project(
    project: Project,
    pricing: PricingSettings,
    calculation: CalculationSettings,
    default_wall_height: float = DEFAULT_WALL_HEIGHT_FT,
    default_coats: int = DEFAULT_COATS,
) -> Project:
    """Snapshot every entity and the active quote's totals."""
    quote_builder = resolve_quote_builder(project)
    updates = {
        name: [
            snapshot_entity(
                entity,
                pricing,
                calculation,
                project=project,
                quote_builder=quote_builder,
                default_wall_height=default_wall_height,
                default_coats=default_coats,
            )
            for entity in getattr(project, name)
        ]
        for name in _ENTITY_LISTS
    }

    quote_id = resolve_quote_id(project)
    if quote_id is not None:
        summary = build_project_summary(
            project,
            pricing,
            calculation,
            quote_builder,
            default_wall_height=default_wall_height,
            default_coats=default_coats,
        )
        totals = QuoteTotals(
            labor_total=summary.total_labor_cost,
            materials_total=summary.total_materials_cost,
            grand_total=summary.grand_total,
        )
        updates["quotes"] = [
            quote.model_copy(update={"totals": totals}) if quote.id == quote_id else quote
            for quote in project.quotes
        ]

    logger.info("project_snapshotted", project_id=project.id, quote_id=quote_id)
    return project.model_copy(update=updates)
