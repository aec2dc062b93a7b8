"""
Estimate API endpoints.

Endpoints:
- GET  /api/v1/estimates/defaults - Pricing and calculation defaults in effect
- POST /api/v1/estimates/entity   - Live preview of one entity's price
- POST /api/v1/estimates/project  - Aggregated quote for a project
"""

import structlog
from fastapi import APIRouter
from pydantic import BaseModel, Field

from paintquote.api.dependencies import AppSettings
from paintquote.models.entities import PaintableEntity
from paintquote.models.outputs import PricingSummary, ProjectSummary
from paintquote.models.quote import Project, QuoteBuilder
from paintquote.models.settings import CalculationSettings, PricingSettings
from paintquote.services.aggregator import build_project_summary
from paintquote.services.cost_calculator import compute_pricing_summary
from paintquote.services.resolution import resolve_quote_builder

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/estimates", tags=["estimates"])


class EntityEstimateRequest(BaseModel):
    """Request body for a single-entity preview."""

    entity: PaintableEntity
    quote_builder: QuoteBuilder | None = Field(
        default=None, description="None uses the project's active quote, or the defaults"
    )
    project: Project | None = Field(
        default=None, description="Supplies floor heights and project defaults"
    )
    pricing: PricingSettings | None = Field(default=None, description="Overrides configured pricing")
    calculation: CalculationSettings | None = Field(
        default=None, description="Overrides configured dimensions"
    )


class ProjectEstimateRequest(BaseModel):
    """Request body for a project quote."""

    project: Project
    quote_builder: QuoteBuilder | None = Field(
        default=None, description="None uses the project's active quote"
    )
    pricing: PricingSettings | None = None
    calculation: CalculationSettings | None = None


class DefaultsResponse(BaseModel):
    pricing: PricingSettings
    calculation: CalculationSettings
    default_wall_height: float
    default_coats: int


@router.get("/defaults", response_model=DefaultsResponse)
async def get_defaults(settings: AppSettings) -> DefaultsResponse:
    return DefaultsResponse(
        pricing=settings.pricing,
        calculation=settings.calculation,
        default_wall_height=settings.default_wall_height,
        default_coats=settings.default_coats,
    )


@router.post("/entity", response_model=PricingSummary)
async def estimate_entity(body: EntityEstimateRequest, settings: AppSettings) -> PricingSummary:
    """Price one entity exactly as the save path would."""
    quote_builder = body.quote_builder
    if quote_builder is None:
        quote_builder = resolve_quote_builder(body.project) if body.project is not None else QuoteBuilder()
    summary = compute_pricing_summary(
        body.entity,
        quote_builder,
        body.pricing or settings.pricing,
        body.calculation or settings.calculation,
        project=body.project,
        default_wall_height=settings.default_wall_height,
        default_coats=settings.default_coats,
    )
    logger.info(
        "entity_estimated",
        entity_id=summary.entity_id,
        kind=summary.kind.value,
        total=summary.total_displayed,
    )
    return summary


@router.post("/project", response_model=ProjectSummary)
async def estimate_project(body: ProjectEstimateRequest, settings: AppSettings) -> ProjectSummary:
    """Aggregate the project under the given (or active) quote configuration."""
    return build_project_summary(
        body.project,
        body.pricing or settings.pricing,
        body.calculation or settings.calculation,
        quote_builder=body.quote_builder,
        default_wall_height=settings.default_wall_height,
        default_coats=settings.default_coats,
    )
