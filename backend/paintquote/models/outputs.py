"""
Output models produced by the calculators.

GeometryResult   - raw quantities for one entity, before any filtering
PricingSummary   - canonical per-entity price (preview, save and import all
                   read this one model)
ProjectSummary   - aggregated quote for a project
PaintOptionResult / PurchasePlan - proposal extras
"""

from pydantic import BaseModel, Field

from paintquote.models.enums import EntityKind, PaintType, SurfaceCategory, Unit

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


class GeometryResult(BaseModel):
    """Surface quantities for one entity. Areas in sq ft, lengths in linear ft."""

    perimeter: float = 0.0
    floor_area: float = 0.0
    effective_wall_height: float = 0.0

    wall_area: float = Field(default=0.0, description="Net wall area after opening deductions")
    ceiling_area: float = 0.0
    baseboard_lf: float = 0.0
    crown_moulding_lf: float = 0.0

    window_trim_area: float = 0.0
    door_trim_area: float = 0.0
    closet_trim_area: float = 0.0
    opening_trim_area: float = 0.0
    door_face_area: float = 0.0
    jamb_area: float = 0.0

    closet_wall_area: float = 0.0
    closet_ceiling_area: float = 0.0
    closet_baseboard_lf: float = 0.0

    door_count: int = 0
    window_count: int = 0
    closet_count: int = 0

    # Staircases
    riser_area: float = 0.0
    spindle_area: float = 0.0
    handrail_area: float = 0.0
    stairwell_wall_area: float = 0.0
    stairwell_ceiling_area: float = 0.0

    # Fireplaces
    mantel_area: float = 0.0
    legs_area: float = 0.0
    over_mantel_area: float = 0.0
    fireplace_face_area: float = 0.0
    fireplace_trim_area: float = 0.0

    # Built-ins and brick walls
    built_in_area: float = 0.0
    brick_area: float = 0.0
    primer_area: float = 0.0


# ---------------------------------------------------------------------------
# Per-entity pricing
# ---------------------------------------------------------------------------


class GallonUsage(BaseModel):
    """Unrounded gallons per paint type."""

    wall: float = 0.0
    ceiling: float = 0.0
    trim: float = 0.0
    door: float = 0.0
    primer: float = 0.0

    def get(self, paint_type: PaintType) -> float:
        return getattr(self, paint_type.value)

    def __add__(self, other: "GallonUsage") -> "GallonUsage":
        return GallonUsage(
            **{t.value: self.get(t) + other.get(t) for t in PaintType}
        )


class LaborLineItem(BaseModel):
    """One labor category on an entity estimate."""

    category: SurfaceCategory
    quantity: float = Field(ge=0)
    unit: Unit
    rate: float = Field(ge=0)
    coat_multiplier: float = 1.0
    adjustment: float = Field(default=1.0, description="Room-level multiplier, e.g. accent walls")
    cost: float = Field(ge=0)


class MaterialLineItem(BaseModel):
    """One paint product on an entity estimate. Cans are whole gallons."""

    paint_type: PaintType
    gallons: float = Field(ge=0)
    cans: int = Field(ge=0)
    price_per_gallon: float = Field(ge=0)
    cost: float = Field(ge=0)


class PricingSummary(BaseModel):
    """Canonical price of one entity under one quote configuration.

    total_cost is the raw sum and is kept for diagnostics only; anything shown
    to a client or persisted reads the *_displayed fields.
    """

    entity_id: str
    entity_name: str
    kind: EntityKind
    floor: int = 1
    inclusions: dict[str, bool] = Field(default_factory=dict)

    labor_items: list[LaborLineItem] = Field(default_factory=list)
    material_items: list[MaterialLineItem] = Field(default_factory=list)

    wall_area: float = 0.0
    ceiling_area: float = 0.0
    trim_area: float = 0.0
    door_area: float = 0.0
    baseboard_lf: float = 0.0
    door_count: int = 0
    window_count: int = 0
    closet_count: int = 0
    closet_interiors_included: bool = False

    gallons: GallonUsage = Field(default_factory=GallonUsage)
    wall_cans: int = 0
    wall_materials_cost: float = 0.0

    labor_cost: float = 0.0
    materials_cost: float = 0.0
    total_cost: float = 0.0

    labor_displayed: float = 0.0
    materials_displayed: float = 0.0
    total_displayed: float = 0.0


# ---------------------------------------------------------------------------
# Project level
# ---------------------------------------------------------------------------


class ItemizedPrice(BaseModel):
    """One line of a client-facing itemized quote (displayed values)."""

    id: str
    name: str
    kind: EntityKind | None = Field(default=None, description="None for project fees")
    price: float
    labor_cost: float
    materials_cost: float


class PurchaseLine(BaseModel):
    """How to buy one paint product: 5-gallon buckets first, then gallons."""

    paint_type: PaintType
    gallons_needed: float
    buckets: int
    single_gallons: int
    cost: float


class PurchasePlan(BaseModel):
    lines: list[PurchaseLine] = Field(default_factory=list)
    total_cost: float = 0.0


class PaintOptionResult(BaseModel):
    """Project total repriced with one paint tier's wall paint."""

    option_id: str
    option_name: str
    total: float
    notes: str = ""
    wall_gallons: int
    wall_paint_cost: float


class ClosetStats(BaseModel):
    included_interiors: int = 0
    excluded_interiors: int = 0


class ProjectSummary(BaseModel):
    """Aggregated estimate for the participating entities of a project."""

    project_id: str
    quote_id: str | None = None
    itemized_prices: list[ItemizedPrice] = Field(default_factory=list)
    entity_summaries: list[PricingSummary] = Field(default_factory=list)

    gallons: GallonUsage = Field(default_factory=GallonUsage)
    total_wall_sq_ft: float = 0.0
    total_ceiling_sq_ft: float = 0.0
    total_trim_sq_ft: float = 0.0
    total_door_sq_ft: float = 0.0
    total_doors: int = 0
    total_windows: int = 0
    closets: ClosetStats = Field(default_factory=ClosetStats)

    total_labor_cost: float = 0.0
    total_materials_cost: float = 0.0
    grand_total: float = 0.0

    purchase_plan: PurchasePlan = Field(default_factory=PurchasePlan)
    paint_option_results: list[PaintOptionResult] = Field(default_factory=list)
