"""
Contractor-tunable calculation and pricing settings.

CalculationSettings holds the physical defaults used when an entity does not
carry its own measurement (standard door size, trim widths...). Door and
window sizes are feet; trim, jamb, closet and opening widths are inches, the
way they are read off a tape measure.

PricingSettings holds labor rates, paint prices and coverage rates.

Both are frozen: replace them through update() rather than mutating fields,
so every calculation sees one consistent snapshot.
"""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from paintquote.constants import MIN_COVERAGE_SQ_FT_PER_GALLON
from paintquote.models.enums import PaintType


class _FrozenSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    def update(self, **changes: object) -> Self:
        """Return a new validated snapshot with `changes` applied."""
        return type(self).model_validate({**self.model_dump(), **changes})

    @classmethod
    def defaults(cls) -> Self:
        return cls()


class CalculationSettings(_FrozenSettings):
    """Default physical dimensions for openings, trim and closets."""

    door_height: float = Field(default=7.0, ge=0, description="Door height (ft)")
    door_width: float = Field(default=3.0, ge=0, description="Door width (ft)")
    door_trim_width: float = Field(default=3.5, ge=0, description="Door casing width (in)")
    door_jamb_width: float = Field(default=4.5, ge=0, description="Door jamb width (in)")

    window_width: float = Field(default=3.0, ge=0, description="Window width (ft)")
    window_height: float = Field(default=5.0, ge=0, description="Window height (ft)")
    window_trim_width: float = Field(default=3.5, ge=0, description="Window casing width (in)")

    single_closet_width: float = Field(default=30.0, ge=0, description="Single closet opening (in)")
    single_closet_trim_width: float = Field(default=3.5, ge=0, description="Single closet casing (in)")
    double_closet_width: float = Field(default=60.0, ge=0, description="Double closet opening (in)")
    double_closet_trim_width: float = Field(default=3.5, ge=0, description="Double closet casing (in)")
    closet_cavity_depth: float = Field(default=2.0, ge=0, description="Closet interior depth (ft)")

    baseboard_width: float = Field(default=5.5, ge=0, description="Baseboard height (in)")
    crown_moulding_width: float = Field(default=5.5, ge=0, description="Crown moulding width (in)")

    opening_width: float = Field(default=36.0, ge=0, description="Pass-through opening width (in)")
    opening_height: float = Field(default=80.0, ge=0, description="Pass-through opening height (in)")
    opening_trim_width: float = Field(default=3.5, ge=0, description="Opening casing width (in)")


class PricingSettings(_FrozenSettings):
    """Labor rates, paint prices and coverage rates."""

    # Labor
    wall_labor_per_sq_ft: float = Field(default=1.5, ge=0)
    ceiling_labor_per_sq_ft: float = Field(default=1.75, ge=0)
    baseboard_labor_per_lf: float = Field(default=1.25, ge=0)
    crown_moulding_labor_per_lf: float = Field(default=1.5, ge=0)
    handrail_labor_per_lf: float = Field(default=10.0, ge=0)
    door_labor: float = Field(default=50.0, ge=0)
    window_labor: float = Field(default=35.0, ge=0)
    closet_labor: float = Field(default=75.0, ge=0)
    riser_labor: float = Field(default=15.0, ge=0)
    spindle_labor: float = Field(default=8.0, ge=0)
    fireplace_labor: float = Field(default=150.0, ge=0)
    mantel_labor: float = Field(default=100.0, ge=0)
    legs_labor: float = Field(default=100.0, ge=0)
    built_in_labor_per_sq_ft: float = Field(default=2.5, ge=0)

    # Multipliers & fees
    second_coat_labor_multiplier: float = Field(default=2.0, ge=0)
    accent_wall_labor_multiplier: float = Field(default=1.25, ge=0)
    furniture_moving_fee: float = Field(default=100.0, ge=0)

    # Materials, per gallon
    wall_paint_per_gallon: float = Field(default=45.0, ge=0)
    ceiling_paint_per_gallon: float = Field(default=40.0, ge=0)
    trim_paint_per_gallon: float = Field(default=50.0, ge=0)
    door_paint_per_gallon: float = Field(default=50.0, ge=0)
    primer_per_gallon: float = Field(default=35.0, ge=0)

    # Materials, per 5-gallon bucket (None = only sold by the gallon)
    wall_paint_per_5_gallon: float | None = Field(default=200.0, ge=0)
    ceiling_paint_per_5_gallon: float | None = Field(default=175.0, ge=0)
    trim_paint_per_5_gallon: float | None = Field(default=225.0, ge=0)
    door_paint_per_5_gallon: float | None = Field(default=225.0, ge=0)
    primer_per_5_gallon: float | None = Field(default=150.0, ge=0)

    # Coverage (sq ft per gallon)
    wall_coverage_sq_ft_per_gallon: float = 350.0
    ceiling_coverage_sq_ft_per_gallon: float = 350.0
    trim_coverage_sq_ft_per_gallon: float = 350.0
    door_coverage_sq_ft_per_gallon: float = 350.0
    primer_coverage_sq_ft_per_gallon: float = 350.0

    def coverage_for(self, paint_type: PaintType) -> float:
        """Coverage rate for a paint type, floored at MIN_COVERAGE_SQ_FT_PER_GALLON."""
        rate = getattr(self, f"{paint_type.value}_coverage_sq_ft_per_gallon")
        return max(MIN_COVERAGE_SQ_FT_PER_GALLON, rate)

    def price_per_gallon(self, paint_type: PaintType) -> float:
        if paint_type == PaintType.PRIMER:
            return self.primer_per_gallon
        return getattr(self, f"{paint_type.value}_paint_per_gallon")

    def price_per_bucket(self, paint_type: PaintType) -> float | None:
        if paint_type == PaintType.PRIMER:
            return self.primer_per_5_gallon
        return getattr(self, f"{paint_type.value}_paint_per_5_gallon")
