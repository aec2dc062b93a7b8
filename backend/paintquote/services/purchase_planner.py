"""
Paint purchase planning.

Paint is sold by the gallon and in 5-gallon buckets. A plan buys as many
full buckets as fit, then single gallons for the remainder.
"""

import math

from paintquote.constants import BUCKET_SIZE_GALLONS
from paintquote.models.enums import PaintType
from paintquote.models.outputs import GallonUsage, PurchaseLine, PurchasePlan
from paintquote.models.settings import PricingSettings
from paintquote.services.numeric import non_negative, round_cents
from paintquote.services.paint_consumption import cans_needed


def split_purchase(gallons: float) -> tuple[int, int]:
    """(buckets, single gallons) for a gallon requirement."""
    gallons = non_negative(gallons)
    buckets = math.floor(gallons / BUCKET_SIZE_GALLONS)
    singles = cans_needed(gallons - buckets * BUCKET_SIZE_GALLONS)
    return buckets, singles


def paint_cost(gallons: float, price_per_gallon: float, price_per_bucket: float | None) -> float:
    """Cheapest-by-convention cost: buckets then gallons.

    Without a bucket price every gallon is bought singly.
    """
    if price_per_bucket is None:
        return cans_needed(gallons) * non_negative(price_per_gallon)
    buckets, singles = split_purchase(gallons)
    return buckets * non_negative(price_per_bucket) + singles * non_negative(price_per_gallon)


def plan_purchase(gallons: GallonUsage, pricing: PricingSettings) -> PurchasePlan:
    """Purchase plan for every paint type with a non-zero requirement."""
    lines: list[PurchaseLine] = []
    for paint_type in PaintType:
        needed = non_negative(gallons.get(paint_type))
        if needed <= 0:
            continue
        bucket_price = pricing.price_per_bucket(paint_type)
        if bucket_price is None:
            buckets, singles = 0, cans_needed(needed)
        else:
            buckets, singles = split_purchase(needed)
        lines.append(PurchaseLine(
            paint_type=paint_type,
            gallons_needed=needed,
            buckets=buckets,
            single_gallons=singles,
            cost=round_cents(paint_cost(needed, pricing.price_per_gallon(paint_type), bucket_price)),
        ))
    return PurchasePlan(lines=lines, total_cost=round_cents(sum(line.cost for line in lines)))
