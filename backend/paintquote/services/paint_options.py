"""
Paint-tier option engine (Good / Better / Best).

Each enabled tier reprices only the wall paint of the quote: the standard
wall paint cost is taken out of the grand total and the tier's price per
gallon is applied to the same whole-can wall count. Labor and every other
paint type are unchanged.
"""

from paintquote.models.outputs import PaintOptionResult, ProjectSummary
from paintquote.models.quote import PaintOption
from paintquote.services.numeric import non_negative, round_cents, round_whole


def compute_paint_option_results(
    project_summary: ProjectSummary,
    paint_options: list[PaintOption],
) -> list[PaintOptionResult]:
    """Results for the enabled options, in their configured order."""
    entities = project_summary.entity_summaries
    wall_cans = sum(s.wall_cans for s in entities)
    base_wall_materials = sum(s.wall_materials_cost for s in entities)
    base_total = project_summary.grand_total - base_wall_materials

    results: list[PaintOptionResult] = []
    for option in paint_options:
        if not option.enabled:
            continue
        wall_paint_cost = wall_cans * non_negative(option.price_per_gallon)
        results.append(PaintOptionResult(
            option_id=option.id,
            option_name=option.name,
            total=max(0.0, round_whole(base_total + wall_paint_cost)),
            notes=option.notes,
            wall_gallons=wall_cans,
            wall_paint_cost=round_cents(wall_paint_cost),
        ))
    return results
