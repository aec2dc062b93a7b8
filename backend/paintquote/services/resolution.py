"""
Configuration resolution.

Values can be set on the entity, on the project, or nowhere. Every lookup
goes through one layered resolver so preview, save and import agree on the
same fallback chain.

The quote builder has its own chain:
    active quote -> first quote -> legacy bare quote_builder -> defaults
"""

import structlog

from paintquote.constants import DEFAULT_COATS, DEFAULT_WALL_HEIGHT_FT
from paintquote.models.quote import Project, QuoteBuilder
from paintquote.services.numeric import safe_number

logger = structlog.get_logger(__name__)


def resolve_setting(*layers, default):
    """First layer that is not None, else default."""
    for value in layers:
        if value is not None:
            return value
    return default


def _positive_or_none(value: object) -> float | None:
    number = safe_number(value)
    return number if number > 0 else None


def floor_height(project: Project | None, floor: int) -> float | None:
    """Configured wall height of a 1-based floor, if any."""
    if project is None or floor < 1 or floor > len(project.floor_heights):
        return None
    return _positive_or_none(project.floor_heights[floor - 1])


def resolve_wall_height(
    entity_height: float | None,
    floor: int,
    project: Project | None,
    default: float = DEFAULT_WALL_HEIGHT_FT,
) -> float:
    """Entity height -> project floor height -> default."""
    return resolve_setting(
        _positive_or_none(entity_height),
        floor_height(project, floor),
        default=default,
    )


def resolve_coats(
    entity_coats: int | None,
    project: Project | None,
    default: int = DEFAULT_COATS,
) -> int:
    """Entity coats -> project default -> default. Zero counts as unset."""
    project_coats = project.default_coats if project is not None else None
    return int(
        resolve_setting(
            _positive_or_none(entity_coats),
            _positive_or_none(project_coats),
            default=default,
        )
    )


def resolve_closet_interior(entity_value: bool | None, project: Project | None) -> bool:
    """Entity toggle -> project default -> True."""
    project_value = project.include_closet_interior_default if project is not None else None
    return resolve_setting(entity_value, project_value, default=True)


def resolve_quote_builder(project: Project) -> QuoteBuilder:
    """The one quote builder every pricing path should use for this project."""
    if project.quotes:
        if project.active_quote_id is not None:
            for quote in project.quotes:
                if quote.id == project.active_quote_id:
                    return quote.quote_builder
            logger.warning(
                "active_quote_not_found",
                project_id=project.id,
                active_quote_id=project.active_quote_id,
                fallback_quote_id=project.quotes[0].id,
            )
        return project.quotes[0].quote_builder

    if project.quote_builder is not None:
        return project.quote_builder

    return QuoteBuilder()


def resolve_quote_id(project: Project) -> str | None:
    """Id of the quote resolve_quote_builder picks, None for legacy/default builders."""
    if not project.quotes:
        return None
    ids = [quote.id for quote in project.quotes]
    return project.active_quote_id if project.active_quote_id in ids else ids[0]
