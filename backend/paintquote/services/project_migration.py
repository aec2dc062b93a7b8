"""
Legacy project migration.

Projects saved before multi-quote support carry one bare quote_builder and
no quotes. migrate_legacy_project() wraps that builder in a synthesized quote
and makes it active. Running it again is a no-op.
"""

import structlog

from paintquote.constants import DEFAULT_QUOTE_ID, DEFAULT_QUOTE_TITLE
from paintquote.models.quote import Project, Quote

logger = structlog.get_logger(__name__)


def needs_migration(project: Project) -> bool:
    return not project.quotes and project.quote_builder is not None


def migrate_legacy_project(project: Project) -> Project:
    """Return a copy of the project with its bare quote builder wrapped in a Quote."""
    if not needs_migration(project):
        return project

    quote = Quote(
        id=DEFAULT_QUOTE_ID,
        title=DEFAULT_QUOTE_TITLE,
        quote_builder=project.quote_builder,
    )
    logger.info("legacy_project_migrated", project_id=project.id, quote_id=quote.id)
    return project.model_copy(update={
        "quotes": [quote],
        "active_quote_id": quote.id,
        "quote_builder": None,
    })
