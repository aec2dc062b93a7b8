"""
Project API endpoints.

Endpoints:
- POST /api/v1/projects/import   - Import an exported project (JSON object)
- POST /api/v1/projects/snapshot - Save path: freeze current prices onto entities
- POST /api/v1/projects/migrate  - Wrap a legacy bare quote builder into a quote
"""

from typing import Any

import structlog
from fastapi import APIRouter, Body, HTTPException

from paintquote.api.dependencies import AppSettings
from paintquote.models.quote import Project
from paintquote.services.project_import import ProjectImportError, import_project_payload
from paintquote.services.project_migration import migrate_legacy_project
from paintquote.services.snapshot import snapshot_project

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("/import", response_model=Project)
async def import_project(settings: AppSettings, payload: Any = Body(...)) -> Project:
    """Validate, migrate and price an imported project."""
    try:
        return import_project_payload(payload, settings)
    except ProjectImportError as e:
        logger.warning("project_import_rejected", error=str(e))
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/snapshot", response_model=Project)
async def snapshot(project: Project, settings: AppSettings) -> Project:
    return snapshot_project(
        migrate_legacy_project(project),
        settings.pricing,
        settings.calculation,
        default_wall_height=settings.default_wall_height,
        default_coats=settings.default_coats,
    )


@router.post("/migrate", response_model=Project)
async def migrate(project: Project) -> Project:
    return migrate_legacy_project(project)
