"""
Project import pipeline.

JSON text -> normalized payload -> validated Project -> legacy migration ->
resolved room heights -> snapshot totals.

Snapshots are computed by the same snapshot path a manual save uses, under
the quote builder the imported project resolves to, so an imported project
shows exactly the totals it would show after being opened and saved.
"""

import json
import uuid
from typing import Any

import structlog
from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from paintquote.config import Settings
from paintquote.constants import CEILING_TYPE_ALIASES
from paintquote.models.quote import Project
from paintquote.models.settings import PricingSettings
from paintquote.services.project_migration import migrate_legacy_project
from paintquote.services.resolution import floor_height
from paintquote.services.snapshot import snapshot_project

logger = structlog.get_logger(__name__)

_ROOM_LISTS = ("rooms", "bathrooms", "irregular_rooms")
_ENTITY_LISTS = (*_ROOM_LISTS, "staircases", "fireplaces", "built_ins", "brick_walls")

# Export keys whose snake_case form is not the field name
_PROJECT_KEY_RENAMES = {
    "project_coats": "default_coats",
    "project_include_closet_interior_in_quote": "include_closet_interior_default",
}
_ROOM_KEY_RENAMES = {"include_closet_interior_in_quote": "include_closet_interior"}


class ProjectImportError(ValueError):
    """Raised when an import payload cannot be turned into a project."""


def snake_case_keys(value: Any) -> Any:
    """Recursively convert dict keys from the app's camelCase export format."""
    if isinstance(value, dict):
        return {to_snake(key) if isinstance(key, str) else key: snake_case_keys(v) for key, v in value.items()}
    if isinstance(value, list):
        return [snake_case_keys(item) for item in value]
    return value


def _rename(data: dict, renames: dict[str, str]) -> dict:
    for old, new in renames.items():
        if old in data:
            value = data.pop(old)
            data.setdefault(new, value)
    return data


def _normalize_entity(entity: Any) -> Any:
    if not isinstance(entity, dict):
        return entity
    entity = _rename(dict(entity), _ROOM_KEY_RENAMES)
    if not entity.get("id"):
        entity["id"] = str(uuid.uuid4())
    ceiling_type = entity.get("ceiling_type")
    if isinstance(ceiling_type, str):
        key = ceiling_type.strip().lower()
        entity["ceiling_type"] = CEILING_TYPE_ALIASES.get(key, key)
    return entity


def _normalize_staircase(stairs: Any) -> Any:
    """Turn the flat secondary-stairwell fields into a stairwell wall."""
    stairs = _normalize_entity(stairs)
    if not isinstance(stairs, dict) or "walls" in stairs:
        return stairs
    tall = stairs.pop("tall_wall_height", None)
    short = stairs.pop("short_wall_height", None)
    if stairs.pop("has_secondary_stairwell", False) and tall and short:
        stairs["walls"] = [{"tall_height": tall, "short_height": short}]
    return stairs


def _normalize_quote_builder(qb: Any) -> Any:
    """Map the legacy room-selection keys onto included_entity_ids."""
    if not isinstance(qb, dict):
        return qb
    qb = dict(qb)
    include_all = qb.pop("include_all_rooms", None)
    legacy_ids = qb.pop("rooms_included", None)
    if legacy_ids is None:
        legacy_ids = qb.pop("included_room_ids", None)
    if "included_entity_ids" not in qb:
        if include_all is False and legacy_ids is not None:
            qb["included_entity_ids"] = legacy_ids
        elif include_all is None and legacy_ids:
            qb["included_entity_ids"] = legacy_ids
    return qb


def normalize_payload(payload: dict) -> dict:
    """Fix known quirks of older exports before validation.

    Accepts both the snake_case API shape and the app's camelCase export
    (`clientInfo.name`, `ceilingType`, `projectCoats`...).
    """
    data = _rename(snake_case_keys(payload), _PROJECT_KEY_RENAMES)

    client_info = data.pop("client_info", None)
    if isinstance(client_info, dict):
        data.setdefault("client_name", client_info.get("name") or "")
        data.setdefault("address", client_info.get("address") or "")
    if not data.get("id"):
        data["id"] = str(uuid.uuid4())

    for key in _ENTITY_LISTS:
        if isinstance(data.get(key), list):
            normalize = _normalize_staircase if key == "staircases" else _normalize_entity
            data[key] = [normalize(entity) for entity in data[key]]
    if "quote_builder" in data:
        data["quote_builder"] = _normalize_quote_builder(data["quote_builder"])
    if isinstance(data.get("quotes"), list):
        data["quotes"] = [
            {**quote, "quote_builder": _normalize_quote_builder(quote.get("quote_builder"))}
            if isinstance(quote, dict) and "quote_builder" in quote
            else quote
            for quote in data["quotes"]
        ]
    return data


def _apply_floor_heights(project: Project) -> Project:
    """Give rooms without an explicit height the height of their floor."""
    updates = {}
    for key in _ROOM_LISTS:
        updates[key] = [
            room.model_copy(update={"height": floor_height(project, room.floor)})
            if room.height is None and floor_height(project, room.floor) is not None
            else room
            for room in getattr(project, key)
        ]
    return project.model_copy(update=updates)


def imported_pricing(base: PricingSettings, block: Any) -> PricingSettings:
    """Apply an export's `pricing` block on top of the configured pricing."""
    if not isinstance(block, dict) or not block:
        return base
    try:
        return base.update(**block)
    except ValidationError as e:
        raise ProjectImportError(f"Invalid pricing data: {e}") from e


def import_project_payload(payload: dict, settings: Settings) -> Project:
    """
    Build a priced project from a decoded import payload.

    Args:
        payload: Decoded JSON object
        settings: Pricing, calculation and fallback defaults

    Returns:
        Project with legacy quote data migrated and every entity snapshotted.

    Raises:
        ProjectImportError: payload is not a project, has no client name or
            carries invalid pricing
    """
    if not isinstance(payload, dict):
        raise ProjectImportError("Import payload must be a JSON object")

    data = normalize_payload(payload)
    pricing = imported_pricing(settings.pricing, data.pop("pricing", None))
    try:
        project = Project.model_validate(data)
    except ValidationError as e:
        logger.warning("project_import_invalid", errors=e.error_count())
        raise ProjectImportError(f"Invalid project data: {e}") from e

    if not project.client_name.strip():
        raise ProjectImportError("Imported project has no client name")

    project = migrate_legacy_project(project)
    project = _apply_floor_heights(project)
    project = snapshot_project(
        project,
        pricing,
        settings.calculation,
        default_wall_height=settings.default_wall_height,
        default_coats=settings.default_coats,
    )

    logger.info(
        "project_imported",
        project_id=project.id,
        entities=len(project.all_entities()),
        quotes=len(project.quotes),
    )
    return project


def import_project_json(text: str, settings: Settings) -> Project:
    """Decode and import a project JSON document."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProjectImportError(f"Import file is not valid JSON: {e.msg}") from e
    return import_project_payload(payload, settings)
