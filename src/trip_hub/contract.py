"""JSON Schemas for the data blocks embedded in generated pages.

The browser scripts read these payloads from ``<script id="trip-data">``; a
payload that drifts from the shape they expect would only fail at page load, so
the build checks it up front.
"""

from __future__ import annotations

from typing import Any

from jsonschema import ValidationError, validate

from trip_hub.errors import ContractError

DATA_SCRIPT_ID = "trip-data"

_AI_FILES = {"type": "array", "items": {"type": "string", "pattern": r"(?i)\.html$"}}

MANIFEST_ENTRY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["slug", "title", "aiFiles"],
    "additionalProperties": False,
    "properties": {
        "slug": {"type": "string", "minLength": 1},
        "title": {"type": "string"},
        "aiFiles": _AI_FILES,
    },
}

MANIFEST_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": MANIFEST_ENTRY_SCHEMA,
}

TRIP_PAGE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["slug", "title", "aiFiles", "overviewPath"],
    "additionalProperties": False,
    "properties": {
        "slug": {"type": "string", "minLength": 1},
        "title": {"type": "string"},
        "aiFiles": _AI_FILES,
        "overviewPath": {"type": "string", "pattern": r"^\./[^/]+$"},
    },
}


def check_payload(payload: Any, schema: dict[str, Any], *, name: str) -> Any:
    """Return ``payload`` unchanged, raising ``ContractError`` if it breaks ``schema``."""
    try:
        validate(instance=payload, schema=schema)
    except ValidationError as e:
        raise ContractError(f"{name} payload failed schema validation: {e.message}") from e
    return payload


def check_manifest(payload: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return check_payload(payload, MANIFEST_SCHEMA, name="manifest")


def check_trip_page(payload: dict[str, Any]) -> dict[str, Any]:
    return check_payload(payload, TRIP_PAGE_SCHEMA, name=f"trip page {payload.get('slug')!r}")
