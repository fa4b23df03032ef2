"""Render the explorer index page and the per-trip hub pages with Jinja2."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from trip_hub.config import ASSETS_DIRNAME, BuildConfig
from trip_hub.contract import DATA_SCRIPT_ID, check_manifest, check_trip_page
from trip_hub.markup import escape_html, format_agent_label, serialize_json, url_segment
from trip_hub.models import Trip

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"


@lru_cache(maxsize=1)
def template_env() -> Environment:
    # Autoescape stays off: every interpolation goes through an explicit filter.
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.filters["html"] = escape_html
    env.filters["script_json"] = serialize_json
    env.filters["url_segment"] = url_segment
    env.filters["agent_label"] = format_agent_label
    env.globals["data_script_id"] = DATA_SCRIPT_ID
    env.globals["assets_dirname"] = ASSETS_DIRNAME
    return env


def render_index_html(trips: Sequence[Trip], config: BuildConfig) -> str:
    env = template_env()
    if not trips:
        return env.get_template("empty.html").render(source_dir=config.source_dir.as_posix())

    manifest = check_manifest([trip.manifest_entry().to_payload() for trip in trips])
    return env.get_template("index.html").render(
        trips=trips,
        manifest=manifest,
    )


def render_trip_html(trip: Trip, config: BuildConfig) -> str:
    payload = check_trip_page(trip.page_data(config.overview_filename).to_payload())
    return template_env().get_template("trip.html").render(
        trip=trip,
        payload=payload,
        overview_filename=config.overview_filename,
    )
