"""Bundle the browser scripts into ``<dist>/assets``.

Each entry script is concatenated with the shared helpers and a small
generated prelude, then wrapped in a strict-mode IIFE so the two bundles can be
loaded on the same origin without sharing globals.
"""

from __future__ import annotations

import logging
from pathlib import Path

from trip_hub.config import BuildConfig
from trip_hub.contract import DATA_SCRIPT_ID
from trip_hub.markup import serialize_json

logger = logging.getLogger(__name__)

WEB_DIR = Path(__file__).resolve().parent / "web"
SHARED_SOURCE = "shared.js"
ENTRY_POINTS = {
    "app": "app.js",
    "trip": "trip.js",
}


def render_prelude(config: BuildConfig) -> str:
    constants = {
        "OVERVIEW_FILENAME": config.overview_filename,
        "DATA_SCRIPT_ID": DATA_SCRIPT_ID,
    }
    return "\n".join(f"const {name} = {serialize_json(value)};" for name, value in constants.items())


def bundle_entry(name: str, config: BuildConfig) -> str:
    entry = WEB_DIR / ENTRY_POINTS[name]
    parts = [
        render_prelude(config),
        (WEB_DIR / SHARED_SOURCE).read_text(encoding="utf-8").strip(),
        entry.read_text(encoding="utf-8").strip(),
    ]
    body = "\n\n".join(parts)
    return f'/* {name}.js: generated by trip-hub */\n(function () {{\n"use strict";\n\n{body}\n}})();\n'


def bundle_client(config: BuildConfig) -> list[Path]:
    """Write one bundle per entry point and return the written paths."""
    config.assets_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name in ENTRY_POINTS:
        out_path = config.assets_dir / f"{name}.js"
        out_path.write_text(bundle_entry(name, config), encoding="utf-8")
        written.append(out_path)
        logger.info(f"✓ Bundled {out_path}")
    return written
