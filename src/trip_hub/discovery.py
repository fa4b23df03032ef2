"""Find trip folders under the source directory and catalogue their HTML.

Each immediate sub-directory of the source root is one trip. Its reserved index
file becomes the trip overview; every other ``.html`` file is an AI suggestion.
"""

from __future__ import annotations

import datetime as _dt
import logging
import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from trip_hub.config import BuildConfig
from trip_hub.errors import SourceRootError
from trip_hub.models import Trip

logger = logging.getLogger(__name__)

PLACEHOLDER_OVERVIEW_HTML = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Overview not provided</title>
    <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/tailwindcss@3.4.15/dist/tailwind.min.css" />
  </head>
  <body class="min-h-screen bg-slate-950">
    <main class="mx-auto flex min-h-screen max-w-xl flex-col items-center justify-center gap-4 px-6 text-center text-slate-200">
      <h1 class="text-2xl font-semibold tracking-tight">Overview not provided</h1>
      <p class="text-sm text-slate-400">This trip does not include an <code>index.html</code> yet. Use the AI tabs or edit the overview file to add content.</p>
    </main>
  </body>
</html>"""

_DATE_SLUG_RE = re.compile(r"^(\d+)-(\d+)-(\d+)$")
_WORD_SPLIT_RE = re.compile(r"[-_\s]+")
_HTML_SUFFIX_RE = re.compile(r"\.html$", re.IGNORECASE)


def format_trip_title(slug: str) -> str:
    """Human-readable title for a trip folder name.

    ``2025-12-31`` becomes ``December 31, 2025``; anything that is not a valid
    calendar date is split into words and capitalized (``kyoto-trip`` becomes
    ``Kyoto Trip``).
    """
    match = _DATE_SLUG_RE.match(slug)
    if match:
        year, month, day = (int(part) for part in match.groups())
        try:
            date = _dt.date(year, month, day)
        except ValueError:
            pass
        else:
            return f"{date:%B} {date.day}, {date.year}"

    words = [word for word in _WORD_SPLIT_RE.split(slug) if word]
    if not words:
        return slug
    return " ".join(word[:1].upper() + word[1:] for word in words)


def agent_sort_key(filename: str, agent_order: Sequence[str]) -> tuple[int, str]:
    base = _HTML_SUFFIX_RE.sub("", filename).lower()
    try:
        bucket = list(agent_order).index(base)
    except ValueError:
        bucket = len(agent_order)
    return bucket, base


def sort_ai_files(files: Iterable[str], agent_order: Sequence[str]) -> list[str]:
    """Known agents first in preference order, then everything else alphabetically."""
    return sorted(files, key=lambda name: agent_sort_key(name, agent_order))


def read_overview(trip_dir: Path, config: BuildConfig) -> str:
    """Return the trip overview, or the placeholder document when there is none.

    Only a missing or whitespace-only index file falls back to the placeholder;
    any other read error propagates and aborts the build.
    """
    index_path = _find_reserved(trip_dir, config.index_filename)
    if index_path is None:
        logger.warning(f"{trip_dir.name}: no {config.index_filename}, using placeholder overview")
        return PLACEHOLDER_OVERVIEW_HTML
    try:
        raw = index_path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        logger.warning(f"{trip_dir.name}: {index_path.name} vanished, using placeholder overview")
        return PLACEHOLDER_OVERVIEW_HTML
    if not raw.strip():
        logger.warning(f"{trip_dir.name}: {index_path.name} is empty, using placeholder overview")
        return PLACEHOLDER_OVERVIEW_HTML
    return raw


def list_ai_files(trip_dir: Path, config: BuildConfig) -> list[str]:
    reserved = {config.index_filename.lower(), config.overview_filename.lower()}
    html_files = [
        entry.name
        for entry in trip_dir.iterdir()
        if entry.is_file() and entry.name.lower().endswith(".html")
    ]
    return sort_ai_files(
        (name for name in html_files if name.lower() not in reserved),
        config.agent_order,
    )


def load_trip(trip_dir: Path, config: BuildConfig) -> Trip:
    slug = trip_dir.name
    ai_files = list_ai_files(trip_dir, config)
    logger.debug(f"{slug}: {len(ai_files)} AI suggestion file(s)")
    return Trip(
        slug=slug,
        title=format_trip_title(slug),
        ai_files=tuple(ai_files),
        overview_html=read_overview(trip_dir, config),
    )


def discover_trips(config: BuildConfig) -> list[Trip]:
    """Return one ``Trip`` per sub-directory of the source root, newest slug first."""
    root = config.source_dir
    if not root.exists():
        raise SourceRootError(f"source directory {root} does not exist")
    if not root.is_dir():
        raise SourceRootError(f"source path {root} is not a directory")

    trips = [load_trip(entry, config) for entry in root.iterdir() if entry.is_dir()]
    trips.sort(key=lambda trip: trip.slug, reverse=True)
    logger.info(f"Discovered {len(trips)} trip(s) in {root}")
    return trips


def _find_reserved(trip_dir: Path, filename: str) -> Path | None:
    exact = trip_dir / filename
    if exact.is_file():
        return exact
    wanted = filename.lower()
    for entry in sorted(trip_dir.iterdir()):
        if entry.name.lower() == wanted and entry.is_file():
            return entry
    return None
