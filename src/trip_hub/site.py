"""Run the static build: discover trips, write pages, copy assets, bundle scripts."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from trip_hub.bundle import bundle_client
from trip_hub.config import ASSETS_DIRNAME, BuildConfig
from trip_hub.discovery import discover_trips
from trip_hub.errors import BuildConfigError
from trip_hub.models import Trip
from trip_hub.render import render_index_html, render_trip_html

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    trips: list[Trip]
    written: list[Path] = field(default_factory=list)


def _check_dist_location(config: BuildConfig) -> None:
    source = config.source_dir.resolve()
    dist = config.dist_dir.resolve()
    if dist == source or dist in source.parents:
        raise BuildConfigError(
            f"refusing to clear {config.dist_dir}: it contains the source directory {config.source_dir}"
        )
    if source in dist.parents:
        raise BuildConfigError(
            f"output directory {config.dist_dir} must not live inside the source directory {config.source_dir}"
        )


def _check_slugs(trips: Sequence[Trip]) -> None:
    for trip in trips:
        if trip.slug.lower() == ASSETS_DIRNAME:
            raise BuildConfigError(
                f"trip folder {trip.slug!r} clashes with the bundled {ASSETS_DIRNAME}/ directory"
            )


def reset_dist(config: BuildConfig) -> None:
    """Delete and recreate the output directory."""
    _check_dist_location(config)
    if config.dist_dir.exists():
        logger.debug(f"Removing {config.dist_dir}")
        shutil.rmtree(config.dist_dir)
    config.dist_dir.mkdir(parents=True)


def _write(path: Path, text: str, written: list[Path]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    written.append(path)
    logger.debug(f"Wrote {path}")


def copy_trip(trip: Trip, config: BuildConfig, written: list[Path] | None = None) -> Path:
    """Mirror one trip folder into the output tree and add its overview and hub page.

    The source index file is not copied: its text already lives on the trip
    record and is written out under the overview filename instead.
    """
    written = [] if written is None else written
    source = config.source_dir / trip.slug
    destination = config.dist_dir / trip.slug
    reserved = config.index_filename.lower()

    def skip_index(directory: str, names: list[str]) -> list[str]:
        if Path(directory) != source:
            return []
        return [name for name in names if name.lower() == reserved]

    shutil.copytree(source, destination, ignore=skip_index)
    _write(destination / config.overview_filename, trip.overview_html, written)
    _write(destination / config.index_filename, render_trip_html(trip, config), written)
    logger.info(f"✓ Wrote {trip.slug} ({len(trip.ai_files)} AI suggestion(s))")
    return destination


def write_index(trips: Sequence[Trip], config: BuildConfig, written: list[Path] | None = None) -> Path:
    written = [] if written is None else written
    path = config.dist_dir / config.index_filename
    _write(path, render_index_html(trips, config), written)
    logger.info(f"✓ Wrote {path}")
    return path


def build_site(config: BuildConfig) -> BuildResult:
    """Build the whole site into ``config.dist_dir``.

    Any filesystem error aborts the build part way; the output directory is
    rebuilt from scratch on the next run.
    """
    _check_dist_location(config)
    trips = discover_trips(config)
    _check_slugs(trips)
    result = BuildResult(trips=trips)

    reset_dist(config)
    for trip in trips:
        copy_trip(trip, config, result.written)
    write_index(trips, config, result.written)
    result.written.extend(bundle_client(config))

    logger.info(f"Build complete: {len(trips)} trip(s) in {config.dist_dir}/")
    return result
