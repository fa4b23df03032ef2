"""Command line entry point for the static build."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from trip_hub.config import BuildConfig
from trip_hub.errors import BuildError
from trip_hub.site import build_site

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trip-hub",
        description="Build the static trip explorer site from generated trip folders",
    )
    parser.add_argument(
        "--source",
        type=Path,
        help="Directory holding one folder per trip (default: src/generated_html)",
    )
    parser.add_argument(
        "--dist",
        type=Path,
        help="Output directory; cleared on every build (default: dist)",
    )
    parser.add_argument(
        "--agent",
        dest="agents",
        action="append",
        metavar="NAME",
        help="Agent name in tab order; repeat to list several (default: claude, gpt, gemini, grok)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every file written",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = BuildConfig.from_env(
            source_dir=args.source,
            dist_dir=args.dist,
            agent_order=tuple(args.agents) if args.agents else None,
        )
    except ValidationError as e:
        logger.error(f"Invalid build configuration: {e}")
        return 1

    try:
        build_site(config)
    except (BuildError, OSError) as e:
        logger.error(f"Static build failed: {e}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
