"""Build configuration.

All fixed paths and reserved names live on a single ``BuildConfig`` value that
is passed through the pipeline, so tests can point a build at temporary
directories without touching module state.

Environment overrides:
    - TRIP_HUB_SOURCE_DIR: directory holding one sub-folder per trip
    - TRIP_HUB_DIST_DIR: output directory (cleared on every build)
    - TRIP_HUB_AGENT_ORDER: comma-separated agent names used for tab ordering
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SOURCE_DIR = Path("src/generated_html")
DEFAULT_DIST_DIR = Path("dist")
DEFAULT_AGENT_ORDER = ("claude", "gpt", "gemini", "grok")

ENV_SOURCE_DIR = "TRIP_HUB_SOURCE_DIR"
ENV_DIST_DIR = "TRIP_HUB_DIST_DIR"
ENV_AGENT_ORDER = "TRIP_HUB_AGENT_ORDER"

ASSETS_DIRNAME = "assets"


class BuildConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_dir: Path = DEFAULT_SOURCE_DIR
    dist_dir: Path = DEFAULT_DIST_DIR
    index_filename: str = "index.html"
    overview_filename: str = "overview.html"
    agent_order: tuple[str, ...] = Field(default=DEFAULT_AGENT_ORDER)

    @field_validator("index_filename", "overview_filename")
    @classmethod
    def _plain_html_name(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError(f"reserved filename must be a bare file name, got {value!r}")
        if not value.lower().endswith(".html"):
            raise ValueError(f"reserved filename must end in .html, got {value!r}")
        return value

    @field_validator("agent_order")
    @classmethod
    def _normalise_agents(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(name.strip().lower() for name in value if name.strip())

    @property
    def assets_dir(self) -> Path:
        return self.dist_dir / ASSETS_DIRNAME

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: Any) -> BuildConfig:
        """Build a config from environment variables; explicit overrides win.

        ``None`` overrides are ignored so CLI arguments can be passed straight
        through without filtering.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if env.get(ENV_SOURCE_DIR):
            values["source_dir"] = Path(env[ENV_SOURCE_DIR])
        if env.get(ENV_DIST_DIR):
            values["dist_dir"] = Path(env[ENV_DIST_DIR])
        if env.get(ENV_AGENT_ORDER):
            values["agent_order"] = tuple(env[ENV_AGENT_ORDER].split(","))
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
