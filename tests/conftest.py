from __future__ import annotations

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))

from trip_hub.config import BuildConfig  # noqa: E402


def write_trip(root: Path, slug: str, files: dict[str, str | bytes]) -> Path:
    trip_dir = root / slug
    trip_dir.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        path = trip_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return trip_dir


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Two trips: a full one and one without an overview."""
    root = tmp_path / "trips"
    write_trip(
        root,
        "2025-01-05",
        {
            "index.html": "<p>Hi</p>",
            "claude.html": "<p>claude</p>",
            "gpt.html": "<p>gpt</p>",
            "notes.txt": "bring sunscreen",
            "img/map.png": b"\x89PNG\r\n",
        },
    )
    write_trip(root, "2024-12-31", {"grok.html": "<p>grok</p>"})
    return root


@pytest.fixture
def config(source_dir: Path, tmp_path: Path) -> BuildConfig:
    return BuildConfig(source_dir=source_dir, dist_dir=tmp_path / "dist")
