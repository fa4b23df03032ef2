"""build_html.py – build the static trip explorer.

Reads trip folders from src/generated_html and writes dist/ with the explorer
index, one hub page per trip and the bundled client scripts. Accepts the same
arguments as the ``trip-hub`` command.
"""

import sys
from pathlib import Path

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if SRC_PATH.exists() and str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from trip_hub.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
