import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
SCRIPT = ROOT_DIR / "scripts" / "build_html.py"


def test_build_html_script_runs(source_dir, tmp_path):
    """scripts/build_html.py should build a site when run directly."""
    dist = tmp_path / "site"

    completed = subprocess.run(
        [sys.executable, str(SCRIPT), "--source", str(source_dir), "--dist", str(dist)],
        capture_output=True,
        text=True,
        check=False,
    )

    assert completed.returncode == 0, completed.stderr
    assert (dist / "index.html").exists()
    assert "Build complete" in completed.stderr
