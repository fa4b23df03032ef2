import logging
from pathlib import Path

from trip_hub.cli import main


def test_cli_builds_site(source_dir, tmp_path, caplog):
    dist = tmp_path / "site"
    caplog.set_level(logging.INFO)

    exit_code = main(["--source", str(source_dir), "--dist", str(dist)])

    assert exit_code == 0
    assert (dist / "index.html").exists()
    assert (dist / "2025-01-05" / "overview.html").exists()
    assert "Build complete: 2 trip(s)" in caplog.text


def test_cli_agent_order_controls_tabs(source_dir, tmp_path):
    dist = tmp_path / "site"

    assert main(["--source", str(source_dir), "--dist", str(dist), "--agent", "gpt", "--agent", "claude"]) == 0

    hub = (dist / "2025-01-05" / "index.html").read_text(encoding="utf-8")
    assert '"aiFiles":["gpt.html","claude.html"]' in hub


def test_cli_reports_missing_source(tmp_path, caplog):
    exit_code = main(["--source", str(tmp_path / "missing"), "--dist", str(tmp_path / "site")])

    assert exit_code == 1
    assert "Static build failed" in caplog.text


def test_cli_uses_environment(monkeypatch, source_dir, tmp_path):
    dist = tmp_path / "from-env"
    monkeypatch.setenv("TRIP_HUB_SOURCE_DIR", str(source_dir))
    monkeypatch.setenv("TRIP_HUB_DIST_DIR", str(dist))

    assert main([]) == 0
    assert (dist / "assets" / "trip.js").exists()


def test_cli_reports_unreadable_trip_directory(source_dir, tmp_path, monkeypatch, caplog):
    real_iterdir = Path.iterdir

    def iterdir(self):
        if self.name == "2024-12-31":
            raise PermissionError(13, "Permission denied", str(self))
        return real_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)

    exit_code = main(["--source", str(source_dir), "--dist", str(tmp_path / "site")])

    assert exit_code == 1
    assert "Static build failed" in caplog.text
    assert "Permission denied" in caplog.text


def test_cli_reports_write_failure(source_dir, tmp_path, monkeypatch, caplog):
    real_write_text = Path.write_text

    def write_text(self, *args, **kwargs):
        if self.name == "overview.html":
            raise OSError(28, "No space left on device", str(self))
        return real_write_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "write_text", write_text)

    exit_code = main(["--source", str(source_dir), "--dist", str(tmp_path / "site")])

    assert exit_code == 1
    assert "Static build failed" in caplog.text


def test_cli_builds_trip_with_latin1_overview(tmp_path):
    trip_dir = tmp_path / "trips" / "lisboa"
    trip_dir.mkdir(parents=True)
    (trip_dir / "index.html").write_bytes("<p>Café</p>".encode("latin-1"))
    dist = tmp_path / "site"

    assert main(["--source", str(tmp_path / "trips"), "--dist", str(dist)]) == 0
    assert (dist / "lisboa" / "overview.html").read_text(encoding="utf-8") == "<p>Caf\ufffd</p>"
