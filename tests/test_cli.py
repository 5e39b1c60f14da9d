"""Tests for the command-line interface."""

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from xspf_tools.cli.main import cli
from xspf_tools.utils import get_package_logger


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the handlers installed by setup_logging."""
    package_logger = get_package_logger()
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def playlist_file(tmp_path: Path) -> Path:
    """Write a playlist pointing at real files in per-day directories."""
    library = tmp_path / "library"
    files = [
        library / "20170802" / "v01-tranquil.mp3",
        library / "20170802" / "20170802-02-TouchedByAnAngel.flac",
        library / "20170803" / "randomfile.ogg",
    ]
    durations = ["61000", None, "2000"]

    entries = []
    for path, duration in zip(files, durations):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("audio data")
        duration_xml = f"<duration>{duration}</duration>" if duration else ""
        entries.append(
            f"<track><location>{path.as_uri()}</location>{duration_xml}</track>"
        )
    entries.append("<track><title>No location</title></track>")

    playlist = tmp_path / "practice.xspf"
    playlist.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<playlist version="1" xmlns="http://xspf.org/ns/0/">'
        "<title>Practice</title>"
        f"<trackList>{''.join(entries)}</trackList>"
        "</playlist>",
        encoding="utf-8",
    )
    return playlist


class TestListCommand:
    """Test the list command."""

    def test_lists_filenames(self, runner, playlist_file, tmp_path):
        """One filename per track, in playlist order."""
        out_file = tmp_path / "list.txt"
        result = runner.invoke(
            cli, ["list", str(playlist_file), "--output", str(out_file)]
        )

        assert result.exit_code == 0, result.output
        assert out_file.read_text(encoding="utf-8").splitlines() == [
            "v01-tranquil.mp3",
            "20170802-02-TouchedByAnAngel.flac",
            "randomfile.ogg",
        ]

    def test_lists_to_stdout(self, runner, playlist_file):
        """Without --output the list goes to stdout."""
        result = runner.invoke(
            cli, ["--log-level", "ERROR", "list", str(playlist_file)]
        )

        assert result.exit_code == 0, result.output
        assert "v01-tranquil.mp3\n" in result.output
        assert "randomfile.ogg\n" in result.output


class TestJsonCommand:
    """Test the json command."""

    def test_dumps_playlist(self, runner, playlist_file, tmp_path):
        """The JSON mirrors the data model."""
        out_file = tmp_path / "playlist.json"
        result = runner.invoke(
            cli, ["json", str(playlist_file), "-o", str(out_file)]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(out_file.read_text(encoding="utf-8"))
        assert data["title"] == "Practice"
        assert len(data["tracks"]) == 3
        assert data["tracks"][0]["duration"] == 61000
        assert data["tracks"][0]["date"] == "20170802"
        assert data["tracks"][1]["info"] == {
            "track_type": "MuseScore",
            "index": 2,
            "name": "TouchedByAnAngel",
            "extn": "flac",
        }

    def test_compact_output(self, runner, playlist_file, tmp_path):
        """--indent 0 writes the JSON on one line."""
        out_file = tmp_path / "playlist.json"
        result = runner.invoke(
            cli, ["json", str(playlist_file), "-o", str(out_file), "--indent", "0"]
        )

        assert result.exit_code == 0, result.output
        assert len(out_file.read_text(encoding="utf-8").splitlines()) == 1

    def test_malformed_playlist_fails(self, runner, tmp_path):
        """Document errors exit with an error message."""
        broken = tmp_path / "broken.xspf"
        broken.write_text("<playlist>", encoding="utf-8")

        result = runner.invoke(cli, ["--log-level", "CRITICAL", "json", str(broken)])

        assert result.exit_code != 0
        assert "Cannot parse playlist" in result.output


class TestSummaryCommand:
    """Test the summary command."""

    def test_shows_totals(self, runner, playlist_file):
        """The summary shows the track count and total duration."""
        result = runner.invoke(
            cli, ["--log-level", "ERROR", "summary", str(playlist_file)]
        )

        assert result.exit_code == 0, result.output
        assert "Practice - practice.xspf" in result.output
        assert "Total Duration" in result.output
        assert "01:03" in result.output
        assert "Tracks Without Duration" in result.output


class TestExportCommand:
    """Test the export command."""

    def test_copies_tracks(self, runner, playlist_file, tmp_path):
        """Tracks are copied with numbered filenames."""
        target = tmp_path / "export"
        result = runner.invoke(
            cli, ["--log-level", "ERROR", "export", str(playlist_file), str(target)]
        )

        assert result.exit_code == 0, result.output
        assert sorted(path.name for path in target.iterdir()) == [
            "01_VL01-tranquil.mp3",
            "02_MS02-TouchedByAnAngel.flac",
            "03_t00-randomfile.ogg",
        ]

    def test_dry_run(self, runner, playlist_file, tmp_path):
        """Dry runs copy nothing."""
        target = tmp_path / "export"
        result = runner.invoke(
            cli,
            [
                "--log-level",
                "ERROR",
                "export",
                str(playlist_file),
                str(target),
                "--dry-run",
            ],
        )

        assert result.exit_code == 0, result.output
        assert not target.exists()

    def test_default_target_from_environment(
        self, runner, playlist_file, tmp_path, monkeypatch
    ):
        """Without a target the configured export directory is used."""
        target = tmp_path / "configured"
        monkeypatch.setenv("XSPF_TOOLS_EXPORT_DIRECTORY", str(target))

        result = runner.invoke(
            cli, ["--log-level", "ERROR", "export", str(playlist_file)]
        )

        assert result.exit_code == 0, result.output
        assert len(list(target.iterdir())) == 3

    def test_missing_source_fails(self, runner, playlist_file, tmp_path):
        """Failed copies give a non-zero exit code."""
        (tmp_path / "library" / "20170803" / "randomfile.ogg").unlink()

        result = runner.invoke(
            cli,
            [
                "--log-level",
                "CRITICAL",
                "export",
                str(playlist_file),
                str(tmp_path / "out"),
            ],
        )

        assert result.exit_code != 0
        assert "1 track(s) failed to export" in result.output
