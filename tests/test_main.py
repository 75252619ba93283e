"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from transit_timecheck.foundation.timestamps import MIN_POSIX_TIME, to_millis
from transit_timecheck.main import EXIT_ERRORS_FOUND, EXIT_OK, EXIT_USAGE, main

from tests.test_adapters import _message
from tests.test_feed_models import _stop, _trip_entity

M = MIN_POSIX_TIME
NOW = str(to_millis(M))


def _write_json(path: Path, header_timestamp: int, *entities: dict) -> Path:
    path.write_text(json.dumps({
        "header": {"gtfs_realtime_version": "2.0", "timestamp": header_timestamp},
        "entity": list(entities),
    }))
    return path


class TestMain:
    def test_clean_feed(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        current = _write_json(tmp_path / "current.json", M, _trip_entity(M))
        assert main([str(current), "--now-millis", NOW]) == EXIT_OK
        assert "No timestamp diagnostics." in capsys.readouterr().out

    def test_warnings_only_exit_ok(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        current = _write_json(tmp_path / "current.json", 0)
        assert main([str(current), "--now-millis", NOW]) == EXIT_OK
        assert "W001 [WARNING]" in capsys.readouterr().out

    def test_errors_exit_nonzero(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        current = _write_json(tmp_path / "current.json", M)
        previous = _write_json(tmp_path / "previous.json", M + 2)
        code = main([str(current), "--previous", str(previous), "--now-millis", NOW])
        assert code == EXIT_ERRORS_FOUND
        assert "E018 [ERROR]" in capsys.readouterr().out

    def test_stop_times_rendered_in_time_zone(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        stops = (_stop(seq=1, arrival=M), _stop(seq=2, arrival=M))
        current = _write_json(tmp_path / "current.json", M, _trip_entity(M, stops=stops))
        code = main([str(current), "--timezone", "America/New_York", "--now-millis", NOW])
        assert code == EXIT_ERRORS_FOUND
        assert "arrival_time 19:00:00" in capsys.readouterr().out

    def test_negative_stop_time_reported(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        stops = (_stop(seq=1, arrival=-5),)
        current = _write_json(tmp_path / "current.json", M, _trip_entity(M, stops=stops))
        assert main([str(current), "--now-millis", NOW]) == EXIT_ERRORS_FOUND
        assert "stop_sequence 1 arrival_time -5" in capsys.readouterr().out

    def test_protobuf_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        current = tmp_path / "current.pb"
        current.write_bytes(_message().SerializeToString())
        assert main([str(current), "--now-millis", NOW]) == EXIT_OK
        assert "No timestamp diagnostics." in capsys.readouterr().out

    def test_same_snapshot_twice_is_usage_error(self, tmp_path: Path) -> None:
        current = _write_json(tmp_path / "current.json", M)
        code = main([str(current), "--previous", str(current), "--now-millis", NOW])
        assert code == EXIT_USAGE

    def test_unknown_time_zone(self, tmp_path: Path) -> None:
        current = _write_json(tmp_path / "current.json", M)
        code = main([str(current), "--timezone", "Mars/Olympus_Mons", "--now-millis", NOW])
        assert code == EXIT_USAGE

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "absent.json"), "--now-millis", NOW]) == EXIT_USAGE

    def test_uses_wall_clock_by_default(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        current = _write_json(tmp_path / "current.json", M)
        with patch("transit_timecheck.main.now_millis", return_value=to_millis(M + 70)):
            assert main([str(current)]) == EXIT_OK
        assert "W008 [WARNING]" in capsys.readouterr().out
