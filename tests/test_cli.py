from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path

import pytest

from sat_track.config import TrackConfig
from tracker import look as look_module
from tracker.cli import build_parser, main
from tracker.look import build_observer, parse_time


def test_parser_accepts_negative_coordinates() -> None:
    args = build_parser().parse_args(["look", "-x", "-121.8743", "-y", "36.5974", "-z", "14"])

    assert args.lon == -121.8743
    assert args.lat == 36.5974
    assert args.elev == 14.0


def test_look_report(iss_tle_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(
        [
            "look",
            "--tle-file",
            str(iss_tle_file),
            "--lat",
            "36.5974",
            "--lon",
            "-121.8743",
            "--elev",
            "14",
            "--time",
            "2019-12-09T18:00:00Z",
        ]
    )
    out = capsys.readouterr().out.splitlines()

    assert out[0].startswith("Satellite { name: 'ISS (ZARYA)'")
    assert re.match(r"Prediction \{ lat: -?\d+\.\d{3} deg, lon: -?\d+\.\d{3} deg, alt: \d+\.\d{3} km", out[1])
    assert "time: 2019-12-09T18:00:00+00:00" in out[2]
    match = re.match(r"Look \{ azimuth: (\d+\.\d{3}) deg, elevation: (-?\d+\.\d{3}) deg, range: (\d+\.\d{3}) km \}", out[3])
    assert match is not None
    assert 0.0 <= float(match.group(1)) < 360.0


def test_bad_time_keeps_current_time(caplog: pytest.LogCaptureFixture) -> None:
    before = datetime.now(timezone.utc)

    with caplog.at_level(logging.WARNING, logger="tracker.look"):
        observer = build_observer(TrackConfig(), lat_deg=0.0, lon_deg=0.0, time_text="yesterday")

    assert observer.time >= before
    assert "Failed to parse time" in caplog.text


def test_missing_coordinates_fall_back_when_ip_lookup_fails(
    monkeypatch: pytest.MonkeyPatch, iss_tle_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    from sat_track.web import WebLookupError

    def fail(cfg=None):
        raise WebLookupError("offline")

    monkeypatch.setattr(look_module.Observer, "from_ip", staticmethod(fail))
    cfg_path = tmp_path / "cfg.json"
    cfg_path.write_text(json.dumps({"obs_lat_deg": 10.0, "obs_lon_deg": 20.0}))

    main(["look", "--tle-file", str(iss_tle_file), "--config", str(cfg_path), "--time", "2019-12-09T18:00:00Z"])

    assert "Observer { lat: 10.000 deg, lon: 20.000 deg" in capsys.readouterr().out


def test_missing_tle_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="TLE file not found"):
        main(["look", "--tle-file", str(tmp_path / "nope.tle"), "--lat", "0", "--lon", "0"])


def test_pass_command_writes_csv(iss_tle_file: Path, tmp_path: Path) -> None:
    main(
        [
            "pass",
            "--tle-file",
            str(iss_tle_file),
            "--lat",
            "40",
            "--lon",
            "-105",
            "--start",
            "2019-12-09T17:00:00Z",
            "--duration-s",
            "600",
            "--step-s",
            "60",
            "--out-dir",
            str(tmp_path / "out"),
            "--no-plots",
        ]
    )

    lines = (tmp_path / "out" / "track.csv").read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("time_utc,lat_deg,lon_deg,alt_km")
    assert len(lines) == 12


def test_parse_time_variants() -> None:
    assert parse_time("2024-01-02T03:04:05Z").utcoffset().total_seconds() == 0.0
    assert parse_time("2024-01-02T03:04:05.250+02:00").utcoffset().total_seconds() == 7200.0
    with pytest.raises(ValueError, match="no UTC offset"):
        parse_time("2024-01-02T03:04:05")
