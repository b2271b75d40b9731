"""Unified CLI entrypoint.

Two run modes:
  1) look  - one-shot position and look angle at a single instant
  2) pass  - sampled table (CSV + NPZ + plots) over a time window
"""

from __future__ import annotations

import argparse
from datetime import datetime, timezone
from pathlib import Path

from sat_track.config import TrackConfig, config_with_overrides, load_config
from sat_track.observer import Observer
from sat_track.sat import Satellite
from sat_track.utils.logging import get_logger
from sat_track.web import WebLookupError
from tracker.look import build_observer, build_satellite, parse_time, run_look
from tracker.pass_table import run_pass_table


def _resolve_config(args: argparse.Namespace) -> TrackConfig:
    cfg = load_config(args.config) if args.config else TrackConfig()
    return config_with_overrides(cfg, {"norad_id": args.id, "log_level": args.log_level}, source="command line")


def _prepare(args: argparse.Namespace) -> tuple[TrackConfig, Observer, Satellite]:
    cfg = _resolve_config(args)
    get_logger("sat_track", cfg.log_level.upper())
    get_logger("tracker", cfg.log_level.upper())
    observer = build_observer(
        cfg,
        lat_deg=args.lat,
        lon_deg=args.lon,
        elev_m=args.elev,
        time_text=getattr(args, "time", None),
    )
    satellite = build_satellite(cfg, norad_id=cfg.norad_id, tle_file=args.tle_file)
    return cfg, observer, satellite


def _cmd_look(args: argparse.Namespace) -> None:
    _, observer, satellite = _prepare(args)
    run_look(satellite, observer)


def _cmd_pass(args: argparse.Namespace) -> None:
    cfg, observer, satellite = _prepare(args)
    start = parse_time(args.start) if args.start else datetime.now(timezone.utc)
    duration_s = args.duration_s if args.duration_s is not None else cfg.pass_duration_s
    step_s = args.step_s if args.step_s is not None else cfg.pass_step_s
    run_pass_table(
        satellite,
        observer,
        Path(args.out_dir),
        start=start,
        duration_s=duration_s,
        step_s=step_s,
        save_figs=not args.no_plots,
    )


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-i", "--id", type=int, default=None, help="Target's NORAD Catalog Number (1-9 digits)")
    parser.add_argument("-x", "--lon", type=float, default=None, help="Observer's longitude in degrees")
    parser.add_argument("-y", "--lat", type=float, default=None, help="Observer's latitude in degrees")
    parser.add_argument("-z", "--elev", type=float, default=None, help="Observer's elevation in meters MSL")
    parser.add_argument("--tle-file", type=str, default=None, help="Read the element set from a local file")
    parser.add_argument("--config", type=str, default=None, help="JSON file of TrackConfig overrides")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (DEBUG, INFO, WARNING)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sat-track", description="Satellite position and look-angle tracker")
    sub = parser.add_subparsers(dest="cmd", required=True)

    look = sub.add_parser("look", help="Report position and look angle at one instant")
    _add_common_args(look)
    look.add_argument("-t", "--time", type=str, default=None, help="Time of observation (RFC 3339)")
    look.set_defaults(func=_cmd_look)

    track = sub.add_parser("pass", help="Sample position and look angle over a time window")
    _add_common_args(track)
    track.add_argument("--start", type=str, default=None, help="Window start (RFC 3339); defaults to now")
    track.add_argument("--duration-s", type=float, default=None, help="Window length in seconds")
    track.add_argument("--step-s", type=float, default=None, help="Sample spacing in seconds")
    track.add_argument("--out-dir", type=str, default="out", help="Folder for track outputs")
    track.add_argument("--no-plots", action="store_true", help="Skip saving plot PNGs")
    track.set_defaults(func=_cmd_pass)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (ValueError, FileNotFoundError, WebLookupError) as exc:
        raise SystemExit(f"sat-track: {exc}") from exc


if __name__ == "__main__":
    main()
