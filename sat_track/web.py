"""Network acquisition of element sets and observer location."""

from __future__ import annotations

import logging

import requests

from sat_track.config import TrackConfig
from sat_track.sat.tle import Tle, parse_tle

logger = logging.getLogger(__name__)


class WebLookupError(RuntimeError):
    """A remote lookup failed or returned an unusable payload."""


def fetch_tle(norad_id: int, cfg: TrackConfig | None = None) -> Tle:
    """Fetch the current element set for a NORAD catalog number from CelesTrak."""

    cfg = cfg or TrackConfig()
    try:
        resp = requests.get(
            cfg.celestrak_url,
            params={"CATNR": norad_id, "FORMAT": "TLE"},
            timeout=cfg.http_timeout_s,
        )
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise WebLookupError(f"CelesTrak request for CATNR={norad_id} failed: {exc}") from exc

    try:
        tle = parse_tle(resp.text)
    except ValueError as exc:
        raise WebLookupError(f"Failed to build a TLE from the celestrak.org response: {exc}") from exc
    logger.info("Got element set for %s (CATNR=%d) from %s", tle.name or "unnamed", norad_id, cfg.celestrak_url)
    return tle


def locate_by_ip(cfg: TrackConfig | None = None) -> tuple[float, float]:
    """Return (lat_deg, lon_deg) for the public IP address of this host."""

    cfg = cfg or TrackConfig()
    try:
        resp = requests.get(cfg.ipinfo_url, timeout=cfg.http_timeout_s)
        resp.raise_for_status()
        loc = resp.json()["loc"]
        lat_text, lon_text = loc.split(",")[:2]
        lat, lon = float(lat_text), float(lon_text)
    except requests.RequestException as exc:
        raise WebLookupError(f"IP geolocation request failed: {exc}") from exc
    except (KeyError, TypeError, ValueError) as exc:
        raise WebLookupError("Failed to parse location from web request") from exc
    logger.info("Got a location of %s, %s from %s", lat, lon, cfg.ipinfo_url)
    return lat, lon


def lookup_elevation(lat_deg: float, lon_deg: float, cfg: TrackConfig | None = None) -> float:
    """Terrain elevation in meters, or 0.0 when the lookup fails."""

    cfg = cfg or TrackConfig()
    try:
        resp = requests.get(
            cfg.opentopodata_url,
            params={"locations": f"{lat_deg},{lon_deg}"},
            timeout=cfg.http_timeout_s,
        )
        resp.raise_for_status()
        elev = float(resp.json()["results"][0]["elevation"])
    except (requests.RequestException, KeyError, IndexError, TypeError, ValueError) as exc:
        logger.warning("Failed to get elevation from %s: %s", cfg.opentopodata_url, exc)
        return 0.0
    logger.info("Got an elevation of %sm from %s", elev, cfg.opentopodata_url)
    return elev
