"""SGP4-backed satellite state provider."""

from __future__ import annotations

import math
from datetime import datetime

from sgp4.api import SGP4_ERRORS, Satrec
from sgp4.conveniences import sat_epoch_datetime
from sgp4.propagation import gstime

from sat_track.config import TrackConfig
from sat_track.models import GeoPrediction, InertialVector, LookAngle
from sat_track.observer import Observer
from sat_track.sat.tle import Tle
from sat_track.transform import eci_to_geodetic, look_angle

SECONDS_PER_HOUR = 3_600.0
SECONDS_PER_DAY = 86_400.0


class Satellite:
    """Satellite built from an element set, propagated with SGP4."""

    def __init__(self, tle: Tle) -> None:
        self.tle = tle
        try:
            self.satrec = Satrec.twoline2rv(tle.line1, tle.line2)
        except ValueError as exc:
            raise ValueError(f"Failed to parse element set for {tle.name or 'unnamed'}: {exc}") from exc
        if self.satrec.error != 0:
            raise ValueError(f"Invalid element set: {SGP4_ERRORS.get(self.satrec.error, self.satrec.error)}")

    @classmethod
    def from_tle(cls, tle: Tle) -> Satellite:
        return cls(tle)

    @classmethod
    def from_norad_cat(cls, norad_id: int, cfg: TrackConfig | None = None) -> Satellite:
        from sat_track.web import fetch_tle

        return cls(fetch_tle(norad_id, cfg))

    @property
    def name(self) -> str:
        return self.tle.name or "Unknown"

    @property
    def norad_id(self) -> int:
        return self.tle.norad_id

    @property
    def epoch(self) -> datetime:
        return sat_epoch_datetime(self.satrec)

    def __repr__(self) -> str:
        return f"Satellite {{ name: {self.name!r}, epoch: {self.epoch.isoformat()} }}"

    def predict(self, time: datetime) -> GeoPrediction:
        """Propagate to ``time`` (timezone-aware) and return the geodetic sub-point."""

        if time.tzinfo is None:
            raise ValueError("Prediction time must be timezone-aware")
        elapsed_s = (time - self.epoch).total_seconds()
        jd = self.satrec.jdsatepoch
        fr = self.satrec.jdsatepochF + elapsed_s / SECONDS_PER_DAY
        err, r_km, v_kms = self.satrec.sgp4(jd, fr)
        if err != 0:
            raise ValueError(f"SGP4 propagation failed for {self.name}: {SGP4_ERRORS.get(err, err)}")

        gmst = gstime(jd + fr)
        position = eci_to_geodetic(InertialVector(*r_km), gmst)
        speed_kmh = math.sqrt(sum(v**2 for v in v_kms)) * SECONDS_PER_HOUR
        return GeoPrediction(position=position, speed_kmh=speed_kmh, gmst_rad=gmst)

    def look(self, observer: Observer) -> tuple[GeoPrediction, LookAngle]:
        prediction = self.predict(observer.time)
        return prediction, look_angle(observer.position(), prediction.position)
