from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from sat_track.models import LengthUnit
from sat_track.observer import Observer
from sat_track.sat import Satellite, parse_tle


@pytest.fixture
def iss(iss_tle_text: str) -> Satellite:
    return Satellite.from_tle(parse_tle(iss_tle_text))


def test_satellite_metadata(iss: Satellite) -> None:
    assert iss.name == "ISS (ZARYA)"
    assert iss.norad_id == 25544
    assert iss.epoch.year == 2019
    assert iss.epoch.utcoffset() == timedelta(0)
    assert "ISS (ZARYA)" in repr(iss)


def test_predict_at_epoch_is_plausible_leo(iss: Satellite) -> None:
    prediction = iss.predict(iss.epoch)
    position = prediction.position

    assert position.height.unit is LengthUnit.KILOMETERS
    assert 350.0 < position.height.to_kilometers() < 480.0
    assert abs(position.lat_deg) <= 52.0
    assert -180.0 < position.lon_deg <= 180.0
    assert 26_000.0 < prediction.speed_kmh < 29_000.0
    assert 0.0 <= prediction.gmst_rad < 2.0 * np.pi


def test_ground_track_moves_over_time(iss: Satellite) -> None:
    first = iss.predict(iss.epoch)
    later = iss.predict(iss.epoch + timedelta(minutes=10))

    assert (first.position.lon_deg, first.position.lat_deg) != (later.position.lon_deg, later.position.lat_deg)
    assert not np.isclose(first.gmst_rad, later.gmst_rad)


def test_predict_requires_aware_time(iss: Satellite) -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        iss.predict(datetime(2019, 12, 9, 17, 0, 0))


def test_look_from_observer(iss: Satellite) -> None:
    observer = Observer.from_lat_lon(40.0, -105.0).with_time(iss.epoch + timedelta(hours=1))

    prediction, look = iss.look(observer)

    assert 0.0 <= look.azimuth_deg < 360.0
    assert -90.0 <= look.elevation_deg <= 90.0
    assert look.range_km >= prediction.position.height.to_kilometers() - 1.0


def test_predict_accepts_non_utc_offsets(iss: Satellite) -> None:
    t_utc = datetime(2019, 12, 9, 18, 0, 0, tzinfo=timezone.utc)
    t_local = t_utc.astimezone(timezone(timedelta(hours=-7)))

    a = iss.predict(t_utc).position
    b = iss.predict(t_local).position

    assert np.isclose(a.lon_deg, b.lon_deg)
    assert np.isclose(a.lat_deg, b.lat_deg)
