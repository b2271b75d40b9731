from pathlib import Path

import pytest

from sat_track.sat.tle import load_tle_file, parse_tle


def test_parse_three_line_set(iss_tle_text: str) -> None:
    tle = parse_tle(iss_tle_text)

    assert tle.name == "ISS (ZARYA)"
    assert tle.line1.startswith("1 25544U")
    assert tle.line2.startswith("2 25544 ")
    assert tle.norad_id == 25544


def test_parse_two_line_set(iss_tle_text: str) -> None:
    lines = iss_tle_text.splitlines()[1:]

    tle = parse_tle("\n".join(lines))

    assert tle.name == ""
    assert tle.norad_id == 25544


def test_parse_rejects_short_text() -> None:
    with pytest.raises(ValueError, match="Expected a two- or three-line element set"):
        parse_tle("No GP data found\n")


def test_parse_rejects_swapped_lines(iss_tle_text: str) -> None:
    name, line1, line2 = iss_tle_text.splitlines()

    with pytest.raises(ValueError, match="must start with '1 '"):
        parse_tle("\n".join([name, line2, line1]))


def test_parse_rejects_truncated_line(iss_tle_text: str) -> None:
    name, line1, line2 = iss_tle_text.splitlines()

    with pytest.raises(ValueError, match="expected 69"):
        parse_tle("\n".join([name, line1[:40], line2]))


def test_parse_rejects_catalog_mismatch(iss_tle_text: str) -> None:
    name, line1, line2 = iss_tle_text.splitlines()
    other = line2[:2] + "25545" + line2[7:]

    with pytest.raises(ValueError, match="Catalog number mismatch"):
        parse_tle("\n".join([name, line1, other]))


def test_load_tle_file(iss_tle_file: Path) -> None:
    assert load_tle_file(iss_tle_file).norad_id == 25544


def test_load_missing_tle_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_tle_file(tmp_path / "missing.tle")
