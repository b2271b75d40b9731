"""Three-line element set records."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_LINE_LENGTH = 69


@dataclass(frozen=True)
class Tle:
    """Named two-line element set."""

    name: str
    line1: str
    line2: str

    @property
    def norad_id(self) -> int:
        return int(self.line1[2:7])


def parse_tle(text: str) -> Tle:
    """Parse the first element set out of a TLE text block.

    Accepts either a name line followed by the two element lines or the two
    element lines alone.
    """

    lines = [line.rstrip() for line in text.splitlines() if line.strip()]
    if len(lines) >= 3 and not lines[0].startswith("1 "):
        name, line1, line2 = lines[0].strip(), lines[1], lines[2]
    elif len(lines) >= 2:
        name, line1, line2 = "", lines[0], lines[1]
    else:
        raise ValueError(f"Expected a two- or three-line element set, got {len(lines)} line(s)")

    _check_line(line1, "1")
    _check_line(line2, "2")
    if line1[2:7] != line2[2:7]:
        raise ValueError(f"Catalog number mismatch between lines: {line1[2:7]!r} != {line2[2:7]!r}")
    return Tle(name=name, line1=line1, line2=line2)


def load_tle_file(path: str | Path) -> Tle:
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"TLE file not found: {source}")
    return parse_tle(source.read_text(encoding="utf-8"))


def _check_line(line: str, number: str) -> None:
    if not line.startswith(f"{number} "):
        raise ValueError(f"Element line {number} must start with '{number} ': {line!r}")
    if len(line) < _LINE_LENGTH:
        raise ValueError(f"Element line {number} is {len(line)} chars, expected {_LINE_LENGTH}")
    if not line[2:7].strip().isdigit():
        raise ValueError(f"Element line {number} has no catalog number: {line!r}")
