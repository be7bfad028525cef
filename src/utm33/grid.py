"""Grid keys, coordinate pairs and cell resolution."""

from __future__ import annotations

import math
from typing import NamedTuple

from .constants import GRANULARITY


class GridPoint(NamedTuple):
    """Anchor corner of one sampled cell, in whole metres."""

    easting: int
    northing: int

    def shifted(self, cols: int, rows: int, granularity: int = GRANULARITY) -> "GridPoint":
        return GridPoint(self.easting + cols * granularity, self.northing + rows * granularity)


class LatLng(NamedTuple):
    """Geographic position in decimal degrees."""

    latitude: float
    longitude: float


def _trunc_div(value: int, granularity: int) -> int:
    # Integer division rounding toward zero, unlike ``//``.
    q = abs(value) // granularity
    return -q if value < 0 else q


def truncate_coordinate(value: float, granularity: int = GRANULARITY) -> int:
    """Return the cell anchor for one coordinate.

    The coordinate is first truncated toward zero to whole metres and then
    integer-divided by ``granularity``, again truncating toward zero. Negative
    coordinates therefore resolve to the cell *closer to zero* (``-10`` maps to
    ``0``, not ``-50000``), which is what the reference conversion does and
    decides which neighbourhood is used. Do not replace this with flooring.
    """
    if not math.isfinite(value):
        raise ValueError(f"coordinate must be finite, got {value!r}")
    return _trunc_div(int(value), granularity) * granularity


def resolve_cell(easting: float, northing: float, granularity: int = GRANULARITY) -> GridPoint:
    return GridPoint(
        truncate_coordinate(easting, granularity),
        truncate_coordinate(northing, granularity),
    )
