"""Quadratic interpolation over the Kartverket sample table.

Kartverket defines its UTM33 conversion in a closed library, so results are
reproduced by fitting parabolas through known conversions. A query resolves
to an anchor cell; the 3x3 block starting at that anchor is interpolated
row-wise in the easting direction and then once more in the northing
direction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .constants import NEIGHBOR_OFFSETS
from .errors import IncompleteNeighborhoodError
from .grid import GridPoint, LatLng, resolve_cell
from .sample_table import SampleTable


def quadratic(f0, f1, f2, x):
    """Return f(x) for the parabola through f(0)=f0, f(1)=f1, f(2)=f2.

    Works on floats and NumPy arrays alike. ``x`` outside ``[0, 2]``
    extrapolates.
    """
    a = (f2 + f0) / 2 - f1
    b = f1 - f0 - a
    return a * x * x + b * x + f0


def quadratic_latlng(p0: LatLng, p1: LatLng, p2: LatLng, x: float) -> LatLng:
    return LatLng(
        quadratic(p0.latitude, p1.latitude, p2.latitude, x),
        quadratic(p0.longitude, p1.longitude, p2.longitude, x),
    )


@dataclass(frozen=True)
class Interpolator:
    """Scalar reference conversion; every other backend is checked against it."""

    table: SampleTable

    @property
    def granularity(self) -> int:
        return self.table.granularity

    def neighborhood(self, easting: float, northing: float) -> Tuple[GridPoint, Tuple[Tuple[LatLng, ...], ...]]:
        """Return the anchor and the 3x3 known conversions indexed ``[row][col]``.

        Rows advance northwards and columns eastwards from the anchor.
        """
        g = self.granularity
        anchor = resolve_cell(easting, northing, g)
        rows = []
        missing = []
        for row in NEIGHBOR_OFFSETS:
            values = []
            for col in NEIGHBOR_OFFSETS:
                point = anchor.shifted(col, row, g)
                value = self.table.lookup(point)
                if value is None:
                    missing.append(point)
                values.append(value)
            rows.append(tuple(values))
        if missing:
            raise IncompleteNeighborhoodError(easting, northing, anchor, tuple(missing))
        return anchor, tuple(rows)

    def convert(self, easting: float, northing: float) -> LatLng:
        anchor, rows = self.neighborhood(easting, northing)
        g = self.granularity
        x = (easting - anchor.easting) / g
        y = (northing - anchor.northing) / g
        r0, r1, r2 = (quadratic_latlng(row[0], row[1], row[2], x) for row in rows)
        return quadratic_latlng(r0, r1, r2, y)

    def convert_many(self, eastings, northings) -> Tuple[np.ndarray, np.ndarray]:
        e = np.asarray(eastings, dtype=float)
        n = np.asarray(northings, dtype=float)
        if e.shape != n.shape:
            raise ValueError("eastings and northings must have the same shape")
        lat = np.empty(e.shape, dtype=float)
        lng = np.empty(e.shape, dtype=float)
        for idx in np.ndindex(e.shape):
            lat[idx], lng[idx] = self.convert(float(e[idx]), float(n[idx]))
        return lat, lng
