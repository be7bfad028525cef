"""Numba-accelerated conversion backend."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from ..grid import LatLng
from ..interpolation import Interpolator
from ..sample_table import SampleTable
from .numpy_backend import DenseGrid, anchor_indices

try:
    from numba import njit
except Exception as exc:  # pragma: no cover - optional dependency
    njit = None
    _NUMBA_IMPORT_ERROR = exc
else:
    _NUMBA_IMPORT_ERROR = None


if njit is not None:

    @njit(cache=True)
    def _quadratic_numba(f0: float, f1: float, f2: float, x: float) -> float:
        a = (f2 + f0) / 2 - f1
        b = f1 - f0 - a
        return a * x * x + b * x + f0

    @njit(cache=True)
    def _convert_numba(
        lat_grid: np.ndarray,
        lng_grid: np.ndarray,
        present: np.ndarray,
        ie: np.ndarray,
        jn: np.ndarray,
        x: np.ndarray,
        y: np.ndarray,
        lat_out: np.ndarray,
        lng_out: np.ndarray,
    ) -> int:
        """Fill the outputs and return the index of the first failure, or -1."""
        ne, nn = present.shape
        rows_lat = np.empty(3, dtype=np.float64)
        rows_lng = np.empty(3, dtype=np.float64)
        for k in range(ie.shape[0]):
            i0 = ie[k]
            j0 = jn[k]
            if i0 < 0 or j0 < 0 or i0 + 2 >= ne or j0 + 2 >= nn:
                return k
            for r in range(3):
                for c in range(3):
                    if not present[i0 + c, j0 + r]:
                        return k
                rows_lat[r] = _quadratic_numba(
                    lat_grid[i0, j0 + r], lat_grid[i0 + 1, j0 + r], lat_grid[i0 + 2, j0 + r], x[k]
                )
                rows_lng[r] = _quadratic_numba(
                    lng_grid[i0, j0 + r], lng_grid[i0 + 1, j0 + r], lng_grid[i0 + 2, j0 + r], x[k]
                )
            lat_out[k] = _quadratic_numba(rows_lat[0], rows_lat[1], rows_lat[2], y[k])
            lng_out[k] = _quadratic_numba(rows_lng[0], rows_lng[1], rows_lng[2], y[k])
        return -1


@dataclass
class NumbaBackend:
    table: SampleTable
    grid: DenseGrid = field(init=False)
    reference: Interpolator = field(init=False)

    def __post_init__(self) -> None:
        self.grid = DenseGrid.from_table(self.table)
        self.reference = Interpolator(self.table)

    def convert(self, easting: float, northing: float) -> LatLng:
        lat, lng = self.convert_many([easting], [northing])
        return LatLng(float(lat[0]), float(lng[0]))

    def convert_many(self, eastings, northings) -> Tuple[np.ndarray, np.ndarray]:
        e = np.asarray(eastings, dtype=float)
        n = np.asarray(northings, dtype=float)
        if e.shape != n.shape:
            raise ValueError("eastings and northings must have the same shape")
        shape = e.shape
        e = np.ascontiguousarray(e.ravel())
        n = np.ascontiguousarray(n.ravel())
        finite = np.isfinite(e) & np.isfinite(n)
        if not finite.all():
            k = int(np.argmin(finite))
            raise ValueError(f"coordinate must be finite, got ({e[k]!r}, {n[k]!r})")

        g = self.grid.granularity
        e0, n0, ie, jn = anchor_indices(self.grid, e, n)
        x = (e - e0) / g
        y = (n - n0) / g
        lat = np.empty(e.shape, dtype=float)
        lng = np.empty(e.shape, dtype=float)
        bad = _convert_numba(self.grid.lat, self.grid.lng, self.grid.present, ie, jn, x, y, lat, lng)
        if bad >= 0:
            self.reference.neighborhood(float(e[bad]), float(n[bad]))
        return lat.reshape(shape), lng.reshape(shape)


def build_numba_backend(table: SampleTable):
    if njit is None:
        raise RuntimeError("Numba backend requested but numba is not installed") from _NUMBA_IMPORT_ERROR
    return NumbaBackend(table)
