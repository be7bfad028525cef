"""Vectorised NumPy backend.

The sample table is unpacked into dense 2-D arrays indexed by cell so a whole
batch of queries can be gathered and interpolated without Python loops.
Cells the table does not hold are marked absent in ``present``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from ..constants import NEIGHBOR_OFFSETS
from ..grid import LatLng
from ..interpolation import Interpolator, quadratic
from ..sample_table import SampleTable


@dataclass(frozen=True)
class DenseGrid:
    """Sample table laid out as ``[easting index, northing index]`` arrays."""

    origin_easting: int
    origin_northing: int
    granularity: int
    lat: np.ndarray
    lng: np.ndarray
    present: np.ndarray

    @classmethod
    def from_table(cls, table: SampleTable) -> "DenseGrid":
        g = table.granularity
        eastings, northings, lats, lngs = table.as_arrays()
        min_e, min_n, max_e, max_n = table.bounds()
        shape = ((max_e - min_e) // g + 1, (max_n - min_n) // g + 1)
        ie = (eastings - min_e) // g
        jn = (northings - min_n) // g
        lat = np.full(shape, np.nan, dtype=float)
        lng = np.full(shape, np.nan, dtype=float)
        present = np.zeros(shape, dtype=bool)
        lat[ie, jn] = lats
        lng[ie, jn] = lngs
        present[ie, jn] = True
        return cls(min_e, min_n, g, lat, lng, present)


def anchor_indices(grid: DenseGrid, e: np.ndarray, n: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Resolve anchors (truncating toward zero) and their dense-grid indices."""
    g = grid.granularity
    te = np.trunc(e).astype(np.int64)
    tn = np.trunc(n).astype(np.int64)
    e0 = np.sign(te) * (np.abs(te) // g) * g
    n0 = np.sign(tn) * (np.abs(tn) // g) * g
    return e0, n0, (e0 - grid.origin_easting) // g, (n0 - grid.origin_northing) // g


def neighborhood_mask(grid: DenseGrid, ie: np.ndarray, jn: np.ndarray) -> np.ndarray:
    """Return True where every cell of the 3x3 block is present."""
    ok = np.ones(ie.shape, dtype=bool)
    ne, nn = grid.present.shape
    for row in NEIGHBOR_OFFSETS:
        for col in NEIGHBOR_OFFSETS:
            i = ie + col
            j = jn + row
            inside = (i >= 0) & (i < ne) & (j >= 0) & (j < nn)
            hit = np.zeros(ie.shape, dtype=bool)
            hit[inside] = grid.present[i[inside], j[inside]]
            ok &= hit
    return ok


@dataclass
class NumpyBackend:
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
        e = e.ravel()
        n = n.ravel()
        finite = np.isfinite(e) & np.isfinite(n)
        if not finite.all():
            k = int(np.argmin(finite))
            raise ValueError(f"coordinate must be finite, got ({e[k]!r}, {n[k]!r})")

        grid = self.grid
        g = grid.granularity
        e0, n0, ie, jn = anchor_indices(grid, e, n)
        ok = neighborhood_mask(grid, ie, jn)
        if not ok.all():
            k = int(np.argmin(ok))
            # Raises IncompleteNeighborhoodError with the missing cells.
            self.reference.neighborhood(float(e[k]), float(n[k]))

        x = (e - e0) / g
        y = (n - n0) / g
        out = []
        for values in (grid.lat, grid.lng):
            rows = [
                quadratic(*(values[ie + col, jn + row] for col in NEIGHBOR_OFFSETS), x)
                for row in NEIGHBOR_OFFSETS
            ]
            out.append(quadratic(rows[0], rows[1], rows[2], y).reshape(shape))
        return out[0], out[1]


def build_numpy_backend(table: SampleTable):
    return NumpyBackend(table)
