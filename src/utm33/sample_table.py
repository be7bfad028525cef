"""Immutable lookup table of known UTM33 -> latitude/longitude conversions.

The known points are provided by Kartverket (http://kartverket.no/) and ship
with the package as ``data/kartverket_utm33.csv``. The table is built once by
:func:`load_sample_table` and never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Tuple

import numpy as np

from .constants import DATA_COLUMNS, DATA_FILENAME, GRANULARITY
from .grid import GridPoint, LatLng

PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "data"
DEFAULT_DATA_PATH = DATA_DIR / DATA_FILENAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleTable:
    """Read-only mapping from grid anchors to known conversions."""

    entries: Mapping[GridPoint, LatLng]
    granularity: int = GRANULARITY

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[Tuple[Tuple[int, int], Tuple[float, float]]],
        granularity: int = GRANULARITY,
    ) -> "SampleTable":
        if granularity <= 0:
            raise ValueError("granularity must be > 0")
        grid: dict[GridPoint, LatLng] = {}
        for key, value in entries:
            point = GridPoint(int(key[0]), int(key[1]))
            if point.easting != key[0] or point.northing != key[1]:
                raise ValueError(f"grid point {key!r} must have integer coordinates")
            if point.easting % granularity or point.northing % granularity:
                raise ValueError(f"grid point {key!r} is not a multiple of granularity {granularity}")
            if point in grid:
                raise ValueError(f"duplicate grid point {key!r}")
            grid[point] = LatLng(float(value[0]), float(value[1]))
        return cls(entries=MappingProxyType(grid), granularity=granularity)

    def lookup(self, point: Tuple[int, int]) -> LatLng | None:
        """Return the known conversion at ``point`` or ``None`` if not sampled."""
        return self.entries.get(GridPoint(*point))

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, point: object) -> bool:
        return point in self.entries

    def __iter__(self) -> Iterator[GridPoint]:
        return iter(self.entries)

    def bounds(self) -> Tuple[int, int, int, int]:
        """Return ``(min_easting, min_northing, max_easting, max_northing)``."""
        if not self.entries:
            raise ValueError("sample table is empty")
        eastings = [p.easting for p in self.entries]
        northings = [p.northing for p in self.entries]
        return min(eastings), min(northings), max(eastings), max(northings)

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Return eastings, northings, latitudes and longitudes as arrays."""
        n = len(self.entries)
        eastings = np.empty(n, dtype=np.int64)
        northings = np.empty(n, dtype=np.int64)
        lats = np.empty(n, dtype=float)
        lngs = np.empty(n, dtype=float)
        for i, (point, value) in enumerate(self.entries.items()):
            eastings[i], northings[i] = point
            lats[i], lngs[i] = value
        return eastings, northings, lats, lngs


def _read_rows(path: Path) -> np.ndarray:
    with open(path, encoding="utf-8") as fh:
        header = fh.readline().strip().split(",")
        if tuple(h.strip() for h in header) != DATA_COLUMNS:
            raise ValueError(f"{path}: expected header {','.join(DATA_COLUMNS)}, got {','.join(header)}")
        rows = np.loadtxt(fh, delimiter=",", dtype=float, ndmin=2)
    if rows.size and rows.shape[1] != len(DATA_COLUMNS):
        raise ValueError(f"{path}: expected {len(DATA_COLUMNS)} columns, got {rows.shape[1]}")
    return rows


def _table_from_file(path: Path, granularity: int) -> SampleTable:
    rows = _read_rows(path)
    table = SampleTable.from_entries(
        (((row[0], row[1]), (row[2], row[3])) for row in rows),
        granularity=granularity,
    )
    logger.debug("Loaded %d known conversions from %s", len(table), path)
    return table


@lru_cache(maxsize=None)
def _default_table(granularity: int) -> SampleTable:
    return _table_from_file(DEFAULT_DATA_PATH, granularity)


def load_sample_table(path: str | Path | None = None, granularity: int = GRANULARITY) -> SampleTable:
    """Build the sample table from a CSV dataset.

    With no ``path`` the packaged Kartverket dataset is used and the result is
    shared for the lifetime of the process.
    """
    if path is None:
        return _default_table(granularity)
    return _table_from_file(Path(path), granularity)
