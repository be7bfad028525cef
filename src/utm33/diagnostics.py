"""Diagnostic routines for sample tables and converters."""

from __future__ import annotations

import numpy as np

from .constants import NEIGHBOR_OFFSETS
from .sample_table import SampleTable


def interior_anchors(table: SampleTable) -> list:
    """Grid points whose full 3x3 neighbourhood is in the table."""
    g = table.granularity
    return [
        p
        for p in table
        if all(p.shifted(col, row, g) in table for row in NEIGHBOR_OFFSETS for col in NEIGHBOR_OFFSETS)
    ]


def table_report(table: SampleTable) -> dict:
    g = table.granularity
    min_e, min_n, max_e, max_n = table.bounds()
    n_cols = (max_e - min_e) // g + 1
    n_rows = (max_n - min_n) // g + 1
    checks = {
        "aligned": all(p.easting % g == 0 and p.northing % g == 0 for p in table),
        "finite": bool(all(np.isfinite(v.latitude) and np.isfinite(v.longitude) for v in table.entries.values())),
        "latitude_in_range": all(-90.0 <= v.latitude <= 90.0 for v in table.entries.values()),
        "longitude_in_range": all(-180.0 <= v.longitude <= 180.0 for v in table.entries.values()),
    }
    return {
        "n_entries": len(table),
        "granularity": g,
        "bounds": (min_e, min_n, max_e, max_n),
        "fill_ratio": float(len(table)) / float(n_cols * n_rows),
        "n_interior_anchors": len(interior_anchors(table)),
        "checks": checks,
        "all_checks_pass": bool(all(checks.values())),
    }


def exactness_residuals(converter) -> np.ndarray:
    """Return converted-minus-stored values at every interior anchor, shape (n, 2)."""
    table = converter.table
    anchors = interior_anchors(table)
    if not anchors:
        return np.empty((0, 2), dtype=float)
    e = np.array([p.easting for p in anchors], dtype=float)
    n = np.array([p.northing for p in anchors], dtype=float)
    lat, lng = converter.convert_many(e, n)
    stored = np.array([table.lookup(p) for p in anchors], dtype=float)
    return np.column_stack([lat, lng]) - stored
