from __future__ import annotations

from utm33.sample_table import SampleTable

G = 50000


def linear_table(n_cols: int = 4, n_rows: int = 4, origin: tuple[int, int] = (0, 0)) -> SampleTable:
    """Table whose latitude grows with northing and longitude with easting."""
    e0, n0 = origin
    entries = []
    for i in range(n_cols):
        for j in range(n_rows):
            e = e0 + i * G
            n = n0 + j * G
            entries.append(((e, n), (60.0 + n / 100000.0, 10.0 + e / 200000.0)))
    return SampleTable.from_entries(entries, granularity=G)
