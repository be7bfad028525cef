"""Named constants shared by the sample table and the interpolator.

The granularity has to match the spacing of the shipped dataset: the table
validates its keys against it and cell resolution divides by it.
"""

# ---------------------------------------------------------------------------
# Sample grid
# ---------------------------------------------------------------------------
GRANULARITY = 50000     # Spacing between sampled cells (metres)

# Cell offsets (in granularity steps) gathered around the resolved anchor.
# The anchor sits at position 0 of the parabola, so the block spans the
# anchor and the two cells east/north of it.
NEIGHBOR_OFFSETS = (0, 1, 2)
NEIGHBORHOOD_SIZE = len(NEIGHBOR_OFFSETS)

# ---------------------------------------------------------------------------
# Packaged dataset
# ---------------------------------------------------------------------------
DATA_FILENAME = "kartverket_utm33.csv"
DATA_COLUMNS = ("easting", "northing", "latitude", "longitude")

# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------
BACKENDS = ("python", "numpy", "numba", "auto")
