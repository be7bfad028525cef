"""Exceptions raised by the conversion routines."""

from __future__ import annotations

from .grid import GridPoint


class IncompleteNeighborhoodError(LookupError):
    """Raised when a query needs grid cells the sample table does not hold.

    The query is either outside the covered area or at its edge; no
    lower-order fallback is attempted.
    """

    def __init__(
        self,
        easting: float,
        northing: float,
        anchor: GridPoint,
        missing: tuple[GridPoint, ...],
    ) -> None:
        self.easting = easting
        self.northing = northing
        self.anchor = anchor
        self.missing = tuple(missing)
        cells = ", ".join(f"({p.easting}, {p.northing})" for p in self.missing)
        super().__init__(
            f"Incomplete neighborhood for ({easting}, {northing}) at anchor "
            f"({anchor.easting}, {anchor.northing}): missing {len(self.missing)} cell(s) {cells}"
        )
