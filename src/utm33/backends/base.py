"""Backend protocol for conversion kernels."""

from __future__ import annotations

from typing import Protocol, Tuple

import numpy as np

from ..grid import LatLng


class ConversionBackend(Protocol):
    def convert(self, easting: float, northing: float) -> LatLng:
        ...

    def convert_many(self, eastings, northings) -> Tuple[np.ndarray, np.ndarray]:
        ...
