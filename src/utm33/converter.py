"""Public conversion entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import threading
from typing import Tuple

import numpy as np

from .backends.base import ConversionBackend
from .backends.factory import build_backend
from .config import ConverterConfig
from .errors import IncompleteNeighborhoodError
from .grid import LatLng
from .sample_table import SampleTable, load_sample_table

logger = logging.getLogger(__name__)


@dataclass
class UTM33Converter:
    """Converts Kartverket UTM33 easting/northing to latitude/longitude.

    One sample table and one backend are built at construction and reused for
    every call; neither is mutated afterwards, so an instance can be shared
    between threads.
    """

    config: ConverterConfig = field(default_factory=ConverterConfig)
    table: SampleTable | None = None
    backend: ConversionBackend = field(init=False, repr=False)

    def __post_init__(self) -> None:
        cfg = self.config
        if self.table is None:
            self.table = load_sample_table(cfg.data_path, granularity=cfg.granularity)
        elif self.table.granularity != cfg.granularity:
            raise ValueError(
                f"table granularity {self.table.granularity} does not match configured {cfg.granularity}"
            )
        self.backend = build_backend(cfg.backend, self.table)
        logger.debug("Using %s for %d known conversions", type(self.backend).__name__, len(self.table))

    def convert(self, easting: float, northing: float) -> LatLng:
        """Convert one point; raises ``IncompleteNeighborhoodError`` outside coverage."""
        return self.backend.convert(easting, northing)

    def convert_many(self, eastings, northings) -> Tuple[np.ndarray, np.ndarray]:
        return self.backend.convert_many(eastings, northings)

    def try_convert(self, easting: float, northing: float) -> LatLng | None:
        """Like :meth:`convert` but returns ``None`` when coverage is missing."""
        try:
            return self.convert(easting, northing)
        except IncompleteNeighborhoodError:
            return None

    def covers(self, easting: float, northing: float) -> bool:
        return self.try_convert(easting, northing) is not None


_default_lock = threading.Lock()
_default_converter: UTM33Converter | None = None


def default_converter() -> UTM33Converter:
    global _default_converter
    if _default_converter is None:
        with _default_lock:
            if _default_converter is None:
                _default_converter = UTM33Converter()
    return _default_converter


def convert(easting: float, northing: float) -> LatLng:
    """Convert with the shared default converter."""
    return default_converter().convert(easting, northing)
