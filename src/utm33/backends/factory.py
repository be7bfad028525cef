"""Backend factory for conversion kernels."""

from __future__ import annotations

import logging

from .base import ConversionBackend
from .numba_backend import build_numba_backend
from .numpy_backend import build_numpy_backend
from .python_backend import build_python_backend
from ..sample_table import SampleTable

logger = logging.getLogger(__name__)


def build_backend(name: str, table: SampleTable) -> ConversionBackend:
    if name == "python":
        return build_python_backend(table)
    if name == "numpy":
        return build_numpy_backend(table)
    if name == "numba":
        return build_numba_backend(table)
    if name == "auto":
        try:
            return build_numba_backend(table)
        except RuntimeError as exc:
            logger.debug("Falling back to numpy backend: %s", exc)
        return build_numpy_backend(table)
    raise ValueError(f"Unknown backend: {name}")
