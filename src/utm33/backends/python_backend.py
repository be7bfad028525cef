"""Pure-Python reference backend."""

from __future__ import annotations

from ..interpolation import Interpolator
from ..sample_table import SampleTable


def build_python_backend(table: SampleTable):
    return Interpolator(table)
