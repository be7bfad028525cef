"""Kartverket UTM33 to latitude/longitude conversion by quadratic interpolation."""

from . import constants
from .config import ConverterConfig
from .converter import UTM33Converter, convert, default_converter
from .diagnostics import exactness_residuals, table_report
from .errors import IncompleteNeighborhoodError
from .grid import GridPoint, LatLng, resolve_cell
from .interpolation import Interpolator, quadratic
from .sample_table import SampleTable, load_sample_table

__all__ = [
    "constants",
    "ConverterConfig",
    "UTM33Converter",
    "convert",
    "default_converter",
    "exactness_residuals",
    "table_report",
    "IncompleteNeighborhoodError",
    "GridPoint",
    "LatLng",
    "resolve_cell",
    "Interpolator",
    "quadratic",
    "SampleTable",
    "load_sample_table",
]
