"""Converter configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import BACKENDS, GRANULARITY


@dataclass(frozen=True)
class ConverterConfig:
    """Container for user-controlled conversion settings."""

    granularity: int = GRANULARITY
    backend: str = "auto"
    data_path: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.granularity, bool) or not isinstance(self.granularity, int):
            raise ValueError("granularity must be an integer")
        if self.granularity <= 0:
            raise ValueError("granularity must be > 0")
        if self.backend not in BACKENDS:
            raise ValueError("backend must be one of: " + ", ".join(BACKENDS))
        if self.data_path is not None and str(self.data_path).strip() == "":
            raise ValueError("data_path cannot be empty")
