"""Interchangeable conversion kernels."""

from .factory import build_backend

__all__ = ["build_backend"]
