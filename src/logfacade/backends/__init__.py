"""Logging backends."""

from .base import LogBackend
from .stdlib import StdlibBackend

__all__ = ["LogBackend", "StdlibBackend"]
