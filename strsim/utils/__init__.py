"""Utility helpers for strsim."""

from .io import read_yaml
from .logs import configure_logging
from .mathx import safe_div

__all__ = ["configure_logging", "read_yaml", "safe_div"]
