"""Command-line interface for strsim."""

from .main import app, run

__all__ = ["app", "run"]
