"""YAML IO helpers for strsim configuration files."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

__all__ = ["read_yaml"]


def read_yaml(path: str | Path) -> Any:
    """Load a YAML file and return the decoded document (``None`` when empty)."""

    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        # Subclass of OSError; callers report a missing file themselves.
        raise
    except OSError as exc:  # pragma: no cover - I/O edge cases
        raise RuntimeError(f"Failed to read YAML file '{file_path}': {exc}") from exc

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in '{file_path}': {exc}") from exc
