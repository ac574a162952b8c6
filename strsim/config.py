"""Run configuration: an immutable value built and validated before any input is read."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from strsim.utils.io import read_yaml

__all__ = [
    "ConfigError",
    "DEFAULTS",
    "Mode",
    "StrsimConfig",
    "build_config",
    "load_config_file",
    "resolve_config",
]

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "delimiter": "\t",
    "threshold": 0.9,
    "reference": None,
    "codepoints": False,
}


class ConfigError(ValueError):
    """Raised when command-line or file configuration is unusable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Mode(Enum):
    """How each input line is turned into a pair of strings."""

    SPLIT = "split"
    REFERENCE = "reference"


@dataclass(frozen=True)
class StrsimConfig:
    delimiter: str = "\t"
    threshold: float = 0.9
    reference: Optional[str] = None
    codepoints: bool = False

    @property
    def mode(self) -> Mode:
        return Mode.SPLIT if self.reference is None else Mode.REFERENCE

    @property
    def delimiter_bytes(self) -> bytes:
        return self.delimiter.encode("utf-8")


def build_config(
    delimiter: Any = DEFAULTS["delimiter"],
    threshold: Any = DEFAULTS["threshold"],
    reference: Any = DEFAULTS["reference"],
    codepoints: Any = DEFAULTS["codepoints"],
) -> StrsimConfig:
    """Validate raw option values and return a :class:`StrsimConfig`.

    Raises :class:`ConfigError` for a delimiter that is not exactly one
    character, a threshold that is not a float, a non-string reference or a
    non-boolean ``codepoints``.
    The threshold range is not checked: values below 0 match every scorable
    pair and values above 1 match nothing.
    """

    if not isinstance(delimiter, str) or len(delimiter) == 0:
        raise ConfigError("delimiter must be one character")
    if len(delimiter) > 1:
        raise ConfigError(f"delimiter '{delimiter}' too long - must be one character")

    if not isinstance(codepoints, bool):
        raise ConfigError(f"codepoints must be a boolean, got {codepoints!r}")
    if not codepoints and len(delimiter.encode("utf-8")) != 1:
        raise ConfigError(
            f"delimiter '{delimiter}' is not a single byte - use --codepoints for non-ASCII delimiters"
        )

    if isinstance(threshold, bool):
        raise ConfigError(f"not a float: {threshold}")
    try:
        threshold_value = float(threshold)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"not a float: {threshold}") from exc

    if reference is not None and not isinstance(reference, str):
        raise ConfigError(f"reference must be a string, got {type(reference).__name__}")

    return StrsimConfig(
        delimiter=delimiter,
        threshold=threshold_value,
        reference=reference,
        codepoints=codepoints,
    )


def load_config_file(path: str | Path) -> Dict[str, Any]:
    """Read option defaults from a YAML mapping at ``path``."""

    config_path = Path(path)
    try:
        data = read_yaml(config_path)
    except FileNotFoundError as exc:
        raise ConfigError(f"config file not found: {config_path}") from exc
    except (RuntimeError, ValueError) as exc:
        raise ConfigError(str(exc)) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file '{config_path}' must contain a mapping")

    unknown = sorted(str(key) for key in data if key not in DEFAULTS)
    if unknown:
        raise ConfigError(f"unknown config keys in '{config_path}': {', '.join(unknown)}")

    logger.debug("Loaded config file %s: %s", config_path, sorted(data))
    return dict(data)


def resolve_config(
    overrides: Mapping[str, Any],
    config_path: str | Path | None = None,
) -> StrsimConfig:
    """Merge defaults, an optional YAML file and explicit ``overrides``.

    ``None`` in ``overrides`` means "not given" and leaves the lower layer in
    place.
    """

    values = dict(DEFAULTS)
    if config_path is not None:
        values.update(load_config_file(config_path))
    values.update({key: value for key, value in overrides.items() if value is not None})
    return build_config(**values)
