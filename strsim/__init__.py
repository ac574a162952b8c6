"""strsim: emit the lines whose strings are almost equal by bigram overlap."""

from .bigram import NO_SCORE, encode, is_match, score, similarity
from .config import ConfigError, Mode, StrsimConfig, build_config
from .stream import StreamStats, process_stream, split

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Mode",
    "NO_SCORE",
    "StrsimConfig",
    "StreamStats",
    "build_config",
    "encode",
    "is_match",
    "process_stream",
    "score",
    "similarity",
    "split",
]
