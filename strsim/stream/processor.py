"""Read-score-emit loop over a line-oriented binary stream."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Optional, Tuple

from strsim.bigram.encoder import Text, encode
from strsim.bigram.similarity import is_match, score
from strsim.config import Mode, StrsimConfig
from strsim.stream.splitter import split

__all__ = ["Mode", "StreamStats", "line_pair", "process_stream"]

logger = logging.getLogger(__name__)

_NEWLINE = b"\n"


@dataclass(frozen=True)
class StreamStats:
    lines_read: int
    lines_emitted: int


def _as_text(raw: bytes, codepoints: bool) -> Text:
    if codepoints:
        return raw.decode("utf-8", errors="surrogateescape")
    return raw


def _fixed_operand(config: StrsimConfig) -> Text:
    """Return the reference (reference mode) or the delimiter (split mode) in the scoring unit."""

    if config.mode is Mode.REFERENCE:
        return config.reference if config.codepoints else os.fsencode(config.reference)
    return config.delimiter if config.codepoints else config.delimiter_bytes


def line_pair(config: StrsimConfig, line: bytes, operand: Optional[Text] = None) -> Tuple[Text, Text]:
    """Return the two strings compared for ``line`` (without its terminator).

    ``operand`` is the value of ``_fixed_operand(config)``; callers scoring many
    lines pass it in so it is derived once per run.
    """

    if operand is None:
        operand = _fixed_operand(config)
    text = _as_text(line, config.codepoints)
    if config.mode is Mode.REFERENCE:
        return operand, text
    return split(text, operand)


def process_stream(config: StrsimConfig, source: Iterable[bytes], sink: BinaryIO) -> StreamStats:
    """Write each line of ``source`` whose pair scores at least ``config.threshold``.

    Lines are scored without their trailing newline and written back with one,
    unchanged otherwise and in input order. Each match is flushed before the
    next line is read. Exhausting ``source`` ends the run normally.
    """

    mode = config.mode
    operand = _fixed_operand(config)
    logger.debug(
        "Processing stream in %s mode (threshold=%s, codepoints=%s)",
        mode.value,
        config.threshold,
        config.codepoints,
    )

    lines_read = 0
    lines_emitted = 0
    for raw in source:
        lines_read += 1
        line = raw[:-1] if raw.endswith(_NEWLINE) else raw
        left, right = line_pair(config, line, operand)
        if is_match(score(encode(left), encode(right)), config.threshold):
            sink.write(line + _NEWLINE)
            sink.flush()
            lines_emitted += 1

    stats = StreamStats(lines_read=lines_read, lines_emitted=lines_emitted)
    logger.debug("Read %d lines, emitted %d", stats.lines_read, stats.lines_emitted)
    return stats
