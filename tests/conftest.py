"""Pytest configuration for strsim tests."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def reset_strsim_logger() -> Iterator[None]:
    """Undo handlers installed by ``configure_logging`` during CLI runs."""

    logger = logging.getLogger("strsim")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
