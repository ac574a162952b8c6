"""Line splitting and stream processing."""

from .processor import StreamStats, line_pair, process_stream
from .splitter import split

__all__ = ["StreamStats", "line_pair", "process_stream", "split"]
