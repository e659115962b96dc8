"""
Sample writers (sinks).
"""

from .base import SampleWriter, SinkError
from .stream import FileSampleWriter, StreamSampleWriter

__all__ = [
    "SampleWriter",
    "SinkError",
    "StreamSampleWriter",
    "FileSampleWriter",
]
