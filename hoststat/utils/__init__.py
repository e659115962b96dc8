"""
Host access helpers.
"""

from .host import FsStats, get_clock_ticks, statfs
from .opener import FileOpener, Opener

__all__ = [
    "Opener",
    "FileOpener",
    "FsStats",
    "get_clock_ticks",
    "statfs",
]
