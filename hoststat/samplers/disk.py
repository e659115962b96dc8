"""
Samplers for block device I/O and filesystem usage.
"""

from ..const import ETC_MTAB, PROC_DISKSTATS
from ..models.sample import Sample
from ..parsers.diskio import parse_diskstats_line
from ..parsers.fsusage import StatfsFunc, parse_mounts_line
from ..sinks.base import SampleWriter
from ..utils.host import statfs as host_statfs
from ..utils.opener import Opener
from .base import LineSampler


class DiskIOSampler(LineSampler):
    """Sampler for per-device I/O counters from /proc/diskstats."""

    FAMILY = "disk"
    PATH = PROC_DISKSTATS

    def parse_line(self, line: str, timestamp: int) -> list[Sample]:
        return parse_diskstats_line(line, timestamp)


class FSUsageSampler(LineSampler):
    """
    Sampler for filesystem space and inode usage.

    Walks the mount table and queries each ext-family mount point
    through the injected statfs capability.
    """

    FAMILY = "fs"
    PATH = ETC_MTAB

    def __init__(
        self,
        opener: Opener,
        sink: SampleWriter,
        statfs: StatfsFunc = host_statfs,
    ):
        super().__init__(opener, sink)
        self.statfs = statfs

    def parse_line(self, line: str, timestamp: int) -> list[Sample]:
        return parse_mounts_line(line, self.statfs, timestamp)
