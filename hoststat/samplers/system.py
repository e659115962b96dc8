"""
Samplers for host-wide CPU, load and memory statistics.
"""

from ..const import PROC_LOADAVG, PROC_MEMINFO, PROC_STAT
from ..errors import MalformedRecord, SamplerError
from ..models.sample import Sample
from ..parsers.cpu import parse_stat_line
from ..parsers.load import parse_loadavg_line
from ..parsers.memory import MEMINFO_FIELDS, parse_meminfo_line
from ..sinks.base import SampleWriter
from ..utils.host import get_clock_ticks
from ..utils.opener import Opener
from .base import LineSampler


class CPUSampler(LineSampler):
    """
    Sampler for CPU time from /proc/stat.

    Tick counts are converted to seconds with the host clock-tick rate,
    fetched once in initialize() unless given explicitly.
    """

    FAMILY = "cpu"
    PATH = PROC_STAT

    def __init__(self, opener: Opener, sink: SampleWriter, hz: int | None = None):
        super().__init__(opener, sink)
        self.hz = hz

    async def initialize(self) -> None:
        if self.hz is None:
            self.hz = get_clock_ticks()

    def parse_line(self, line: str, timestamp: int) -> list[Sample]:
        if not self.hz:
            raise SamplerError("CPU sampler used before the clock tick rate is known")
        return parse_stat_line(line, self.hz, timestamp)


class LoadSampler(LineSampler):
    """Sampler for load averages from /proc/loadavg."""

    FAMILY = "load"
    PATH = PROC_LOADAVG

    def parse_line(self, line: str, timestamp: int) -> list[Sample]:
        return parse_loadavg_line(line, timestamp)


class MemorySampler(LineSampler):
    """
    Sampler for RAM and swap usage from /proc/meminfo.

    Args:
        require_all: Fail the pass unless every tracked meminfo label
            was present
    """

    FAMILY = "memory"
    PATH = PROC_MEMINFO

    def __init__(self, opener: Opener, sink: SampleWriter, require_all: bool = True):
        super().__init__(opener, sink)
        self.require_all = require_all

    def parse_line(self, line: str, timestamp: int) -> list[Sample]:
        return parse_meminfo_line(line, timestamp)

    def finish(self, samples: list[Sample]) -> list[Sample]:
        if self.require_all:
            seen = {s.name for s in samples}
            missing = [label for label, name in MEMINFO_FIELDS.items() if name not in seen]
            if missing:
                raise MalformedRecord(
                    self.FAMILY, "", f"missing fields: {', '.join(missing)}"
                )
        return samples
