"""
Base sampler interface.

Every sampler exposes two operations: initialize() for one-time setup
and sample() for one sampling pass over its resource. Resource access
and output go through the injected Opener and SampleWriter.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..errors import ResourceUnavailable
from ..models.sample import Sample, now_ms
from ..sinks.base import SampleWriter
from ..utils.opener import Opener


class Sampler(ABC):
    """Abstract base class for samplers."""

    # Metric family tag handed to the sink (override in subclasses)
    FAMILY: str = "unknown"

    async def initialize(self) -> None:
        """
        Initialize the sampler.

        Called once before the first sample. Failures are fatal to
        agent startup.
        """

    @abstractmethod
    async def sample(self) -> None:
        """
        Run one sampling pass and forward the results to the sink.

        Raises:
            SamplerError: If the pass failed; nothing is written
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.FAMILY!r})"


class LineSampler(Sampler):
    """
    Sampler for a line-oriented kernel text resource.

    Subclasses set PATH and FAMILY and implement parse_line(). The
    whole resource is parsed before anything is written, so a malformed
    line aborts the pass with no partial output.
    """

    PATH: str = ""

    def __init__(self, opener: Opener, sink: SampleWriter):
        self.opener = opener
        self.sink = sink

    @abstractmethod
    def parse_line(self, line: str, timestamp: int) -> list[Sample]:
        """Parse one line of the resource."""

    def finish(self, samples: list[Sample]) -> list[Sample]:
        """Check or adjust the samples of a complete pass."""
        return samples

    def read_samples(self, timestamp: int) -> list[Sample]:
        """
        Read and parse the whole resource.

        Raises:
            ResourceUnavailable: The resource cannot be opened or read
            MalformedRecord: A line has the wrong shape
        """
        samples: list[Sample] = []
        try:
            with self.opener.open(self.PATH) as stream:
                for line in stream:
                    if not line.strip():
                        continue
                    samples.extend(self.parse_line(line, timestamp))
        except OSError as e:
            raise ResourceUnavailable(self.PATH, e) from e
        return self.finish(samples)

    async def sample(self) -> None:
        samples = self.read_samples(now_ms())
        self.emit(samples)

    def emit(self, samples: Iterable[Sample]) -> None:
        samples = list(samples)
        if samples:
            self.sink.write(self.FAMILY, samples)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.PATH!r})"
