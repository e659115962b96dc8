"""
Sample writer interface.

A SampleWriter receives the samples of one resource family at a time
and owns everything downstream of sampling: formatting, batching and
transport.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..models.sample import Metadata, Sample


class SinkError(Exception):
    """Raised by a writer that can no longer accept samples."""


class SampleWriter(ABC):
    """
    Abstract base class for sample writers.

    Transient write failures are the writer's business; a writer only
    raises SinkError when it wants the agent to stop.
    """

    @abstractmethod
    def write(self, family: str, samples: Sequence[Sample]) -> None:
        """
        Accept the samples of one sampling pass.

        Args:
            family: Metric family tag (cpu, load, memory, disk, fs, net)
            samples: Samples in the order the sampler produced them
        """

    @abstractmethod
    def write_metadata(self, items: Sequence[Metadata]) -> None:
        """Accept host metadata records."""

    def close(self) -> None:
        """Release any resources held by the writer."""

    def __enter__(self) -> "SampleWriter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
