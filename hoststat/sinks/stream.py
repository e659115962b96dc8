"""
Writers that emit wire-format records to a text stream or file.
"""

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from ..const import DEFAULT_SINK_MAX_FAILURES
from ..logging import get_logger
from ..models.sample import Metadata, Sample
from .base import SampleWriter, SinkError

logger = get_logger("sinks")


class StreamSampleWriter(SampleWriter):
    """
    Writes each sample as a wire record to a text stream.

    A failed write is logged and the records are dropped. After
    max_failures consecutive failures the writer raises SinkError.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        max_failures: int = DEFAULT_SINK_MAX_FAILURES,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.max_failures = max_failures
        self._consecutive_failures = 0
        self.dropped = 0

    def _emit(self, records: Iterable[str], count: int) -> None:
        try:
            self.stream.write("".join(records))
            self.stream.flush()
        except (OSError, ValueError) as e:  # ValueError: stream closed
            self._consecutive_failures += 1
            self.dropped += count
            logger.warning(
                f"Dropped {count} record(s) ({self._consecutive_failures} "
                f"consecutive failures): {e}"
            )
            if self.max_failures and self._consecutive_failures >= self.max_failures:
                raise SinkError(f"Giving up after {self._consecutive_failures} failed writes") from e
            return
        self._consecutive_failures = 0

    def write(self, family: str, samples: Sequence[Sample]) -> None:
        logger.debug(f"Writing {len(samples)} {family} sample(s)")
        self._emit((s.serialize() for s in samples), len(samples))

    def write_metadata(self, items: Sequence[Metadata]) -> None:
        self._emit((f"{m.serialize()}\n" for m in items), len(items))


class FileSampleWriter(StreamSampleWriter):
    """Appends wire records to a file, creating parent directories."""

    def __init__(self, path: str | Path, max_failures: int = DEFAULT_SINK_MAX_FAILURES):
        self.path = Path(path)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            stream = self.path.open("a", encoding="utf-8")
        except OSError as e:
            raise SinkError(f"Cannot open sample file {self.path}: {e}") from e
        super().__init__(stream, max_failures)

    def close(self) -> None:
        if not self.stream.closed:
            self.stream.close()
