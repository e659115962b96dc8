"""
Sample and metadata records with their line-oriented wire format.

Sample record:
    <timestamp-ms>|<name>:<value>|<kind>\\n

Metadata record:
    M|<name>|<value>
"""

import re
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

# Characters that delimit fields on the wire
NAME_DELIMITERS = ("|", ":")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

RECORD_TERMINATOR = "\n"
METADATA_TAG = "M"

_SAMPLE_RE = re.compile(r"(-?\d+)\|([^|:\n]+):(-?\d+)\|([^|:\n]*)")


class SampleFormatError(ValueError):
    """Base class for wire format errors."""


class MalformedSampleSyntax(SampleFormatError):
    """Text does not have the shape of a sample record."""


class InvalidTimestamp(SampleFormatError):
    """Sample record carries a negative timestamp."""


class UnknownSampleType(SampleFormatError):
    """Sample record carries a kind label other than g or c."""


class SampleKind(Enum):
    """Aggregation semantics of a sample; the value is the wire label."""

    GAUGE = "g"
    COUNTER = "c"


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def metric_name(*parts: object) -> str:
    """
    Build a dotted metric name from parts.

    Wire delimiters inside a part are replaced with underscores so names
    taken from the kernel (mount points, device names) stay parseable.

    Example:
        metric_name("fs", "/", "total") -> "fs./.total"
    """
    cleaned = []
    for part in parts:
        text = str(part)
        for delimiter in NAME_DELIMITERS:
            text = text.replace(delimiter, "_")
        cleaned.append(text)
    return ".".join(cleaned)


@dataclass(frozen=True)
class Sample:
    """One timestamped, named, typed metric observation."""

    timestamp: int
    name: str
    value: int
    kind: SampleKind = SampleKind.GAUGE

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Sample name must not be empty")
        if any(d in self.name for d in NAME_DELIMITERS):
            raise ValueError(f"Sample name contains a wire delimiter: {self.name!r}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"Sample value out of int64 range: {self.value}")

    @classmethod
    def gauge(cls, name: str, value: int, timestamp: int) -> "Sample":
        return cls(timestamp=timestamp, name=name, value=value, kind=SampleKind.GAUGE)

    @classmethod
    def counter(cls, name: str, value: int, timestamp: int) -> "Sample":
        return cls(timestamp=timestamp, name=name, value=value, kind=SampleKind.COUNTER)

    @property
    def observed_at(self) -> datetime:
        """Timestamp as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)

    def serialize(self) -> str:
        """Serialize to a single wire record, terminator included."""
        return f"{self.timestamp}|{self.name}:{self.value}|{self.kind.value}{RECORD_TERMINATOR}"

    def __str__(self) -> str:
        return self.serialize().rstrip(RECORD_TERMINATOR)


def parse_sample(text: str) -> Sample:
    """
    Parse one sample record.

    Args:
        text: Wire record, with or without its trailing terminator

    Returns:
        The decoded Sample

    Raises:
        MalformedSampleSyntax: Text is not a single three-part sample
            record. A delimiter or line break inside the kind label is a
            framing problem and lands here too.
        InvalidTimestamp: Timestamp is negative
        UnknownSampleType: Kind label is well formed but not g or c
    """
    record = text[:-1] if text.endswith(RECORD_TERMINATOR) else text
    match = _SAMPLE_RE.fullmatch(record)
    if match is None:
        raise MalformedSampleSyntax(f"Malformed sample syntax: {text!r}")

    raw_ts, name, raw_value, label = match.groups()

    timestamp = int(raw_ts)
    if timestamp < 0:
        raise InvalidTimestamp(f"Invalid sample timestamp: {timestamp}")

    value = int(raw_value)
    if not INT64_MIN <= value <= INT64_MAX:
        raise MalformedSampleSyntax(f"Sample value out of int64 range: {raw_value}")

    try:
        kind = SampleKind(label)
    except ValueError:
        raise UnknownSampleType(f"Unknown sample type: {label!r}") from None

    return Sample(timestamp=timestamp, name=name, value=value, kind=kind)


def parse_samples(text: str) -> list[Sample]:
    """Parse a block of sample records, skipping blank lines."""
    return [parse_sample(line) for line in text.splitlines() if line.strip()]


@dataclass(frozen=True)
class Metadata:
    """Static descriptive fact about the host (hostname, interface address)."""

    name: str
    value: str

    def serialize(self) -> str:
        return f"{METADATA_TAG}|{self.name}|{self.value}"

    def __str__(self) -> str:
        return self.serialize()

    @classmethod
    def parse(cls, text: str) -> "Metadata":
        """Parse an ``M|name|value`` record."""
        parts = text.rstrip(RECORD_TERMINATOR).split("|", 2)
        if len(parts) != 3 or parts[0] != METADATA_TAG or not parts[1]:
            raise MalformedSampleSyntax(f"Malformed metadata syntax: {text!r}")
        return cls(name=parts[1], value=parts[2])
