"""
Data models for samples and host metadata.
"""

from .sample import (
    InvalidTimestamp,
    MalformedSampleSyntax,
    Metadata,
    Sample,
    SampleFormatError,
    SampleKind,
    UnknownSampleType,
    metric_name,
    now_ms,
    parse_sample,
    parse_samples,
)

__all__ = [
    "Sample",
    "SampleKind",
    "Metadata",
    "SampleFormatError",
    "MalformedSampleSyntax",
    "InvalidTimestamp",
    "UnknownSampleType",
    "metric_name",
    "now_ms",
    "parse_sample",
    "parse_samples",
]
