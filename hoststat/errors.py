"""
Errors raised while sampling kernel resources.

Parsers and samplers raise these and never log them; the composite
sampler and the run loop decide what to do with a failure.
"""


class SamplerError(Exception):
    """Base class for sampling failures."""


class ResourceUnavailable(SamplerError):
    """A kernel resource could not be opened or read."""

    def __init__(self, path: str, cause: OSError | None = None):
        self.path = path
        self.cause = cause
        reason = f": {cause.strerror or cause}" if cause else ""
        super().__init__(f"Resource unavailable: {path}{reason}")


class MalformedRecord(SamplerError):
    """A line does not have the shape its resource expects."""

    def __init__(self, resource: str, line: str, reason: str):
        self.resource = resource
        self.line = line
        self.reason = reason
        message = f"Malformed {resource} record ({reason})"
        if line.strip():
            message += f": {line.strip()!r}"
        super().__init__(message)


class CapabilityError(SamplerError):
    """An OS-level query (statfs, sysconf) failed."""


class SampleCycleError(SamplerError):
    """One or more resource samplers failed during a cycle."""

    def __init__(self, failures: dict[str, SamplerError]):
        self.failures = failures
        summary = ", ".join(f"{family}: {error}" for family, error in failures.items())
        super().__init__(f"{len(failures)} sampler(s) failed: {summary}")
