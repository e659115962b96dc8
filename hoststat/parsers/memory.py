"""
Parser for /proc/meminfo.

    MemTotal:        3353936 kB
"""

from ..errors import MalformedRecord
from ..models.sample import Sample

RESOURCE = "memory"

# meminfo label -> metric name
MEMINFO_FIELDS = {
    "MemTotal": "mem.total",
    "MemFree": "mem.free",
    "Buffers": "mem.buffer",
    "Cached": "mem.cache",
    "SwapTotal": "mem.swtot",
    "SwapFree": "mem.swfree",
}


def parse_meminfo_line(line: str, timestamp: int) -> list[Sample]:
    """
    Parse one /proc/meminfo line.

    Only the labels in MEMINFO_FIELDS produce a sample; the unit suffix
    after the value is dropped.

    Raises:
        MalformedRecord: A recognised label has a missing or bad value
    """
    label, sep, rest = line.partition(":")
    if not sep:
        return []

    name = MEMINFO_FIELDS.get(label.strip())
    if name is None:
        return []

    tokens = rest.split()
    if not tokens:
        raise MalformedRecord(RESOURCE, line, "missing value")
    try:
        value = int(tokens[0])
    except ValueError:
        raise MalformedRecord(RESOURCE, line, "non-numeric value") from None
    if value < 0:
        raise MalformedRecord(RESOURCE, line, "negative value")

    return [Sample.gauge(name, value, timestamp)]
