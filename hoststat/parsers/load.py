"""
Parser for /proc/loadavg.

    0.00 0.02 0.05 1/406 16439
"""

from decimal import Decimal, InvalidOperation

from ..errors import MalformedRecord
from ..models.sample import Sample

RESOURCE = "load"


def _scaled(raw: str) -> int:
    # Decimal keeps 0.29 * 100 at 29 rather than 28.999...
    value = Decimal(raw)
    if not value.is_finite():
        raise ValueError(raw)
    return int(value * 100)


def parse_loadavg_line(line: str, timestamp: int) -> list[Sample]:
    """
    Parse the /proc/loadavg line.

    Load averages are reported multiplied by 100 and truncated; the
    process count is the total from the running/total pair.

    Raises:
        MalformedRecord: Wrong field count or non-numeric field
    """
    fields = line.split()
    if len(fields) != 5:
        raise MalformedRecord(RESOURCE, line, f"expected 5 fields, got {len(fields)}")

    running, sep, total = fields[3].partition("/")
    if not sep:
        raise MalformedRecord(RESOURCE, line, "expected running/total process pair")

    try:
        load1, load5, load15 = (_scaled(v) for v in fields[:3])
        int(running)
        procs = int(total)
        int(fields[4])
    except (InvalidOperation, ValueError):
        raise MalformedRecord(RESOURCE, line, "non-numeric field") from None

    return [
        Sample.gauge("load.1m", load1, timestamp),
        Sample.gauge("load.5m", load5, timestamp),
        Sample.gauge("load.15m", load15, timestamp),
        Sample.gauge("load.proc", procs, timestamp),
    ]
