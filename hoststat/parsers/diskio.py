"""
Parser for /proc/diskstats.

    8       0 sda 50762 6347 1674054 67360 23942 20742 563152 25820 0 14200 93132

Fields: major minor name, then rd_ios rd_merges rd_sectors rd_ticks
wr_ios wr_merges wr_sectors wr_ticks ios_in_progress io_ticks
time_in_queue. Newer kernels append discard and flush counters.
"""

from ..errors import MalformedRecord
from ..models.sample import Sample, metric_name

RESOURCE = "diskio"
FIELD_COUNT = 14

# Synthetic block devices that never carry real I/O
IGNORED_PREFIXES = ("ram", "loop")


def parse_diskstats_line(line: str, timestamp: int) -> list[Sample]:
    """
    Parse one /proc/diskstats line into read/write op and KB counters.

    Sector counts are 512-byte units, halved to kilobytes.

    Raises:
        MalformedRecord: Truncated line or non-numeric counter
    """
    fields = line.split()
    if len(fields) >= 3 and fields[2].startswith(IGNORED_PREFIXES):
        return []
    if len(fields) < FIELD_COUNT:
        raise MalformedRecord(RESOURCE, line, f"expected {FIELD_COUNT} fields, got {len(fields)}")

    dev = fields[2]
    try:
        counters = [int(v) for v in fields[:2] + fields[3:FIELD_COUNT]]
    except ValueError:
        raise MalformedRecord(RESOURCE, line, "non-numeric field") from None

    rd_ios, rd_sectors = counters[2], counters[4]
    wr_ios, wr_sectors = counters[6], counters[8]

    return [
        Sample.counter(metric_name("disk", "rop", dev), rd_ios, timestamp),
        Sample.counter(metric_name("disk", "wop", dev), wr_ios, timestamp),
        Sample.counter(metric_name("disk", "rkb", dev), rd_sectors // 2, timestamp),
        Sample.counter(metric_name("disk", "wkb", dev), wr_sectors // 2, timestamp),
    ]
