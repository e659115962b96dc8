"""
Parser for /proc/stat CPU lines.

    cpu  1377723 12309 425558 92572282 176914 102 11966 0 0 0
    cpu0 445076 5965 184472 22802862 67989 101 11569 0 0 0

Counters after the marker, in ticks: user nice system idle iowait irq
softirq steal guest guest_nice.
"""

from ..errors import MalformedRecord
from ..models.sample import Sample, metric_name

RESOURCE = "cpu"
MARKER = "cpu"
FIELD_COUNT = 10


def parse_stat_line(line: str, hz: int, timestamp: int) -> list[Sample]:
    """
    Parse one /proc/stat line.

    The aggregate "cpu" line yields the host uptime in seconds. Each
    "cpuN" line yields per-CPU time in seconds for user, nice, sys,
    iowait, steal and idle. Other lines yield nothing.

    Args:
        line: Raw line from /proc/stat
        hz: Clock ticks per second
        timestamp: Observation time in milliseconds

    Raises:
        MalformedRecord: Fewer than ten counters, or a non-numeric one
    """
    fields = line.split()
    if not fields or not fields[0].startswith(MARKER):
        return []

    dev = fields[0]
    index = dev[len(MARKER):]
    if index and not index.isdigit():
        return []

    if len(fields) - 1 < FIELD_COUNT:
        raise MalformedRecord(RESOURCE, line, f"expected {FIELD_COUNT} counters")
    try:
        user, nice, system, idle, iowait, irq, softirq, steal = (
            int(v) for v in fields[1:9]
        )
        # guest and guest_nice are already included in user and nice
        int(fields[9])
        int(fields[10])
    except ValueError:
        raise MalformedRecord(RESOURCE, line, "non-numeric counter") from None

    if not index:
        uptime = (user + nice + system + idle + iowait + irq + softirq + steal) // hz
        return [Sample.gauge("uptime", uptime, timestamp)]

    return [
        Sample.gauge(metric_name("cpu", index, "user"), user // hz, timestamp),
        Sample.gauge(metric_name("cpu", index, "nice"), nice // hz, timestamp),
        Sample.gauge(metric_name("cpu", index, "sys"), system // hz, timestamp),
        Sample.gauge(metric_name("cpu", index, "iowait"), iowait // hz, timestamp),
        Sample.gauge(metric_name("cpu", index, "steal"), steal // hz, timestamp),
        Sample.gauge(metric_name("cpu", index, "idle"), idle // hz, timestamp),
    ]
