"""
Parser for /proc/net/dev.

    Inter-|   Receive                            |  Transmit
     face |bytes    packets errs drop fifo frame compressed multicast|bytes ...
      eth0: 16651766   30158    0    0    0     0          0         0  4036294 ...
"""

from ..errors import MalformedRecord
from ..models.sample import Sample, metric_name

RESOURCE = "network"
FIELD_COUNT = 16

LOOPBACK_PREFIX = "lo"

# Offsets into the 16 counters: 8 receive then 8 transmit
RX_FIELDS = {"rx_bytes": 0, "rx_packets": 1, "rx_errors": 2, "rx_drops": 3}
TX_FIELDS = {"tx_bytes": 8, "tx_packets": 9, "tx_errors": 10, "tx_drops": 11}


def parse_net_dev_line(line: str, timestamp: int) -> list[Sample]:
    """
    Parse one /proc/net/dev line into receive and transmit counters.

    Header lines and loopback interfaces yield nothing.

    Raises:
        MalformedRecord: Missing interface separator, wrong counter count
            or non-numeric counter
    """
    if "|" in line:
        return []

    dev, sep, rest = line.partition(":")
    dev = dev.strip()
    if not sep or not dev:
        raise MalformedRecord(RESOURCE, line, "missing interface name")
    if dev.startswith(LOOPBACK_PREFIX):
        return []

    fields = rest.split()
    if len(fields) != FIELD_COUNT:
        raise MalformedRecord(RESOURCE, line, f"expected {FIELD_COUNT} counters, got {len(fields)}")
    try:
        counters = [int(v) for v in fields]
    except ValueError:
        raise MalformedRecord(RESOURCE, line, "non-numeric counter") from None

    return [
        Sample.counter(metric_name("net", dev, name), counters[offset], timestamp)
        for name, offset in (RX_FIELDS | TX_FIELDS).items()
    ]
