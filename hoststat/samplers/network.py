"""
Sampler for network interface counters.
"""

from ..const import PROC_NET_DEV
from ..models.sample import Sample
from ..parsers.network import parse_net_dev_line
from .base import LineSampler


class NICSampler(LineSampler):
    """Sampler for per-interface traffic counters from /proc/net/dev."""

    FAMILY = "net"
    PATH = PROC_NET_DEV

    def parse_line(self, line: str, timestamp: int) -> list[Sample]:
        return parse_net_dev_line(line, timestamp)
