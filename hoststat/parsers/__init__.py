"""
Pure parsers for kernel text resources.

Each parser turns one line into zero or more samples, or raises
MalformedRecord when the line has the wrong shape.
"""

from .cpu import parse_stat_line
from .diskio import parse_diskstats_line
from .fsusage import parse_mounts_line, unescape_mount_field
from .load import parse_loadavg_line
from .memory import MEMINFO_FIELDS, parse_meminfo_line
from .network import parse_net_dev_line

__all__ = [
    "parse_stat_line",
    "parse_loadavg_line",
    "parse_meminfo_line",
    "parse_diskstats_line",
    "parse_mounts_line",
    "parse_net_dev_line",
    "unescape_mount_field",
    "MEMINFO_FIELDS",
]
