"""
Parser for the mounted filesystems table (/etc/mtab, /proc/mounts).

    /dev/sda1 / ext4 rw,errors=remount-ro 0 0
"""

import re
from collections.abc import Callable

from ..errors import CapabilityError, MalformedRecord
from ..models.sample import Sample, metric_name
from ..utils.host import FsStats

RESOURCE = "filesystem"

# Only the ext2/3/4 family is sampled
FSTYPE_PREFIX = "ext"

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")

StatfsFunc = Callable[[str], FsStats]


def unescape_mount_field(value: str) -> str:
    """Decode the octal escapes the kernel uses for spaces and tabs."""
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), value)


def parse_mounts_line(line: str, statfs: StatfsFunc, timestamp: int) -> list[Sample]:
    """
    Parse one mount table line and sample its filesystem usage.

    Args:
        line: Raw mount table line
        statfs: Filesystem statistics query for a mount point
        timestamp: Observation time in milliseconds

    Raises:
        MalformedRecord: Fewer than four fields
        CapabilityError: The statistics query failed
    """
    fields = line.split()
    if len(fields) < 4:
        raise MalformedRecord(RESOURCE, line, f"expected 4 fields, got {len(fields)}")

    mount, fstype = unescape_mount_field(fields[1]), fields[2]
    if not fstype.startswith(FSTYPE_PREFIX):
        return []

    try:
        st = statfs(mount)
    except OSError as e:
        raise CapabilityError(f"statfs({mount}) failed: {e}") from e

    # Not mounted yet, or a pseudo filesystem
    if st.blocks == 0:
        return []

    def kb(blocks: int) -> int:
        return blocks * st.block_size // 1024

    return [
        Sample.gauge(metric_name("fs", mount, "total"), kb(st.blocks), timestamp),
        Sample.gauge(metric_name("fs", mount, "free"), kb(st.blocks_free), timestamp),
        Sample.gauge(metric_name("fs", mount, "avail"), kb(st.blocks_avail), timestamp),
        Sample.gauge(metric_name("fs", mount, "inode"), st.files, timestamp),
        Sample.gauge(metric_name("fs", mount, "ifree"), st.files_free, timestamp),
    ]
