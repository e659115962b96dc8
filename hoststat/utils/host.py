"""
OS-level capabilities that are not text parses.

- Clock ticks per second (sysconf SC_CLK_TCK)
- Filesystem statistics for a mount point (statvfs)
"""

import os
from pathlib import Path
from typing import NamedTuple

from ..errors import CapabilityError


class FsStats(NamedTuple):
    """Filesystem statistics for one mount point."""

    block_size: int  # Unit of the block counts, in bytes
    blocks: int  # Total data blocks
    blocks_free: int  # Free blocks
    blocks_avail: int  # Free blocks available to unprivileged users
    files: int  # Total inodes
    files_free: int  # Free inodes


def get_clock_ticks() -> int:
    """
    Get the number of scheduler clock ticks per second.

    Raises:
        CapabilityError: If the value cannot be determined
    """
    try:
        ticks = os.sysconf("SC_CLK_TCK")
    except (ValueError, OSError) as e:
        raise CapabilityError(f"Cannot determine clock tick rate: {e}") from e

    if ticks <= 0:
        raise CapabilityError(f"Invalid clock tick rate: {ticks}")
    return ticks


def statfs(mountpoint: str, root: str | Path = "/") -> FsStats:
    """
    Query filesystem statistics for a mount point.

    Args:
        mountpoint: Mount point as listed in the mount table
        root: Host root the mount table refers to (for containers)

    Raises:
        OSError: If the query fails
    """
    path = Path(root) / mountpoint.lstrip("/")
    st = os.statvfs(path)

    # f_frsize is the unit of f_blocks; some filesystems report 0
    block_size = st.f_frsize or st.f_bsize
    return FsStats(
        block_size=block_size,
        blocks=st.f_blocks,
        blocks_free=st.f_bfree,
        blocks_avail=st.f_bavail,
        files=st.f_files,
        files_free=st.f_ffree,
    )
