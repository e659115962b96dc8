"""
Static host metadata emitted once at startup.

- host: hostname
- nic.<name>: first IPv4 address of each non-loopback interface
"""

import socket

import psutil

from .models.sample import Metadata, metric_name
from .parsers.network import LOOPBACK_PREFIX


def interface_addresses() -> dict[str, str]:
    """
    Get the first IPv4 address of every non-loopback interface.

    Returns:
        Mapping of interface name to dotted-quad address, sorted by name
    """
    result: dict[str, str] = {}
    for name, addrs in sorted(psutil.net_if_addrs().items()):
        if name.startswith(LOOPBACK_PREFIX):
            continue
        for addr in addrs:
            if addr.family == socket.AF_INET and addr.address:
                result[name] = addr.address
                break
    return result


def collect_metadata() -> list[Metadata]:
    """
    Collect host metadata.

    Raises:
        OSError: If the hostname or interface list cannot be read
    """
    items = [Metadata("host", socket.gethostname())]
    for name, address in interface_addresses().items():
        items.append(Metadata(metric_name("nic", name), address))
    return items
