"""
Samplers for kernel-exposed host resources.
"""

from .base import LineSampler, Sampler
from .disk import DiskIOSampler, FSUsageSampler
from .network import NICSampler
from .standard import STANDARD_FAMILIES, StandardSampler
from .system import CPUSampler, LoadSampler, MemorySampler

__all__ = [
    "Sampler",
    "LineSampler",
    "CPUSampler",
    "LoadSampler",
    "MemorySampler",
    "DiskIOSampler",
    "FSUsageSampler",
    "NICSampler",
    "StandardSampler",
    "STANDARD_FAMILIES",
]
