"""
Composite sampler over all standard resource samplers.
"""

from ..errors import SampleCycleError, SamplerError
from ..logging import get_logger
from ..sinks.base import SampleWriter
from ..utils.host import statfs as host_statfs
from ..utils.opener import Opener
from .base import Sampler
from .disk import DiskIOSampler, FSUsageSampler
from .network import NICSampler
from .system import CPUSampler, LoadSampler, MemorySampler

logger = get_logger("samplers")

# Fixed sampling order
STANDARD_FAMILIES = ("cpu", "load", "memory", "disk", "fs", "net")


class StandardSampler(Sampler):
    """
    Aggregate of the CPU, load, memory, disk I/O, filesystem and
    network samplers behind the same initialize()/sample() contract.

    initialize() stops at the first failure. sample() runs every
    resource even when one fails: each failure is logged, and once the
    pass is over a SampleCycleError lists the failed families. Errors
    that are not SamplerError (a sink giving up) propagate at once.
    """

    FAMILY = "standard"

    def __init__(self, samplers: list[Sampler]):
        self.samplers = samplers

    @classmethod
    def create(
        cls,
        opener: Opener,
        sink: SampleWriter,
        families: list[str] | None = None,
        **options,
    ) -> "StandardSampler":
        """
        Build the standard sampler set.

        Args:
            opener: Resource opener shared by all samplers
            sink: Sample writer shared by all samplers
            families: Families to include (all if None), kept in
                standard order
            options: hz for the CPU sampler, statfs for the filesystem
                sampler, require_all for the memory sampler
        """
        factories = {
            "cpu": lambda: CPUSampler(opener, sink, hz=options.get("hz")),
            "load": lambda: LoadSampler(opener, sink),
            "memory": lambda: MemorySampler(
                opener, sink, require_all=options.get("require_all", True)
            ),
            "disk": lambda: DiskIOSampler(opener, sink),
            "fs": lambda: FSUsageSampler(
                opener, sink, statfs=options.get("statfs", host_statfs)
            ),
            "net": lambda: NICSampler(opener, sink),
        }
        if families is not None:
            unknown = set(families) - set(factories)
            if unknown:
                raise ValueError(f"Unknown sampler families: {', '.join(sorted(unknown))}")
        selected = [f for f in STANDARD_FAMILIES if families is None or f in families]
        return cls([factories[family]() for family in selected])

    @property
    def families(self) -> list[str]:
        return [s.FAMILY for s in self.samplers]

    async def initialize(self) -> None:
        for sampler in self.samplers:
            await sampler.initialize()
            logger.debug(f"Initialized sampler: {sampler!r}")

    async def sample(self) -> None:
        failures: dict[str, SamplerError] = {}

        for sampler in self.samplers:
            try:
                await sampler.sample()
            except SamplerError as e:
                logger.error(f"Sampler {sampler.FAMILY} failed: {e}")
                failures[sampler.FAMILY] = e

        if failures:
            raise SampleCycleError(failures)

    def __repr__(self) -> str:
        return f"StandardSampler({', '.join(self.families)})"
