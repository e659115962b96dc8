"""
Configuration schema: dataclasses built from a parsed document.
"""

from dataclasses import dataclass, field
from enum import Enum

from ..const import DEFAULT_HOST_ROOT, DEFAULT_SAMPLE_INTERVAL, DEFAULT_SINK_MAX_FAILURES
from .parser import Block, ConfigDocument


class SinkType(Enum):
    """Where sample records are written."""

    CONSOLE = "console"  # stdout
    FILE = "file"  # append to a file


@dataclass
class AgentConfig:
    """Sampling loop settings."""

    interval: float = DEFAULT_SAMPLE_INTERVAL
    host_root: str = DEFAULT_HOST_ROOT
    metadata: bool = True

    @classmethod
    def from_block(cls, block: Block | None) -> "AgentConfig":
        if block is None:
            return cls()
        interval = float(block.get_value("interval", DEFAULT_SAMPLE_INTERVAL))
        if interval <= 0:
            raise ValueError(f"Sampling interval must be positive, got {interval}")
        return cls(
            interval=interval,
            host_root=str(block.get_value("host_root", DEFAULT_HOST_ROOT)),
            metadata=bool(block.get_value("metadata", True)),
        )


@dataclass
class SamplersConfig:
    """Which resource samplers run."""

    cpu: bool = True
    load: bool = True
    memory: bool = True
    disk: bool = True
    filesystem: bool = True
    network: bool = True

    # Config directive -> sampler family
    FAMILIES = {
        "cpu": "cpu",
        "load": "load",
        "memory": "memory",
        "disk": "disk",
        "filesystem": "fs",
        "network": "net",
    }

    @classmethod
    def from_block(cls, block: Block | None) -> "SamplersConfig":
        if block is None:
            return cls()
        return cls(**{key: bool(block.get_value(key, True)) for key in cls.FAMILIES})

    def families(self) -> list[str]:
        """Enabled sampler families."""
        return [family for key, family in self.FAMILIES.items() if getattr(self, key)]


@dataclass
class SinkConfig:
    """Sample writer settings."""

    type: SinkType = SinkType.CONSOLE
    path: str | None = None
    max_failures: int = DEFAULT_SINK_MAX_FAILURES

    @classmethod
    def from_block(cls, block: Block | None) -> "SinkConfig":
        if block is None:
            return cls()
        raw_type = str(block.get_value("type", SinkType.CONSOLE.value)).lower()
        try:
            sink_type = SinkType(raw_type)
        except ValueError:
            choices = ", ".join(t.value for t in SinkType)
            raise ValueError(f"Unknown sink type '{raw_type}' (expected one of: {choices})") from None
        path = block.get_value("path")
        return cls(
            type=sink_type,
            path=str(path) if path is not None else None,
            max_failures=int(block.get_value("max_failures", DEFAULT_SINK_MAX_FAILURES)),
        )


@dataclass
class LoggingConfig:
    """Logging settings from the config file."""

    level: str = "info"
    file: str | None = None
    file_level: str = "debug"
    file_max_size: int = 10  # MB
    file_keep: int = 5
    colors: bool = True
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    @classmethod
    def from_block(cls, block: Block | None) -> "LoggingConfig":
        if block is None:
            return cls()
        defaults = cls()
        return cls(
            level=str(block.get_value("level", defaults.level)),
            file=block.get_value("file"),
            file_level=str(block.get_value("file_level", defaults.file_level)),
            file_max_size=int(block.get_value("file_max_size", defaults.file_max_size)),
            file_keep=int(block.get_value("file_keep", defaults.file_keep)),
            colors=bool(block.get_value("colors", defaults.colors)),
            format=str(block.get_value("format", defaults.format)),
        )


@dataclass
class Config:
    """Complete agent configuration."""

    agent: AgentConfig = field(default_factory=AgentConfig)
    samplers: SamplersConfig = field(default_factory=SamplersConfig)
    sink: SinkConfig = field(default_factory=SinkConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_document(cls, doc: ConfigDocument) -> "Config":
        return cls(
            agent=AgentConfig.from_block(doc.get_block("agent")),
            samplers=SamplersConfig.from_block(doc.get_block("samplers")),
            sink=SinkConfig.from_block(doc.get_block("sink")),
            logging=LoggingConfig.from_block(doc.get_block("logging")),
        )
