"""
Agent run loop.

Handles:
- Building the opener, sink and samplers from configuration
- One-time metadata emission
- Periodic sample cycles
- Graceful shutdown on SIGINT/SIGTERM (between cycles)
"""

import asyncio
import functools
import signal

from .config.loader import ConfigLoader
from .config.schema import Config, SinkType
from .errors import SampleCycleError
from .logging import LogConfig, get_logger, setup_logging
from .metadata import collect_metadata
from .samplers.base import Sampler
from .samplers.standard import StandardSampler
from .sinks.base import SampleWriter, SinkError
from .sinks.stream import FileSampleWriter, StreamSampleWriter
from .utils.host import statfs
from .utils.opener import FileOpener, Opener

logger = get_logger("app")


def create_sink(config: Config) -> SampleWriter:
    """Create the sample writer selected by the configuration."""
    sink = config.sink
    if sink.type == SinkType.FILE:
        if not sink.path:
            raise SinkError("File sink requires a path")
        return FileSampleWriter(sink.path, max_failures=sink.max_failures)
    return StreamSampleWriter(max_failures=sink.max_failures)


class Application:
    """
    Main application class.

    Drives a single sampler on a fixed interval. Cycles run one after
    another; a shutdown signal is honoured once the current cycle ends.
    """

    def __init__(
        self,
        config: Config,
        opener: Opener | None = None,
        sink: SampleWriter | None = None,
        sampler: Sampler | None = None,
    ):
        self.config = config
        self.opener = opener or FileOpener(config.agent.host_root)
        self.sink = sink or create_sink(config)
        self.sampler = sampler or StandardSampler.create(
            self.opener,
            self.sink,
            families=config.samplers.families(),
            statfs=functools.partial(statfs, root=config.agent.host_root),
        )

        self.cycles = 0
        self.failed_cycles = 0
        self._shutdown_event = asyncio.Event()

    def _setup_signal_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.add_signal_handler(sig, self._signal_handler, sig)

    def _signal_handler(self, sig: signal.Signals) -> None:
        logger.info(f"Caught {sig.name}: shutting down")
        self._shutdown_event.set()

    def request_stop(self) -> None:
        """Stop the loop after the current cycle."""
        self._shutdown_event.set()

    def emit_metadata(self) -> None:
        """Write host metadata to the sink once."""
        try:
            items = collect_metadata()
        except OSError as e:
            logger.warning(f"Could not collect host metadata: {e}")
            return
        self.sink.write_metadata(items)
        logger.debug(f"Emitted {len(items)} metadata record(s)")

    async def run_cycle(self) -> bool:
        """
        Run one sample cycle.

        Returns:
            True if every sampler succeeded

        Raises:
            SinkError: If the sink gave up
        """
        self.cycles += 1
        try:
            await self.sampler.sample()
        except SampleCycleError as e:
            self.failed_cycles += 1
            logger.warning(f"Cycle {self.cycles} incomplete: {len(e.failures)} sampler(s) failed")
            return False
        return True

    async def _wait(self, timeout: float) -> bool:
        """Sleep until the next tick. Returns True if shutdown was requested."""
        try:
            await asyncio.wait_for(self._shutdown_event.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            return False
        return True

    async def start(self, install_signal_handlers: bool = True) -> None:
        """
        Initialize the sampler and run cycles until shutdown.

        Raises:
            SamplerError: If sampler initialization fails
            SinkError: If the sink gave up
        """
        logger.info(f"Starting hoststat: {self.sampler!r} every {self.config.agent.interval}s")

        try:
            await self.sampler.initialize()

            if install_signal_handlers:
                self._setup_signal_handlers()

            if self.config.agent.metadata:
                self.emit_metadata()

            while not self._shutdown_event.is_set():
                await self.run_cycle()
                if await self._wait(self.config.agent.interval):
                    break
        finally:
            self.sink.close()
            logger.info(f"Stopped after {self.cycles} cycle(s), {self.failed_cycles} incomplete")


async def run_app(config_path: str | None, cli_log_config: LogConfig | None = None) -> None:
    """
    Load configuration and run the agent.

    Args:
        config_path: Path to configuration file (defaults if None)
        cli_log_config: Logging config from CLI args (overrides file config)
    """
    loader = ConfigLoader()
    config = loader.load_file(config_path) if config_path else Config()

    if cli_log_config is None:
        setup_logging(
            LogConfig(
                console_level=config.logging.level,
                console_colors=config.logging.colors,
                file_enabled=config.logging.file is not None,
                file_path=config.logging.file or LogConfig.file_path,
                file_level=config.logging.file_level,
                file_max_bytes=config.logging.file_max_size * 1024 * 1024,
                file_backup_count=config.logging.file_keep,
                format=config.logging.format,
            )
        )
    else:
        if not cli_log_config.file_enabled and config.logging.file:
            cli_log_config.file_enabled = True
            cli_log_config.file_path = config.logging.file
            cli_log_config.file_level = config.logging.file_level
            cli_log_config.file_max_bytes = config.logging.file_max_size * 1024 * 1024
            cli_log_config.file_backup_count = config.logging.file_keep
        setup_logging(cli_log_config)

    if config_path:
        logger.info(f"Loaded configuration from {config_path}")
        for warning in loader.validate(config):
            logger.warning(f"Config warning: {warning}")

    app = Application(config)
    await app.start()
