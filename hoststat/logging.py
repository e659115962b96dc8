"""
Logging configuration for hoststat.

Console output (coloured on a TTY), optional rotating log file and
per-module levels, all under the "hoststat" logger hierarchy.
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path

RESET = "\033[0m"

# Log level colors
LEVEL_COLORS = {
    logging.DEBUG: "\033[2m\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1m\033[91m",
}

# Component colors for logger names
COMPONENT_COLORS = {
    "config": "\033[35m",
    "samplers": "\033[36m",
    "sinks": "\033[34m",
    "app": "\033[32m",
}

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

ROOT_LOGGER = "hoststat"


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level and component name."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        levelname, name = record.levelname, record.name
        record.levelname = f"{LEVEL_COLORS.get(record.levelno, '')}{levelname:8}{RESET}"
        for component, color in COMPONENT_COLORS.items():
            if component in name:
                record.name = f"{color}{name}{RESET}"
                break
        try:
            return super().format(record)
        finally:
            record.levelname, record.name = levelname, name


@dataclass
class LogConfig:
    """Logging configuration."""

    console_level: str = "INFO"
    console_colors: bool = True

    file_enabled: bool = False
    file_path: str = "/var/log/hoststat/hoststat.log"
    file_level: str = "DEBUG"
    file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    file_backup_count: int = 5

    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    # Per-module levels (module_name -> level)
    module_levels: dict[str, str] | None = None


def get_log_level(level_str: str) -> int:
    """Convert string log level to logging constant."""
    return LEVELS.get(level_str.lower(), logging.INFO)


def setup_logging(config: LogConfig | None = None) -> None:
    """
    Configure the hoststat logger hierarchy.

    Args:
        config: Logging configuration (uses defaults if None)
    """
    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)  # Filter at handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Sample records go to stdout, so logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(get_log_level(config.console_level))
    use_colors = config.console_colors and sys.stderr.isatty()
    console_handler.setFormatter(
        ColoredFormatter(fmt=config.format, datefmt=config.date_format, use_colors=use_colors)
    )
    root_logger.addHandler(console_handler)

    if config.file_enabled:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
        )
        file_handler.setLevel(get_log_level(config.file_level))
        file_handler.setFormatter(logging.Formatter(fmt=config.format, datefmt=config.date_format))
        root_logger.addHandler(file_handler)

    for module_name, level_str in (config.module_levels or {}).items():
        get_logger(module_name).setLevel(get_log_level(level_str))

    logging.getLogger("psutil").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (prefixed with "hoststat." if needed)
    """
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
