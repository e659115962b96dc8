"""
Entry point for hoststat.

Usage:
    python -m hoststat [/path/to/hoststat.conf]
    python -m hoststat --help
"""

import argparse
import asyncio
import sys
from pathlib import Path

from . import __version__
from .app import run_app
from .config.loader import ConfigError, ConfigLoader
from .errors import SamplerError
from .logging import LogConfig, get_logger, setup_logging
from .sinks.base import SinkError

logger = get_logger("main")


def validate_config(config_path: str) -> int:
    """Validate a configuration file and print a summary."""
    loader = ConfigLoader()
    try:
        config = loader.load_file(config_path)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    warnings = loader.validate(config)
    if warnings:
        print(f"Configuration warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")

    print("\nConfiguration summary:")
    print(f"  Interval: {config.agent.interval}s")
    print(f"  Host root: {config.agent.host_root}")
    print(f"  Samplers: {', '.join(config.samplers.families()) or 'none'}")
    print(f"  Sink: {config.sink.type.value}" + (f" ({config.sink.path})" if config.sink.path else ""))
    print(f"  Logging level: {config.logging.level}")

    print("\nConfiguration is valid!")
    return 0


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="hoststat",
        description="Host metrics sampling agent for Linux",
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to configuration file (built-in defaults if omitted)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable INFO logging")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable DEBUG logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    parser.add_argument("--log-file", metavar="PATH", help="Write logs to file")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate configuration and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args()

    if args.config and not Path(args.config).exists():
        print(f"Configuration file not found: {args.config}", file=sys.stderr)
        return 1

    if args.validate:
        if not args.config:
            print("--validate requires a configuration file", file=sys.stderr)
            return 1
        return validate_config(args.config)

    # Without any logging flag the config file decides
    log_config = None
    if args.debug or args.verbose or args.quiet or args.no_color or args.log_file:
        log_config = LogConfig()
        if args.debug:
            log_config.console_level = "debug"
        elif args.verbose:
            log_config.console_level = "info"
        elif args.quiet:
            log_config.console_level = "error"
        else:
            log_config.console_level = "warning"
        log_config.console_colors = not args.no_color
        if args.log_file:
            log_config.file_enabled = True
            log_config.file_path = args.log_file
    setup_logging(log_config)

    try:
        asyncio.run(run_app(args.config, cli_log_config=log_config))
        return 0
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except SamplerError as e:
        logger.error(f"Could not initialize samplers: {e}")
        return 1
    except SinkError as e:
        logger.error(f"Sink failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0


if __name__ == "__main__":
    sys.exit(main())
