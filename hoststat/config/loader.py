"""
Configuration loader with file reading and validation.
"""

from pathlib import Path

from .lexer import LexerError
from .parser import ConfigDocument, ParseError, parse_config, parse_config_file
from .schema import Config, SamplersConfig, SinkType


class ConfigError(Exception):
    """Exception raised for configuration errors."""


class ConfigLoader:
    """
    Loads and validates configuration from files or strings.

    Usage:
        loader = ConfigLoader()
        config = loader.load_file("/etc/hoststat/hoststat.conf")
        warnings = loader.validate(config)
    """

    # Known directives for each block type
    KNOWN_DIRECTIVES = {
        "agent": {"interval", "host_root", "metadata"},
        "samplers": set(SamplersConfig.FAMILIES),
        "sink": {"type", "path", "max_failures"},
        "logging": {
            "level",
            "file",
            "file_level",
            "file_max_size",
            "file_keep",
            "colors",
            "format",
        },
    }

    def __init__(self):
        self.last_document: ConfigDocument | None = None

    def load_file(self, path: str | Path) -> Config:
        """
        Load configuration from a file.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")
        return self._build_from(lambda: parse_config_file(path))

    def load_string(self, source: str, filename: str = "<string>") -> Config:
        """
        Load configuration from a string.

        Raises:
            ConfigError: If the configuration cannot be parsed
        """
        return self._build_from(lambda: parse_config(source, filename))

    def _build_from(self, parse) -> Config:
        try:
            document = parse()
        except (LexerError, ParseError) as e:
            raise ConfigError(f"Failed to parse configuration: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read configuration: {e}") from e
        return self._build(document)

    def _build(self, document: ConfigDocument) -> Config:
        self.last_document = document
        try:
            return Config.from_document(document)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def validate(self, config: Config) -> list[str]:
        """
        Check a loaded configuration for likely mistakes.

        Returns:
            List of warning messages (empty if none)
        """
        warnings: list[str] = []

        if self.last_document is not None:
            for block in self.last_document.blocks:
                known = self.KNOWN_DIRECTIVES.get(block.type)
                if known is None:
                    warnings.append(f"Unknown block '{block.type}' (line {block.line})")
                    continue
                for directive in block.directives:
                    if directive.name not in known:
                        warnings.append(
                            f"Unknown directive '{directive.name}' in '{block.type}' "
                            f"(line {directive.line})"
                        )
            for directive in self.last_document.directives:
                warnings.append(f"Unexpected top-level directive '{directive.name}' (line {directive.line})")

        if not config.samplers.families():
            warnings.append("No samplers enabled")
        if config.sink.type == SinkType.FILE and not config.sink.path:
            warnings.append("File sink selected without a path")

        return warnings
