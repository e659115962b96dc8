"""
Tests for configuration lexing, parsing and loading.
"""

from pathlib import Path

import pytest

from hoststat.config.lexer import LexerError, TokenType, tokenize
from hoststat.config.loader import ConfigError, ConfigLoader
from hoststat.config.parser import ParseError, parse_config
from hoststat.config.schema import Config, SinkType
from hoststat.const import DEFAULT_SAMPLE_INTERVAL, DEFAULT_SINK_MAX_FAILURES

EXAMPLE_CONFIG = Path(__file__).parent.parent / "config.example.conf"


class TestLexer:
    """Tests for the config lexer."""

    def test_token_types(self) -> None:
        tokens = tokenize('agent { interval 500ms; metadata off; host_root "/host"; }')

        assert [t.type for t in tokens] == [
            TokenType.IDENTIFIER,
            TokenType.LBRACE,
            TokenType.IDENTIFIER,
            TokenType.DURATION,
            TokenType.SEMICOLON,
            TokenType.IDENTIFIER,
            TokenType.BOOLEAN,
            TokenType.SEMICOLON,
            TokenType.IDENTIFIER,
            TokenType.STRING,
            TokenType.SEMICOLON,
            TokenType.RBRACE,
            TokenType.EOF,
        ]
        assert tokens[3].value == pytest.approx(0.5)
        assert tokens[6].value is False
        assert tokens[9].value == "/host"

    @pytest.mark.parametrize(
        "source, expected",
        [("10", 10), ("2.5", 2.5), ("10s", 10), ("5m", 300), ("1h", 3600), ("1d", 86400)],
    )
    def test_numbers_and_durations(self, source: str, expected: float) -> None:
        assert tokenize(source)[0].value == expected

    def test_comments(self) -> None:
        tokens = tokenize("# line\n/* block\ncomment */ cpu on;")

        assert [t.value for t in tokens[:-1]] == ["cpu", True, ";"]
        assert tokens[0].line == 3

    def test_string_escapes(self) -> None:
        assert tokenize(r'"a\"b\tc"')[0].value == 'a"b\tc'

    @pytest.mark.parametrize(
        "source",
        ['"unterminated', "/* open", "10parsecs", "@", "1.2.3"],
    )
    def test_errors(self, source: str) -> None:
        with pytest.raises(LexerError):
            tokenize(source)


class TestParser:
    """Tests for the config parser."""

    def test_blocks_and_directives(self) -> None:
        doc = parse_config('agent { interval 10s; }\nsink file { path "/tmp/x"; }\n')

        agent = doc.get_block("agent")
        assert agent is not None
        assert agent.get_value("interval") == 10
        sink = doc.get_block("sink")
        assert sink.name == "file"
        assert sink.get_value("path") == "/tmp/x"
        assert sink.line == 2

    def test_later_directive_wins(self) -> None:
        doc = parse_config("agent { interval 10s; interval 20s; }")

        assert doc.get_block("agent").get_value("interval") == 20

    def test_missing_value_uses_default(self) -> None:
        doc = parse_config("agent { interval; }")

        assert doc.get_block("agent").get_value("interval", 7) == 7

    @pytest.mark.parametrize(
        "source",
        [
            "agent { interval 10s; ",
            "agent { interval 10s }",
            "agent a b { }",
            "{ }",
            "agent",
        ],
    )
    def test_errors(self, source: str) -> None:
        with pytest.raises(ParseError):
            parse_config(source)


class TestConfigLoader:
    """Tests for ConfigLoader and the schema."""

    def test_defaults(self) -> None:
        config = ConfigLoader().load_string("")

        assert config == Config()
        assert config.agent.interval == DEFAULT_SAMPLE_INTERVAL
        assert config.agent.host_root == "/"
        assert config.agent.metadata is True
        assert config.samplers.families() == ["cpu", "load", "memory", "disk", "fs", "net"]
        assert config.sink.type == SinkType.CONSOLE
        assert config.sink.max_failures == DEFAULT_SINK_MAX_FAILURES

    def test_example_config(self) -> None:
        loader = ConfigLoader()
        config = loader.load_file(EXAMPLE_CONFIG)

        assert config.agent.interval == 10
        assert config.sink.type == SinkType.CONSOLE
        assert config.logging.level == "info"
        assert loader.validate(config) == []

    def test_full_config(self) -> None:
        config = ConfigLoader().load_string(
            """
            agent {
                interval 1m;
                host_root "/host";
                metadata off;
            }
            samplers {
                disk off;
                filesystem off;
            }
            sink {
                type file;
                path "/var/lib/hoststat/samples.log";
                max_failures 0;
            }
            logging {
                level debug;
                file "/tmp/hoststat.log";
                file_keep 2;
                colors off;
            }
            """
        )

        assert config.agent.interval == 60
        assert config.agent.host_root == "/host"
        assert config.agent.metadata is False
        assert config.samplers.families() == ["cpu", "load", "memory", "net"]
        assert config.sink.type == SinkType.FILE
        assert config.sink.path == "/var/lib/hoststat/samples.log"
        assert config.sink.max_failures == 0
        assert config.logging.level == "debug"
        assert config.logging.file == "/tmp/hoststat.log"
        assert config.logging.file_keep == 2
        assert config.logging.colors is False

    @pytest.mark.parametrize(
        "source",
        [
            "agent { interval 0; }",
            "agent { interval -5; }",
            "sink { type kafka; }",
            "sink { max_failures lots; }",
            "agent { interval 10s",
            "agent { interval 10x; }",
        ],
    )
    def test_invalid_config(self, source: str) -> None:
        with pytest.raises(ConfigError):
            ConfigLoader().load_string(source)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader().load_file(tmp_path / "missing.conf")

    def test_validate_warnings(self) -> None:
        loader = ConfigLoader()
        config = loader.load_string(
            """
            interval 5s;
            agent { intervall 5s; }
            samplers { cpu off; load off; memory off; disk off; filesystem off; network off; }
            sink { type file; }
            mqtt { host localhost; }
            """
        )

        warnings = loader.validate(config)

        assert any("intervall" in w for w in warnings)
        assert any("Unknown block 'mqtt'" in w for w in warnings)
        assert any("top-level directive 'interval'" in w for w in warnings)
        assert "No samplers enabled" in warnings
        assert "File sink selected without a path" in warnings
