"""
Tests for the pydantic configuration schemas.

Covers:
- StdFormatterConfig flag parsing and formatter construction
- OutputConfig level resolution (names and ints)
- LoggerConfig sink resolution and output ordering
- Error cases (unknown flag, level, sink)
"""

import pytest
from pydantic import ValidationError

from multilog.config import (
    LoggerConfig,
    OutputConfig,
    StdFormatterConfig,
    configure,
)
from multilog.formatters import FormatFlag, StdFormatter
from multilog.levels import Level
from multilog.sinks import ConsoleSink, MemorySink


# ═══════════════════════════════════════════════════════════════════
#  StdFormatterConfig
# ═══════════════════════════════════════════════════════════════════

class TestStdFormatterConfig:
    def test_defaults(self):
        cfg = StdFormatterConfig()
        fm = cfg.build()
        assert isinstance(fm, StdFormatter)
        assert fm.prefix == ""
        assert fm.flags == FormatFlag(0)
        assert fm.colored is False

    def test_flags_case_insensitive(self):
        cfg = StdFormatterConfig(flags=["date", "Microseconds", "SHORTFILE"])
        assert cfg.flags == ["DATE", "MICROSECONDS", "SHORTFILE"]
        assert cfg.format_flags == FormatFlag.DATE | FormatFlag.MICROSECONDS | FormatFlag.SHORTFILE

    def test_std_alias(self):
        cfg = StdFormatterConfig(flags=["std"])
        assert cfg.build().flags == FormatFlag.DATE | FormatFlag.TIME

    def test_unknown_flag(self):
        with pytest.raises(ValidationError, match="Unknown format flag"):
            StdFormatterConfig(flags=["date", "weekday"])

    def test_prefix_and_color(self):
        fm = StdFormatterConfig(prefix="[db]", colored=True).build()
        assert fm.prefix == "[db]"
        assert fm.colored is True


# ═══════════════════════════════════════════════════════════════════
#  OutputConfig
# ═══════════════════════════════════════════════════════════════════

class TestOutputConfig:
    def test_defaults(self):
        cfg = OutputConfig()
        assert cfg.sink == "stderr"
        assert cfg.min_level == Level.TRACE

    def test_level_by_name(self):
        assert OutputConfig(min_level="WARN").min_level == 30
        assert OutputConfig(min_level="FATAL").min_level == 50

    def test_level_by_int(self):
        assert OutputConfig(min_level=25).min_level == 25

    def test_unknown_level_name_rejected(self):
        with pytest.raises(ValidationError, match="Wrong log level"):
            OutputConfig(min_level="WARNING")

    def test_empty_level_name_rejected(self):
        with pytest.raises(ValidationError, match="level is empty"):
            OutputConfig(min_level="")


# ═══════════════════════════════════════════════════════════════════
#  LoggerConfig
# ═══════════════════════════════════════════════════════════════════

class TestLoggerConfig:
    def test_empty(self):
        log = LoggerConfig().build()
        assert log.outputs == ()

    def test_build_preserves_order(self):
        a, b = MemorySink(), MemorySink()
        log = configure(
            {
                "outputs": [
                    {"sink": "a", "min_level": "ERROR"},
                    {"sink": "b", "min_level": 10, "formatter": {"prefix": "[b]"}},
                ],
            },
            sinks={"a": a, "b": b},
        )
        assert [o.sink for o in log.outputs] == [a, b]
        assert [o.min_level for o in log.outputs] == [40, 10]

        log.info("only b")
        log.error("both")
        assert a.writes == [b"ERROR  both\n"]
        assert b.writes == [b"INFO [b] only b\n", b"ERROR [b] both\n"]

    def test_console_sinks_by_name(self, capsys):
        log = configure({
            "outputs": [
                {"sink": "stdout", "min_level": "INFO"},
                {"sink": "stderr", "min_level": "ERROR"},
            ],
        })
        assert all(isinstance(o.sink, ConsoleSink) for o in log.outputs)

        log.info("info line")
        log.error("error line")
        captured = capsys.readouterr()
        assert captured.out == "INFO  info line\nERROR  error line\n"
        assert captured.err == "ERROR  error line\n"

    def test_supplied_sink_shadows_console_name(self):
        mine = MemorySink()
        log = configure({"outputs": [{"sink": "stdout"}]}, sinks={"stdout": mine})
        assert log.outputs[0].sink is mine

    def test_unknown_sink(self):
        with pytest.raises(ValueError, match="Unknown sink 'audit'"):
            configure({"outputs": [{"sink": "audit"}]})

    def test_invalid_structure(self):
        with pytest.raises(ValidationError):
            configure({"outputs": [{"min_level": "NOPE"}]})
