"""
Pydantic configuration schemas for building a Logger from plain data.

The caller owns parsing (YAML, TOML, JSON, a dict literal); these models
only validate the result and assemble the Logger. Sinks that need opening
(files, sockets) are passed in by name, already open.

Usage:
    log = configure({
        "outputs": [
            {"sink": "stderr", "min_level": "INFO",
             "formatter": {"flags": ["date", "time"], "colored": True}},
            {"sink": "audit", "min_level": 40,
             "formatter": {"prefix": "[audit]", "flags": ["microseconds", "shortfile"]}},
        ],
    }, sinks={"audit": open("audit.log", "ab")})
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, Field, field_validator

from multilog.core import Logger
from multilog.formatters import FormatFlag, StdFormatter
from multilog.levels import parse_level
from multilog.sinks import ConsoleSink, Sink


class StdFormatterConfig(BaseModel):
    prefix: str = ""
    flags: list[str] = Field(default_factory=list)   # FormatFlag member names
    colored: bool = False

    @field_validator("flags")
    @classmethod
    def validate_flags(cls, flags: list[str]) -> list[str]:
        normalized = []
        for name in flags:
            upper = name.upper()
            if upper not in FormatFlag.__members__:
                raise ValueError(
                    f"Unknown format flag '{name}'. "
                    f"Valid flags: {', '.join(m.lower() for m in FormatFlag.__members__)}"
                )
            normalized.append(upper)
        return normalized

    @property
    def format_flags(self) -> FormatFlag:
        combined = FormatFlag(0)
        for name in self.flags:
            combined |= FormatFlag[name]
        return combined

    def build(self) -> StdFormatter:
        return StdFormatter(prefix=self.prefix, flags=self.format_flags, colored=self.colored)


class OutputConfig(BaseModel):
    sink: str = "stderr"
    min_level: int | str = 0   # TRACE: everything
    formatter: StdFormatterConfig = Field(default_factory=StdFormatterConfig)

    @field_validator("min_level")
    @classmethod
    def resolve_level(cls, value: int | str) -> int:
        # Config is explicit: no silent DEBUG fallback for a typo.
        if isinstance(value, str):
            return int(parse_level(value))
        return value


class LoggerConfig(BaseModel):
    outputs: list[OutputConfig] = Field(default_factory=list)

    def build(self, sinks: Mapping[str, Sink] | None = None) -> Logger:
        """Create a Logger with one output per entry, in listed order."""
        sinks = sinks or {}
        logger = Logger()
        for output_cfg in self.outputs:
            logger.add_output(
                _resolve_sink(output_cfg.sink, sinks),
                output_cfg.min_level,
                output_cfg.formatter.build(),
            )
        return logger


def configure(config: dict[str, Any], sinks: Mapping[str, Sink] | None = None) -> Logger:
    """Validate a config dict and build the Logger it describes."""
    return LoggerConfig.model_validate(config).build(sinks)


# ── Helpers ───────────────────────────────────────────────────────────

def _resolve_sink(name: str, sinks: Mapping[str, Sink]) -> Sink:
    if name in sinks:
        return sinks[name]
    if name in ConsoleSink.TARGETS:
        return ConsoleSink(name)
    raise ValueError(
        f"Unknown sink '{name}'. Pass it in sinks= or use one of {ConsoleSink.TARGETS}"
    )
