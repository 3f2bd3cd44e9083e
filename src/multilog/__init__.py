"""
multilog: leveled logging with independently filtered and formatted outputs.

One Logger, many outputs; each output pairs a byte sink with its own minimum
level and formatter.
"""

from multilog.levels import (
    Level,
    LEVEL_NAMES,
    COLORED_LEVEL_NAMES,
    InvalidLevelError,
    level_name,
    parse_level,
    string_to_level,
)
from multilog.formatters import Formatter, FormatFlag, StdFormatter
from multilog.outputs import Output
from multilog.sinks import Sink, TextStreamSink, ConsoleSink, MemorySink
from multilog.core import Logger, new
from multilog.config import LoggerConfig, OutputConfig, StdFormatterConfig, configure
from multilog.bridge import LoggerHandler

__version__ = "0.1.0"

__all__ = [
    "Level",
    "LEVEL_NAMES",
    "COLORED_LEVEL_NAMES",
    "InvalidLevelError",
    "level_name",
    "parse_level",
    "string_to_level",
    "Formatter",
    "FormatFlag",
    "StdFormatter",
    "Output",
    "Sink",
    "TextStreamSink",
    "ConsoleSink",
    "MemorySink",
    "Logger",
    "new",
    "LoggerConfig",
    "OutputConfig",
    "StdFormatterConfig",
    "configure",
    "LoggerHandler",
]
