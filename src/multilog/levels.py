"""
Severity levels and their display names.

Canonical values are spaced by ten so intermediate levels can slot in later
without renumbering. Any int is a valid level: filtering is integer
comparison, and unnamed values display as their decimal string.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class Level(IntEnum):
    """Canonical severity levels, ordered by value."""
    TRACE = 0
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    FATAL = 50


# ── ANSI escapes ──────────────────────────────────────────────────────

OFF = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"


def ansi_escape(*parts: str) -> str:
    """Concatenate escape codes and text, e.g. ansi_escape(RED, "x", OFF)."""
    return "".join(parts)


# ── Name tables ───────────────────────────────────────────────────────

LEVEL_NAMES: Mapping[int, str] = MappingProxyType({
    Level.TRACE: "TRACE",
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARNING: "WARN",
    Level.ERROR: "ERROR",
    Level.FATAL: "FATAL",
})

COLORED_LEVEL_NAMES: Mapping[int, str] = MappingProxyType({
    Level.TRACE: LEVEL_NAMES[Level.TRACE],
    Level.DEBUG: LEVEL_NAMES[Level.DEBUG],
    Level.INFO: ansi_escape(MAGENTA, LEVEL_NAMES[Level.INFO], OFF),
    Level.WARNING: ansi_escape(YELLOW, LEVEL_NAMES[Level.WARNING], OFF),
    Level.ERROR: ansi_escape(RED, LEVEL_NAMES[Level.ERROR], OFF),
    Level.FATAL: ansi_escape(RED, BOLD, LEVEL_NAMES[Level.FATAL], OFF),
})

_LEVELS_BY_NAME: Mapping[str, Level] = MappingProxyType(
    {name: Level(level) for level, name in LEVEL_NAMES.items()}
)


def level_name(level: int, colored: bool = False) -> str:
    """Get display name for a level value. Falls back to numeric string."""
    table = COLORED_LEVEL_NAMES if colored else LEVEL_NAMES
    name = table.get(level)
    if name is None:
        return str(int(level))
    return name


# ── Parsing ───────────────────────────────────────────────────────────

class InvalidLevelError(ValueError):
    """
    Raised or returned when a level name cannot be resolved.

    Always carries a usable fallback (DEBUG) so callers may log anyway.
    """

    fallback = Level.DEBUG

    def __init__(self, name: str):
        self.name = name
        if not name:
            message = "level is empty"
        else:
            message = (
                f"Wrong log level {name!r}. "
                f"Valid levels: {', '.join(LEVEL_NAMES.values())}"
            )
        super().__init__(message)


def string_to_level(name: str) -> tuple[int, InvalidLevelError | None]:
    """
    Resolve a level from its exact display name ("TRACE" ... "FATAL").

    Returns (level, None) on success and (Level.DEBUG, error) otherwise,
    so the first element is always usable.
    """
    level = _LEVELS_BY_NAME.get(name) if name else None
    if level is None:
        return InvalidLevelError.fallback, InvalidLevelError(name)
    return level, None


def parse_level(name: str) -> Level:
    """Raising form of string_to_level(). The error's .fallback is DEBUG."""
    level, err = string_to_level(name)
    if err is not None:
        raise err
    return Level(level)
