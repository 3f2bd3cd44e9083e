"""
Log formatters.

A formatter turns (level, message) into the bytes written to a sink. Each
output has its own formatter; one formatter may be shared by many outputs,
so implementations must not keep per-call state.

StdFormatter output, segments joined by single spaces:
    [date] [time] LEVEL prefix [file:line] message
Example with FormatFlag.STD | FormatFlag.SHORTFILE and prefix "[api]":
    2026-3-7 09:04:05 WARN [api] handlers.py:42 cache miss
"""

import inspect
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntFlag
from types import FrameType
from typing import Callable

from multilog.levels import level_name


class Formatter(ABC):
    """Base formatter. Transforms (level, message) → bytes."""

    @abstractmethod
    def format(self, level: int, message: str) -> bytes: ...


class FormatFlag(IntFlag):
    """Which optional segments StdFormatter renders."""
    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    LONGFILE = 8
    SHORTFILE = 16
    STD = DATE | TIME


UNKNOWN_CALLER = "???"

# Frames from these directories are never reported as the call site.
_SKIP_DIRS = tuple(
    os.path.normcase(os.path.dirname(os.path.abspath(path))) + os.sep
    for path in (__file__, logging.__file__)
)


@dataclass(frozen=True)
class StdFormatter(Formatter):
    """
    Plain-text formatter with optional timestamp, caller and ANSI colors.

    prefix is always emitted as its own segment, so an empty prefix shows
    up as a doubled space between level and message.
    """
    prefix: str = ""
    flags: FormatFlag = FormatFlag(0)
    colored: bool = False
    clock: Callable[[], datetime] = field(default=datetime.now, repr=False, compare=False)

    def format(self, level: int, message: str) -> bytes:
        out: list[str] = []
        flags = self.flags

        if flags & (FormatFlag.DATE | FormatFlag.TIME | FormatFlag.MICROSECONDS):
            now = self.clock()
            if flags & FormatFlag.DATE:
                # Month and day are deliberately left unpadded.
                out.append(f"{now.year}-{now.month}-{now.day}")
            if flags & FormatFlag.MICROSECONDS:
                out.append(
                    f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}.{now.microsecond:06d}"
                )
            elif flags & FormatFlag.TIME:
                out.append(f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}")

        out.append(level_name(level, colored=self.colored))
        out.append(self.prefix)

        # Walking the stack is expensive; only do it when asked.
        if flags & (FormatFlag.SHORTFILE | FormatFlag.LONGFILE):
            out.append(_caller_location(short=bool(flags & FormatFlag.SHORTFILE)))

        out.append(message)
        return " ".join(out).encode("utf-8")


def _caller_location(short: bool) -> str:
    """file:line of the first frame outside multilog and stdlib logging."""
    frame = _find_caller()
    if frame is None:
        return UNKNOWN_CALLER
    filename = frame.f_code.co_filename
    if short:
        filename = filename.rpartition(os.sep)[2]
        if os.altsep:
            filename = filename.rpartition(os.altsep)[2]
    return f"{filename}:{frame.f_lineno}"


def _find_caller() -> FrameType | None:
    frame = _current_frame()
    while frame is not None:
        filename = os.path.normcase(os.path.abspath(frame.f_code.co_filename))
        if not filename.startswith(_SKIP_DIRS) and not _is_formatter_frame(frame):
            return frame
        frame = frame.f_back
    return None


def _is_formatter_frame(frame: FrameType) -> bool:
    # User formatters wrapping StdFormatter are not the call site either.
    return (
        frame.f_code.co_name == "format"
        and isinstance(frame.f_locals.get("self"), Formatter)
    )


def _current_frame() -> FrameType | None:
    # Isolated so tests can simulate an interpreter without frame support.
    return inspect.currentframe()
