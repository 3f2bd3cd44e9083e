"""
Byte sinks.

A sink is anything with write(bytes): binary files opened by the caller,
io.BytesIO, sys.stdout.buffer, socket.makefile("wb"). The helpers here cover
the cases that need adapting (text streams) or inspecting (memory).

The logger never opens, flushes or closes a caller's sink.
"""

import sys
import threading
from abc import ABC, abstractmethod
from collections import deque
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Anything accepting bytes. The return value is ignored."""

    def write(self, data: bytes) -> object: ...


class _DecodingSink(ABC):
    """Text-stream sink base; subclasses decide which stream to write to."""

    def __init__(self, encoding: str = "utf-8", errors: str = "replace"):
        self.encoding = encoding
        self.errors = errors

    @property
    @abstractmethod
    def stream(self) -> TextIO: ...

    def write(self, data: bytes) -> int:
        stream = self.stream
        stream.write(data.decode(self.encoding, self.errors))
        stream.flush()
        return len(data)


class TextStreamSink(_DecodingSink):
    """Decodes bytes onto a text stream and flushes after every write."""

    def __init__(self, stream: TextIO, encoding: str = "utf-8", errors: str = "replace"):
        super().__init__(encoding, errors)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream


class ConsoleSink(_DecodingSink):
    """
    Writes to sys.stdout or sys.stderr, looked up at write time so that
    redirection (and pytest capture) installed later is honoured.
    """

    TARGETS = ("stdout", "stderr")

    def __init__(self, target: str = "stderr", encoding: str = "utf-8", errors: str = "replace"):
        if target not in self.TARGETS:
            raise ValueError(f"Unknown console target '{target}'. Expected one of {self.TARGETS}")
        super().__init__(encoding, errors)
        self.target = target

    @property
    def stream(self) -> TextIO:
        return getattr(sys, self.target)


class MemorySink:
    """
    Keeps every write in memory, optionally as a ring buffer of the last
    maxlen writes. Safe to read while other threads are logging.
    """

    def __init__(self, maxlen: int | None = None):
        self._writes: deque[bytes] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def write(self, data: bytes) -> int:
        with self._lock:
            self._writes.append(bytes(data))
        return len(data)

    @property
    def writes(self) -> list[bytes]:
        with self._lock:
            return list(self._writes)

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._writes)

    def getvalue(self) -> bytes:
        return b"".join(self.writes)

    def lines(self, encoding: str = "utf-8") -> list[str]:
        return self.getvalue().decode(encoding, "replace").splitlines()

    def clear(self) -> None:
        with self._lock:
            self._writes.clear()
