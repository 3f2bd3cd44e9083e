"""
Logger: one severity filter, many outputs.

Every call runs on the caller's thread. A single lock guards the output
list and the whole dispatch of one message, so concurrent messages never
interleave on a sink. The flip side: a slow sink stalls every caller of
this Logger.
"""

import threading
from typing import Any, Mapping

from multilog.formatters import Formatter
from multilog.levels import Level
from multilog.outputs import Output
from multilog.sinks import Sink


class Logger:
    """
    Usage:
        log = Logger()
        log.add_output(sys.stderr.buffer, Level.INFO, StdFormatter(flags=FormatFlag.STD))
        log.info("listening on %s:%d", host, port)
    """

    # Re-export levels for convenience: Logger.DEBUG, etc.
    TRACE = Level.TRACE
    DEBUG = Level.DEBUG
    INFO = Level.INFO
    WARNING = Level.WARNING
    ERROR = Level.ERROR
    FATAL = Level.FATAL

    def __init__(self) -> None:
        self._outputs: list[Output] = []
        self._lock = threading.Lock()

    # ── Output Management ─────────────────────────────────────────

    def add_output(self, sink: Sink, min_level: int, formatter: Formatter) -> None:
        """
        Register an output receiving every message at min_level or above.

        E.g. Level.WARNING gets WARNING, ERROR and FATAL messages. Outputs
        are served in registration order.
        """
        with self._lock:
            self._outputs.append(Output(sink, min_level, formatter))

    @property
    def outputs(self) -> tuple[Output, ...]:
        """Registered outputs in dispatch order (snapshot)."""
        with self._lock:
            return tuple(self._outputs)

    # ── Core Logging ──────────────────────────────────────────────

    def log(self, level: int, message: str) -> None:
        """
        Write message to every output whose threshold it meets.

        Most callers will prefer the convenience methods, which also append
        the trailing newline. Failures of a formatter or sink are dropped so
        the remaining outputs are still served and the caller never sees them.
        """
        with self._lock:
            for output in self._outputs:
                if not output.accepts(level):
                    continue
                try:
                    output.sink.write(output.formatter.format(level, message))
                except Exception:
                    # Logging must never crash the caller
                    pass

    def log_formatted(self, level: int, fmt: str, *args: Any) -> None:
        """
        printf-style interpolation (only when args are given), newline, log().

        A single mapping argument feeds %(name)s placeholders, as in stdlib logging.
        A template that does not match its args is logged as the raw template
        followed by the args' repr instead of raising.
        """
        if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
            args = args[0]  # type: ignore[assignment]
        if args:
            try:
                message = fmt % args
            except (TypeError, ValueError, KeyError):
                message = f"{fmt} {args!r}"
        else:
            message = fmt
        self.log(level, message + "\n")

    # ── Convenience Methods ───────────────────────────────────────

    def trace(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Level.TRACE, fmt, *args)

    def debug(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Level.DEBUG, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Level.INFO, fmt, *args)

    def warning(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Level.WARNING, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        self.log_formatted(Level.ERROR, fmt, *args)

    def fatal(self, fmt: str, *args: Any) -> None:
        """Logs at FATAL. Does not exit or raise; severity only."""
        self.log_formatted(Level.FATAL, fmt, *args)


def new() -> Logger:
    """Create an empty Logger."""
    return Logger()
