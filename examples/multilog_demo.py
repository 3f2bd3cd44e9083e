"""
multilog walkthrough.

Shows:
1. Console output with date/time and colored levels
2. A second output with its own threshold, prefix and caller info
3. Unknown level names falling back to DEBUG
4. Building the same setup from a config dict
5. Routing third-party stdlib logging through the same outputs

Run:
    python examples/multilog_demo.py
"""

import logging
import sys

from multilog import (
    FormatFlag,
    Level,
    LoggerHandler,
    MemorySink,
    StdFormatter,
    configure,
    new,
    string_to_level,
)


def main():
    print("=" * 60)
    print("  multilog demo")
    print("=" * 60)

    # ── 1 & 2: two outputs, independent thresholds ────────────────
    audit = MemorySink()
    log = new()
    log.add_output(sys.stdout.buffer, Level.DEBUG, StdFormatter(flags=FormatFlag.STD, colored=True))
    log.add_output(
        audit,
        Level.WARNING,
        StdFormatter(prefix="[audit]", flags=FormatFlag.MICROSECONDS | FormatFlag.SHORTFILE),
    )
    sys.stdout.flush()

    log.trace("not shown anywhere")
    log.debug("cache warmed with %d entries", 128)
    log.info("listening on %s:%d", "0.0.0.0", 8080)
    log.warning("slow query took %.1fs", 2.4)
    log.error("disk full")
    log.fatal("fatal is a severity; the process keeps running")
    sys.stdout.buffer.flush()

    print("\n  audit output received %d lines:" % audit.count)
    for line in audit.lines():
        print("    " + line)

    # ── 3: level parsing with fallback ────────────────────────────
    level, err = string_to_level("VERBOSE")
    print(f"\n  string_to_level('VERBOSE') -> {level!r}, error: {err}")

    # ── 4: same thing from configuration ──────────────────────────
    configured = configure(
        {
            "outputs": [
                {"sink": "stdout", "min_level": "INFO", "formatter": {"flags": ["time"]}},
                {"sink": "audit", "min_level": "ERROR", "formatter": {"prefix": "[audit]"}},
            ],
        },
        sinks={"audit": audit},
    )
    print()
    configured.info("configured logger ready")

    # ── 5: stdlib logging bridge ──────────────────────────────────
    lib_logger = logging.getLogger("some.library")
    lib_logger.setLevel(logging.INFO)
    lib_logger.propagate = False
    lib_logger.addHandler(LoggerHandler(configured))
    lib_logger.error("reported by a third-party library")

    print(f"\n  audit total: {audit.count} lines")


if __name__ == "__main__":
    main()
