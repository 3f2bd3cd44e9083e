"""
Bridge from the standard library's logging module.

Third-party packages log through `logging`; attaching a LoggerHandler sends
their records through a multilog Logger's outputs as well.

    logging.getLogger("urllib3").addHandler(LoggerHandler(log))

stdlib's numeric levels line up with Level (DEBUG=10 ... CRITICAL=50, which
is FATAL here), so records are dispatched at record.levelno unchanged.
"""

import logging

from multilog.core import Logger


class LoggerHandler(logging.Handler):
    """logging.Handler that forwards each record to a multilog Logger."""

    def __init__(self, logger: Logger, level: int = logging.NOTSET):
        super().__init__(level)
        self.logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return
        self.logger.log(record.levelno, message + "\n")
