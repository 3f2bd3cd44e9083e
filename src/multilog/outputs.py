"""
Output registry entry: where a message goes, from which level, in what shape.
"""

from dataclasses import dataclass

from multilog.formatters import Formatter
from multilog.sinks import Sink


@dataclass(frozen=True)
class Output:
    """
    A registered (sink, min_level, formatter) triple.

    Created by Logger.add_output() and never changed afterwards. Not
    validated: a sink without write() is the caller's mistake and simply
    fails (silently) at dispatch time.
    """
    sink: Sink
    min_level: int
    formatter: Formatter

    def accepts(self, level: int) -> bool:
        return level >= self.min_level
