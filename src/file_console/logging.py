"""Console audit log.

Every command the console runs leaves one entry behind: what was asked
for and how it went.  The web front-end serves the log at ``/api/log``
and can narrow it to problems only (``?min_level=WARNING``).

Outcome maps to level:
    - INFO — the command did what was asked.
    - WARNING — the command was refused, or the input was not a command.
    - ERROR — the filesystem call failed.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """How a command turned out, ordered so ``>=`` filters by severity."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """One command outcome."""

    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only record of command outcomes."""

    def __init__(self) -> None:
        """Create an empty log."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return a copy of every entry, oldest first."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Record one outcome."""
        self._entries.append(LogEntry(level=level, message=message, source=source))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries at or above *min_level* from *source*, oldest first.

        Either criterion may be omitted to leave that dimension unfiltered.
        """
        return [
            entry
            for entry in self._entries
            if (min_level is None or entry.level >= min_level)
            and (source is None or entry.source == source)
        ]
