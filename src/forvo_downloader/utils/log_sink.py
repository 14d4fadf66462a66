"""
Log sinks for recording download progress.
"""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Callable, List, Optional


class LogWriteError(Exception):
    """Raised when a log entry cannot be written."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FileLogSink:
    """Appends timestamped lines to a log file, reopening it for every entry."""

    def __init__(self, path: str, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize the log sink.

        Args:
            path: Path of the log file
            clock: Optional callable returning the current time
        """
        self.path = path
        self.clock = clock or _utc_now

    def format_entry(self, message: str) -> str:
        """Format a message as a single RFC 1123 timestamped log line."""
        timestamp = format_datetime(self.clock().astimezone(timezone.utc), usegmt=True)
        return f"[{timestamp}] {message}\n"

    def log(self, message: str) -> None:
        """
        Append a message to the log file.

        Raises:
            LogWriteError: If the file cannot be opened or written
        """
        entry = self.format_entry(message)
        try:
            with open(self.path, 'a', encoding='utf-8', errors='surrogateescape') as f:
                f.write(entry)
        except (OSError, UnicodeError) as e:
            raise LogWriteError(f"couldn't write to log file '{self.path}': {e}") from e


class MemoryLogSink:
    """Keeps log messages in memory."""

    def __init__(self):
        self.messages: List[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)
