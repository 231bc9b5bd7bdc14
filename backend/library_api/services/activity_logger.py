"""
Library API — Activity Logger Implementations
==============================================

What:  Concrete ActivityLogger variants and the factory that picks one.
How:   `build_activity_logger(kind)` maps the ACTIVITY_LOGGER setting to a class.
Who:   create_app() builds one instance per application; tests use
       RecordingActivityLogger through dependency overrides.

Output of ConsoleActivityLogger:
    [ActivityLogger] 2024-01-15 12:00:00: GET all books
"""

import logging
import sys
from datetime import datetime
from typing import List, Optional, TextIO, Tuple

from library_api.services.logger_base import ActivityLogger

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ConsoleActivityLogger(ActivityLogger):
    """
    Writes one timestamped line per call to a text stream.

    Args:
        stream: Where lines go. None means whatever `sys.stdout` is at the
                time of the call (so redirected stdout is honoured).
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def log(self, message: str) -> None:
        stream = self._stream or sys.stdout
        timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        stream.write(f"[ActivityLogger] {timestamp}: {message}\n")
        stream.flush()


class LoggingActivityLogger(ActivityLogger):
    """
    Sends activity lines to the stdlib logger `library_api.activity` at INFO.

    The timestamp comes from the root handler's format configured in
    main.setup_logging().
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("library_api.activity")

    def log(self, message: str) -> None:
        self._logger.info(message)


class RecordingActivityLogger(ActivityLogger):
    """Keeps (timestamp, message) pairs in memory instead of printing them."""

    def __init__(self):
        self.entries: List[Tuple[datetime, str]] = []

    @property
    def messages(self) -> List[str]:
        return [message for _, message in self.entries]

    def log(self, message: str) -> None:
        self.entries.append((datetime.now(), message))


def build_activity_logger(kind: str) -> ActivityLogger:
    """
    Build the ActivityLogger named by the ACTIVITY_LOGGER setting.

    Raises:
        ValueError: `kind` is not "console" or "logging". Settings already
                    validates this, so it only fires for direct callers.
    """
    if kind == "console":
        return ConsoleActivityLogger()
    if kind == "logging":
        return LoggingActivityLogger()
    raise ValueError(f"Unknown activity logger kind '{kind}'")
