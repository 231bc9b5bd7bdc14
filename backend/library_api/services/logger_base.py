"""
Library API — Abstract Activity Logger Interface
=================================================

What:  Contract for recording one human-readable line per catalog access.
How:   Concrete implementations inherit from ActivityLogger and implement log().
Who:   Called by every book route handler after its service call.

Implementations (library_api.services.activity_logger):
    - ConsoleActivityLogger: timestamped line on stdout (default)
    - LoggingActivityLogger: routes through the stdlib `logging` tree
    - RecordingActivityLogger: keeps messages in memory for tests
"""

from abc import ABC, abstractmethod


class ActivityLogger(ABC):
    """
    Abstract interface for the activity log.

    Contract:
        - log() records the current wall-clock time together with `message`
        - One call produces one line of output
        - log() never raises
    """

    @abstractmethod
    def log(self, message: str) -> None:
        """Record `message` with the current timestamp."""
        ...
