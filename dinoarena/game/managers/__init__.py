"""Manager systems for arena coordination.

This package contains the manager classes that coordinate arena functionality
through the event-driven architecture.
"""

from .arena_manager import ArenaManager
from .log_manager import LogManager, LogEntry, LogLevel, LogCategory

__all__ = [
    "ArenaManager",
    "LogManager",
    "LogEntry",
    "LogLevel",
    "LogCategory",
]
