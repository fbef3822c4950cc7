"""Session persistence."""
from .base import SessionRecord, SessionStore, STATUS_IN_PROGRESS, STATUS_COMPLETED
from .memory import InMemorySessionStore

__all__ = [
    "SessionRecord",
    "SessionStore",
    "STATUS_IN_PROGRESS",
    "STATUS_COMPLETED",
    "InMemorySessionStore",
]
