"""Persistence contract for sessions, selections and profiles."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..scoring.profile import TasteProfile
from ..selections.models import Selection

STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETED = "completed"


@dataclass
class SessionRecord:
    """Lifecycle state of one questionnaire session."""
    session_id: str
    status: str = STATUS_IN_PROGRESS
    created_at: str = ""
    completed_at: Optional[str] = None

    def __post_init__(self):
        if not self.created_at:
            self.created_at = datetime.now().isoformat()

    @property
    def is_completed(self) -> bool:
        return self.status == STATUS_COMPLETED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "status": self.status,
            "created_at": self.created_at,
            "completed_at": self.completed_at,
        }


class SessionStore(ABC):
    """Storage backend used by the taste service.

    Implementations must make ``commit_completion`` all-or-nothing: either
    the profile is saved and the session marked completed, or neither.
    """

    @abstractmethod
    def create_session(self, session_id: Optional[str] = None) -> SessionRecord:
        """Create a new in-progress session."""

    @abstractmethod
    def get_session(self, session_id: str) -> SessionRecord:
        """Get a session; raises SessionNotFoundError if unknown."""

    @abstractmethod
    def load_selections(self, session_id: str) -> List[Selection]:
        """All selections stored for a session."""

    @abstractmethod
    def save_selection(self, selection: Selection) -> Selection:
        """Insert or fully replace the selection for its (session, quad) key.

        Raises:
            SessionNotFoundError: If the session is unknown.
            SessionCompletedError: If the session is already completed.
        """

    @abstractmethod
    def load_profile(self, session_id: str) -> Optional[TasteProfile]:
        """The saved profile, or None if the session is not completed."""

    @abstractmethod
    def commit_completion(self, session_id: str, profile: TasteProfile) -> SessionRecord:
        """Save the profile and mark the session completed atomically.

        Raises:
            PersistenceError: If either write fails; nothing is changed.
        """
