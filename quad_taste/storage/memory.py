"""Thread-safe in-memory session store."""
import threading
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..core.errors import PersistenceError, SessionCompletedError, SessionNotFoundError
from ..core.logging_config import get_logger
from ..scoring.profile import TasteProfile
from ..selections.models import Selection
from .base import STATUS_COMPLETED, SessionRecord, SessionStore

logger = get_logger(__name__)


class InMemorySessionStore(SessionStore):
    """Keeps sessions, selections and profiles in dictionaries.

    Selections are keyed by (session_id, quad_id); a save for an existing
    key replaces the prior value (last write wins).
    """

    def __init__(self):
        self._sessions: Dict[str, SessionRecord] = {}
        self._selections: Dict[Tuple[str, str], Selection] = {}
        self._profiles: Dict[str, TasteProfile] = {}
        self._lock = threading.Lock()

    def create_session(self, session_id: Optional[str] = None) -> SessionRecord:
        session_id = session_id or uuid.uuid4().hex[:12]
        with self._lock:
            if session_id in self._sessions:
                raise PersistenceError(f"Session already exists: {session_id}")
            record = SessionRecord(session_id=session_id)
            self._sessions[session_id] = record
        return replace(record)

    def get_session(self, session_id: str) -> SessionRecord:
        with self._lock:
            record = self._sessions.get(session_id)
        if record is None:
            raise SessionNotFoundError(f"Session not found: {session_id}")
        return replace(record)

    def load_selections(self, session_id: str) -> List[Selection]:
        with self._lock:
            return [
                replace(selection)
                for (sid, _), selection in self._selections.items()
                if sid == session_id
            ]

    def save_selection(self, selection: Selection) -> Selection:
        with self._lock:
            record = self._sessions.get(selection.session_id)
            if record is None:
                raise SessionNotFoundError(f"Session not found: {selection.session_id}")
            if record.is_completed:
                raise SessionCompletedError(
                    f"Session {selection.session_id} is completed; selections are frozen"
                )
            self._selections[selection.key] = replace(selection)
        return replace(selection)

    def load_profile(self, session_id: str) -> Optional[TasteProfile]:
        with self._lock:
            profile = self._profiles.get(session_id)
        return replace(profile) if profile is not None else None

    def _write_profile(self, session_id: str, profile: TasteProfile):
        self._profiles[session_id] = replace(profile)

    def _write_status(self, session_id: str, status: str, completed_at: str):
        record = self._sessions[session_id]
        self._sessions[session_id] = replace(record, status=status, completed_at=completed_at)

    def commit_completion(self, session_id: str, profile: TasteProfile) -> SessionRecord:
        with self._lock:
            if session_id not in self._sessions:
                raise SessionNotFoundError(f"Session not found: {session_id}")

            previous_session = self._sessions[session_id]
            previous_profile = self._profiles.get(session_id)
            try:
                self._write_profile(session_id, profile)
                self._write_status(session_id, STATUS_COMPLETED, datetime.now().isoformat())
            except Exception as e:
                self._sessions[session_id] = previous_session
                if previous_profile is None:
                    self._profiles.pop(session_id, None)
                else:
                    self._profiles[session_id] = previous_profile
                logger.error("Rolled back completion of session %s: %s", session_id, e)
                raise PersistenceError(f"Failed to complete session {session_id}: {e}") from e

            return replace(self._sessions[session_id])
