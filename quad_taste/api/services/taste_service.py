"""Service layer wiring the quad catalog, selections and scoring to a store.

This is the surface the questionnaire and report collaborators talk to:
recording selections, resume state, session completion, and the profile and
category metrics read back for the report.
"""
import logging
from typing import Any, Dict, List, Optional, Union

from ...catalog.default_catalog import load_quad_library
from ...catalog.library import QuadLibrary
from ...core.config import Config
from ...core.errors import ProfileNotFoundError
from ...core.taxonomy import Category
from ...scoring.aggregator import ProfileAggregator
from ...scoring.metrics import CategoryMetricDeriver, CategoryMetrics, OverallMetrics
from ...scoring.profile import TasteProfile
from ...selections.models import Selection
from ...selections.recorder import SelectionRecorder
from ...storage.base import SessionRecord, SessionStore
from ...storage.memory import InMemorySessionStore

logger = logging.getLogger(__name__)


class TasteService:
    """Facade over the scoring pipeline for one store and catalog."""

    def __init__(
        self,
        config: Optional[Config] = None,
        store: Optional[SessionStore] = None,
        library: Optional[QuadLibrary] = None,
    ):
        """
        Initialize TasteService.

        Args:
            config: Application configuration object.
            store: Persistence backend; defaults to an in-memory store.
            library: Quad catalog; defaults to the configured catalog.
        """
        self.config = config or Config()
        self.store = store or InMemorySessionStore()
        self.library = library or load_quad_library(self.config.catalog)

        self.recorder = SelectionRecorder(self.store, self.library, self.config.selections)
        self.aggregator = ProfileAggregator(self.library, self.config.scoring)
        self.deriver = CategoryMetricDeriver(self.library, self.config.metrics)

    # ------------------------------------------------------------------
    # Sessions and selections
    # ------------------------------------------------------------------

    def create_session(self, session_id: Optional[str] = None) -> SessionRecord:
        record = self.store.create_session(session_id)
        logger.info("Created taste session %s", record.session_id)
        return record

    def get_session(self, session_id: str) -> SessionRecord:
        return self.store.get_session(session_id)

    def record_selection(
        self,
        session_id: str,
        quad_id: str,
        favorite1: Optional[int] = None,
        favorite2: Optional[int] = None,
        least_favorite: Optional[int] = None,
        skipped: bool = False,
    ) -> Selection:
        return self.recorder.create_or_update(
            session_id,
            quad_id,
            favorite1=favorite1,
            favorite2=favorite2,
            least_favorite=least_favorite,
            skipped=skipped,
        )

    def get_selections(self, session_id: str) -> List[Selection]:
        self.store.get_session(session_id)
        selections = self.store.load_selections(session_id)
        order = {quad.quad_id: i for i, quad in enumerate(self.library)}
        return sorted(selections, key=lambda s: (order.get(s.quad_id, len(order)), s.quad_id))

    def get_resume_index(self, session_id: str) -> int:
        self.store.get_session(session_id)
        return self.recorder.resume_index(session_id)

    def is_complete(self, session_id: str) -> bool:
        self.store.get_session(session_id)
        return self.recorder.is_complete(session_id)

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    def compute_profile(self, session_id: str) -> TasteProfile:
        """Aggregate the current selections without persisting anything."""
        self.store.get_session(session_id)
        return self.aggregator.aggregate(session_id, self.store.load_selections(session_id))

    def complete_session(self, session_id: str) -> TasteProfile:
        """
        Compute and save the profile and mark the session completed.

        Both writes happen in one store commit. Completing an already
        completed session returns the saved profile unchanged.

        Raises:
            SessionNotFoundError: If the session is unknown.
            PersistenceError: If the store fails; the session stays in progress.
        """
        session = self.store.get_session(session_id)
        if session.is_completed:
            existing = self.store.load_profile(session_id)
            if existing is not None:
                logger.info("Session %s already completed; returning saved profile", session_id)
                return existing

        profile = self.aggregator.aggregate(session_id, self.store.load_selections(session_id))
        self.store.commit_completion(session_id, profile)
        logger.info(
            "Completed session %s: %d answered, %d skipped of %d",
            session_id, profile.completed_quads, profile.skipped_quads, profile.total_quads,
        )
        return profile

    def get_profile(self, session_id: str) -> TasteProfile:
        """
        The saved profile of a completed session.

        Raises:
            SessionNotFoundError: If the session is unknown.
            ProfileNotFoundError: If the session has not been completed.
        """
        self.store.get_session(session_id)
        profile = self.store.load_profile(session_id)
        if profile is None:
            raise ProfileNotFoundError(f"No profile for session {session_id}")
        return profile

    # ------------------------------------------------------------------
    # Report metrics
    # ------------------------------------------------------------------

    def get_category_metrics(self, session_id: str, category: Union[Category, str]) -> CategoryMetrics:
        self.store.get_session(session_id)
        return self.deriver.category_metrics(category, self.store.load_selections(session_id))

    def get_all_category_metrics(self, session_id: str) -> List[CategoryMetrics]:
        self.store.get_session(session_id)
        return self.deriver.all_category_metrics(self.store.load_selections(session_id))

    def get_overall_metrics(self, session_id: str) -> OverallMetrics:
        self.store.get_session(session_id)
        return self.deriver.overall_metrics(self.store.load_selections(session_id))

    def export_session(self, session_id: str) -> Dict[str, Any]:
        """
        Export answered selections and the saved profile.

        Each fully answered quad maps to ``{"favorites": [favorite1,
        favorite2], "least": least_favorite}``; skipped and partial quads
        are left out.
        """
        session = self.store.get_session(session_id)
        selections = {
            s.quad_id: {"favorites": [s.favorite1, s.favorite2], "least": s.least_favorite}
            for s in self.get_selections(session_id)
            if s.is_answered
        }
        profile = self.store.load_profile(session_id)
        multiplier = self.config.scoring.persist_multiplier
        return {
            "session": session.to_dict(),
            "selections": selections,
            "profile": profile.to_dict(multiplier) if profile is not None else None,
        }
