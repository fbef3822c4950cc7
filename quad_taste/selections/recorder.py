"""Recording of per-quad selections and questionnaire resume state."""
from typing import Dict, Iterable, Optional, Sequence

from ..catalog.library import IMAGES_PER_QUAD, Quad, QuadLibrary
from ..core.config import SelectionConfig
from ..core.errors import InvalidSelectionError, SessionCompletedError
from ..core.logging_config import get_logger
from ..storage.base import SessionStore
from .models import Selection

logger = get_logger(__name__)


def find_resume_index(quads: Sequence[Quad], selections: Iterable[Selection]) -> int:
    """
    Position of the first quad without a resolved selection.

    Returns ``len(quads)`` when every quad is resolved.
    """
    by_quad: Dict[str, Selection] = {s.quad_id: s for s in selections}
    for index, quad in enumerate(quads):
        selection = by_quad.get(quad.quad_id)
        if selection is None or not selection.is_resolved:
            return index
    return len(quads)


def all_resolved(quads: Sequence[Quad], selections: Iterable[Selection]) -> bool:
    """True when every quad has a resolved (answered or skipped) selection."""
    return find_resume_index(quads, selections) == len(quads)


class SelectionRecorder:
    """Upserts selections and answers resume/completion questions."""

    def __init__(
        self,
        store: SessionStore,
        library: QuadLibrary,
        config: Optional[SelectionConfig] = None,
    ):
        self.store = store
        self.library = library
        self.config = config or SelectionConfig()

    def _validate(self, selection: Selection):
        positions = selection.positions()
        for role, index in positions.items():
            if isinstance(index, bool) or not isinstance(index, int):
                raise InvalidSelectionError(f"{role.value} must be an integer position, got {index!r}")
            if not 0 <= index < IMAGES_PER_QUAD:
                raise InvalidSelectionError(
                    f"{role.value} must be between 0 and {IMAGES_PER_QUAD - 1}, got {index}"
                )
        if self.config.reject_duplicate_positions:
            indices = list(positions.values())
            if len(set(indices)) != len(indices):
                raise InvalidSelectionError(
                    f"Positions must be distinct for quad {selection.quad_id}: {indices}"
                )

    def create_or_update(
        self,
        session_id: str,
        quad_id: str,
        favorite1: Optional[int] = None,
        favorite2: Optional[int] = None,
        least_favorite: Optional[int] = None,
        skipped: bool = False,
    ) -> Selection:
        """
        Store the selection for one quad, replacing any earlier one.

        A skipped selection is stored with all positions cleared, whatever
        was passed in.

        Raises:
            QuadNotFoundError: If the quad is not in the catalog.
            SessionNotFoundError: If the session is unknown.
            SessionCompletedError: If the session is already completed.
            InvalidSelectionError: If a position is out of range or repeated.
        """
        self.library.lookup(quad_id)

        # The store re-checks under its lock when writing
        session = self.store.get_session(session_id)
        if session.is_completed:
            raise SessionCompletedError(f"Session {session_id} is completed; selections are frozen")

        selection = Selection(
            session_id=session_id,
            quad_id=quad_id,
            favorite1=favorite1,
            favorite2=favorite2,
            least_favorite=least_favorite,
            skipped=skipped,
        )
        self._validate(selection)

        saved = self.store.save_selection(selection)
        logger.debug(
            "Saved selection %s/%s skipped=%s resolved=%s",
            session_id, quad_id, saved.skipped, saved.is_resolved,
        )
        return saved

    def resume_index(self, session_id: str) -> int:
        """Catalog position where the session should continue."""
        return find_resume_index(self.library.quads, self.store.load_selections(session_id))

    def is_complete(self, session_id: str) -> bool:
        """True when every quad in the catalog has a resolved selection."""
        return all_resolved(self.library.quads, self.store.load_selections(session_id))
