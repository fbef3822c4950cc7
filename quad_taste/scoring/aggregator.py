"""Weighted aggregation of quad selections into a taste profile."""
import math
from typing import Dict, Iterable, List, Optional

import numpy as np

from ..catalog.library import IMAGES_PER_QUAD, QuadLibrary
from ..core.config import ScoringConfig
from ..core.logging_config import get_logger
from ..core.taxonomy import ALL_AXES, ATTRIBUTE_AXES
from ..selections.models import Selection, SelectionRole
from .profile import TasteProfile

logger = get_logger(__name__)


class ProfileAggregator:
    """
    Turns a session's selections into a six-axis taste profile.

    Each role present in an answered selection adds the chosen image's
    attribute values times the role weight to a running sum, and the
    absolute weight to a running total. The weighted mean per axis is then
    mapped onto the score scale by the configured scale function. The
    least-favorite weight is negative, so it pulls scores away from the
    rejected image.

    Aggregation is a pure function of its inputs: no I/O, and the same
    selections always give the same profile.
    """

    def __init__(self, library: QuadLibrary, config: Optional[ScoringConfig] = None):
        self.library = library
        self.config = config or ScoringConfig()
        self._weights = {
            SelectionRole.FAVORITE_1: self.config.favorite1_weight,
            SelectionRole.FAVORITE_2: self.config.favorite2_weight,
            SelectionRole.LEAST_FAVORITE: self.config.least_favorite_weight,
        }

    def weight(self, role: SelectionRole) -> float:
        return self._weights[role]

    def scale(self, weighted_mean: float) -> float:
        """Map a weighted mean onto the clamped score scale.

        Ties round up (5.25 -> 5.3), not to the nearest even digit.
        """
        cfg = self.config
        step = 10 ** cfg.score_precision
        value = math.floor((float(weighted_mean) * cfg.scale_factor + cfg.scale_offset) * step + 0.5) / step
        return float(np.clip(value, cfg.score_min, cfg.score_max))

    def _in_catalog_order(self, session_id: str, selections: Iterable[Selection]) -> List[Selection]:
        latest: Dict[str, Selection] = {}
        for selection in selections:
            if selection.session_id != session_id:
                continue
            latest[selection.quad_id] = selection

        known = [s for s in latest.values() if s.quad_id in self.library]
        unknown = [s for s in latest.values() if s.quad_id not in self.library]
        known.sort(key=lambda s: self.library.index_of(s.quad_id))
        return known + sorted(unknown, key=lambda s: s.quad_id)

    def aggregate(self, session_id: str, selections: Iterable[Selection]) -> TasteProfile:
        """
        Compute the profile for one session.

        Args:
            session_id: Session whose selections are aggregated; selections
                for other sessions are ignored.
            selections: The session's persisted selections.

        Returns:
            TasteProfile with every axis on the configured score scale.
        """
        sums = np.zeros(len(ATTRIBUTE_AXES))
        total_weight = 0.0
        completed = 0
        skipped = 0

        for selection in self._in_catalog_order(session_id, selections):
            quad = self.library.get(selection.quad_id)
            if quad is None:
                logger.debug("Skipping selection for unknown quad %s", selection.quad_id)
                continue
            if selection.skipped:
                skipped += 1
                continue
            if not selection.is_resolved:
                continue

            completed += 1
            if not quad.has_attributes:
                continue

            for role, position in selection.positions().items():
                if not 0 <= position < IMAGES_PER_QUAD:
                    logger.warning(
                        "Ignoring out-of-range %s=%s for quad %s", role.value, position, quad.quad_id
                    )
                    continue
                role_weight = self.weight(role)
                sums += quad.attribute_vector(position) * role_weight
                total_weight += abs(role_weight)

        scores = {axis: self.config.midpoint for axis in ALL_AXES}
        if total_weight > 0:
            for i, axis in enumerate(ATTRIBUTE_AXES):
                scores[axis] = self.scale(sums[i] / total_weight)

        logger.debug(
            "Aggregated session %s: completed=%d skipped=%d total_weight=%.1f",
            session_id, completed, skipped, total_weight,
        )

        return TasteProfile(
            session_id=session_id,
            scores=scores,
            completed_quads=completed,
            skipped_quads=skipped,
            total_quads=len(self.library),
            top_materials=[],
        )
