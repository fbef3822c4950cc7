"""Per-category and overall style metrics for the taste report.

Each category is represented by the first quad, in catalog order, where the
client picked a favorite. The favorite image's AS/VD/MP codes are rescaled
from 1-9 to 1-5 as style era, material complexity and mood palette.

Missing data is handled differently at the two levels:

* ``category_metrics`` always returns a value; a category without a
  representative gets neutral defaults and ``has_selection=False``.
* ``overall_metrics`` averages only the categories that have a
  representative; unanswered categories are left out, not defaulted.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import numpy as np

from ..catalog.library import Quad, QuadLibrary
from ..catalog.style_codes import CODE_MAX, CODE_MIN, try_parse_style_codes
from ..core.config import MetricsConfig
from ..core.logging_config import get_logger
from ..core.taxonomy import CATEGORY_ORDER, Category
from ..selections.models import Selection
from .classifier import classify_style

logger = get_logger(__name__)

METRIC_MIN = 1.0
METRIC_MAX = 5.0


def normalize_code(code: int) -> float:
    """Rescale a 1-9 style code linearly onto 1-5."""
    return (code - CODE_MIN) / (CODE_MAX - CODE_MIN) * (METRIC_MAX - METRIC_MIN) + METRIC_MIN


@dataclass(frozen=True)
class CategoryMetrics:
    """Style metrics for one category (1-5 scale)."""
    category: Category
    style_era: float
    material_complexity: float
    mood_palette: float
    has_selection: bool
    quad_id: Optional[str] = None
    image: Optional[str] = None

    @property
    def triple(self) -> Tuple[float, float, float]:
        return (self.style_era, self.material_complexity, self.mood_palette)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "style_era": self.style_era,
            "material_complexity": self.material_complexity,
            "mood_palette": self.mood_palette,
            "has_selection": self.has_selection,
            "quad_id": self.quad_id,
            "image": self.image,
        }


@dataclass(frozen=True)
class OverallMetrics:
    """Style metrics averaged over answered categories."""
    style_era: float
    material_complexity: float
    mood_palette: float
    style_label: str
    categories_answered: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "style_era": self.style_era,
            "material_complexity": self.material_complexity,
            "mood_palette": self.mood_palette,
            "style_label": self.style_label,
            "categories_answered": self.categories_answered,
        }


class CategoryMetricDeriver:
    """Derives report metrics from a session's selections."""

    def __init__(self, library: QuadLibrary, config: Optional[MetricsConfig] = None):
        self.library = library
        self.config = config or MetricsConfig()

    @staticmethod
    def _by_quad(selections: Iterable[Selection]) -> Dict[str, Selection]:
        return {selection.quad_id: selection for selection in selections}

    def representative(
        self,
        category: Union[Category, str],
        selections: Union[Iterable[Selection], Dict[str, Selection]],
    ) -> Optional[Tuple[Quad, Selection]]:
        """First quad of the category, in catalog order, with a chosen favorite."""
        by_quad = selections if isinstance(selections, dict) else self._by_quad(selections)
        for quad in self.library.list_by_category(category):
            selection = by_quad.get(quad.quad_id)
            if selection is not None and selection.has_favorite:
                return quad, selection
        return None

    def _neutral(self, category: Category, has_selection: bool, quad_id=None, image=None) -> CategoryMetrics:
        neutral = self.config.neutral_value
        return CategoryMetrics(
            category=category,
            style_era=neutral,
            material_complexity=neutral,
            mood_palette=neutral,
            has_selection=has_selection,
            quad_id=quad_id,
            image=image,
        )

    def category_metrics(
        self,
        category: Union[Category, str],
        selections: Union[Iterable[Selection], Dict[str, Selection]],
    ) -> CategoryMetrics:
        """
        Metrics for one category; never raises for missing or bad data.

        Without a representative selection the neutral defaults are
        returned with ``has_selection=False``. An image whose reference
        carries no style codes also yields neutral defaults, but keeps
        ``has_selection=True``. Legacy references with only an AS code get
        neutral values for the missing components.
        """
        category = Category(category)
        found = self.representative(category, selections)
        if found is None:
            return self._neutral(category, has_selection=False)

        quad, selection = found
        if not 0 <= selection.favorite1 < len(quad.images):
            logger.warning("Favorite position %s out of range for quad %s", selection.favorite1, quad.quad_id)
            return self._neutral(category, has_selection=True, quad_id=quad.quad_id)

        image = quad.images[selection.favorite1]
        codes = try_parse_style_codes(image)
        if codes is None:
            logger.debug("No style codes in %s; using neutral metrics", image)
            return self._neutral(category, has_selection=True, quad_id=quad.quad_id, image=image)

        neutral = self.config.neutral_value
        return CategoryMetrics(
            category=category,
            style_era=normalize_code(codes.architectural_style),
            material_complexity=(
                normalize_code(codes.visual_density) if codes.visual_density is not None else neutral
            ),
            mood_palette=normalize_code(codes.mood_palette) if codes.mood_palette is not None else neutral,
            has_selection=True,
            quad_id=quad.quad_id,
            image=image,
        )

    def all_category_metrics(self, selections: Iterable[Selection]) -> List[CategoryMetrics]:
        """Metrics for every category, in category order."""
        by_quad = self._by_quad(selections)
        return [self.category_metrics(category, by_quad) for category in CATEGORY_ORDER]

    def overall_metrics(self, selections: Iterable[Selection]) -> OverallMetrics:
        """
        Average metrics across the categories that have a representative.

        Unanswered categories are excluded from the average. With no
        answered category at all the neutral value is reported.
        """
        answered = [m for m in self.all_category_metrics(selections) if m.has_selection]

        if answered:
            style_era, material, mood = (float(v) for v in np.mean([m.triple for m in answered], axis=0))
        else:
            style_era = material = mood = self.config.neutral_value

        return OverallMetrics(
            style_era=style_era,
            material_complexity=material,
            mood_palette=mood,
            style_label=classify_style(
                style_era,
                contemporary_below=self.config.contemporary_below,
                traditional_above=self.config.traditional_above,
            ),
            categories_answered=len(answered),
        )
