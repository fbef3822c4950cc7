"""Taste profile model and its persisted representation."""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..core.taxonomy import ALL_AXES, Axis
from .classifier import classify_tradition

DEFAULT_PERSIST_MULTIPLIER = 10


def _score_key(axis: Axis) -> str:
    return f"{axis.value}_score"


@dataclass
class TasteProfile:
    """Six-axis taste vector (1-10 per axis) plus completion counters."""
    session_id: str
    scores: Dict[Axis, float]
    completed_quads: int = 0
    skipped_quads: int = 0
    total_quads: int = 0
    # Never populated by aggregation; kept so stored profiles round-trip.
    top_materials: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.scores = {Axis(axis): float(value) for axis, value in self.scores.items()}
        missing = [axis.value for axis in ALL_AXES if axis not in self.scores]
        if missing:
            raise ValueError(f"Profile is missing scores for: {', '.join(missing)}")
        if isinstance(self.top_materials, str):
            self.top_materials = json.loads(self.top_materials) if self.top_materials else []
        self.top_materials = list(self.top_materials or [])

    def score(self, axis: Axis) -> float:
        return self.scores[Axis(axis)]

    def persisted_scores(self, multiplier: int = DEFAULT_PERSIST_MULTIPLIER) -> Dict[Axis, int]:
        """Scores as stored: integer 10-100 for the default multiplier."""
        return {axis: int(round(self.scores[axis] * multiplier)) for axis in ALL_AXES}

    def style_label(
        self,
        contemporary_below: float = 4.0,
        traditional_above: float = 6.0,
    ) -> str:
        """Style label read off the tradition axis."""
        return classify_tradition(
            self.scores[Axis.TRADITION],
            contemporary_below=contemporary_below,
            traditional_above=traditional_above,
        )

    def to_dict(self, multiplier: int = DEFAULT_PERSIST_MULTIPLIER) -> Dict[str, Any]:
        """Convert to the persisted record shape."""
        data: Dict[str, Any] = {"session_id": self.session_id}
        for axis, value in self.persisted_scores(multiplier).items():
            data[_score_key(axis)] = value
        data["completed_quads"] = self.completed_quads
        data["skipped_quads"] = self.skipped_quads
        data["total_quads"] = self.total_quads
        data["top_materials"] = list(self.top_materials)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], multiplier: int = DEFAULT_PERSIST_MULTIPLIER) -> "TasteProfile":
        """Create a profile from its persisted record shape."""
        return cls(
            session_id=data["session_id"],
            scores={axis: data[_score_key(axis)] / multiplier for axis in ALL_AXES},
            completed_quads=data.get("completed_quads", 0),
            skipped_quads=data.get("skipped_quads", 0),
            total_quads=data.get("total_quads", 0),
            top_materials=data.get("top_materials") or [],
        )
