"""Per-quad selection state."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SelectionRole(str, Enum):
    """Role an image position plays in a selection."""
    FAVORITE_1 = "favorite1"
    FAVORITE_2 = "favorite2"
    LEAST_FAVORITE = "least_favorite"


@dataclass
class Selection:
    """A client's choice for one quad within a session.

    A skipped selection never carries position indices, whatever was
    supplied.
    """
    session_id: str
    quad_id: str
    favorite1: Optional[int] = None
    favorite2: Optional[int] = None
    least_favorite: Optional[int] = None
    skipped: bool = False
    updated_at: str = field(default="", compare=False)

    def __post_init__(self):
        self.skipped = bool(self.skipped)
        if self.skipped:
            self.favorite1 = None
            self.favorite2 = None
            self.least_favorite = None
        if not self.updated_at:
            self.updated_at = datetime.now().isoformat()

    @property
    def key(self) -> Tuple[str, str]:
        return (self.session_id, self.quad_id)

    @property
    def is_resolved(self) -> bool:
        """Skipped, or all three positions chosen."""
        if self.skipped:
            return True
        return None not in (self.favorite1, self.favorite2, self.least_favorite)

    @property
    def is_answered(self) -> bool:
        """Resolved and not skipped."""
        return self.is_resolved and not self.skipped

    @property
    def has_favorite(self) -> bool:
        return not self.skipped and self.favorite1 is not None

    def positions(self) -> Dict[SelectionRole, int]:
        """Roles that have a position set."""
        chosen = {
            SelectionRole.FAVORITE_1: self.favorite1,
            SelectionRole.FAVORITE_2: self.favorite2,
            SelectionRole.LEAST_FAVORITE: self.least_favorite,
        }
        return {role: index for role, index in chosen.items() if index is not None}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "quad_id": self.quad_id,
            "favorite1": self.favorite1,
            "favorite2": self.favorite2,
            "least_favorite": self.least_favorite,
            "skipped": self.skipped,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Selection":
        return cls(
            session_id=data["session_id"],
            quad_id=data["quad_id"],
            favorite1=data.get("favorite1"),
            favorite2=data.get("favorite2"),
            least_favorite=data.get("least_favorite"),
            skipped=data.get("skipped", False),
            updated_at=data.get("updated_at", ""),
        )
