"""Fixed axis and category vocabularies.

Every lookup keyed by an axis or a category goes through these enums, so a
misspelled key fails at attribute access rather than deep inside scoring.
"""
from enum import Enum
from typing import Tuple


class Axis(str, Enum):
    """Design-preference dimensions of a taste profile."""
    WARMTH = "warmth"
    FORMALITY = "formality"
    DRAMA = "drama"
    TRADITION = "tradition"
    OPENNESS = "openness"
    ART_FOCUS = "art_focus"

    @property
    def label(self) -> str:
        return _AXIS_INFO[self][0]

    @property
    def low_label(self) -> str:
        return _AXIS_INFO[self][1]

    @property
    def high_label(self) -> str:
        return _AXIS_INFO[self][2]


# (label, low end, high end) as shown on the printed report
_AXIS_INFO = {
    Axis.WARMTH: ("Warmth", "Cool", "Warm"),
    Axis.FORMALITY: ("Formality", "Casual", "Formal"),
    Axis.DRAMA: ("Drama", "Subtle", "Dramatic"),
    Axis.TRADITION: ("Tradition", "Contemporary", "Traditional"),
    Axis.OPENNESS: ("Openness", "Defined", "Open"),
    Axis.ART_FOCUS: ("Art Integration", "Minimal", "Art-Centric"),
}

# Axes with per-image attribute values in the quad catalog.
ATTRIBUTE_AXES: Tuple[Axis, ...] = (
    Axis.WARMTH,
    Axis.FORMALITY,
    Axis.DRAMA,
    Axis.TRADITION,
)

ALL_AXES: Tuple[Axis, ...] = tuple(Axis)


class Category(str, Enum):
    """Room/space categories a quad can belong to."""
    EXTERIOR_ARCHITECTURE = "exterior_architecture"
    LIVING_SPACES = "living_spaces"
    DINING_SPACES = "dining_spaces"
    KITCHENS = "kitchens"
    FAMILY_AREAS = "family_areas"
    PRIMARY_BEDROOMS = "primary_bedrooms"
    PRIMARY_BATHROOMS = "primary_bathrooms"
    GUEST_BEDROOMS = "guest_bedrooms"
    OUTDOOR_LIVING = "outdoor_living"

    @property
    def prefix(self) -> str:
        """Quad id prefix, e.g. ``EA`` for exterior architecture."""
        return _CATEGORY_INFO[self][0]

    @property
    def label(self) -> str:
        return _CATEGORY_INFO[self][1]

    @classmethod
    def from_prefix(cls, prefix: str) -> "Category":
        for category, (code, _) in _CATEGORY_INFO.items():
            if code == prefix:
                return category
        raise ValueError(f"Unknown category prefix: {prefix}")


_CATEGORY_INFO = {
    Category.EXTERIOR_ARCHITECTURE: ("EA", "Exterior Architecture"),
    Category.LIVING_SPACES: ("LS", "Living Spaces"),
    Category.DINING_SPACES: ("DS", "Dining Spaces"),
    Category.KITCHENS: ("KT", "Kitchens"),
    Category.FAMILY_AREAS: ("FA", "Family Areas"),
    Category.PRIMARY_BEDROOMS: ("PB", "Primary Bedrooms"),
    Category.PRIMARY_BATHROOMS: ("PBT", "Primary Bathrooms"),
    Category.GUEST_BEDROOMS: ("GB", "Guest Bedrooms"),
    Category.OUTDOOR_LIVING: ("OL", "Outdoor Living"),
}

CATEGORY_ORDER: Tuple[Category, ...] = tuple(Category)
