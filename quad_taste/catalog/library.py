"""Immutable quad catalog.

The library is built once at process start and shared read-only. Quads are
held in an arena keyed by quad id alongside the fixed catalog order, which
drives resume positions and per-category representative selection.
"""
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import yaml

from ..core.errors import CatalogError, QuadNotFoundError
from ..core.logging_config import get_logger
from ..core.taxonomy import ATTRIBUTE_AXES, Axis, Category
from .style_codes import try_parse_style_codes

logger = get_logger(__name__)

IMAGES_PER_QUAD = 4

# Per-axis attribute values implied by each Architectural Style code.
AS_ATTRIBUTES: Dict[int, Dict[Axis, int]] = {
    1: {Axis.WARMTH: 2, Axis.FORMALITY: 3, Axis.DRAMA: 9, Axis.TRADITION: 1},
    2: {Axis.WARMTH: 3, Axis.FORMALITY: 4, Axis.DRAMA: 8, Axis.TRADITION: 2},
    3: {Axis.WARMTH: 5, Axis.FORMALITY: 5, Axis.DRAMA: 5, Axis.TRADITION: 3},
    4: {Axis.WARMTH: 4, Axis.FORMALITY: 4, Axis.DRAMA: 4, Axis.TRADITION: 4},
    5: {Axis.WARMTH: 5, Axis.FORMALITY: 6, Axis.DRAMA: 5, Axis.TRADITION: 5},
    6: {Axis.WARMTH: 6, Axis.FORMALITY: 7, Axis.DRAMA: 5, Axis.TRADITION: 6},
    7: {Axis.WARMTH: 7, Axis.FORMALITY: 7, Axis.DRAMA: 6, Axis.TRADITION: 7},
    8: {Axis.WARMTH: 8, Axis.FORMALITY: 9, Axis.DRAMA: 7, Axis.TRADITION: 8},
    9: {Axis.WARMTH: 9, Axis.FORMALITY: 9, Axis.DRAMA: 8, Axis.TRADITION: 9},
}


def attributes_for_styles(styles: Sequence[int]) -> Dict[Axis, Tuple[int, ...]]:
    """Expand one AS code per image into parallel per-axis attribute tuples."""
    return {
        axis: tuple(AS_ATTRIBUTES[code][axis] for code in styles)
        for axis in ATTRIBUTE_AXES
    }


@dataclass(frozen=True)
class Quad:
    """A forced-choice set of four candidate images."""
    quad_id: str
    category: Category
    images: Tuple[str, ...]
    attributes: Mapping[Axis, Tuple[int, ...]] = field(default_factory=dict)

    def __post_init__(self):
        if not self.quad_id:
            raise CatalogError("Quad id must not be empty")
        try:
            category = Category(self.category)
        except ValueError:
            raise CatalogError(f"Quad {self.quad_id}: unknown category {self.category!r}") from None

        images = tuple(self.images)
        if len(images) != IMAGES_PER_QUAD:
            raise CatalogError(
                f"Quad {self.quad_id}: expected {IMAGES_PER_QUAD} images, got {len(images)}"
            )

        attributes = {}
        if self.attributes:
            for key, values in self.attributes.items():
                try:
                    axis = Axis(key)
                except ValueError:
                    raise CatalogError(f"Quad {self.quad_id}: unknown axis {key!r}") from None
                if axis not in ATTRIBUTE_AXES:
                    raise CatalogError(f"Quad {self.quad_id}: {axis.value} has no per-image attributes")
                values = tuple(values)
                if len(values) != IMAGES_PER_QUAD:
                    raise CatalogError(
                        f"Quad {self.quad_id}: {axis.value} needs {IMAGES_PER_QUAD} values, got {len(values)}"
                    )
                attributes[axis] = values
            missing = [a.value for a in ATTRIBUTE_AXES if a not in attributes]
            if missing:
                raise CatalogError(f"Quad {self.quad_id}: missing attributes for {', '.join(missing)}")

        object.__setattr__(self, "category", category)
        object.__setattr__(self, "images", images)
        object.__setattr__(self, "attributes", MappingProxyType(attributes))

    @property
    def has_attributes(self) -> bool:
        return bool(self.attributes)

    def attribute_vector(self, position: int) -> np.ndarray:
        """Attribute values of one image, ordered as ATTRIBUTE_AXES."""
        return np.array(
            [self.attributes[axis][position] for axis in ATTRIBUTE_AXES],
            dtype=float,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "quad_id": self.quad_id,
            "category": self.category.value,
            "images": list(self.images),
            "attributes": {axis.value: list(values) for axis, values in self.attributes.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quad":
        """
        Create a Quad from a catalog entry.

        When ``attributes`` is absent but every image reference carries an
        AS code, attributes are derived from the codes.
        """
        attributes = data.get("attributes")
        if not attributes:
            codes = [try_parse_style_codes(ref) for ref in data.get("images", [])]
            if len(codes) == IMAGES_PER_QUAD and all(codes):
                attributes = attributes_for_styles([c.architectural_style for c in codes])
        return cls(
            quad_id=data["quad_id"],
            category=data["category"],
            images=tuple(data.get("images", ())),
            attributes=attributes or {},
        )


class QuadLibrary:
    """Read-only catalog of quads in fixed order."""

    def __init__(self, quads: Iterable[Quad]):
        ordered = tuple(quads)
        by_id: Dict[str, Quad] = {}
        positions: Dict[str, int] = {}
        for index, quad in enumerate(ordered):
            if quad.quad_id in by_id:
                raise CatalogError(f"Duplicate quad id: {quad.quad_id}")
            by_id[quad.quad_id] = quad
            positions[quad.quad_id] = index

        self._quads = ordered
        self._by_id = MappingProxyType(by_id)
        self._positions = MappingProxyType(positions)
        self._by_category = MappingProxyType({
            category: tuple(q for q in ordered if q.category is category)
            for category in Category
        })

    @property
    def quads(self) -> Tuple[Quad, ...]:
        return self._quads

    def __len__(self) -> int:
        return len(self._quads)

    def __iter__(self) -> Iterator[Quad]:
        return iter(self._quads)

    def __contains__(self, quad_id: object) -> bool:
        return quad_id in self._by_id

    def lookup(self, quad_id: str) -> Quad:
        """
        Get a quad by id.

        Raises:
            QuadNotFoundError: If the id is not in the catalog.
        """
        try:
            return self._by_id[quad_id]
        except KeyError:
            raise QuadNotFoundError(quad_id) from None

    def get(self, quad_id: str) -> Optional[Quad]:
        return self._by_id.get(quad_id)

    def index_of(self, quad_id: str) -> int:
        """Catalog position of a quad."""
        try:
            return self._positions[quad_id]
        except KeyError:
            raise QuadNotFoundError(quad_id) from None

    def list_by_category(self, category: Union[Category, str]) -> Tuple[Quad, ...]:
        """Quads of one category, in catalog order."""
        return self._by_category[Category(category)]

    def category_counts(self) -> Dict[Category, int]:
        return {category: len(quads) for category, quads in self._by_category.items()}

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {"quads": [quad.to_dict() for quad in self._quads]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuadLibrary":
        entries = (data or {}).get("quads")
        if not entries:
            raise CatalogError("Catalog contains no quads")
        try:
            return cls(Quad.from_dict(entry) for entry in entries)
        except KeyError as e:
            raise CatalogError(f"Catalog entry missing field: {e}") from e

    @classmethod
    def from_yaml(cls, path: Path) -> "QuadLibrary":
        """
        Load a catalog from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            CatalogError: If the catalog is malformed.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Quad catalog not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        library = cls.from_dict(data)
        logger.info("Loaded %d quads from %s", len(library), path)
        return library
