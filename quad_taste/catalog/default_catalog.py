"""Built-in quad catalog.

Twelve quads per category (fourteen for primary bathrooms), each image
tagged with an (AS, VD, MP) style triple that is encoded into its filename.
"""
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from ..core.config import CatalogConfig
from ..core.logging_config import get_logger
from ..core.taxonomy import Category
from .library import Quad, QuadLibrary, attributes_for_styles
from .style_codes import format_style_reference

logger = get_logger(__name__)

StyleTriple = Tuple[int, int, int]

# (AS, VD, MP) for image positions 0-3 of each quad in a category row.
STYLE_MATRIX: Tuple[Tuple[StyleTriple, ...], ...] = (
    ((1, 2, 2), (3, 3, 4), (6, 6, 5), (8, 7, 7)),
    ((2, 1, 3), (4, 4, 4), (5, 5, 6), (7, 8, 6)),
    ((1, 3, 1), (3, 2, 3), (7, 7, 7), (9, 9, 8)),
    ((2, 2, 2), (4, 3, 5), (6, 5, 6), (8, 8, 8)),
    ((1, 1, 2), (3, 4, 3), (5, 6, 5), (9, 8, 9)),
    ((2, 3, 3), (4, 5, 4), (6, 6, 7), (8, 9, 8)),
    ((1, 2, 1), (3, 3, 2), (7, 6, 6), (9, 8, 9)),
    ((2, 2, 4), (5, 4, 5), (6, 7, 6), (8, 8, 7)),
    ((1, 1, 3), (4, 3, 4), (5, 5, 5), (7, 7, 8)),
    ((2, 3, 2), (3, 4, 3), (6, 5, 7), (9, 9, 9)),
    ((1, 2, 3), (4, 4, 5), (7, 6, 6), (8, 7, 8)),
    ((2, 1, 2), (5, 5, 4), (6, 6, 6), (9, 8, 8)),
)

# Primary bathrooms carry two extra quads.
EXTRA_ROWS = {
    Category.PRIMARY_BATHROOMS: (
        ((1, 2, 2), (3, 3, 4), (6, 6, 5), (8, 7, 7)),
        ((2, 2, 3), (4, 4, 4), (7, 7, 6), (9, 9, 8)),
    ),
}


def build_quad(
    quad_id: str,
    category: Category,
    styles: Sequence[StyleTriple],
    image_base_url: str = "",
    image_extension: str = "jpg",
) -> Quad:
    """Build a quad whose image filenames encode its style triples."""
    base = image_base_url.rstrip("/")
    images = []
    for position, (architectural, density, mood) in enumerate(styles, start=1):
        name = format_style_reference(quad_id, position, architectural, density, mood, image_extension)
        images.append(f"{base}/{name}" if base else name)

    return Quad(
        quad_id=quad_id,
        category=category,
        images=tuple(images),
        attributes=attributes_for_styles([s[0] for s in styles]),
    )


def build_default_quads(image_base_url: str = "", image_extension: str = "jpg") -> List[Quad]:
    quads = []
    for category in Category:
        rows = STYLE_MATRIX + EXTRA_ROWS.get(category, ())
        for seq, styles in enumerate(rows, start=1):
            quad_id = f"{category.prefix}-{seq:03d}"
            quads.append(build_quad(quad_id, category, styles, image_base_url, image_extension))
    return quads


@lru_cache(maxsize=None)
def _default_library(image_base_url: str, image_extension: str) -> QuadLibrary:
    library = QuadLibrary(build_default_quads(image_base_url, image_extension))
    logger.info("Built default quad catalog with %d quads", len(library))
    return library


def load_quad_library(config: Optional[CatalogConfig] = None) -> QuadLibrary:
    """
    Load the quad catalog named by the configuration.

    A YAML catalog is used when ``config.path`` is set; otherwise the
    built-in catalog is returned. The built-in catalog is built once per
    base URL and shared.
    """
    config = config or CatalogConfig()
    if config.path:
        return QuadLibrary.from_yaml(config.path)
    return _default_library(config.image_base_url, config.image_extension)
