"""Shared fixtures."""
import pytest

from quad_taste.catalog.default_catalog import build_default_quads
from quad_taste.catalog.library import Quad, QuadLibrary
from quad_taste.core.taxonomy import Axis, Category
from quad_taste.storage.memory import InMemorySessionStore


@pytest.fixture
def library():
    """The built-in 110-quad catalog, with bare filenames."""
    return QuadLibrary(build_default_quads())


@pytest.fixture
def store():
    return InMemorySessionStore()


@pytest.fixture
def warmth_quad():
    """A quad whose warmth values are [2, 5, 6, 9]."""
    return Quad(
        quad_id="LS-900",
        category=Category.LIVING_SPACES,
        images=(
            "LS-900_1_AS1_VD1_MP1.jpg",
            "LS-900_2_AS3_VD3_MP3.jpg",
            "LS-900_3_AS6_VD6_MP6.jpg",
            "LS-900_4_AS9_VD9_MP9.jpg",
        ),
        attributes={
            Axis.WARMTH: (2, 5, 6, 9),
            Axis.FORMALITY: (3, 5, 7, 9),
            Axis.DRAMA: (9, 5, 5, 8),
            Axis.TRADITION: (1, 3, 6, 9),
        },
    )
