"""Core infrastructure modules."""
from .config import Config, load_config, save_config
from .errors import (
    QuadTasteError,
    CatalogError,
    QuadNotFoundError,
    StyleCodeError,
    InvalidSelectionError,
    SessionNotFoundError,
    SessionCompletedError,
    ProfileNotFoundError,
    PersistenceError,
)
from .logging_config import (
    setup_logging,
    get_logger,
)
from .taxonomy import Axis, Category, ATTRIBUTE_AXES, CATEGORY_ORDER

__all__ = [
    "Config",
    "load_config",
    "save_config",
    "QuadTasteError",
    "CatalogError",
    "QuadNotFoundError",
    "StyleCodeError",
    "InvalidSelectionError",
    "SessionNotFoundError",
    "SessionCompletedError",
    "ProfileNotFoundError",
    "PersistenceError",
    "setup_logging",
    "get_logger",
    "Axis",
    "Category",
    "ATTRIBUTE_AXES",
    "CATEGORY_ORDER",
]
