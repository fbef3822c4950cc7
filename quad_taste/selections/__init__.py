"""Selection state and resume logic.

The recorder lives in ``quad_taste.selections.recorder``; it depends on the
storage layer, which itself imports the selection models from here.
"""
from .models import Selection, SelectionRole

__all__ = [
    "Selection",
    "SelectionRole",
]
