"""Service layer for the API."""
from .taste_service import TasteService

__all__ = ["TasteService"]
