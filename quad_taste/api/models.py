"""Pydantic models for the API layer."""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..core.taxonomy import Category


# ── Catalog models ──────────────────────────────────────────────────────

class QuadModel(BaseModel):
    """A quad as served to the questionnaire."""
    quad_id: str
    category: Category
    images: List[str]
    attributes: Dict[str, List[int]] = Field(default_factory=dict)


# ── Session / selection models ─────────────────────────────────────────

class SessionCreate(BaseModel):
    """Request body for creating a session (id is generated if omitted)."""
    session_id: Optional[str] = Field(None, min_length=1, max_length=64)


class SessionResponse(BaseModel):
    """Session lifecycle state."""
    session_id: str
    status: str
    created_at: str
    completed_at: Optional[str] = None


class SelectionRequest(BaseModel):
    """Request body for saving a quad selection."""
    quad_id: str = Field(..., min_length=1)
    favorite1: Optional[int] = None
    favorite2: Optional[int] = None
    least_favorite: Optional[int] = None
    skipped: bool = False


class SelectionResponse(BaseModel):
    """A stored selection."""
    session_id: str
    quad_id: str
    favorite1: Optional[int] = None
    favorite2: Optional[int] = None
    least_favorite: Optional[int] = None
    skipped: bool = False
    resolved: bool = False
    updated_at: str


class ResumeResponse(BaseModel):
    """Where the questionnaire should continue."""
    session_id: str
    resume_index: int
    total_quads: int
    is_complete: bool


# ── Profile / metrics models ───────────────────────────────────────────

class ProfileResponse(BaseModel):
    """A saved taste profile; scores are on the 1-10 scale."""
    session_id: str
    scores: Dict[str, float]
    persisted_scores: Dict[str, int]
    completed_quads: int
    skipped_quads: int
    total_quads: int
    top_materials: List[str] = Field(default_factory=list)
    style_label: str


class CategoryMetricsResponse(BaseModel):
    """Style metrics for one category (1-5 scale)."""
    category: Category
    style_era: float
    material_complexity: float
    mood_palette: float
    has_selection: bool
    quad_id: Optional[str] = None
    image: Optional[str] = None


class OverallMetricsResponse(BaseModel):
    """Style metrics averaged over answered categories."""
    style_era: float
    material_complexity: float
    mood_palette: float
    style_label: str
    categories_answered: int


class ReportMetricsResponse(BaseModel):
    """Per-category and overall metrics for the report."""
    categories: List[CategoryMetricsResponse]
    overall: OverallMetricsResponse
