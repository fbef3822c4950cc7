"""Routes for the taste questionnaire and report collaborators."""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from ...core.errors import (
    InvalidSelectionError,
    PersistenceError,
    ProfileNotFoundError,
    QuadNotFoundError,
    QuadTasteError,
    SessionCompletedError,
    SessionNotFoundError,
)
from ...core.taxonomy import ALL_AXES, Category
from ..models import (
    CategoryMetricsResponse,
    OverallMetricsResponse,
    ProfileResponse,
    QuadModel,
    ReportMetricsResponse,
    ResumeResponse,
    SelectionRequest,
    SelectionResponse,
    SessionCreate,
    SessionResponse,
)
from ..services.taste_service import TasteService

router = APIRouter(prefix="/api/taste", tags=["taste"])

_STATUS_CODES = (
    (QuadNotFoundError, 404),
    (SessionNotFoundError, 404),
    (ProfileNotFoundError, 404),
    (InvalidSelectionError, 400),
    (SessionCompletedError, 409),
    (PersistenceError, 500),
)


def get_service(request: Request) -> TasteService:
    return request.app.state.taste_service


def _http_error(error: QuadTasteError) -> HTTPException:
    for error_type, status_code in _STATUS_CODES:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=500, detail=str(error))


def _profile_response(service: TasteService, profile) -> ProfileResponse:
    metrics = service.config.metrics
    return ProfileResponse(
        session_id=profile.session_id,
        scores={axis.value: profile.score(axis) for axis in ALL_AXES},
        persisted_scores={
            axis.value: value
            for axis, value in profile.persisted_scores(service.config.scoring.persist_multiplier).items()
        },
        completed_quads=profile.completed_quads,
        skipped_quads=profile.skipped_quads,
        total_quads=profile.total_quads,
        top_materials=profile.top_materials,
        style_label=profile.style_label(
            contemporary_below=metrics.tradition_contemporary_below,
            traditional_above=metrics.tradition_traditional_above,
        ),
    )


@router.get("/quads", response_model=List[QuadModel])
def list_quads(service: TasteService = Depends(get_service)):
    return [QuadModel(**quad.to_dict()) for quad in service.library]


@router.post("/sessions", response_model=SessionResponse, status_code=201)
def create_session(body: Optional[SessionCreate] = None, service: TasteService = Depends(get_service)):
    try:
        record = service.create_session(body.session_id if body else None)
    except QuadTasteError as e:
        raise _http_error(e)
    return SessionResponse(**record.to_dict())


@router.post("/sessions/{session_id}/selection", response_model=SelectionResponse)
def save_selection(
    session_id: str,
    body: SelectionRequest,
    service: TasteService = Depends(get_service),
):
    try:
        selection = service.record_selection(
            session_id,
            body.quad_id,
            favorite1=body.favorite1,
            favorite2=body.favorite2,
            least_favorite=body.least_favorite,
            skipped=body.skipped,
        )
    except QuadTasteError as e:
        raise _http_error(e)
    return SelectionResponse(resolved=selection.is_resolved, **selection.to_dict())


@router.get("/sessions/{session_id}/resume", response_model=ResumeResponse)
def get_resume(session_id: str, service: TasteService = Depends(get_service)):
    try:
        index = service.get_resume_index(session_id)
    except QuadTasteError as e:
        raise _http_error(e)
    total = len(service.library)
    return ResumeResponse(
        session_id=session_id,
        resume_index=index,
        total_quads=total,
        is_complete=index == total,
    )


@router.post("/sessions/{session_id}/complete", response_model=ProfileResponse)
def complete_session(session_id: str, service: TasteService = Depends(get_service)):
    try:
        profile = service.complete_session(session_id)
    except QuadTasteError as e:
        raise _http_error(e)
    return _profile_response(service, profile)


@router.get("/sessions/{session_id}/profile", response_model=ProfileResponse)
def get_profile(session_id: str, service: TasteService = Depends(get_service)):
    try:
        profile = service.get_profile(session_id)
    except QuadTasteError as e:
        raise _http_error(e)
    return _profile_response(service, profile)


@router.get("/sessions/{session_id}/metrics", response_model=ReportMetricsResponse)
def get_metrics(session_id: str, service: TasteService = Depends(get_service)):
    try:
        categories = service.get_all_category_metrics(session_id)
        overall = service.get_overall_metrics(session_id)
    except QuadTasteError as e:
        raise _http_error(e)
    return ReportMetricsResponse(
        categories=[CategoryMetricsResponse(**m.to_dict()) for m in categories],
        overall=OverallMetricsResponse(**overall.to_dict()),
    )


@router.get("/sessions/{session_id}/metrics/{category}", response_model=CategoryMetricsResponse)
def get_category_metrics(
    session_id: str,
    category: Category,
    service: TasteService = Depends(get_service),
):
    try:
        metrics = service.get_category_metrics(session_id, category)
    except QuadTasteError as e:
        raise _http_error(e)
    return CategoryMetricsResponse(**metrics.to_dict())


@router.get("/sessions/{session_id}/export")
def export_session(session_id: str, service: TasteService = Depends(get_service)):
    try:
        return service.export_session(session_id)
    except QuadTasteError as e:
        raise _http_error(e)
