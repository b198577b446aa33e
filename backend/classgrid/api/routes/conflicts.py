import logging

from fastapi import APIRouter, Depends

from classgrid.api.deps import analysis_options
from classgrid.core.config import Settings, get_settings
from classgrid.schemas.analysis import AnalysisResult, AnalyzeRequest
from classgrid.schemas.conflict import (
    ConflictReport,
    DetectRequest,
    ValidateRequest,
    ValidateResponse,
    ValidationOptions,
)
from classgrid.services.analysis import analyze_assignment
from classgrid.services.conflict_service import detect_schedule_conflicts, validate_assignment

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/validate", response_model=ValidateResponse)
def validate(payload: ValidateRequest) -> ValidateResponse:
    conflict = validate_assignment(
        payload.candidate,
        payload.schedule,
        ValidationOptions(exclude_id=payload.exclude_id),
    )
    if conflict is not None:
        logger.info(
            "Blocked %s %s in room %s: %s conflict with %s",
            payload.candidate.day,
            payload.candidate.time_range,
            payload.candidate.room,
            conflict.kind,
            conflict.conflicting_id,
        )
    return ValidateResponse(ok=conflict is None, conflict=conflict)


@router.post("/analyze", response_model=AnalysisResult)
def analyze(payload: AnalyzeRequest, settings: Settings = Depends(get_settings)) -> AnalysisResult:
    options = analysis_options(settings=settings, exclude_id=payload.exclude_id, room_count=payload.room_count)
    return analyze_assignment(payload.candidate, payload.schedule, options)


@router.post("/detect", response_model=ConflictReport)
def detect(payload: DetectRequest) -> ConflictReport:
    report = detect_schedule_conflicts(payload.schedule)
    if report.has_conflicts:
        logger.info("Schedule audit found %d conflict(s) in %d assignment(s)", len(report.conflicts), len(payload.schedule))
    return report
