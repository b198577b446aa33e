from fastapi import APIRouter, Depends, Query

from classgrid.core.config import Settings, get_settings
from classgrid.schemas.workload import FacultyLoad, LoadClassification, WeeklyHoursRequest
from classgrid.services.workload import classify_load, faculty_load

router = APIRouter()


@router.post("/weekly-hours", response_model=FacultyLoad)
def weekly_hours(payload: WeeklyHoursRequest, settings: Settings = Depends(get_settings)) -> FacultyLoad:
    max_load = payload.max_load if payload.max_load is not None else settings.max_weekly_load
    return faculty_load(payload.faculty, payload.schedule, max_load)


@router.get("/classify", response_model=LoadClassification)
def classify(
    hours: float = Query(ge=0),
    max_load: float | None = Query(default=None, alias="maxLoad", gt=0, le=200),
    settings: Settings = Depends(get_settings),
) -> LoadClassification:
    limit = max_load if max_load is not None else settings.max_weekly_load
    return LoadClassification(hours=hours, max_load=limit, status=classify_load(hours, limit))
