import logging

from fastapi import APIRouter, Depends

from classgrid.api.deps import get_reminder_window, local_now, to_local_time
from classgrid.core.config import Settings, get_settings
from classgrid.schemas.reminder import ReminderWindow, UpcomingAssignment, UpcomingRequest
from classgrid.services.reminders import upcoming_assignments

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/upcoming", response_model=list[UpcomingAssignment])
def upcoming(
    payload: UpcomingRequest,
    settings: Settings = Depends(get_settings),
    window: ReminderWindow = Depends(get_reminder_window),
) -> list[UpcomingAssignment]:
    now = to_local_time(payload.now, settings) if payload.now is not None else local_now(settings)
    selected = upcoming_assignments(payload.schedule, now, window)
    logger.info("Selected %d upcoming class(es) for reminders at %s", len(selected), now.isoformat())
    return selected
