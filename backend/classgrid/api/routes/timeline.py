from fastapi import APIRouter, Depends

from classgrid.core.config import Settings, get_settings
from classgrid.core.exceptions import ValidationInputError
from classgrid.schemas.timeline import LayoutRequest, TimelineLayout
from classgrid.services.timeline_layout import layout_events

router = APIRouter()


@router.post("/layout", response_model=TimelineLayout)
def layout(payload: LayoutRequest, settings: Settings = Depends(get_settings)) -> TimelineLayout:
    events = payload.events
    if payload.day is not None:
        if payload.day not in settings.days:
            raise ValidationInputError(
                f"{payload.day} is not a teaching day",
                details={"day": payload.day, "days": settings.days},
            )
        events = [event for event in events if event.day == payload.day]
    return layout_events(events, default_start_minutes=settings.layout_default_start_hour * 60)
