from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Depends
from pydantic import ValidationError

from classgrid.core.config import Settings, get_settings
from classgrid.core.exceptions import ConfigurationError
from classgrid.schemas.analysis import AnalysisOptions
from classgrid.schemas.reminder import ReminderWindow


def analysis_options(
    *,
    settings: Settings,
    exclude_id: str | None,
    room_count: int | None,
) -> AnalysisOptions:
    try:
        return AnalysisOptions(
            exclude_id=exclude_id,
            room_count=room_count if room_count is not None else settings.room_count,
            utilization_warning_pct=settings.utilization_warning_pct,
            daily_load_threshold=settings.daily_load_threshold,
        )
    except ValidationError as exc:
        raise ConfigurationError(
            "room_count/utilization_warning_pct/daily_load_threshold",
            (settings.room_count, settings.utilization_warning_pct, settings.daily_load_threshold),
        ) from exc


def get_reminder_window(settings: Settings = Depends(get_settings)) -> ReminderWindow:
    try:
        return ReminderWindow(min_minutes=settings.reminder_min_minutes, max_minutes=settings.reminder_max_minutes)
    except ValidationError as exc:
        raise ConfigurationError(
            "reminder_min_minutes/reminder_max_minutes",
            (settings.reminder_min_minutes, settings.reminder_max_minutes),
        ) from exc


def institution_zone(settings: Settings) -> ZoneInfo:
    try:
        return ZoneInfo(settings.timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError("timezone", settings.timezone) from exc


def local_now(settings: Settings) -> datetime:
    return datetime.now(institution_zone(settings))


def to_local_time(moment: datetime, settings: Settings) -> datetime:
    """Shift an aware timestamp into the institution's zone; naive ones are taken as local."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(institution_zone(settings))
