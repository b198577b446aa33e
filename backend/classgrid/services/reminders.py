from __future__ import annotations

from datetime import datetime
import logging
from typing import Iterable, List

from classgrid.schemas.assignment import DAY_VALUES, Assignment
from classgrid.schemas.reminder import ReminderWindow, UpcomingAssignment
from classgrid.services.time_intervals import parse_time_range

logger = logging.getLogger(__name__)


def weekday_name(moment: datetime) -> str:
    return DAY_VALUES[moment.weekday()]


def upcoming_assignments(
    schedule: Iterable[Assignment],
    now: datetime,
    window: ReminderWindow | None = None,
) -> List[UpcomingAssignment]:
    """Classes on ``now``'s weekday starting inside the reminder window.

    ``now`` must already be in the institution's local time.
    """
    window = window or ReminderWindow()
    today = weekday_name(now)
    now_minutes = now.hour * 60 + now.minute + now.second / 60

    upcoming: List[UpcomingAssignment] = []
    for item in schedule:
        if item.day != today:
            continue
        interval = parse_time_range(item.time_range)
        if interval is None:
            logger.debug("Skipping reminder for %s; time range %r is unparseable", item.id, item.time_range)
            continue
        minutes_until = interval.start - now_minutes
        if window.min_minutes <= minutes_until <= window.max_minutes:
            faculty_ids = [member.id for member in item.faculty_members() if member.id]
            upcoming.append(
                UpcomingAssignment(assignment=item, minutes_until=round(minutes_until, 2), faculty_ids=faculty_ids)
            )
    return upcoming
