from __future__ import annotations

import logging
from typing import Iterable

from classgrid.schemas.assignment import Assignment, FacultyIdentity, is_same_faculty
from classgrid.schemas.workload import FacultyLoad, LoadStatus
from classgrid.services.time_intervals import parse_time_range

logger = logging.getLogger(__name__)

DEFAULT_MAX_LOAD = 18.0
DEFAULT_CLASS_HOURS = 1.0
HEAVY_LOAD_RATIO = 0.8


def assignment_hours(assignment: Assignment) -> float:
    interval = parse_time_range(assignment.time_range)
    if interval is None:
        logger.debug(
            "Counting assignment %s as %.1f hour(s); time range %r is unparseable",
            assignment.id,
            DEFAULT_CLASS_HOURS,
            assignment.time_range,
        )
        return DEFAULT_CLASS_HOURS
    return interval.duration_hours


def weekly_hours(faculty: FacultyIdentity, schedule: Iterable[Assignment]) -> float:
    total = sum((assignment_hours(item) for item in schedule if is_same_faculty(faculty, item)), 0.0)
    return round(total, 1)


def classify_load(hours: float, max_load: float = DEFAULT_MAX_LOAD) -> LoadStatus:
    if max_load <= 0:
        raise ValueError("max_load must be positive")
    if hours >= max_load:
        return "Overloaded"
    if hours >= HEAVY_LOAD_RATIO * max_load:
        return "Heavy"
    return "Optimal"


def faculty_load(
    faculty: FacultyIdentity,
    schedule: Iterable[Assignment],
    max_load: float = DEFAULT_MAX_LOAD,
) -> FacultyLoad:
    hours = weekly_hours(faculty, schedule)
    return FacultyLoad(faculty=faculty, hours=hours, max_load=max_load, status=classify_load(hours, max_load))
