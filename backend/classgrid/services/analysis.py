from __future__ import annotations

import math
from typing import Iterable, List

from classgrid.schemas.analysis import AnalysisOptions, AnalysisResult, AnalysisWarning
from classgrid.schemas.assignment import Assignment, FacultyIdentity, groups_overlap, is_same_faculty
from classgrid.schemas.conflict import ValidationOptions
from classgrid.services.conflict_service import validate_assignment

OPTIMAL_MESSAGE = "Slot is optimal."


def utilization_percent(occupied: int, room_count: int) -> int:
    # Half-up so 90.5 reads as 91, like the dashboard meter.
    return int(math.floor((occupied + 1) / room_count * 100 + 0.5))


def daily_schedule(
    candidate: Assignment,
    schedule: Iterable[Assignment],
    *,
    exclude_id: str | None = None,
) -> List[Assignment]:
    return [
        item
        for item in schedule
        if item.day == candidate.day
        and item.academic_period == candidate.academic_period
        and not (exclude_id and item.id == exclude_id)
    ]


def count_faculty_classes(person: FacultyIdentity, items: Iterable[Assignment]) -> int:
    return sum(1 for item in items if is_same_faculty(person, item))


def _repeats_subject(candidate: Assignment, items: Iterable[Assignment]) -> bool:
    if not candidate.subject or not candidate.section:
        return False
    return any(
        item.subject == candidate.subject
        and item.department == candidate.department
        and item.semester == candidate.semester
        and groups_overlap(item.section_or_wildcard, candidate.section_or_wildcard)
        for item in items
    )


def analyze_assignment(
    candidate: Assignment,
    schedule: Iterable[Assignment],
    options: AnalysisOptions | None = None,
) -> AnalysisResult:
    """Live feedback for a candidate slot.

    Hard conflicts come back as ``status="error"``; everything else is
    advisory and never blocks a write on its own.
    """
    options = options or AnalysisOptions()
    items = list(schedule)

    conflict = validate_assignment(candidate, items, ValidationOptions(exclude_id=options.exclude_id))
    if conflict is not None:
        return AnalysisResult(status="error", message=conflict.message, messages=[conflict.message], conflict=conflict)

    same_day = daily_schedule(candidate, items, exclude_id=options.exclude_id)
    warnings: List[AnalysisWarning] = []

    occupied = sum(1 for item in same_day if item.time_range == candidate.time_range)
    utilization = utilization_percent(occupied, options.room_count)
    if utilization > options.utilization_warning_pct:
        warnings.append(
            AnalysisWarning(kind="utilization", message=f"High traffic! {utilization}% of rooms will be booked.")
        )

    if _repeats_subject(candidate, same_day):
        warnings.append(
            AnalysisWarning(
                kind="repetition",
                message=f"Note: {candidate.subject} is already scheduled for this group today.",
            )
        )

    for member in candidate.faculty_members():
        count = count_faculty_classes(member, same_day)
        if count >= options.daily_load_threshold:
            warnings.append(
                AnalysisWarning(
                    kind="overload",
                    message=f"Faculty {member.label()} already has {count} classes today.",
                )
            )

    if warnings:
        messages = [warning.message for warning in warnings]
        return AnalysisResult(
            status="warning",
            message=messages[0],
            messages=messages,
            warnings=warnings,
            utilization_pct=utilization,
        )
    return AnalysisResult(status="ok", message=OPTIMAL_MESSAGE, utilization_pct=utilization)
