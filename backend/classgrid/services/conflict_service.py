from __future__ import annotations

from typing import Iterable, List

from classgrid.schemas.assignment import (
    WILDCARD_GROUP,
    Assignment,
    groups_overlap,
    is_same_faculty,
    same_identity,
)
from classgrid.schemas.conflict import Conflict, ConflictReport, ScheduleConflict, ValidationOptions
from classgrid.services.time_intervals import time_ranges_overlap


def self_conflict(candidate: Assignment) -> Conflict | None:
    first, second = candidate.faculty, candidate.faculty2
    if first is None or second is None or not same_identity(first, second):
        return None
    if first.id and second.id:
        message = "Invalid: Selected faculty members have the same Employee ID."
    else:
        message = "Invalid: Cannot select the same faculty twice."
    return Conflict(kind="self", message=message)


def _group_label(assignment: Assignment) -> str:
    label = f"{assignment.department} {assignment.semester} {assignment.section_or_wildcard}"
    if assignment.subgroup_or_wildcard != WILDCARD_GROUP:
        label += f"-{assignment.subgroup_or_wildcard}"
    return label


def pair_conflict(candidate: Assignment, item: Assignment) -> Conflict | None:
    """Hard conflict between two assignments already known to overlap in time.

    Checked in the fixed order room, faculty, second faculty, student group.
    """
    if candidate.room and item.room == candidate.room:
        return Conflict(
            kind="room",
            message=(
                f'Conflict! Room "{candidate.room}" is already booked for "{item.subject}" '
                f"({item.department}-{item.section_or_wildcard})."
            ),
            conflicting_id=item.id,
        )

    for member in (candidate.faculty, candidate.faculty2):
        if is_same_faculty(member, item):
            return Conflict(
                kind="faculty",
                message=f'Conflict! Faculty "{member.label()}" is already teaching "{item.subject}" in {item.room}.',
                conflicting_id=item.id,
            )

    if (
        candidate.department
        and candidate.semester
        and item.department == candidate.department
        and item.semester == candidate.semester
        and groups_overlap(item.section_or_wildcard, candidate.section_or_wildcard)
        and groups_overlap(item.subgroup_or_wildcard, candidate.subgroup_or_wildcard)
    ):
        return Conflict(
            kind="group",
            message=f'Conflict! Student Group "{_group_label(candidate)}" is already booked for "{item.subject}".',
            conflicting_id=item.id,
        )
    return None


def comparison_set(
    candidate: Assignment,
    schedule: Iterable[Assignment],
    *,
    exclude_id: str | None = None,
) -> List[Assignment]:
    return [
        item
        for item in schedule
        if not (exclude_id and item.id == exclude_id)
        and item.academic_period == candidate.academic_period
        and item.day == candidate.day
        and time_ranges_overlap(item.time_range, candidate.time_range)
    ]


def validate_assignment(
    candidate: Assignment,
    schedule: Iterable[Assignment],
    options: ValidationOptions | None = None,
) -> Conflict | None:
    """Return the first hard conflict ``candidate`` has with ``schedule``.

    The search walks the schedule in the given order and stops at the first
    colliding assignment, so the verdict is deterministic for a stable input
    order. Pass ``exclude_id`` when re-validating an edited assignment.
    """
    options = options or ValidationOptions()

    conflict = self_conflict(candidate)
    if conflict is not None:
        return conflict

    for item in comparison_set(candidate, schedule, exclude_id=options.exclude_id):
        conflict = pair_conflict(candidate, item)
        if conflict is not None:
            return conflict
    return None


def detect_schedule_conflicts(schedule: Iterable[Assignment]) -> ConflictReport:
    """Audit a whole snapshot, listing every colliding pair once."""
    items = list(schedule)
    conflicts: List[ScheduleConflict] = []

    for index, item in enumerate(items):
        item_key = item.id or f"#{index}"
        own = self_conflict(item)
        if own is not None:
            conflicts.append(
                ScheduleConflict(id=f"self-{item_key}", kind=own.kind, message=own.message, affected_ids=[item_key])
            )

        later = items[index + 1 :]
        for offset, other in enumerate(later, start=index + 1):
            if other.academic_period != item.academic_period or other.day != item.day:
                continue
            if not time_ranges_overlap(item.time_range, other.time_range):
                continue
            found = pair_conflict(item, other)
            if found is None:
                continue
            other_key = other.id or f"#{offset}"
            conflicts.append(
                ScheduleConflict(
                    id=f"{found.kind}-{item_key}-{other_key}",
                    kind=found.kind,
                    message=found.message,
                    affected_ids=[item_key, other_key],
                )
            )

    return ConflictReport(conflicts=conflicts)
