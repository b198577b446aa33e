"""Lane assignment for a single day's timeline.

Events that overlap in time are spread across lanes so none of them share a
track. Greedy partitioning over events sorted by start time uses exactly as
many lanes as the deepest point of overlap.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from classgrid.schemas.assignment import Assignment
from classgrid.schemas.timeline import LaidOutEvent, TimelineLayout
from classgrid.services.time_intervals import TimeInterval, parse_time_range

logger = logging.getLogger(__name__)

DEFAULT_START_MINUTES = 9 * 60
DEFAULT_BLOCK_MINUTES = 60


def event_interval(event: Assignment, default_start_minutes: int = DEFAULT_START_MINUTES) -> TimeInterval:
    interval = parse_time_range(event.time_range)
    if interval is not None:
        return interval
    logger.debug("Placing event %s with unparseable time %r at the default slot", event.id, event.time_range)
    return TimeInterval(start=default_start_minutes, end=default_start_minutes + DEFAULT_BLOCK_MINUTES)


def layout_events(
    events: Iterable[Assignment],
    default_start_minutes: int = DEFAULT_START_MINUTES,
) -> TimelineLayout:
    timed: List[Tuple[TimeInterval, Assignment]] = [
        (event_interval(event, default_start_minutes), event) for event in events
    ]
    # Longest first on equal starts, so big blocks claim the low lanes.
    timed.sort(key=lambda pair: (pair[0].start, -pair[0].duration_minutes))

    lane_ends: List[int] = []
    items: List[LaidOutEvent] = []
    for interval, event in timed:
        lane = next((index for index, end in enumerate(lane_ends) if end <= interval.start), None)
        if lane is None:
            lane = len(lane_ends)
            lane_ends.append(interval.end)
        else:
            lane_ends[lane] = interval.end
        items.append(LaidOutEvent(assignment=event, lane=lane, start=interval.start, end=interval.end))

    return TimelineLayout(items=items, lane_count=len(lane_ends))
