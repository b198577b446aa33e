from __future__ import annotations

from dataclasses import dataclass
import logging
import re

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60
RANGE_SEPARATOR = " - "

CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?:\s*([AaPp][Mm]))?$")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class TimeInterval:
    """Half-open interval in minutes past a reference midnight.

    ``end`` may exceed one day when the range crosses midnight.
    """

    start: int
    end: int

    @property
    def duration_minutes(self) -> int:
        return self.end - self.start

    @property
    def duration_hours(self) -> float:
        return self.duration_minutes / 60


def parse_clock_time(value: str) -> int | None:
    """Parse ``H:MM`` with an optional AM/PM suffix into minutes past midnight."""
    match = CLOCK_PATTERN.match(value.strip())
    if match is None:
        return None
    hours = int(match.group(1))
    minutes = int(match.group(2))
    meridiem = match.group(3)
    if minutes > 59:
        return None
    if meridiem is None:
        if hours > 23:
            return None
    else:
        if not 1 <= hours <= 12:
            return None
        if meridiem.upper() == "AM":
            hours = 0 if hours == 12 else hours
        elif hours != 12:
            hours += 12
    return hours * 60 + minutes


def parse_time_range(text: str | None) -> TimeInterval | None:
    """Turn ``"10:00 AM - 11:30 AM"`` into a :class:`TimeInterval`.

    Returns ``None`` for anything that is not exactly two parseable clock
    times. A range whose end is not after its start crosses midnight, so a
    zero-length range reads as a full day.
    """
    if not text:
        return None
    parts = _WHITESPACE.sub(" ", text.strip()).split(RANGE_SEPARATOR)
    if len(parts) != 2:
        logger.debug("Time range %r does not have exactly two parts", text)
        return None

    start = parse_clock_time(parts[0])
    end = parse_clock_time(parts[1])
    if start is None or end is None:
        logger.debug("Unable to parse time range %r", text)
        return None

    if end <= start:
        end += MINUTES_PER_DAY
    return TimeInterval(start=start, end=end)


def overlaps(a: TimeInterval, b: TimeInterval) -> bool:
    return a.start < b.end and a.end > b.start


def time_ranges_overlap(first: str | None, second: str | None) -> bool:
    """Overlap test on raw range text.

    Identical text always overlaps, blank text included. When either side
    cannot be parsed there is nothing better to go on than textual identity,
    so differing text is treated as non-overlapping.
    """
    if first == second:
        return True
    if not first or not second:
        return False

    first_interval = parse_time_range(first)
    second_interval = parse_time_range(second)
    if first_interval is None or second_interval is None:
        return first == second
    return overlaps(first_interval, second_interval)
