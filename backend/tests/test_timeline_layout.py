import random

from classgrid.schemas.assignment import Assignment
from classgrid.services.timeline_layout import DEFAULT_START_MINUTES, layout_events


def _clock(minutes: int) -> str:
    return f"{minutes // 60}:{minutes % 60:02d}"


def _event(identifier: str, start: int, end: int) -> Assignment:
    return Assignment(id=identifier, day="Monday", time_range=f"{_clock(start)} - {_clock(end)}")


def _max_depth(intervals):
    # Sweep line; ends sort before starts at the same instant (half-open).
    points = []
    for start, end in intervals:
        points.append((start, 1))
        points.append((end, -1))
    points.sort(key=lambda point: (point[0], point[1]))
    depth = best = 0
    for _, delta in points:
        depth += delta
        best = max(best, depth)
    return best


def test_empty_layout():
    layout = layout_events([])
    assert layout.items == []
    assert layout.lane_count == 0


def test_non_overlapping_events_share_one_lane():
    events = [_event("a", 540, 600), _event("b", 600, 660), _event("c", 700, 760)]
    layout = layout_events(events)
    assert layout.lane_count == 1
    assert [item.lane for item in layout.items] == [0, 0, 0]


def test_longest_event_claims_lane_first_on_equal_start():
    events = [
        Assignment(id="short", day="Monday", time_range="9:00 AM - 10:00 AM"),
        Assignment(id="long", day="Monday", time_range="9:00 AM - 11:00 AM"),
        Assignment(id="follow", day="Monday", time_range="10:00 AM - 11:00 AM"),
    ]
    layout = layout_events(events)
    lanes = {item.assignment.id: item.lane for item in layout.items}
    assert [item.assignment.id for item in layout.items] == ["long", "short", "follow"]
    assert lanes == {"long": 0, "short": 1, "follow": 1}
    assert layout.lane_count == 2


def test_first_free_lane_is_reused():
    events = [_event("a", 540, 720), _event("b", 540, 600), _event("c", 560, 620), _event("d", 600, 660)]
    layout = layout_events(events)
    lanes = {item.assignment.id: item.lane for item in layout.items}
    assert lanes == {"a": 0, "b": 1, "c": 2, "d": 1}
    assert layout.lane_count == 3


def test_unparseable_event_gets_default_block():
    events = [Assignment(id="x", day="Monday", time_range="TBA"), _event("y", 570, 600)]
    layout = layout_events(events)
    placed = {item.assignment.id: item for item in layout.items}
    assert placed["x"].start == DEFAULT_START_MINUTES
    assert placed["x"].end == DEFAULT_START_MINUTES + 60
    assert placed["x"].lane == 0
    assert placed["y"].lane == 1
    assert layout.lane_count == 2


def test_default_start_is_configurable():
    layout = layout_events([Assignment(day="Monday", time_range="")], default_start_minutes=8 * 60)
    assert layout.items[0].start == 480
    assert layout.items[0].end == 540


def test_lanes_never_overlap_and_count_is_optimal():
    rng = random.Random(20261019)
    for _ in range(50):
        intervals = []
        for _ in range(rng.randint(1, 25)):
            start = rng.randrange(7 * 60, 18 * 60, 15)
            end = start + rng.choice([30, 45, 60, 90, 120, 180])
            intervals.append((start, end))
        events = [_event(f"e{index}", start, end) for index, (start, end) in enumerate(intervals)]

        layout = layout_events(events)

        assert layout.lane_count == _max_depth(intervals)
        by_lane = {}
        for item in layout.items:
            by_lane.setdefault(item.lane, []).append((item.start, item.end))
        for spans in by_lane.values():
            spans.sort()
            for (_, previous_end), (next_start, _) in zip(spans, spans[1:]):
                assert previous_end <= next_start


def test_layout_keeps_every_event():
    events = [_event(f"e{index}", 540 + index * 10, 600 + index * 10) for index in range(6)]
    layout = layout_events(events)
    assert sorted(item.assignment.id for item in layout.items) == sorted(event.id for event in events)
