from classgrid.schemas.analysis import AnalysisOptions
from classgrid.services.analysis import analyze_assignment, utilization_percent


def test_hard_conflict_short_circuits(make_assignment):
    existing = make_assignment(id="A", room="Lab1", subject="Physics")
    candidate = make_assignment(room="Lab1")
    result = analyze_assignment(candidate, [existing])
    assert result.status == "error"
    assert result.blocking
    assert result.conflict.kind == "room"
    assert result.message == result.conflict.message
    assert result.utilization_pct is None


def test_optimal_slot(make_assignment):
    existing = make_assignment(room="R1", timeRange="2:00 PM - 3:00 PM")
    candidate = make_assignment(room="R2")
    result = analyze_assignment(candidate, [existing])
    assert result.status == "ok"
    assert result.message == "Slot is optimal."
    assert result.utilization_pct == 10
    assert result.messages == []
    assert not result.blocking


def test_utilization_counts_exact_slot_text_only(make_assignment):
    schedule = [
        make_assignment(room="R1", timeRange="10:00 AM - 11:00 AM"),
        make_assignment(room="R2", timeRange="10:30 AM - 11:30 AM"),
        make_assignment(room="R3", timeRange="10:00 AM - 11:00 AM", day="Tuesday"),
    ]
    candidate = make_assignment(room="R9", timeRange="10:00 AM - 11:00 AM")
    result = analyze_assignment(candidate, schedule, AnalysisOptions(room_count=4))
    assert result.utilization_pct == 50
    assert result.status == "ok"


def test_high_utilization_warns(make_assignment):
    existing = make_assignment(room="R1")
    candidate = make_assignment(room="R2")
    result = analyze_assignment(candidate, [existing], AnalysisOptions(room_count=2))
    assert result.status == "warning"
    assert result.utilization_pct == 100
    assert result.message == "High traffic! 100% of rooms will be booked."
    assert [warning.kind for warning in result.warnings] == ["utilization"]


def test_utilization_threshold_is_strictly_greater(make_assignment):
    schedule = [make_assignment(room=f"R{index}") for index in range(8)]
    candidate = make_assignment(room="R99")
    result = analyze_assignment(candidate, schedule, AnalysisOptions(room_count=10))
    assert result.utilization_pct == 90
    assert result.status == "ok"


def test_utilization_percent_rounds_half_up():
    assert utilization_percent(0, 8) == 13
    assert utilization_percent(1, 3) == 67
    assert utilization_percent(0, 200) == 1


def test_subject_repetition_warns(make_assignment):
    existing = make_assignment(
        room="R1",
        timeRange="2:00 PM - 3:00 PM",
        subject="Maths",
        department="CS",
        semester="3rd",
        section="All",
    )
    candidate = make_assignment(room="R2", subject="Maths", department="CS", semester="3rd", section="A")
    result = analyze_assignment(candidate, [existing])
    assert result.status == "warning"
    assert result.message == "Note: Maths is already scheduled for this group today."
    assert result.warnings[0].kind == "repetition"


def test_repetition_needs_candidate_section(make_assignment):
    existing = make_assignment(room="R1", timeRange="2:00 PM - 3:00 PM", subject="Maths", department="CS", semester="3rd")
    candidate = make_assignment(room="R2", subject="Maths", department="CS", semester="3rd")
    assert analyze_assignment(candidate, [existing]).status == "ok"


def test_faculty_daily_load_warns_at_four(make_assignment):
    slots = ["8:00 AM - 9:00 AM", "9:00 AM - 10:00 AM", "1:00 PM - 2:00 PM", "2:00 PM - 3:00 PM"]
    schedule = [
        make_assignment(room=f"R{index}", timeRange=slot, faculty={"id": "F1", "displayName": "Dr. Rao"})
        for index, slot in enumerate(slots)
    ]
    candidate = make_assignment(room="R9", faculty={"id": "F1", "displayName": "Dr. Rao"})

    result = analyze_assignment(candidate, schedule)
    assert result.status == "warning"
    assert result.message == "Faculty Dr. Rao already has 4 classes today."

    lighter = analyze_assignment(candidate, schedule[:3])
    assert lighter.status == "ok"


def test_daily_load_threshold_is_configurable(make_assignment):
    schedule = [make_assignment(room="R1", timeRange="2:00 PM - 3:00 PM", faculty="Dr. Rao")]
    candidate = make_assignment(room="R2", faculty="Dr. Rao")
    result = analyze_assignment(candidate, schedule, AnalysisOptions(daily_load_threshold=1))
    assert result.warnings[0].kind == "overload"
    assert "1 classes today" in result.message


def test_all_warnings_are_listed_in_order(make_assignment):
    schedule = [
        make_assignment(
            room=f"R{index}",
            timeRange=slot,
            subject="Maths",
            department="CS",
            semester="3rd",
            section="B",
            faculty={"id": "F1", "displayName": "Dr. Rao"},
        )
        for index, slot in enumerate(
            ["8:00 AM - 9:00 AM", "9:00 AM - 10:00 AM", "1:00 PM - 2:00 PM", "2:00 PM - 3:00 PM"]
        )
    ]
    schedule.append(make_assignment(room="R8", subject="Physics"))
    candidate = make_assignment(
        room="R9",
        subject="Maths",
        department="CS",
        semester="3rd",
        section="B",
        faculty={"id": "F1", "displayName": "Dr. Rao"},
    )
    result = analyze_assignment(candidate, schedule, AnalysisOptions(room_count=2))
    assert result.status == "warning"
    assert [warning.kind for warning in result.warnings] == ["utilization", "repetition", "overload"]
    assert result.message == result.messages[0]
    assert len(result.messages) == 3


def test_exclude_id_drops_edited_assignment_from_counts(make_assignment):
    existing = make_assignment(id="X", room="R1")
    edited = existing.model_copy(update={"room": "R2"})
    result = analyze_assignment(edited, [existing], AnalysisOptions(room_count=2, exclude_id="X"))
    assert result.status == "ok"
    assert result.utilization_pct == 50

    unexcluded = analyze_assignment(edited, [existing], AnalysisOptions(room_count=2))
    assert unexcluded.status == "warning"
    assert unexcluded.utilization_pct == 100


def test_options_accept_camel_case():
    options = AnalysisOptions.model_validate({"excludeId": "X", "roomCount": 5})
    assert options.exclude_id == "X"
    assert options.room_count == 5
    assert options.daily_load_threshold == 4
