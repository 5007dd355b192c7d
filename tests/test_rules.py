import time

from conflict_engine import (
    ALL_CONFLICT_RULES,
    DEFAULT_CONFLICT_RULES,
    ConflictEvaluator,
    build_conflict_index,
    conflicts_for,
    detect_conflicts,
    has_conflict,
)
from models import ConflictKind, ScheduleConflict, UserCareSchedule


def test_same_person_overlap(user_schedule):
    a = user_schedule("a", "09:00", "10:00", person_id="U001")
    b = user_schedule("b", "09:30", "10:30", person_id="U001", staff_ids=["ST002"])
    conflicts = detect_conflicts([a, b])
    assert len(conflicts) == 1
    assert conflicts[0].kind == ConflictKind.USER_CARE_VS_SUPPORT.value
    assert (conflicts[0].id_a, conflicts[0].id_b) == ("a", "b")


def test_different_people_overlap(user_schedule):
    a = user_schedule("a", "09:00", "10:00", person_id="U001", staff_ids=["ST001"])
    b = user_schedule("b", "09:30", "10:30", person_id="U002", staff_ids=["ST002"])
    conflicts = detect_conflicts([a, b])
    assert [c.kind for c in conflicts] == [ConflictKind.USER_SUPPORT_VS_SUPPORT.value]


def test_staff_duty_vs_support(user_schedule, staff_schedule):
    duty = staff_schedule("duty", "09:00", "10:00", staff_ids=["S1"])
    care = user_schedule("care", "09:30", "10:30", staff_ids=["S1"])
    conflicts = detect_conflicts([duty, care])
    assert len(conflicts) == 1
    assert conflicts[0].kind == ConflictKind.STAFF_SUPPORT_VS_STAFF_DUTY.value
    assert "S1" in conflicts[0].message


def test_staff_duty_without_shared_staff_is_ignored(user_schedule, staff_schedule):
    duty = staff_schedule("duty", "09:00", "10:00", staff_ids=["S1"])
    care = user_schedule("care", "09:30", "10:30", staff_ids=["S2"])
    assert detect_conflicts([duty, care]) == []


def test_adjacent_schedules_do_not_conflict(user_schedule):
    a = user_schedule("a", "09:00", "10:00")
    b = user_schedule("b", "10:00", "11:00")
    assert detect_conflicts([a, b]) == []


def test_at_most_one_conflict_per_pair(user_schedule):
    a = user_schedule("a", "09:00", "10:00", vehicle_id="V1", room_id="R1")
    b = user_schedule("b", "09:30", "10:30", vehicle_id="V1", room_id="R1")
    conflicts = detect_conflicts([a, b], ALL_CONFLICT_RULES)
    assert len(conflicts) == 1
    # rule order is precedence: the person rule wins over the resource rules
    assert conflicts[0].kind == ConflictKind.USER_CARE_VS_SUPPORT.value


def test_custom_rule_is_appended(org_schedule):
    def same_audience(a, b):
        if a.category == "Org" and b.category == "Org" and set(a.audience) & set(b.audience):
            return ScheduleConflict(a.id, b.id, "org-audience-clash", "audience double-booked")
        return None

    a = org_schedule("o1", "09:00", "10:00", audience=["team-a"])
    b = org_schedule("o2", "13:00", "14:00", audience=["team-a"])
    assert detect_conflicts([a, b]) == []
    conflicts = detect_conflicts([a, b], DEFAULT_CONFLICT_RULES + [same_audience])
    assert [c.kind for c in conflicts] == ["org-audience-clash"]


def test_input_is_not_mutated(user_schedule):
    schedules = [user_schedule("a", "09:00", "10:00"), user_schedule("b", "09:30", "10:30")]
    before = [s.model_dump() for s in schedules]
    detect_conflicts(schedules)
    assert [s.model_dump() for s in schedules] == before


def test_resource_rules(user_schedule, org_schedule):
    vehicles = [
        user_schedule("v1", "09:00", "10:00", person_id="P1", vehicle_id="car"),
        user_schedule("v2", "09:30", "10:30", person_id="P2", vehicle_id="car"),
    ]
    rules = ALL_CONFLICT_RULES[2:]  # drop the two person rules to reach the resource ones
    assert [c.kind for c in detect_conflicts(vehicles, rules)] == [ConflictKind.VEHICLE_DOUBLE_BOOKING.value]

    rooms = [
        org_schedule("r1", "09:00", "10:00", room_id="hall"),
        org_schedule("r2", "09:30", "10:30", room_id="hall"),
    ]
    assert [c.kind for c in detect_conflicts(rooms, ALL_CONFLICT_RULES)] == [ConflictKind.ROOM_DOUBLE_BOOKING.value]

    equipment = [
        org_schedule("e1", "09:00", "10:00", equipment_ids=["lift", "ball"]),
        org_schedule("e2", "09:30", "10:30", equipment_ids=["lift"]),
    ]
    found = detect_conflicts(equipment, ALL_CONFLICT_RULES)
    assert [c.kind for c in found] == [ConflictKind.EQUIPMENT_CONFLICT.value]
    assert "lift" in found[0].message

    org = [
        org_schedule("g1", "09:00", "10:00", resource_id="play-room"),
        org_schedule("g2", "09:30", "10:30", resource_id="play-room"),
    ]
    assert [c.kind for c in detect_conflicts(org, ALL_CONFLICT_RULES)] == [ConflictKind.ORG_RESOURCE_CONFLICT.value]

    drives = [
        org_schedule("d1", "09:00", "10:00", vehicle_id="car-1", primary_staff_id="driver"),
        org_schedule("d2", "09:30", "10:30", vehicle_id="car-2", primary_staff_id="driver"),
    ]
    assert [c.kind for c in detect_conflicts(drives, ALL_CONFLICT_RULES)] == [ConflictKind.TRANSPORTATION_OVERLAP.value]


def test_resource_rules_need_overlap(org_schedule):
    rooms = [
        org_schedule("r1", "09:00", "10:00", room_id="hall"),
        org_schedule("r2", "10:00", "11:00", room_id="hall"),
    ]
    assert detect_conflicts(rooms, ALL_CONFLICT_RULES) == []


def test_evaluator_class_matches_function(user_schedule):
    schedules = [user_schedule("a", "09:00", "10:00"), user_schedule("b", "09:30", "10:30")]
    assert ConflictEvaluator().evaluate(schedules) == detect_conflicts(schedules)


def test_500_schedules_are_fast():
    schedules = [
        UserCareSchedule(
            id=f"s{i}",
            title=f"Visit {i}",
            start=f"2025-01-01T{8 + i // 50:02d}:00:00",
            end=f"2025-01-01T{9 + i // 50:02d}:00:00",
            person_id=f"U{i % 50}",
            staff_ids=[f"ST{i % 20}"],
        )
        for i in range(500)
    ]
    started = time.perf_counter()
    conflicts = detect_conflicts(schedules)
    elapsed = time.perf_counter() - started
    assert len(conflicts) > 0
    assert elapsed < 1.0


def test_index_files_conflicts_under_both_ids():
    c1 = ScheduleConflict("a", "b", "k", "m1")
    c2 = ScheduleConflict("b", "c", "k", "m2")
    index = build_conflict_index([c1, c2])
    assert index["a"] == [c1]
    assert index["b"] == [c1, c2]
    assert index["c"] == [c2]
    assert has_conflict(index, "b")
    assert not has_conflict(index, "z")
    assert conflicts_for(index, "c") == [c2]


def test_has_conflict_tolerates_missing_index():
    assert not has_conflict(None, "a")
    assert not has_conflict({}, "a")
    assert not has_conflict({"a": []}, "a")
    assert conflicts_for(None, "a") == []
