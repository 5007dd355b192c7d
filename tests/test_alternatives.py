from datetime import date

import pytest

from conflict_engine import suggest_equipment, suggest_rooms, suggest_staff, suggest_vehicles
from conflict_engine.alternatives import classify_capacity, match_requirements
from models import (
    AlternativeRequest,
    CapacityFit,
    EquipmentAlternativeRequest,
    RoomAlternativeRequest,
    RoomProfile,
    StaffProfile,
    VehicleProfile,
)


# --- helpers ---

@pytest.mark.parametrize("capacity, required, fit", [
    (4, 4, CapacityFit.PERFECT),
    (6, 4, CapacityFit.SUFFICIENT),
    (5, 4, CapacityFit.LIMITED),
    (3, 4, CapacityFit.INSUFFICIENT),
])
def test_classify_capacity(capacity, required, fit):
    assert classify_capacity(capacity, required) == fit


def test_empty_requirement_accepts_everything():
    assert match_requirements([], ["a"]) == ([], 1.0)
    assert match_requirements(["a", "b"], ["b", "c"]) == (["b"], 0.5)


# --- staff ---

@pytest.fixture
def care_target(user_schedule):
    return user_schedule("target", "09:00", "10:00", staff_ids=["301"])


def staff_request(target, **extra):
    return AlternativeRequest(
        target_schedule=target,
        required_capabilities=["life-support", "medical-care"],
        exclude_ids=["301"],
        **extra,
    )


def test_staff_ranking(care_target, demo_resources):
    alternatives = suggest_staff(staff_request(care_target), demo_resources["staff"], [care_target])
    assert [(a.resource_id, a.priority) for a in alternatives] == [
        ("302", 170), ("304", 155), ("305", 155), ("303", 145),
    ]
    best = alternatives[0]
    assert not best.busy
    assert best.skills_matched == ["life-support", "medical-care"]
    assert best.reason == "free in this window / life-support, medical-care skill match / life-support specialist"


def test_staff_without_required_skills_ranks_specialists_first(care_target):
    staff = [
        StaffProfile(id="plain", name="Plain Worker", skills=["recreation"]),
        StaffProfile(id="nurse", name="Nurse", skills=["medical-care"]),
    ]
    alternatives = suggest_staff(AlternativeRequest(target_schedule=care_target), staff, [care_target])
    assert [(a.resource_id, a.priority) for a in alternatives] == [("nurse", 170), ("plain", 150)]
    assert alternatives[0].skills_matched == ["medical-care"]
    assert alternatives[0].reason == "free in this window / medical-care specialist"
    assert alternatives[1].reason == "free in this window"


def test_staff_exclusion_and_limit(care_target, demo_resources):
    alternatives = suggest_staff(staff_request(care_target, max_suggestions=2), demo_resources["staff"], [care_target])
    assert len(alternatives) == 2
    assert all(a.resource_id != "301" for a in alternatives)


def test_busy_staff_stays_listed_but_sinks(care_target, user_schedule, demo_resources):
    other = user_schedule("other", "09:30", "10:30", person_id="U002", staff_ids=["304"])
    alternatives = suggest_staff(staff_request(care_target), demo_resources["staff"], [care_target, other])
    by_id = {a.resource_id: a for a in alternatives}
    assert by_id["304"].busy
    assert by_id["304"].priority == 55
    assert by_id["304"].reason == "already booked in this window"
    assert alternatives[-1].resource_id == "304"


def test_org_audience_and_primary_staff_count_as_busy(care_target, org_schedule, demo_resources):
    meeting = org_schedule("meeting", "09:00", "09:30", audience=["302"])
    drive = org_schedule("drive", "09:30", "10:00", primary_staff_id="303", vehicle_id="vehicle-001")
    alternatives = suggest_staff(staff_request(care_target), demo_resources["staff"], [care_target, meeting, drive])
    busy = {a.resource_id for a in alternatives if a.busy}
    assert busy == {"302", "303"}


def test_staff_workload_warning(care_target, user_schedule, demo_resources):
    day = [
        user_schedule(f"w{i}", f"{12 + i}:00", f"{12 + i}:30", person_id=f"P{i}", staff_ids=["305"])
        for i in range(3)
    ]
    alternatives = suggest_staff(staff_request(care_target), demo_resources["staff"], [care_target] + day)
    by_id = {a.resource_id: a for a in alternatives}
    assert not by_id["305"].busy
    assert "3 schedules" in by_id["305"].warning
    assert by_id["302"].warning is None


# --- vehicles ---

@pytest.fixture
def trip(user_schedule):
    return user_schedule("trip", "09:00", "10:00", vehicle_id="vehicle-001")


def vehicle_request(target, **extra):
    return AlternativeRequest(
        target_schedule=target,
        required_capabilities=["wheelchair-accessible"],
        required_capacity=4,
        exclude_ids=["vehicle-001"],
        **extra,
    )


def test_vehicle_ranking(trip, demo_resources):
    alternatives = suggest_vehicles(vehicle_request(trip), demo_resources["vehicles"], [trip])
    assert [(a.resource_id, a.priority) for a in alternatives] == [
        ("vehicle-002", 185), ("vehicle-004", 185), ("vehicle-003", 130),
    ]
    assert alternatives[0].capacity_fit == CapacityFit.SUFFICIENT
    assert alternatives[2].capacity_fit == CapacityFit.PERFECT
    assert alternatives[0].features_matched == ["wheelchair-accessible"]


def test_booked_vehicle_is_flagged(trip, user_schedule, demo_resources):
    other = user_schedule("other", "09:30", "10:30", person_id="U002", vehicle_id="vehicle-002")
    alternatives = suggest_vehicles(vehicle_request(trip), demo_resources["vehicles"], [trip, other])
    assert [a.resource_id for a in alternatives] == ["vehicle-004", "vehicle-003", "vehicle-002"]
    assert alternatives[-1].busy
    assert "booked" in alternatives[-1].warning


def test_vehicle_status_and_maintenance(trip):
    vehicles = [
        VehicleProfile(id="down", name="Broken", type="wagon", capacity=8, status="maintenance"),
        VehicleProfile(id="serviced", name="Serviced", type="wagon", capacity=8,
                       maintenance_dates=[date(2025, 1, 1)]),
        VehicleProfile(id="small", name="Small", type="compact", capacity=2),
    ]
    alternatives = suggest_vehicles(vehicle_request(trip), vehicles, [trip])
    by_id = {a.resource_id: a for a in alternatives}
    assert "down" not in by_id
    assert "maintenance" in by_id["serviced"].warning
    assert by_id["small"].capacity_fit == CapacityFit.INSUFFICIENT
    assert "seats" in by_id["small"].warning


# --- rooms ---

@pytest.fixture
def meeting(org_schedule):
    return org_schedule("meeting", "10:00", "11:00", room_id="room-recreation-001")


def room_request(target, **extra):
    return RoomAlternativeRequest(
        target_schedule=target,
        required_capabilities=["desk", "chairs"],
        required_capacity=4,
        preferred_room_types=["consultation"],
        **extra,
    )


def test_room_ranking(meeting, demo_resources):
    alternatives = suggest_rooms(room_request(meeting), demo_resources["rooms"], [meeting])
    assert [(a.resource_id, a.priority) for a in alternatives] == [
        ("room-consultation-001", 205), ("room-dining-001", 150), ("room-training-001", 130),
    ]
    best = alternatives[0]
    assert best.capacity_fit == CapacityFit.PERFECT
    assert best.equipment_matched == ["desk", "chairs"]
    assert best.setup_minutes == 10
    assert best.warning is None


def test_room_exclusion(meeting, demo_resources):
    alternatives = suggest_rooms(
        room_request(meeting, exclude_ids=["room-consultation-001"], max_suggestions=10),
        demo_resources["rooms"], [meeting],
    )
    assert [a.resource_id for a in alternatives] == ["room-dining-001", "room-training-001", "room-recreation-001"]


def test_room_occupied_by_org_resource(meeting, org_schedule, demo_resources):
    other = org_schedule("party", "10:30", "11:30", resource_id="room-consultation-001")
    alternatives = suggest_rooms(room_request(meeting), demo_resources["rooms"], [meeting, other])
    by_id = {a.resource_id: a for a in alternatives}
    assert by_id["room-dining-001"].priority == 150
    assert alternatives[0].resource_id == "room-dining-001"


def test_room_warnings(org_schedule):
    early = org_schedule("early", "07:00", "08:00")
    rooms = [
        RoomProfile(id="wet", name="Wet", type="meeting", capacity=6, status="cleaning", setup_minutes=15),
        RoomProfile(id="closed", name="Closed", type="meeting", capacity=6,
                    available_hours={"start": "09:00", "end": "17:00"}),
        RoomProfile(id="reserved", name="Reserved", type="meeting", capacity=6, status="reserved"),
    ]
    alternatives = suggest_rooms(RoomAlternativeRequest(target_schedule=early), rooms, [early])
    by_id = {a.resource_id: a for a in alternatives}
    assert set(by_id) == {"wet", "closed"}
    assert "Cleaning" in by_id["wet"].warning
    assert "opening hours" in by_id["closed"].warning


# --- equipment ---

@pytest.fixture
def rehab(user_schedule):
    return user_schedule("rehab", "09:00", "10:00")


def equipment_request(target, **extra):
    return EquipmentAlternativeRequest(
        target_schedule=target,
        required_capabilities=["mobility"],
        required_skills=["transfer-assist", "machine-operation"],
        **extra,
    )


def test_equipment_ranking(rehab, demo_resources):
    alternatives = suggest_equipment(equipment_request(rehab), demo_resources["equipment"], [rehab])
    assert [(a.resource_id, a.priority) for a in alternatives] == [
        ("equipment-lift-001", 150), ("equipment-wheelchair-001", 150), ("equipment-communication-001", 100),
    ]
    lift = alternatives[0]
    assert lift.skill_requirements_met
    assert lift.available_units == 2
    assert lift.units_in_use == 0
    assert lift.location_note == "Stored at Rehabilitation Room"


def test_equipment_units_in_use(rehab, user_schedule, demo_resources):
    uses = [
        user_schedule(f"use{i}", "09:00", "10:00", person_id=f"P{i}", equipment_ids=["equipment-lift-001"])
        for i in range(2)
    ]
    alternatives = suggest_equipment(
        equipment_request(rehab, max_suggestions=5), demo_resources["equipment"], [rehab] + uses,
    )
    lift = next(a for a in alternatives if a.resource_id == "equipment-lift-001")
    assert lift.busy
    assert lift.units_in_use == 2
    assert lift.priority == 50
    assert lift.capacity_fit == CapacityFit.INSUFFICIENT
    assert "0 of 2 units free" in lift.warning


def test_equipment_missing_operator_skill(rehab, demo_resources):
    alternatives = suggest_equipment(
        EquipmentAlternativeRequest(target_schedule=rehab, max_suggestions=5),
        demo_resources["equipment"], [rehab],
    )
    monitor = next(a for a in alternatives if a.resource_id == "equipment-medical-001")
    assert not monitor.skill_requirements_met
    assert "nurse" in monitor.warning
