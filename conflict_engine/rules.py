"""
Conflict rules.

A rule is a pure function of two schedules returning a ScheduleConflict or
None. Rules never mutate their inputs and must not depend on argument order
for their verdict; the evaluator decides the scanning order.

The evaluator records only the FIRST non-None result per pair, so the order
of a rule list is its precedence.
"""

from typing import Callable, List, Optional

from models import BaseSchedule, Category, ConflictKind, ScheduleConflict
from .overlap import schedules_overlap

ConflictRule = Callable[[BaseSchedule, BaseSchedule], Optional[ScheduleConflict]]

_USER = Category.USER.value
_STAFF = Category.STAFF.value
_ORG = Category.ORG.value


def _conflict(a: BaseSchedule, b: BaseSchedule, kind: ConflictKind, message: str) -> ScheduleConflict:
    return ScheduleConflict(id_a=a.id, id_b=b.id, kind=kind.value, message=message)


# --- Default rules (person / staff identity) ---

def detect_same_person_care(a: BaseSchedule, b: BaseSchedule) -> Optional[ScheduleConflict]:
    """Two care visits for the same person at the same time."""
    if a.category != _USER or b.category != _USER:
        return None
    person = a.person_key
    if person is None or person != b.person_key:
        return None
    if not schedules_overlap(a, b):
        return None
    return _conflict(
        a, b, ConflictKind.USER_CARE_VS_SUPPORT,
        f"'{a.title}' and '{b.title}' book the same person ({a.display_name or person}) at the same time",
    )


def detect_cross_person_support(a: BaseSchedule, b: BaseSchedule) -> Optional[ScheduleConflict]:
    """Care visits for different people competing for the same support window."""
    if a.category != _USER or b.category != _USER:
        return None
    person = a.person_key
    if person is not None and person == b.person_key:
        return None
    if not schedules_overlap(a, b):
        return None
    return _conflict(
        a, b, ConflictKind.USER_SUPPORT_VS_SUPPORT,
        f"Support for '{a.title}' and '{b.title}' overlaps",
    )


def detect_staff_duty_vs_support(a: BaseSchedule, b: BaseSchedule) -> Optional[ScheduleConflict]:
    """A staff member assigned to a care visit while holding a duty/leave entry."""
    if a.category == _STAFF and b.category == _USER:
        duty, care = a, b
    elif a.category == _USER and b.category == _STAFF:
        duty, care = b, a
    else:
        return None
    shared = set(duty.staff_ids).intersection(care.staff_ids)
    if not shared:
        return None
    if not schedules_overlap(a, b):
        return None
    return _conflict(
        a, b, ConflictKind.STAFF_SUPPORT_VS_STAFF_DUTY,
        f"Staff {', '.join(sorted(shared))} assigned to '{care.title}' also has '{duty.title}'",
    )


DEFAULT_CONFLICT_RULES: List[ConflictRule] = [
    detect_same_person_care,
    detect_cross_person_support,
    detect_staff_duty_vs_support,
]


# --- Resource rules (append after the defaults) ---

def detect_vehicle_double_booking(a: BaseSchedule, b: BaseSchedule) -> Optional[ScheduleConflict]:
    if not a.vehicle_id or a.vehicle_id != b.vehicle_id:
        return None
    if not schedules_overlap(a, b):
        return None
    return _conflict(
        a, b, ConflictKind.VEHICLE_DOUBLE_BOOKING,
        f"Vehicle {a.vehicle_id} is booked for both '{a.title}' and '{b.title}'",
    )


def detect_room_double_booking(a: BaseSchedule, b: BaseSchedule) -> Optional[ScheduleConflict]:
    if not a.room_id or a.room_id != b.room_id:
        return None
    if not schedules_overlap(a, b):
        return None
    return _conflict(
        a, b, ConflictKind.ROOM_DOUBLE_BOOKING,
        f"Room {a.room_id} is booked for both '{a.title}' and '{b.title}'",
    )


def detect_equipment_conflict(a: BaseSchedule, b: BaseSchedule) -> Optional[ScheduleConflict]:
    if not a.equipment_ids or not b.equipment_ids:
        return None
    shared = set(a.equipment_ids).intersection(b.equipment_ids)
    if not shared:
        return None
    if not schedules_overlap(a, b):
        return None
    return _conflict(
        a, b, ConflictKind.EQUIPMENT_CONFLICT,
        f"Equipment {', '.join(sorted(shared))} is booked for both '{a.title}' and '{b.title}'",
    )


def detect_org_resource_conflict(a: BaseSchedule, b: BaseSchedule) -> Optional[ScheduleConflict]:
    if a.category != _ORG or b.category != _ORG:
        return None
    if not a.resource_id or a.resource_id != b.resource_id:
        return None
    if not schedules_overlap(a, b):
        return None
    return _conflict(
        a, b, ConflictKind.ORG_RESOURCE_CONFLICT,
        f"Shared resource {a.resource_id} is reserved by both '{a.title}' and '{b.title}'",
    )


def detect_transportation_overlap(a: BaseSchedule, b: BaseSchedule) -> Optional[ScheduleConflict]:
    """One driver scheduled on two different vehicles at once."""
    if not a.primary_staff_id or a.primary_staff_id != b.primary_staff_id:
        return None
    if not a.vehicle_id or not b.vehicle_id or a.vehicle_id == b.vehicle_id:
        return None
    if not schedules_overlap(a, b):
        return None
    return _conflict(
        a, b, ConflictKind.TRANSPORTATION_OVERLAP,
        f"Driver {a.primary_staff_id} is on {a.vehicle_id} and {b.vehicle_id} at the same time",
    )


RESOURCE_CONFLICT_RULES: List[ConflictRule] = [
    detect_vehicle_double_booking,
    detect_room_double_booking,
    detect_equipment_conflict,
    detect_org_resource_conflict,
    detect_transportation_overlap,
]

ALL_CONFLICT_RULES: List[ConflictRule] = DEFAULT_CONFLICT_RULES + RESOURCE_CONFLICT_RULES
