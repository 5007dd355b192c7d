"""
Operator-facing guidance for each conflict kind.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

from models import ConflictKind, ScheduleConflict


@dataclass(frozen=True)
class GuideItem:
    kind: str
    title: str
    description: str
    suggestions: List[str]


# kind -> (title, description, suggestions)
_GUIDES: Dict[str, Tuple[str, str, Tuple[str, ...]]] = {
    ConflictKind.USER_CARE_VS_SUPPORT.value: (
        "Care visits for the same person overlap",
        "The same person has two care entries booked in the same time window.",
        (
            "Decide which visit takes priority under the service policy.",
            "Move the start or end of the support visit earlier or later.",
            "Check the booked hours against the person's service agreement.",
        ),
    ),
    ConflictKind.USER_SUPPORT_VS_SUPPORT.value: (
        "Support visits overlap",
        "Two support visits compete for the same time window.",
        (
            "Check the overlapping support visits for a mistaken entry.",
            "Confirm that providing both at once is really needed.",
            "Check that transport times and service slots are realistic.",
        ),
    ),
    ConflictKind.STAFF_SUPPORT_VS_STAFF_DUTY.value: (
        "Assigned staff also has a personal entry",
        "A staff member assigned to a care visit has a meeting, training or leave entry at the same time.",
        (
            "Decide whether the meeting or the care visit takes priority.",
            "Hand the care visit to another staff member.",
            "If both are required, re-check that the support plan is still safe.",
        ),
    ),
    ConflictKind.VEHICLE_DOUBLE_BOOKING.value: (
        "Vehicle is double-booked",
        "The same vehicle is assigned to more than one trip in this time window.",
        (
            "Shift one of the trips to a different time window.",
            "Check whether another vehicle is free.",
            "Combine the trips into one route if seats allow.",
        ),
    ),
    ConflictKind.ROOM_DOUBLE_BOOKING.value: (
        "Room is double-booked",
        "The same room is assigned to more than one entry in this time window.",
        (
            "Decide which entry can move to another room based on size and purpose.",
            "Check whether another room or space is free.",
            "Consider remote attendance to spread the load across rooms.",
        ),
    ),
    ConflictKind.EQUIPMENT_CONFLICT.value: (
        "Equipment is double-booked",
        "The same equipment is booked by more than one entry in this time window.",
        (
            "Check how many units are actually needed at the same time.",
            "Check whether other free equipment or a substitute exists.",
            "Shift one entry earlier or later to spread equipment use.",
        ),
    ),
    ConflictKind.ORG_RESOURCE_CONFLICT.value: (
        "Shared organization resource is double-booked",
        "A resource managed at the organization level is reserved more than once.",
        (
            "Re-check the resource booking sheet and its rules.",
            "Reschedule the lower-priority entry.",
            "Agree on booking slots to avoid repeats of this overlap.",
        ),
    ),
    ConflictKind.TRANSPORTATION_OVERLAP.value: (
        "Transport runs overlap",
        "One driver is scheduled on two vehicles at once, which cannot run as planned.",
        (
            "Re-order the passengers and routes into a workable sequence.",
            "Leave more margin between departure and arrival times.",
            "Split the run into separate trips if needed.",
        ),
    ),
}

_DEFAULT_GUIDE = (
    "Schedule overlap detected",
    "This entry overlaps another entry. Review both and adjust if needed.",
    (
        "Review the overlapping entries.",
        "Consider moving the time window earlier or later.",
        "Consider changing the assignee.",
    ),
)

_LABELS: Dict[str, str] = {
    ConflictKind.USER_CARE_VS_SUPPORT.value: "Person x care/support",
    ConflictKind.USER_SUPPORT_VS_SUPPORT.value: "Support x support",
    ConflictKind.STAFF_SUPPORT_VS_STAFF_DUTY.value: "Staff x support",
    ConflictKind.VEHICLE_DOUBLE_BOOKING.value: "Vehicle overlap",
    ConflictKind.ROOM_DOUBLE_BOOKING.value: "Room overlap",
    ConflictKind.EQUIPMENT_CONFLICT.value: "Equipment overlap",
    ConflictKind.ORG_RESOURCE_CONFLICT.value: "Org resource clash",
    ConflictKind.TRANSPORTATION_OVERLAP.value: "Transport overlap",
}


def to_guide_item(conflict: ScheduleConflict) -> GuideItem:
    """Guide text for a conflict; unknown kinds get a generic guide."""
    title, description, suggestions = _GUIDES.get(conflict.kind, _DEFAULT_GUIDE)
    return GuideItem(kind=conflict.kind, title=title, description=description, suggestions=list(suggestions))


def kind_label(kind: str) -> str:
    return _LABELS.get(getattr(kind, "value", kind), "Overlap")
