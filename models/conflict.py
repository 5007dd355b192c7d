"""
Conflict records produced by the rule evaluator.
"""

from dataclasses import dataclass
from enum import Enum


class ConflictKind(str, Enum):
    """
    Known conflict kinds. The set is open: injected rules may emit any other
    string, which is why ScheduleConflict.kind is typed as plain str.
    """
    USER_CARE_VS_SUPPORT = "user-care-vs-support"
    USER_SUPPORT_VS_SUPPORT = "user-support-vs-support"
    STAFF_SUPPORT_VS_STAFF_DUTY = "staff-support-vs-staff-duty"
    VEHICLE_DOUBLE_BOOKING = "vehicle-double-booking"
    ROOM_DOUBLE_BOOKING = "room-double-booking"
    EQUIPMENT_CONFLICT = "equipment-conflict"
    ORG_RESOURCE_CONFLICT = "org-resource-conflict"
    TRANSPORTATION_OVERLAP = "transportation-overlap"


@dataclass(frozen=True)
class ScheduleConflict:
    """A classified collision between two schedules."""
    id_a: str
    id_b: str
    kind: str
    message: str

    def involves(self, schedule_id: str) -> bool:
        return schedule_id in (self.id_a, self.id_b)

    def other_id(self, schedule_id: str) -> str:
        return self.id_b if schedule_id == self.id_a else self.id_a

    def to_dict(self) -> dict:
        return {
            "id_a": self.id_a,
            "id_b": self.id_b,
            "kind": str(getattr(self.kind, "value", self.kind)),
            "message": self.message,
        }
