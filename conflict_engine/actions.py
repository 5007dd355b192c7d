"""
Suggestion actions and the record patches they produce.

An action is what the operator picks from the conflict guide: move the
schedule, or swap one of its resources. `to_patch` turns it into the partial
field update handed to the persistence collaborator.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from models import BaseSchedule, Category, ResourceKind
from .errors import InvalidSuggestion


class ActionType(str, Enum):
    TIME_SHIFT = "time-shift"
    STAFF_REASSIGN = "staff-reassign"
    VEHICLE_REASSIGN = "vehicle-reassign"
    ROOM_REASSIGN = "room-reassign"
    EQUIPMENT_REASSIGN = "equipment-reassign"


RESOURCE_KIND_BY_ACTION = {
    ActionType.STAFF_REASSIGN: ResourceKind.STAFF,
    ActionType.VEHICLE_REASSIGN: ResourceKind.VEHICLE,
    ActionType.ROOM_REASSIGN: ResourceKind.ROOM,
    ActionType.EQUIPMENT_REASSIGN: ResourceKind.EQUIPMENT,
}

ACTION_BY_RESOURCE_KIND = {kind: action for action, kind in RESOURCE_KIND_BY_ACTION.items()}


class SuggestionAction(BaseModel):
    """
    An operator-selectable remedy for one schedule.
    Time shifts carry new_start/new_end; reassignments carry resource_id.
    """
    action_type: ActionType
    schedule_id: str = Field(min_length=1)
    label: str = ""

    # --- Time shift ---
    new_start: Optional[str] = None
    new_end: Optional[str] = None
    minutes: Optional[int] = Field(default=None, description="Offset the shift was built from")

    # --- Reassignment ---
    resource_id: Optional[str] = None
    resource_name: Optional[str] = None
    replaces_id: Optional[str] = Field(default=None, description="Resource being swapped out, if any")

    @property
    def resource_kind(self) -> Optional[ResourceKind]:
        return RESOURCE_KIND_BY_ACTION.get(self.action_type)


def _swap(current: List[str], old: Optional[str], new: str) -> List[str]:
    """Replace `old` with `new` in place, or append `new` when `old` is absent."""
    if old and old in current:
        swapped = [new if item == old else item for item in current]
    else:
        swapped = current + [new]
    # a swap onto an id already present collapses to one entry
    return list(dict.fromkeys(swapped))


def to_patch(action: SuggestionAction, schedule: BaseSchedule) -> Dict[str, object]:
    """
    Map an action onto the fields it changes.
    Raises InvalidSuggestion when the action lacks what its type needs.
    """
    if action.action_type == ActionType.TIME_SHIFT:
        if not action.new_start or not action.new_end:
            raise InvalidSuggestion(
                "A time shift needs both a new start and a new end",
                details={"schedule_id": action.schedule_id},
            )
        return {"start": action.new_start, "end": action.new_end}

    if not action.resource_id:
        raise InvalidSuggestion(
            f"{action.action_type.value} needs a resource id",
            details={"schedule_id": action.schedule_id},
        )

    if action.action_type == ActionType.STAFF_REASSIGN:
        if schedule.category == Category.ORG.value:
            raise InvalidSuggestion("Org schedules have no assigned staff to reassign",
                                    details={"schedule_id": schedule.id})
        if action.replaces_id:
            return {"staff_ids": _swap(list(schedule.staff_ids), action.replaces_id, action.resource_id)}
        return {"staff_ids": [action.resource_id]}

    if action.action_type == ActionType.VEHICLE_REASSIGN:
        return {"vehicle_id": action.resource_id}

    if action.action_type == ActionType.ROOM_REASSIGN:
        return {"room_id": action.resource_id}

    # equipment
    return {"equipment_ids": _swap(list(schedule.equipment_ids), action.replaces_id, action.resource_id)}


def success_message(action: SuggestionAction) -> str:
    name = action.resource_name or action.resource_id
    if action.action_type == ActionType.STAFF_REASSIGN:
        return f"Assigned staff changed to {name or 'the new staff member'}"
    if action.action_type == ActionType.VEHICLE_REASSIGN:
        return f"Vehicle changed to {name or 'the new vehicle'}"
    if action.action_type == ActionType.ROOM_REASSIGN:
        return f"Room changed to {name or 'the new room'}"
    if action.action_type == ActionType.EQUIPMENT_REASSIGN:
        return f"Equipment changed to {name or 'the new equipment'}"
    return "Schedule adjusted"
