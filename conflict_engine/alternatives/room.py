"""
Room alternatives.

Rooms under cleaning are still offered (with a warning) because they become
usable once setup finishes; maintenance and reserved rooms are not.
"""
from typing import Iterable, List, Optional

from config.settings import SCHEDULING_SETTINGS
from models import (
    BaseSchedule, CapacityFit, ResourceKind, RoomAlternative, RoomAlternativeRequest,
    RoomProfile, RoomStatus, RoomType,
)
from models.timing import SITE_TZ, parse_instant
from .base import (
    AlternativeEngine, Occupancy, ResourceStrategy, classify_capacity, join_warnings,
    match_requirements, ratio_points,
)

USABLE_STATUSES = (RoomStatus.AVAILABLE, RoomStatus.CLEANING)
CARE_ROOM_TYPES = (RoomType.MEDICAL, RoomType.CONSULTATION)


def _outside_opening_hours(room: RoomProfile, schedule: BaseSchedule) -> bool:
    if room.available_hours is None:
        return False
    start = parse_instant(schedule.start)
    if start is None:
        return False
    local = start.astimezone(SITE_TZ).time()
    return not (room.available_hours.start <= local < room.available_hours.end)


class RoomStrategy(ResourceStrategy):
    kind = ResourceKind.ROOM

    def __init__(self, max_suggestions: Optional[int] = None):
        self.default_max_suggestions = max_suggestions or SCHEDULING_SETTINGS["max_resource_suggestions"]

    def is_eligible(self, profile: RoomProfile) -> bool:
        return profile.status in USABLE_STATUSES

    def evaluate(self, profile: RoomProfile, request: RoomAlternativeRequest, occupancy: Occupancy) -> RoomAlternative:
        equipment, equipment_ratio = match_requirements(request.required_capabilities, profile.fixed_equipment)
        access_required = getattr(request, "required_accessibility", [])
        preferred = getattr(request, "preferred_room_types", [])
        access, access_ratio = match_requirements(access_required, profile.accessibility)
        fit = classify_capacity(profile.capacity, request.required_capacity)

        priority = 0 if occupancy.busy else 100
        priority += ratio_points(equipment_ratio, 40)
        priority += ratio_points(access_ratio, 30)
        if not preferred or profile.type in preferred:
            priority += 20
        if profile.type in CARE_ROOM_TYPES:
            priority += 15

        warnings = []
        if profile.status == RoomStatus.CLEANING:
            note = f" ({profile.setup_minutes} min)" if profile.setup_minutes else ""
            warnings.append(f"Cleaning in progress{note}")
        if _outside_opening_hours(profile, request.target_schedule):
            hours = profile.available_hours
            warnings.append(f"Start is outside opening hours {hours.start:%H:%M}-{hours.end:%H:%M}")
        if occupancy.busy:
            warnings.append("Occupied in this window")
        if fit == CapacityFit.INSUFFICIENT:
            warnings.append(f"Holds {profile.capacity} people, {request.required_capacity} needed")

        reason = "occupied in this window" if occupancy.busy else "free in this window"
        reason += f" / {profile.type.value} room for {profile.capacity}"
        if equipment:
            reason += f" / {', '.join(equipment)}"

        return RoomAlternative(
            resource_id=profile.id,
            resource_name=profile.name,
            reason=reason,
            priority=priority,
            busy=occupancy.busy,
            warning=join_warnings(warnings),
            equipment_matched=equipment,
            accessibility_matched=access,
            capacity_fit=fit,
            setup_minutes=profile.setup_minutes,
        )


def suggest_rooms(
    request: RoomAlternativeRequest,
    rooms: Iterable[RoomProfile],
    schedules: Iterable[BaseSchedule],
) -> List[RoomAlternative]:
    return AlternativeEngine(RoomStrategy(), schedules).suggest(request, rooms)
