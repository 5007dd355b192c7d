"""
Equipment alternatives.

Equipment is pooled: a profile has `available_units`, and every overlapping
schedule that books it uses one unit.
"""
import math
from typing import Iterable, List, Optional

from config.settings import SCHEDULING_SETTINGS
from models import (
    BaseSchedule, EquipmentAlternative, EquipmentAlternativeRequest,
    EquipmentProfile, EquipmentStatus, EquipmentType, ResourceKind,
)
from .base import AlternativeEngine, Occupancy, ResourceStrategy, classify_capacity, join_warnings, target_day

SAFETY_CRITICAL_TYPES = (EquipmentType.MEDICAL, EquipmentType.SAFETY)


class EquipmentStrategy(ResourceStrategy):
    kind = ResourceKind.EQUIPMENT

    def __init__(self, max_suggestions: Optional[int] = None):
        self.default_max_suggestions = max_suggestions or SCHEDULING_SETTINGS["max_resource_suggestions"]

    def is_eligible(self, profile: EquipmentProfile) -> bool:
        return profile.status == EquipmentStatus.AVAILABLE

    def evaluate(
        self, profile: EquipmentProfile, request: EquipmentAlternativeRequest, occupancy: Occupancy
    ) -> EquipmentAlternative:
        required_units = request.required_capacity
        in_use = len(occupancy.overlapping)
        free_units = max(0, profile.available_units - in_use)
        operator_skills = set(getattr(request, "required_skills", []))
        skills_met = set(profile.required_skills).issubset(operator_skills)
        wanted_types = request.required_capabilities
        busy = free_units < required_units

        priority = min(int(math.floor(free_units / required_units * 50)), 100)
        if skills_met:
            priority += 30
        if not wanted_types or profile.type.value in wanted_types:
            priority += 20
        if profile.type in SAFETY_CRITICAL_TYPES:
            priority += 25

        warnings = []
        day = target_day(request.target_schedule)
        if day is not None and day in profile.maintenance_dates:
            warnings.append("Scheduled for maintenance on this day")
        if busy:
            warnings.append(f"Only {free_units} of {profile.available_units} units free, {required_units} needed")
        if not skills_met:
            missing = sorted(set(profile.required_skills) - operator_skills)
            warnings.append(f"Operator needs {', '.join(missing)}")

        reason = f"{free_units}/{profile.available_units} units free"
        if profile.category:
            reason += f" / {profile.category}"

        return EquipmentAlternative(
            resource_id=profile.id,
            resource_name=profile.name,
            reason=reason,
            priority=priority,
            busy=busy,
            warning=join_warnings(warnings),
            equipment_type=profile.type,
            skill_requirements_met=skills_met,
            available_units=profile.available_units,
            units_in_use=in_use,
            capacity_fit=classify_capacity(free_units, required_units),
            location_note=f"Stored at {profile.location}" if profile.location else "",
            setup_minutes=profile.setup_minutes,
        )


def suggest_equipment(
    request: EquipmentAlternativeRequest,
    equipment: Iterable[EquipmentProfile],
    schedules: Iterable[BaseSchedule],
) -> List[EquipmentAlternative]:
    return AlternativeEngine(EquipmentStrategy(), schedules).suggest(request, equipment)
