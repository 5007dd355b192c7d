"""
Vehicle alternatives.
"""
from typing import Iterable, List, Optional

from config.settings import SCHEDULING_SETTINGS
from models import (
    AlternativeRequest, BaseSchedule, CapacityFit, ResourceKind, VehicleAlternative,
    VehicleProfile, VehicleStatus,
)
from .base import (
    AlternativeEngine, Occupancy, ResourceStrategy, classify_capacity, join_warnings,
    match_requirements, ratio_points, target_day,
)

ACCESSIBILITY_FEATURES = ("wheelchair-accessible", "lift", "stretcher")

CAPACITY_POINTS = {CapacityFit.PERFECT: 30, CapacityFit.SUFFICIENT: 20}


class VehicleStrategy(ResourceStrategy):
    kind = ResourceKind.VEHICLE

    def __init__(self, max_suggestions: Optional[int] = None):
        self.default_max_suggestions = max_suggestions or SCHEDULING_SETTINGS["max_resource_suggestions"]

    def is_eligible(self, profile: VehicleProfile) -> bool:
        return profile.status == VehicleStatus.AVAILABLE

    def evaluate(self, profile: VehicleProfile, request: AlternativeRequest, occupancy: Occupancy) -> VehicleAlternative:
        matched, ratio = match_requirements(request.required_capabilities, profile.features)
        fit = classify_capacity(profile.capacity, request.required_capacity)

        priority = 0 if occupancy.busy else 100
        priority += ratio_points(ratio, 40)
        priority += CAPACITY_POINTS.get(fit, 0)
        if any(feature in ACCESSIBILITY_FEATURES for feature in matched):
            priority += 25

        warnings = []
        day = target_day(request.target_schedule)
        if day is not None and day in profile.maintenance_dates:
            warnings.append("Scheduled for maintenance on this day")
        if occupancy.busy:
            warnings.append("Already booked in this window")
        if fit == CapacityFit.INSUFFICIENT:
            warnings.append(f"Only {profile.capacity} seats for {request.required_capacity} passengers")

        reason = "booked in this window" if occupancy.busy else "free in this window"
        reason += f" / {profile.capacity} seats"
        if matched:
            reason += f" / {', '.join(matched)}"

        return VehicleAlternative(
            resource_id=profile.id,
            resource_name=profile.name,
            reason=reason,
            priority=priority,
            busy=occupancy.busy,
            warning=join_warnings(warnings),
            features_matched=matched,
            capacity_fit=fit,
        )


def suggest_vehicles(
    request: AlternativeRequest,
    vehicles: Iterable[VehicleProfile],
    schedules: Iterable[BaseSchedule],
) -> List[VehicleAlternative]:
    return AlternativeEngine(VehicleStrategy(), schedules).suggest(request, vehicles)
