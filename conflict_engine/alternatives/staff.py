"""
Staff alternatives: who else could cover this schedule?
"""
from typing import Iterable, List, Optional

from config.settings import SCHEDULING_SETTINGS
from models import AlternativeRequest, BaseSchedule, ResourceKind, StaffAlternative, StaffProfile
from .base import AlternativeEngine, Occupancy, ResourceStrategy, match_requirements, ratio_points

# Skills that earn the specialist bonus
SPECIALIST_SKILLS = ("life-support", "medical-care", "transport")
# Skills worth calling out in the reason text
HIGHLIGHT_SKILLS = SPECIALIST_SKILLS + ("counseling",)


class StaffStrategy(ResourceStrategy):
    kind = ResourceKind.STAFF

    def __init__(self, workload_threshold: Optional[int] = None, max_suggestions: Optional[int] = None):
        if workload_threshold is None:
            workload_threshold = SCHEDULING_SETTINGS["workload_warning_threshold"]
        self.workload_threshold = workload_threshold
        self.default_max_suggestions = max_suggestions or SCHEDULING_SETTINGS["max_staff_suggestions"]

    def evaluate(self, profile: StaffProfile, request: AlternativeRequest, occupancy: Occupancy) -> StaffAlternative:
        matched, ratio = match_requirements(request.required_capabilities, profile.skills)
        if not request.required_capabilities:
            # No requirement: every skill the candidate holds counts as matched
            matched = list(profile.skills)

        priority = 0 if occupancy.busy else 100
        priority += ratio_points(ratio, 50)
        if any(skill in SPECIALIST_SKILLS for skill in matched):
            priority += 20
        if len(profile.skills) >= 3:
            priority += 10

        warning = None
        if occupancy.same_day_count >= self.workload_threshold:
            warning = f"Heavy workload: {occupancy.same_day_count} schedules already on this day"

        return StaffAlternative(
            resource_id=profile.id,
            resource_name=profile.name,
            reason=self._reason(profile, matched, bool(request.required_capabilities), occupancy),
            priority=priority,
            busy=occupancy.busy,
            warning=warning,
            skills_matched=matched,
        )

    @staticmethod
    def _reason(profile: StaffProfile, matched: List[str], has_requirement: bool, occupancy: Occupancy) -> str:
        if occupancy.busy:
            return "already booked in this window"
        parts = ["free in this window"]
        if has_requirement and matched:
            parts.append(f"{', '.join(matched[:2])} skill match")
        highlight = next((skill for skill in profile.skills if skill in HIGHLIGHT_SKILLS), None)
        if highlight:
            parts.append(f"{highlight} specialist")
        return " / ".join(parts)


def suggest_staff(
    request: AlternativeRequest,
    staff: Iterable[StaffProfile],
    schedules: Iterable[BaseSchedule],
) -> List[StaffAlternative]:
    """Rank staff who could replace the current assignee(s) of the target schedule."""
    return AlternativeEngine(StaffStrategy(), schedules).suggest(request, staff)
