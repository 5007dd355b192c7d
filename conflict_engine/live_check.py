"""
Live Conflict Checker.

Checks a single unsaved draft against existing schedules while the operator
is still editing the form. Results are classified by reason so the UI can
render errors, warnings and informational overlaps differently.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from models import BaseSchedule, Category, ScheduleDraft
from .overlap import intervals_overlap

logger = logging.getLogger(__name__)


class ConflictReason(str, Enum):
    DOUBLE_BOOKING = "double_booking"
    STAFF_UNAVAILABLE = "staff_unavailable"
    TIME_OVERLAP = "time_overlap"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


SEVERITY_BY_REASON = {
    ConflictReason.DOUBLE_BOOKING: Severity.ERROR,
    ConflictReason.STAFF_UNAVAILABLE: Severity.WARNING,
    ConflictReason.TIME_OVERLAP: Severity.INFO,
}


def get_severity(reason: ConflictReason) -> Severity:
    return SEVERITY_BY_REASON[ConflictReason(reason)]


@dataclass(frozen=True)
class DraftConflict:
    schedule: BaseSchedule
    reason: ConflictReason
    message: str

    @property
    def severity(self) -> Severity:
        return get_severity(self.reason)


@dataclass
class DraftCheckResult:
    has_conflict: bool = False
    conflicts: List[DraftConflict] = field(default_factory=list)


def _identity_of(schedule: BaseSchedule) -> Optional[str]:
    """Person identity for care visits; other categories have none."""
    if schedule.category == Category.USER.value:
        return schedule.person_key
    return None


def _classify(draft: ScheduleDraft, existing: BaseSchedule) -> List[DraftConflict]:
    found: List[DraftConflict] = []
    title = existing.title or existing.id
    existing_staff = existing.assigned_staff_ids

    identity = draft.user_id
    if identity and (identity in existing_staff or identity == _identity_of(existing)):
        found.append(DraftConflict(
            schedule=existing,
            reason=ConflictReason.DOUBLE_BOOKING,
            message=f"{identity} is already booked for '{title}'",
        ))

    if existing.category == Category.STAFF.value:
        shared = [s for s in draft.staff_ids if s in existing_staff]
        if not draft.staff_ids or shared:
            who = ", ".join(shared) if shared else "Staff"
            found.append(DraftConflict(
                schedule=existing,
                reason=ConflictReason.STAFF_UNAVAILABLE,
                message=f"{who} unavailable: '{title}'",
            ))

    if not found:
        found.append(DraftConflict(
            schedule=existing,
            reason=ConflictReason.TIME_OVERLAP,
            message=f"Overlaps with '{title}'",
        ))
    return found


def check_draft(
    draft: ScheduleDraft,
    existing: Iterable[BaseSchedule],
    exclude_id: Optional[str] = None,
) -> DraftCheckResult:
    """
    Compare one draft against existing schedules.
    A draft with a blank or malformed start/end never conflicts.
    """
    window = draft.interval
    if window is None:
        return DraftCheckResult()

    skip = {i for i in (exclude_id, draft.id) if i}
    conflicts: List[DraftConflict] = []
    for schedule in existing:
        if schedule.id in skip:
            continue
        if not intervals_overlap(window, schedule.interval):
            continue
        conflicts.extend(_classify(draft, schedule))

    if conflicts:
        logger.debug(f"Draft for {draft.user_id or '?'} collides with {len(conflicts)} entries")
    return DraftCheckResult(has_conflict=bool(conflicts), conflicts=conflicts)
