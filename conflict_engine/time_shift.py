"""
Time-Shift Candidate Generator & Re-validator.

Proposes small moves of a conflicting schedule and re-checks a proposed move
(or resource swap) against the rest of the snapshot before anything is saved.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from config.settings import SCHEDULING_SETTINGS
from models import BaseSchedule, ResourceKind
from models.timing import shift_instant
from .actions import ActionType, SuggestionAction
from .alternatives.base import resource_involved
from .errors import InvalidSuggestion, SuggestionRejected
from .evaluator import ConflictEvaluator
from .overlap import schedules_overlap
from .rules import ConflictRule

logger = logging.getLogger(__name__)

# Titles named in a rejection message; the full list stays on the exception
MAX_TITLES_IN_MESSAGE = 2


def _offset_label(minutes: int) -> str:
    if minutes < 0:
        return f"Move {-minutes} min earlier"
    return f"Move {minutes} min later"


@dataclass(frozen=True)
class TimeShiftCandidate:
    minutes: int
    label: str

    @classmethod
    def of(cls, minutes: int) -> "TimeShiftCandidate":
        return cls(minutes=minutes, label=_offset_label(minutes))


DEFAULT_TIME_SHIFT_CANDIDATES = tuple(
    TimeShiftCandidate.of(m) for m in SCHEDULING_SETTINGS["time_shift_offsets"]
)


def shift_schedule(schedule: BaseSchedule, minutes: int) -> BaseSchedule:
    """Copy of `schedule` moved by N minutes with its duration unchanged."""
    new_start = shift_instant(schedule.start, minutes)
    new_end = shift_instant(schedule.end, minutes)
    if new_start is None or new_end is None:
        raise InvalidSuggestion(
            f"Schedule {schedule.id} has no parseable start/end to shift",
            details={"schedule_id": schedule.id},
        )
    return schedule.model_copy(update={"start": new_start, "end": new_end})


def propose_time_shifts(
    schedule: BaseSchedule,
    candidates: Optional[Sequence[TimeShiftCandidate]] = None,
) -> List[SuggestionAction]:
    """One time-shift action per candidate offset; unshiftable schedules get none."""
    actions = []
    for candidate in DEFAULT_TIME_SHIFT_CANDIDATES if candidates is None else candidates:
        new_start = shift_instant(schedule.start, candidate.minutes)
        new_end = shift_instant(schedule.end, candidate.minutes)
        if new_start is None or new_end is None:
            continue
        actions.append(SuggestionAction(
            action_type=ActionType.TIME_SHIFT,
            schedule_id=schedule.id,
            label=candidate.label,
            new_start=new_start,
            new_end=new_end,
            minutes=candidate.minutes,
        ))
    return actions


def _titles(schedules: Iterable[BaseSchedule]) -> List[str]:
    return [s.title or s.id for s in schedules]


def _summarize(titles: List[str]) -> str:
    shown = ", ".join(f"'{t}'" for t in titles[:MAX_TITLES_IN_MESSAGE])
    hidden = len(titles) - MAX_TITLES_IN_MESSAGE
    return f"{shown} and {hidden} more" if hidden > 0 else shown


def validate_time_shift(
    schedule: BaseSchedule,
    new_start: str,
    new_end: str,
    snapshot: Iterable[BaseSchedule],
    rules: Optional[Sequence[ConflictRule]] = None,
) -> BaseSchedule:
    """
    Re-run the rule chain with the schedule at its new time.
    Returns the moved copy, or raises SuggestionRejected naming every
    schedule it would still collide with.
    """
    moved = schedule.model_copy(update={"start": new_start, "end": new_end})
    if moved.interval is None:
        raise InvalidSuggestion(
            f"New time for {schedule.id} is not a valid ISO-8601 range",
            details={"new_start": new_start, "new_end": new_end},
        )
    # model_copy bypasses validate_time_range
    if not moved.all_day and moved.interval[1] <= moved.interval[0]:
        raise InvalidSuggestion(
            f"New time for {schedule.id} must end after it starts",
            details={"new_start": new_start, "new_end": new_end},
        )

    evaluator = ConflictEvaluator(rules)
    others = [s for s in snapshot if s.id != schedule.id]
    # Only pairs with the moved schedule can change; it is scanned last, as in a full pass
    colliding = [other for other in others if evaluator.first_match(other, moved) is not None]

    if colliding:
        titles = _titles(colliding)
        logger.info(f"Rejected time shift of {schedule.id}: still collides with {len(titles)} schedule(s)")
        raise SuggestionRejected(
            f"The new time still collides with {_summarize(titles)}",
            conflicting_titles=titles,
            details={"schedule_id": schedule.id, "new_start": new_start, "new_end": new_end},
        )
    return moved


def validate_reassignment(
    schedule: BaseSchedule,
    resource_kind: ResourceKind,
    resource_id: str,
    snapshot: Iterable[BaseSchedule],
    capacity: int = 1,
) -> None:
    """
    Reject a swap onto a resource that is already used by `capacity` or more
    schedules overlapping this one. `capacity` > 1 applies to pooled equipment.
    """
    busy_with = [
        other for other in snapshot
        if other.id != schedule.id
        and resource_involved(resource_kind, resource_id, other)
        and schedules_overlap(schedule, other)
    ]
    if len(busy_with) >= capacity:
        titles = _titles(busy_with)
        logger.info(f"Rejected {resource_kind.value} reassignment of {schedule.id} to {resource_id}")
        raise SuggestionRejected(
            f"{resource_id} is already assigned to {_summarize(titles)} in this window",
            conflicting_titles=titles,
            details={"schedule_id": schedule.id, "resource_kind": resource_kind.value, "resource_id": resource_id},
        )
