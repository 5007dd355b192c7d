"""
Suggestion resolution: which remedies to offer, and applying the chosen one.

Applying is a three-step flow with no retries and no rollback:
1. Pre-check (re-validate the change against the snapshot)
2. Persist through the ScheduleUpdater collaborator
3. Refresh callback
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Sequence

from models import BaseSchedule, Category, ConflictKind, ScheduleConflict
from .actions import ActionType, SuggestionAction, success_message, to_patch
from .errors import ConflictEngineError, InvalidSuggestion, ScheduleNotFound
from .rules import ALL_CONFLICT_RULES, ConflictRule
from .time_shift import validate_reassignment, validate_time_shift

logger = logging.getLogger(__name__)


class ScheduleUpdater(Protocol):
    """Persistence collaborator. Raises on failure; errors reach the caller unchanged."""

    def update(self, schedule_id: str, patch: Dict[str, object]) -> None:
        ...


# --- Gating: which remedy panels make sense for a schedule ---

def _has_kind(conflicts: Iterable[ScheduleConflict], kind: ConflictKind) -> bool:
    return any(c.kind == kind.value for c in conflicts)


def can_suggest_time_shift(conflicts: Sequence[ScheduleConflict]) -> bool:
    return len(conflicts) > 0


def can_suggest_staff(schedule: BaseSchedule) -> bool:
    return schedule.category in (Category.USER.value, Category.STAFF.value)


def can_suggest_vehicles(conflicts: Sequence[ScheduleConflict], snapshot: Sequence[BaseSchedule]) -> bool:
    return bool(snapshot) and _has_kind(conflicts, ConflictKind.VEHICLE_DOUBLE_BOOKING)


def can_suggest_rooms(conflicts: Sequence[ScheduleConflict], snapshot: Sequence[BaseSchedule]) -> bool:
    return bool(snapshot) and _has_kind(conflicts, ConflictKind.ROOM_DOUBLE_BOOKING)


def can_suggest_equipment(conflicts: Sequence[ScheduleConflict], snapshot: Sequence[BaseSchedule]) -> bool:
    return bool(snapshot) and _has_kind(conflicts, ConflictKind.EQUIPMENT_CONFLICT)


# --- Applying ---

class SuggestionApplier:
    """
    Validates and persists an operator-selected SuggestionAction.
    The updater is never called when validation fails. Time shifts are
    re-checked against ALL_CONFLICT_RULES unless `rules` is given.
    """

    def __init__(
        self,
        updater: ScheduleUpdater,
        snapshot: Iterable[BaseSchedule],
        rules: Optional[Sequence[ConflictRule]] = None,
        on_refresh: Optional[Callable[[], None]] = None,
        equipment_units: Optional[Dict[str, int]] = None,
    ):
        self.updater = updater
        self.snapshot: List[BaseSchedule] = list(snapshot)
        self.rules = ALL_CONFLICT_RULES if rules is None else rules
        self.on_refresh = on_refresh
        # Pool size per equipment id; unknown ids count as a single unit
        self.equipment_units = equipment_units or {}

    def _find(self, schedule_id: str) -> BaseSchedule:
        for schedule in self.snapshot:
            if schedule.id == schedule_id:
                return schedule
        raise ScheduleNotFound(schedule_id)

    def precheck(self, action: SuggestionAction, schedule: BaseSchedule) -> None:
        if action.action_type == ActionType.TIME_SHIFT:
            validate_time_shift(schedule, action.new_start, action.new_end, self.snapshot, self.rules)
            return

        kind = action.resource_kind
        if kind is None:
            raise InvalidSuggestion(f"Unsupported action type {action.action_type!r}")
        capacity = self.equipment_units.get(action.resource_id, 1) if action.action_type == ActionType.EQUIPMENT_REASSIGN else 1
        validate_reassignment(schedule, kind, action.resource_id, self.snapshot, capacity=capacity)

    def apply(self, action: SuggestionAction) -> str:
        """Returns the success message shown to the operator."""
        try:
            schedule = self._find(action.schedule_id)
            patch = to_patch(action, schedule)
            self.precheck(action, schedule)
        except ConflictEngineError as e:
            logger.warning(f"Suggestion {action.action_type.value} for {action.schedule_id} not applied: {e.message}")
            raise

        self.updater.update(schedule.id, patch)
        logger.info(f"Applied {action.action_type.value} to {schedule.id}: {sorted(patch)}")

        if self.on_refresh is not None:
            self.on_refresh()
        return success_message(action)
