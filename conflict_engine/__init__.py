"""
Conflict detection and alternative-resolution engine for care schedules.

Pipeline:
1. Detection (overlap predicate + rule evaluator + index, live draft checks)
2. Remedies (alternative engines, time shifts, suggestion actions)
3. Rollups (daily operational summaries)
"""

from .overlap import intervals_overlap, overlaps, schedules_overlap
from .rules import (
    ALL_CONFLICT_RULES,
    DEFAULT_CONFLICT_RULES,
    RESOURCE_CONFLICT_RULES,
    ConflictRule,
)
from .evaluator import ConflictEvaluator, detect_conflicts
from .index import build_conflict_index, conflicts_for, has_conflict
from .live_check import (
    ConflictReason,
    DraftCheckResult,
    DraftConflict,
    Severity,
    check_draft,
    get_severity,
)
from .alternatives import (
    AlternativeEngine,
    suggest_equipment,
    suggest_rooms,
    suggest_staff,
    suggest_vehicles,
)
from .actions import ActionType, SuggestionAction, to_patch
from .time_shift import (
    DEFAULT_TIME_SHIFT_CANDIDATES,
    TimeShiftCandidate,
    propose_time_shifts,
    shift_schedule,
    validate_reassignment,
    validate_time_shift,
)
from .resolution import (
    ScheduleUpdater,
    SuggestionApplier,
    can_suggest_equipment,
    can_suggest_rooms,
    can_suggest_staff,
    can_suggest_time_shift,
    can_suggest_vehicles,
)
from .guide import GuideItem, kind_label, to_guide_item
from .ops_summary import (
    DailyConflictSummary,
    StaffLoad,
    VehicleUsage,
    daily_conflict_summary,
    staff_load_summary,
    vehicle_usage_summary,
)
from .errors import ConflictEngineError, InvalidSuggestion, ScheduleNotFound, SuggestionRejected

__all__ = [
    # --- Detection ---
    "overlaps",
    "intervals_overlap",
    "schedules_overlap",
    "ConflictRule",
    "DEFAULT_CONFLICT_RULES",
    "RESOURCE_CONFLICT_RULES",
    "ALL_CONFLICT_RULES",
    "ConflictEvaluator",
    "detect_conflicts",
    "build_conflict_index",
    "conflicts_for",
    "has_conflict",
    "ConflictReason",
    "DraftCheckResult",
    "DraftConflict",
    "Severity",
    "check_draft",
    "get_severity",

    # --- Remedies ---
    "AlternativeEngine",
    "suggest_equipment",
    "suggest_rooms",
    "suggest_staff",
    "suggest_vehicles",
    "ActionType",
    "SuggestionAction",
    "to_patch",
    "DEFAULT_TIME_SHIFT_CANDIDATES",
    "TimeShiftCandidate",
    "propose_time_shifts",
    "shift_schedule",
    "validate_reassignment",
    "validate_time_shift",
    "ScheduleUpdater",
    "SuggestionApplier",
    "can_suggest_equipment",
    "can_suggest_rooms",
    "can_suggest_staff",
    "can_suggest_time_shift",
    "can_suggest_vehicles",
    "GuideItem",
    "kind_label",
    "to_guide_item",

    # --- Rollups ---
    "DailyConflictSummary",
    "StaffLoad",
    "VehicleUsage",
    "daily_conflict_summary",
    "staff_load_summary",
    "vehicle_usage_summary",

    # --- Errors ---
    "ConflictEngineError",
    "InvalidSuggestion",
    "ScheduleNotFound",
    "SuggestionRejected",
]
