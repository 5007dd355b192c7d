"""
Operational aggregators built on conflict output.

Daily rollups for the operations dashboard: conflict counts with a simple
safety score, staff load, and vehicle usage.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Iterable, List, Union

from models import BaseSchedule, ScheduleConflict
from models.timing import normalize_day

Day = Union[str, date, datetime]

SAFETY_PENALTY_PER_CONFLICT = 10


@dataclass
class DailyConflictSummary:
    date: str
    total_conflicts: int
    counts_by_kind: Dict[str, int] = field(default_factory=dict)
    safety_score: int = 100
    safety_level: str = "stable"


@dataclass(frozen=True)
class StaffLoad:
    staff_id: str
    schedule_count: int


@dataclass(frozen=True)
class VehicleUsage:
    vehicle_id: str
    trip_count: int


def safety_score(total_conflicts: int) -> int:
    return max(0, 100 - SAFETY_PENALTY_PER_CONFLICT * total_conflicts)


def safety_level(total_conflicts: int) -> str:
    if total_conflicts == 0:
        return "stable"
    if total_conflicts <= 3:
        return "caution"
    return "review"


def _on_day(schedules: Iterable[BaseSchedule], day_key: str) -> List[BaseSchedule]:
    return [s for s in schedules if s.day_key == day_key]


def daily_conflict_summary(
    day: Day,
    conflicts: Iterable[ScheduleConflict],
    schedules: Iterable[BaseSchedule],
) -> DailyConflictSummary:
    """Conflicts count toward `day` when at least one participant starts on it."""
    day_key = normalize_day(day)
    on_day = {s.id for s in _on_day(schedules, day_key)}

    counts: Counter = Counter()
    for conflict in conflicts:
        if conflict.id_a in on_day or conflict.id_b in on_day:
            counts[conflict.kind] += 1

    total = sum(counts.values())
    return DailyConflictSummary(
        date=day_key,
        total_conflicts=total,
        counts_by_kind=dict(counts),
        safety_score=safety_score(total),
        safety_level=safety_level(total),
    )


def staff_load_summary(day: Day, schedules: Iterable[BaseSchedule]) -> List[StaffLoad]:
    """Schedules per staff member on `day`, busiest first."""
    counts: Counter = Counter()
    for schedule in _on_day(schedules, normalize_day(day)):
        staff = set(schedule.assigned_staff_ids)
        if schedule.primary_staff_id:
            staff.add(schedule.primary_staff_id)
        counts.update(staff)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [StaffLoad(staff_id=sid, schedule_count=n) for sid, n in ranked]


def vehicle_usage_summary(day: Day, schedules: Iterable[BaseSchedule]) -> List[VehicleUsage]:
    counts = Counter(s.vehicle_id for s in _on_day(schedules, normalize_day(day)) if s.vehicle_id)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [VehicleUsage(vehicle_id=vid, trip_count=n) for vid, n in ranked]
