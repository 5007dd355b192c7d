"""
Generic alternative engine.

One scan loop shared by every resource kind. A ResourceStrategy plugs in the
kind-specific parts:
1. Eligibility (status filter)
2. Involvement (does a schedule consume this resource?)
3. Evaluation (score, reason text, warnings)
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from models import Alternative, AlternativeRequest, BaseSchedule, CapacityFit, ResourceKind
from ..overlap import intervals_overlap

logger = logging.getLogger(__name__)


@dataclass
class Occupancy:
    """How a candidate is already used around the target schedule."""
    overlapping: List[BaseSchedule] = field(default_factory=list)
    same_day_count: int = 0

    @property
    def busy(self) -> bool:
        return bool(self.overlapping)


def match_requirements(required: Sequence[str], offered: Iterable[str]) -> Tuple[List[str], float]:
    """
    Returns (matched, ratio). An empty requirement accepts every candidate
    with a ratio of 1.0.
    """
    if not required:
        return [], 1.0
    offered_set = set(offered)
    matched = [item for item in required if item in offered_set]
    return matched, len(matched) / len(required)


def ratio_points(ratio: float, weight: int) -> int:
    return int(math.floor(ratio * weight))


def classify_capacity(capacity: int, required: int) -> CapacityFit:
    """equal -> perfect, >=1.5x -> sufficient, >= -> limited, else insufficient."""
    if capacity == required:
        return CapacityFit.PERFECT
    if capacity >= required * 1.5:
        return CapacityFit.SUFFICIENT
    if capacity >= required:
        return CapacityFit.LIMITED
    return CapacityFit.INSUFFICIENT


def target_day(schedule: BaseSchedule) -> Optional[date]:
    return date.fromisoformat(schedule.day_key) if schedule.day_key else None


def resource_involved(kind: ResourceKind, resource_id: str, schedule: BaseSchedule) -> bool:
    """True when `schedule` consumes the resource `resource_id` of the given kind."""
    if kind == ResourceKind.STAFF:
        return resource_id in schedule.involved_staff_ids()
    if kind == ResourceKind.VEHICLE:
        return schedule.vehicle_id == resource_id
    if kind == ResourceKind.ROOM:
        return schedule.room_ref == resource_id
    if kind == ResourceKind.EQUIPMENT:
        return resource_id in schedule.equipment_ids
    raise ValueError(f"Unknown resource kind: {kind!r}")


def join_warnings(warnings: List[str]) -> Optional[str]:
    return "; ".join(warnings) if warnings else None


class ResourceStrategy(ABC):
    """Kind-specific behaviour plugged into AlternativeEngine."""
    kind: ResourceKind
    default_max_suggestions: int = 3

    def is_eligible(self, profile) -> bool:
        return True

    def is_involved(self, profile, schedule: BaseSchedule) -> bool:
        return resource_involved(self.kind, profile.id, schedule)

    @abstractmethod
    def evaluate(self, profile, request: AlternativeRequest, occupancy: Occupancy) -> Alternative:
        """Score one eligible candidate."""


class AlternativeEngine:
    """
    Ranks substitute resources for a target schedule.
    Busy candidates stay in the list (flagged) so the operator can still see them.
    """

    def __init__(self, strategy: ResourceStrategy, schedules: Iterable[BaseSchedule]):
        self.strategy = strategy
        self.schedules = list(schedules)

    def occupancy_of(self, profile, target: BaseSchedule) -> Occupancy:
        window = target.interval
        day = target.day_key
        occupancy = Occupancy()
        for schedule in self.schedules:
            if schedule.id == target.id:
                continue
            if not self.strategy.is_involved(profile, schedule):
                continue
            if day is not None and schedule.day_key == day:
                occupancy.same_day_count += 1
            if intervals_overlap(window, schedule.interval):
                occupancy.overlapping.append(schedule)
        return occupancy

    def suggest(self, request: AlternativeRequest, profiles: Iterable) -> List[Alternative]:
        target = request.target_schedule
        excluded = set(request.exclude_ids)
        limit = request.max_suggestions or self.strategy.default_max_suggestions

        ranked: List[Alternative] = []
        for profile in profiles:
            if profile.id in excluded or not self.strategy.is_eligible(profile):
                continue
            occupancy = self.occupancy_of(profile, target)
            ranked.append(self.strategy.evaluate(profile, request, occupancy))

        # list.sort is stable: equal priorities keep input order
        ranked.sort(key=lambda alt: alt.priority, reverse=True)
        logger.debug(
            f"{self.strategy.kind.value} alternatives for {target.id}: "
            f"{len(ranked)} candidates, returning {min(limit, len(ranked))}"
        )
        return ranked[:limit]
