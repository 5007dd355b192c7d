"""
The Conflict Rule Evaluator.

Scans every unordered pair of schedules once (i < j) and asks the rule chain
for a verdict. Only the first non-None verdict per pair is recorded, so a
pair yields at most one conflict no matter how many rules match.
"""

import logging
import time
from typing import Iterable, List, Optional, Sequence

from models import BaseSchedule, ScheduleConflict
from .rules import DEFAULT_CONFLICT_RULES, ConflictRule

logger = logging.getLogger(__name__)


class ConflictEvaluator:
    """
    Applies an ordered rule chain to a schedule snapshot.
    The O(n^2) pair scan is intentional: snapshots are a day or a week of entries.
    """

    def __init__(self, rules: Optional[Sequence[ConflictRule]] = None):
        self.rules: List[ConflictRule] = list(DEFAULT_CONFLICT_RULES if rules is None else rules)

    def first_match(self, a: BaseSchedule, b: BaseSchedule) -> Optional[ScheduleConflict]:
        """Verdict of the first rule that fires for this pair."""
        for rule in self.rules:
            conflict = rule(a, b)
            if conflict is not None:
                return conflict
        return None

    def evaluate(self, schedules: Iterable[BaseSchedule]) -> List[ScheduleConflict]:
        items = list(schedules)
        started = time.perf_counter()
        conflicts: List[ScheduleConflict] = []

        for i in range(len(items)):
            a = items[i]
            for j in range(i + 1, len(items)):
                conflict = self.first_match(a, items[j])
                if conflict is not None:
                    conflicts.append(conflict)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(
            f"Evaluated {len(items)} schedules with {len(self.rules)} rules: "
            f"{len(conflicts)} conflicts in {elapsed_ms:.1f}ms"
        )
        return conflicts


def detect_conflicts(
    schedules: Iterable[BaseSchedule],
    rules: Optional[Sequence[ConflictRule]] = None,
) -> List[ScheduleConflict]:
    """
    Detect conflicts across a snapshot.
    `rules` defaults to DEFAULT_CONFLICT_RULES; pass
    DEFAULT_CONFLICT_RULES + [custom_rule] to extend the chain.
    """
    return ConflictEvaluator(rules).evaluate(schedules)
