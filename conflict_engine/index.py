"""
Conflict index: schedule id -> every conflict that schedule takes part in.
"""
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from models import ScheduleConflict

ConflictIndex = Dict[str, List[ScheduleConflict]]


def build_conflict_index(conflicts: Iterable[ScheduleConflict]) -> ConflictIndex:
    """File each conflict under both of its schedule ids, in input order."""
    index: Dict[str, List[ScheduleConflict]] = defaultdict(list)
    for conflict in conflicts:
        index[conflict.id_a].append(conflict)
        if conflict.id_b != conflict.id_a:
            index[conflict.id_b].append(conflict)
    return dict(index)


def has_conflict(index: Optional[ConflictIndex], schedule_id: Optional[str]) -> bool:
    if not index or not schedule_id:
        return False
    return bool(index.get(schedule_id))


def conflicts_for(index: Optional[ConflictIndex], schedule_id: Optional[str]) -> List[ScheduleConflict]:
    if not index or not schedule_id:
        return []
    return list(index.get(schedule_id, []))
