"""
Strict half-open interval overlap test.
"""
from typing import Optional

from models.timing import parse_instant


def overlaps(a_start, a_end, b_start, b_end) -> bool:
    """
    True iff [a_start, a_end) and [b_start, b_end) intersect.
    Intervals that only touch at a boundary do not overlap. Any endpoint that
    fails to parse yields False.
    """
    a0 = parse_instant(a_start)
    a1 = parse_instant(a_end)
    b0 = parse_instant(b_start)
    b1 = parse_instant(b_end)
    if a0 is None or a1 is None or b0 is None or b1 is None:
        return False
    return a0 < b1 and b0 < a1


def intervals_overlap(a: Optional[tuple], b: Optional[tuple]) -> bool:
    """Same test on already-parsed (start, end) tuples; None never overlaps."""
    if a is None or b is None:
        return False
    return a[0] < b[1] and b[0] < a[1]


def schedules_overlap(a, b) -> bool:
    """Overlap test for two schedule-like objects exposing `.interval`."""
    return intervals_overlap(a.interval, b.interval)
