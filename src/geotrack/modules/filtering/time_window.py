from datetime import datetime
from typing import Callable, List, Sequence

from geotrack.core.point import Point


def filter_points(segment: Sequence[Point], predicate: Callable[[Point], bool]) -> List[Point]:
    return [p for p in segment if predicate(p)]


def filter_between(segment: Sequence[Point], start: datetime, finish: datetime) -> List[Point]:
    """
    Keeps the points timestamped within [start, finish]. Points without a
    timestamp are dropped.
    """
    return filter_points(segment, lambda p: p.is_between(start, finish))


def sort_points(segment: Sequence[Point]) -> List[Point]:
    """
    Chronological order, used when combining points from several recordings.
    Untimed points sort first.
    """
    return sorted(segment)
