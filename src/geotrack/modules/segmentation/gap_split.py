from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from geotrack.core.point import Point


class GapSplitter:
    """
    Breaks a segment into pieces wherever consecutive timestamps are at least
    `min_gap` apart.

    Points without a timestamp can't be tested, so they join the current
    split. The last known timestamp is kept across them, so a later timed
    point is still compared against it.
    """

    def __init__(self, min_gap: timedelta):
        self.min_gap = min_gap

    def split(self, points: Sequence[Point]) -> List[List[Point]]:
        splits: List[List[Point]] = []
        if not points:
            return splits

        current: List[Point] = []
        splits.append(current)

        last_timestamp: Optional[datetime] = None
        for p in points:
            if last_timestamp is not None and p.timestamp is not None:
                if p.timestamp - last_timestamp >= self.min_gap:
                    current = []
                    splits.append(current)

            current.append(p)
            if p.timestamp is not None:
                last_timestamp = p.timestamp

        return splits


def split(segment: Sequence[Point], min_gap: timedelta) -> List[List[Point]]:
    return GapSplitter(min_gap).split(segment)
