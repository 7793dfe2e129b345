from typing import List, Sequence

from geotrack.core.point import Point
from geotrack.metrics.geodesy import planar_distance


class DistanceSimplifier:
    def __init__(self, min_distance: float):
        """
        Args:
            min_distance: A point is kept only if it is strictly farther than
                          this many meters from the last kept point.
        """
        self.min_distance = min_distance

    def compress(self, points: Sequence[Point]) -> List[Point]:
        """
        Greedy thinning against the last kept point. The first point is always
        kept; nothing is measured against the line between kept points.
        """
        if not points:
            return []

        last_kept = points[0]
        result = [last_kept]
        for p in points[1:]:
            if planar_distance(last_kept, p) > self.min_distance:
                result.append(p)
                last_kept = p

        return result


def simplify(segment: Sequence[Point], min_distance_meters: float) -> List[Point]:
    return DistanceSimplifier(min_distance_meters).compress(segment)
