from typing import List, Sequence

from geotrack.core.point import Point
from geotrack.metrics.geodesy import planar_distance


class StationaryTrimmer:
    """
    Removes the runs of points at the start and end of a segment that show no
    real movement (GPS noise while the receiver sits still). Stationary runs
    in the middle of the segment are left alone.
    """

    def __init__(self, min_separation: float):
        """
        Args:
            min_separation: Minimum distance in meters between two adjacent
                            points for them to count as movement.
        """
        self.min_separation = min_separation

    def trim(self, points: Sequence[Point]) -> List[Point]:
        if not points:
            return []

        result: List[Point] = []
        start = None
        for i in range(1, len(points)):
            if self._moved(points[i - 1], points[i]):
                start = i - 1
                break

        if start is None:
            return result
        result.extend(points[start:])

        # measured from the end backwards; never drop below the pair that
        # satisfied the forward scan
        while len(result) > 2 and not self._moved(result[-1], result[-2]):
            result.pop()

        return result

    def _moved(self, prev: Point, cur: Point) -> bool:
        return planar_distance(prev, cur) >= self.min_separation


def trim(segment: Sequence[Point], min_separation: float) -> List[Point]:
    return StationaryTrimmer(min_separation).trim(segment)
