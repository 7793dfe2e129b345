import logging
from typing import List, NamedTuple, Optional, Sequence, Tuple

from geotrack.core.point import Point
from geotrack.metrics.geodesy import planar_distance

logger = logging.getLogger(__name__)


class AlignedPair(NamedTuple):
    first: Point
    second: Point


class SegmentAligner:
    """
    Pairs up corresponding points of two segments that cover the same ground,
    such as the outbound and return legs of a loop, or two recordings of the
    same route.

    Both segments are walked forward with an integer cursor each. The first
    segment is stepped in increments of at least `min_increment` meters from
    the last matched point; each step is matched to the closest point of the
    second segment that lies within `max_separation` meters.

    Until the first match is found the second cursor stays put, so the first
    segment keeps stepping forward for the place where the two tracks start to
    overlap. Once matching has begun, an attempt with no match runs the second
    cursor off the end, which ends the alignment.
    """

    def __init__(self, min_increment: float, max_separation: float):
        """
        Args:
            min_increment: Minimum distance in meters between successive
                           matched points of the first segment.
            max_separation: Distance in meters below which two points may
                            be paired.
        """
        self.min_increment = min_increment
        self.max_separation = max_separation

    def align(self, s1: Sequence[Point], s2: Sequence[Point]) -> List[AlignedPair]:
        result: List[AlignedPair] = []
        idx1 = 0
        idx2 = 0
        anchor: Optional[Point] = None

        while idx1 < len(s1) and idx2 < len(s2):
            candidate, idx1 = self._next_increment(s1, idx1, anchor)
            if candidate is None:
                break

            before = idx2
            match, idx2 = self._closest_match(candidate, s2, idx2)
            if match is not None:
                result.append(AlignedPair(candidate, match))
                anchor = candidate
            elif not result:
                idx2 = before

        logger.debug("aligned %d pairs from %d and %d points", len(result), len(s1), len(s2))
        return result

    def _next_increment(self, points: Sequence[Point], idx: int,
                        anchor: Optional[Point]) -> Tuple[Optional[Point], int]:
        """
        Returns the next point at least `min_increment` from the anchor (or
        simply the next point if there is no anchor), and the cursor just past it.
        """
        if anchor is None:
            return points[idx], idx + 1

        while idx < len(points):
            p = points[idx]
            idx += 1
            if planar_distance(anchor, p) >= self.min_increment:
                return p, idx
        return None, idx

    def _closest_match(self, target: Point, points: Sequence[Point],
                       idx: int) -> Tuple[Optional[Point], int]:
        """
        Scans forward for the first point within `max_separation` of the
        target, then follows the points for as long as they don't get farther
        away. Returns the closest one and the cursor just past it; with no
        match, returns None and the exhausted cursor.
        """
        while idx < len(points):
            closest = points[idx]
            idx += 1
            closest_dist = planar_distance(target, closest)
            if closest_dist < self.max_separation:
                mark = idx
                while idx < len(points):
                    p = points[idx]
                    idx += 1
                    dist = planar_distance(target, p)
                    if dist > closest_dist:
                        return closest, mark
                    closest, closest_dist, mark = p, dist, idx
                return closest, idx
        return None, idx


def align(s1: Sequence[Point], s2: Sequence[Point],
          min_increment: float, max_separation: float) -> List[AlignedPair]:
    return SegmentAligner(min_increment, max_separation).align(s1, s2)
