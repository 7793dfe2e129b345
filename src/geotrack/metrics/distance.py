from typing import Sequence

from geotrack.core.point import Point
from .geodesy import planar_distance


def cumulative_distance(segment: Sequence[Point]) -> float:
    """
    Sums the planar distance (meters) between consecutive points of a segment.
    Empty and single-point segments have no length.
    """
    total = 0.0
    for prev, cur in zip(segment, segment[1:]):
        total += planar_distance(prev, cur)
    return total


def track_length(segment: Sequence[Point]) -> float:
    """
    Cumulative distance after putting the points in chronological order, for
    tracks assembled from several recordings.
    """
    return cumulative_distance(sorted(segment))
