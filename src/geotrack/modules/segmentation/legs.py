from typing import List, Sequence, Tuple

from geotrack.core.point import Point
from geotrack.metrics.distance import cumulative_distance

OUTBOUND = "outbound"
RETURN = "return"


def assign_legs(splits: Sequence[Sequence[Point]]) -> List[Tuple[str, List[Point]]]:
    """
    Labels the splits of an out-and-back track as outbound or return.

    Splits are taken from the front while the outbound distance is no more
    than the return distance, otherwise from the back, so the two legs end up
    roughly the same length. The result keeps the original split order:
    outbound splits first, then the return splits.
    """
    outbound: List[Tuple[str, List[Point]]] = []
    back: List[Tuple[str, List[Point]]] = []

    start = 0
    end = len(splits)
    out_dist = 0.0
    back_dist = 0.0
    while start < end:
        if out_dist <= back_dist:
            split = list(splits[start])
            start += 1
            outbound.append((OUTBOUND, split))
            out_dist += cumulative_distance(split)
        else:
            end -= 1
            split = list(splits[end])
            back.insert(0, (RETURN, split))
            back_dist += cumulative_distance(split)

    return outbound + back
