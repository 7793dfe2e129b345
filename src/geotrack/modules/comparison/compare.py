from dataclasses import dataclass
from typing import List, Sequence

from geotrack.core.point import Point
from geotrack.metrics.distance import cumulative_distance
from geotrack.metrics.geodesy import midpoint, velocity_mph
from geotrack.modules.alignment.aligner import AlignedPair


@dataclass(frozen=True)
class Leg:
    start: Point
    finish: Point
    mph: float


@dataclass(frozen=True)
class LegComparison:
    """
    One stretch of ground covered by both tracks. `start` and `finish` sit
    halfway between the two tracks' points.
    """
    start: Point
    finish: Point
    first_mph: float
    second_mph: float

    @property
    def second_faster(self) -> bool:
        return self.second_mph > self.first_mph


@dataclass(frozen=True)
class ComparisonSummary:
    pair_count: int
    second_faster_count: int
    distance: float


def leg_velocities(segment: Sequence[Point]) -> List[Leg]:
    """Speed in miles/hour over each consecutive pair of points."""
    return [Leg(prev, cur, velocity_mph(prev, cur)) for prev, cur in zip(segment, segment[1:])]


class TrackComparator:
    """
    Compares the speed of two aligned tracks, leg by leg.
    """

    def compare(self, pairs: Sequence[AlignedPair]) -> List[LegComparison]:
        legs = []
        for prev, cur in zip(pairs, pairs[1:]):
            legs.append(LegComparison(
                start=midpoint(prev.first, prev.second),
                finish=midpoint(cur.first, cur.second),
                first_mph=velocity_mph(prev.first, cur.first),
                second_mph=velocity_mph(prev.second, cur.second),
            ))
        return legs

    def summarize(self, pairs: Sequence[AlignedPair]) -> ComparisonSummary:
        """
        Args:
            pairs: Output of `SegmentAligner.align`.

        Returns:
            Pair count, how many legs the second track covered faster, and the
            distance in meters spanned by the first track's aligned points.
        """
        legs = self.compare(pairs)
        return ComparisonSummary(
            pair_count=len(pairs),
            second_faster_count=sum(1 for leg in legs if leg.second_faster),
            distance=cumulative_distance([pair.first for pair in pairs]),
        )
