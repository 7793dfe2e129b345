import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional, Sequence, Tuple

from geotrack.core.constants import (
    DEFAULT_ALIGN_INCREMENT_METERS, DEFAULT_ALIGN_SEPARATION_METERS,
    DEFAULT_SIMPLIFY_DISTANCE_METERS, DEFAULT_SPLIT_GAP, DEFAULT_TRIM_SEPARATION_METERS
)
from geotrack.core.point import Point
from geotrack.metrics.distance import cumulative_distance
from geotrack.modules.alignment.aligner import AlignedPair, SegmentAligner
from geotrack.modules.filtering.time_window import filter_between, sort_points
from geotrack.modules.move_compression.distance_filter import DistanceSimplifier
from geotrack.modules.segmentation.gap_split import GapSplitter
from geotrack.modules.segmentation.legs import OUTBOUND, RETURN, assign_legs
from geotrack.modules.trimming.trimmer import StationaryTrimmer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CleanupConfig:
    """Thresholds for the cleanup chains. Distances in meters."""
    trim_separation: float = DEFAULT_TRIM_SEPARATION_METERS
    split_gap: timedelta = DEFAULT_SPLIT_GAP
    simplify_distance: float = DEFAULT_SIMPLIFY_DISTANCE_METERS
    align_increment: float = DEFAULT_ALIGN_INCREMENT_METERS
    align_separation: float = DEFAULT_ALIGN_SEPARATION_METERS


class TrackCleaner:
    """
    Runs the segment operations in the order a track is usually tidied up
    before it is written back out.
    """

    def __init__(self, config: Optional[CleanupConfig] = None):
        self.config = config or CleanupConfig()
        self.trimmer = StationaryTrimmer(self.config.trim_separation)
        self.splitter = GapSplitter(self.config.split_gap)
        self.simplifier = DistanceSimplifier(self.config.simplify_distance)
        self.aligner = SegmentAligner(self.config.align_increment, self.config.align_separation)

    def clean(self, points: Sequence[Point], start: Optional[datetime] = None,
              finish: Optional[datetime] = None) -> List[List[Point]]:
        """
        Sorts the points chronologically, keeps those inside [start, finish]
        when a window is given, trims stationary ends and splits on time gaps.
        With only `start`, the window runs to the last millisecond of the
        following 24 hours.

        Returns:
            The splits; an empty list when no points survive.
        """
        if start is None and finish is not None:
            raise ValueError("finish given without start")
        if start is not None and finish is None:
            finish = start + timedelta(days=1) - timedelta(milliseconds=1)

        result = sort_points(points)
        if start is not None:
            result = filter_between(result, start, finish)
            logger.debug("filtered track has %d points", len(result))

        result = self.trimmer.trim(result)
        logger.debug("trimmed track has %d points", len(result))
        if not result:
            logger.warning("all %d points removed by cleanup", len(points))
            return []

        logger.debug("track length: %.1f meters", cumulative_distance(result))
        splits = self.splitter.split(result)
        logger.debug("split track has %d segments", len(splits))
        return splits

    def thin(self, points: Sequence[Point]) -> List[List[Point]]:
        """Simplifies the points, then splits them on time gaps."""
        simplified = self.simplifier.compress(points)
        logger.debug("after simplification, %d of %d points remain", len(simplified), len(points))
        splits = self.splitter.split(simplified)
        logger.debug("after split, %d segments", len(splits))
        return splits

    def legs(self, points: Sequence[Point]) -> List[Tuple[str, List[Point]]]:
        """Thins the points and labels the resulting splits as outbound or return."""
        legs = assign_legs(self.thin(points))
        logger.debug("%d outbound and %d return splits",
                     sum(1 for name, _ in legs if name == OUTBOUND),
                     sum(1 for name, _ in legs if name == RETURN))
        return legs

    def align(self, s1: Sequence[Point], s2: Sequence[Point]) -> List[AlignedPair]:
        return self.aligner.align(s1, s2)
