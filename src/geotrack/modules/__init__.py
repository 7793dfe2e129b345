from .trimming.trimmer import StationaryTrimmer, trim
from .segmentation.gap_split import GapSplitter, split
from .segmentation.legs import OUTBOUND, RETURN, assign_legs
from .move_compression.distance_filter import DistanceSimplifier, simplify
from .alignment.aligner import AlignedPair, SegmentAligner, align
from .filtering.time_window import filter_between, filter_points, sort_points
from .comparison.compare import ComparisonSummary, Leg, LegComparison, TrackComparator, leg_velocities
from .pipeline.cleaner import CleanupConfig, TrackCleaner
