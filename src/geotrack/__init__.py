"""
Distance, thinning, splitting and alignment of GPS tracks.

Everything works on plain sequences of `Point`; reading and writing track
files is left to the caller.
"""

from geotrack.core.point import Point  # noqa: F401
from geotrack.core.segment import Segment  # noqa: F401
from geotrack.metrics import (  # noqa: F401
    corrected_longitude, planar_distance, great_circle_distance,
    velocity, velocity_mph, midpoint, cumulative_distance, track_length
)
from geotrack.modules import (  # noqa: F401
    trim, split, simplify, align, AlignedPair, filter_between, sort_points,
    CleanupConfig, TrackCleaner
)

__version__ = "0.1.0"
