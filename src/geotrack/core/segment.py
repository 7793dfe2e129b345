from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, Optional, Sequence, Tuple

from geotrack.metrics.distance import cumulative_distance
from .point import Point


@dataclass(frozen=True)
class Segment:
    """
    An ordered run of points along a path, in traversal order.
    Duplicate points are allowed.
    """
    points: Tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))

    @classmethod
    def of(cls, points: Sequence[Point]) -> "Segment":
        return cls(points=tuple(points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @property
    def start_time(self) -> Optional[datetime]:
        if not self.points:
            raise ValueError("Segment is empty")
        return self.points[0].timestamp

    @property
    def end_time(self) -> Optional[datetime]:
        if not self.points:
            raise ValueError("Segment is empty")
        return self.points[-1].timestamp

    @property
    def distance(self) -> float:
        """Cumulative planar distance along the segment, in meters."""
        return cumulative_distance(self.points)
