from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLI = timedelta(milliseconds=1)


@dataclass(frozen=True)
class Point:
    """
    A single GPS fix: latitude, longitude, optional elevation (meters) and
    optional timestamp.

    Timestamps are held as UTC datetimes with millisecond resolution; naive
    datetimes are taken to be UTC already.
    """
    lat: float
    lon: float
    elevation: Optional[float] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        if self.lat < -90.0 or self.lat > 90.0:
            raise ValueError(f"invalid latitude: {self.lat}")
        if self.lon < -180.0 or self.lon > 180.0:
            raise ValueError(f"invalid longitude: {self.lon}")
        if self.timestamp is not None:
            object.__setattr__(self, "timestamp", _normalize_timestamp(self.timestamp))

    @classmethod
    def from_millis(cls, lat: float, lon: float, millis: int, elevation: Optional[float] = None) -> "Point":
        """Builds a point whose timestamp is given as milliseconds since the epoch."""
        return cls(lat=lat, lon=lon, elevation=elevation, timestamp=EPOCH + timedelta(milliseconds=millis))

    @property
    def elevation_or_zero(self) -> float:
        return 0.0 if self.elevation is None else self.elevation

    @property
    def timestamp_millis(self) -> int:
        """Milliseconds since the epoch, with a missing timestamp treated as 0."""
        if self.timestamp is None:
            return 0
        return (self.timestamp - EPOCH) // _ONE_MILLI

    @property
    def timestamp_as_string(self) -> Optional[str]:
        """ISO-8601 "Zulu" form of the timestamp, e.g. 2019-12-28T15:43:48Z."""
        if self.timestamp is None:
            return None
        text = self.timestamp.strftime("%Y-%m-%dT%H:%M:%S")
        if self.timestamp.microsecond:
            text += f".{self.timestamp.microsecond // 1000:03d}"
        return text + "Z"

    def is_between(self, start: datetime, finish: datetime) -> bool:
        """Inclusive time-window test; points without a timestamp are never inside."""
        if self.timestamp is None:
            return False
        return _normalize_timestamp(start) <= self.timestamp <= _normalize_timestamp(finish)

    @property
    def sort_key(self):
        # timestamp first; the rest only break ties between simultaneous fixes
        return (self.timestamp_millis, abs(self.lat), abs(self.lon), self.elevation_or_zero)

    def __lt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def __repr__(self):
        parts = [f"lat={self.lat}", f"lon={self.lon}"]
        if self.elevation is not None:
            parts.append(f"ele={self.elevation}")
        if self.timestamp is not None:
            parts.append(f"ts={self.timestamp_as_string}")
        return f"Point({','.join(parts)})"


def _normalize_timestamp(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)
