import math
from datetime import timedelta
from typing import Optional

from geotrack.core.constants import (
    EARTH_DEGREE_LENGTH, EARTH_RADIUS, FEET_PER_MILE, INCHES_PER_FOOT,
    INCHES_PER_METER, MILLIS_PER_SECOND, SECONDS_PER_HOUR
)
from geotrack.core.point import EPOCH, Point


def corrected_longitude(base_degree_length: float, at_latitude: float) -> float:
    """
    Scales a length measured in degrees of longitude for the latitude it was
    measured at (in degrees, not radians).
    """
    return base_degree_length * math.cos(math.radians(at_latitude))


def planar_distance(p1: Point, p2: Point, base_degree_length: float = EARTH_DEGREE_LENGTH) -> float:
    """
    Pythagorean distance in meters, treating degree deltas as a flat grid.
    Longitude is corrected at the latitude of the first point.

    Only adequate for short distances, but cheap enough to run over every
    pair of a long track.
    """
    d_lat = base_degree_length * (p2.lat - p1.lat)
    d_lon = corrected_longitude(base_degree_length * (p2.lon - p1.lon), p1.lat)
    return math.sqrt(d_lat * d_lat + d_lon * d_lon)


def great_circle_distance(p1: Point, p2: Point, radius: float = EARTH_RADIUS) -> float:
    """
    Spherical distance in meters, using the vector (cross/dot product) form.

    The central angle is atan(|cross| / dot), not atan2: when the dot product
    is zero or negative (points a quarter of the sphere or more apart) the
    result is not the true distance.
    """
    lat1 = math.radians(p1.lat)
    lat2 = math.radians(p2.lat)
    d_lon = math.radians(p2.lon) - math.radians(p1.lon)
    n1 = math.cos(lat2) * math.sin(d_lon)
    n2 = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    d = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(d_lon)
    sigma = math.atan(_divide(math.sqrt(n1 * n1 + n2 * n2), d))
    return sigma * radius


def velocity(p1: Point, p2: Point) -> float:
    """
    Speed in meters/second needed to get from one point to the other, by
    planar distance. Points with equal (or missing) timestamps give inf, or
    nan if they are also at the same place.
    """
    distance = planar_distance(p1, p2)
    elapsed = (p1.timestamp_millis - p2.timestamp_millis) / MILLIS_PER_SECOND
    return abs(_divide(distance, elapsed))


def velocity_mph(p1: Point, p2: Point) -> float:
    return velocity(p1, p2) * INCHES_PER_METER / INCHES_PER_FOOT / FEET_PER_MILE * SECONDS_PER_HOUR


def midpoint(p1: Point, p2: Point) -> Point:
    """
    Point halfway between the two. Elevation and timestamp are averaged only
    when both points have them; otherwise they are left unset.
    """
    lat = (p2.lat + p1.lat) / 2
    lon = (p2.lon + p1.lon) / 2

    elevation: Optional[float] = None
    if p1.elevation is not None and p2.elevation is not None:
        elevation = (p1.elevation + p2.elevation) / 2

    timestamp = None
    if p1.timestamp is not None and p2.timestamp is not None:
        total = p1.timestamp_millis + p2.timestamp_millis
        # truncate toward zero, same as integer millis arithmetic elsewhere
        avg = total // 2 if total >= 0 else -((-total) // 2)
        timestamp = EPOCH + timedelta(milliseconds=avg)

    return Point(lat=lat, lon=lon, elevation=elevation, timestamp=timestamp)


def _divide(numerator: float, denominator: float) -> float:
    """Float division that follows IEEE-754 for a zero denominator instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
