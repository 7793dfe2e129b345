"""
Numeric constants shared by the point and segment calculations.

Distances are in meters, durations in seconds unless the name says otherwise.
"""
from datetime import timedelta

# Length of a degree of latitude at 45 N/S, used for planar distance.
EARTH_DEGREE_LENGTH = 111132.0

# Mean Earth radius, used for great-circle distance.
EARTH_RADIUS = 6371000.0

# Meters/second -> miles/hour goes through inches and feet.
INCHES_PER_METER = 39.37
INCHES_PER_FOOT = 12
FEET_PER_MILE = 5280
SECONDS_PER_HOUR = 3600

MILLIS_PER_SECOND = 1000.0

# Pipeline defaults, taken from the track cleanup / conversion / compare tools.
DEFAULT_TRIM_SEPARATION_METERS = 25.0
DEFAULT_SPLIT_GAP = timedelta(minutes=30)
DEFAULT_SIMPLIFY_DISTANCE_METERS = 25.0
DEFAULT_ALIGN_INCREMENT_METERS = 50.0
DEFAULT_ALIGN_SEPARATION_METERS = 100.0
