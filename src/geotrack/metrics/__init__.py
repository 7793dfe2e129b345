from .geodesy import (
    corrected_longitude, planar_distance, great_circle_distance,
    velocity, velocity_mph, midpoint
)
from .distance import cumulative_distance, track_length
