from datetime import timedelta

import geotrack
from geotrack.core.point import Point

def test_top_level_api():
    points = [Point.from_millis(0.0, i * 0.001, i * 10000) for i in range(5)]

    assert geotrack.cumulative_distance(points) > 0
    assert geotrack.trim(points, 10.0) == points
    assert geotrack.split(points, timedelta(minutes=30)) == [points]
    assert geotrack.simplify(points, 1.0) == points
    assert len(geotrack.align(points, points, 50.0, 10.0)) == 5
