import unittest
from datetime import datetime, timedelta
from geotrack.core.point import Point
from geotrack.metrics.geodesy import planar_distance
from geotrack.modules.move_compression.distance_filter import DistanceSimplifier, simplify

class TestDistanceSimplifier(unittest.TestCase):
    def setUp(self):
        self.compressor = DistanceSimplifier(min_distance=25.0)
        self.start_time = datetime(2023, 1, 1, 12, 0, 0)

    def create_point(self, i, lat, lon):
        return Point(
            lat=lat,
            lon=lon,
            timestamp=self.start_time + timedelta(minutes=i)
        )

    def test_compress_empty(self):
        self.assertEqual(self.compressor.compress([]), [])

    def test_single_point(self):
        p = self.create_point(0, 40.0, -75.0)
        self.assertEqual(self.compressor.compress([p]), [p])

    def test_compress_straight_line(self):
        # ~11.1 meters between neighbours; every third point clears 25 meters
        points = [self.create_point(i, 40.0 + i * 0.0001, -75.0) for i in range(10)]
        result = self.compressor.compress(points)
        self.assertEqual(result, [points[0], points[3], points[6], points[9]])

    def test_measured_from_last_kept_point(self):
        # jitter around the start never builds up enough distance on its own
        base = self.create_point(0, 40.0, -75.0)
        jitter = [self.create_point(i, 40.0 + (i % 2) * 0.0001, -75.0) for i in range(1, 8)]
        far = self.create_point(8, 40.001, -75.0)
        self.assertEqual(simplify([base] + jitter + [far], 25.0), [base, far])

    def test_threshold_is_strict(self):
        p1 = self.create_point(0, 0.0, 0.0)
        p2 = self.create_point(1, 0.0, 1.0)
        d = planar_distance(p1, p2)
        self.assertEqual(simplify([p1, p2], d), [p1])
        self.assertEqual(simplify([p1, p2], d - 1.0), [p1, p2])

    def test_kept_points_are_spaced(self):
        points = [self.create_point(i, 40.0 + (i * 37 % 11) * 0.0001, -75.0 + i * 0.00005) for i in range(40)]
        result = simplify(points, 25.0)
        self.assertEqual(result[0], points[0])
        for a, b in zip(result, result[1:]):
            self.assertGreater(planar_distance(a, b), 25.0)

if __name__ == '__main__':
    unittest.main()
