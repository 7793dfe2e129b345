import unittest
from geotrack.core.point import Point
from geotrack.metrics.geodesy import midpoint, velocity_mph
from geotrack.modules.alignment.aligner import AlignedPair
from geotrack.modules.comparison.compare import TrackComparator, leg_velocities

class TestTrackComparator(unittest.TestCase):
    def setUp(self):
        self.comparator = TrackComparator()
        # both tracks cover ~111 meters per leg; the second one in half the time
        self.pairs = [
            AlignedPair(Point.from_millis(0.0, 0.0, 0), Point.from_millis(0.0, 0.0001, 0)),
            AlignedPair(Point.from_millis(0.001, 0.0, 10000), Point.from_millis(0.001, 0.0001, 5000)),
            AlignedPair(Point.from_millis(0.002, 0.0, 15000), Point.from_millis(0.002, 0.0001, 15000)),
        ]

    def test_compare(self):
        legs = self.comparator.compare(self.pairs)
        self.assertEqual(len(legs), 2)

        first = legs[0]
        self.assertEqual(first.start, midpoint(self.pairs[0].first, self.pairs[0].second))
        self.assertEqual(first.finish, midpoint(self.pairs[1].first, self.pairs[1].second))
        self.assertEqual(first.start.timestamp_millis, 0)
        self.assertEqual(first.finish.timestamp_millis, 7500)
        self.assertAlmostEqual(first.second_mph, 2 * first.first_mph)
        self.assertTrue(first.second_faster)

        self.assertAlmostEqual(legs[1].first_mph, 2 * legs[1].second_mph)
        self.assertFalse(legs[1].second_faster)

    def test_compare_too_few_pairs(self):
        self.assertEqual(self.comparator.compare([]), [])
        self.assertEqual(self.comparator.compare(self.pairs[:1]), [])

    def test_summarize(self):
        summary = self.comparator.summarize(self.pairs)
        self.assertEqual(summary.pair_count, 3)
        self.assertEqual(summary.second_faster_count, 1)
        self.assertAlmostEqual(summary.distance, 0.002 * 111132.0)

    def test_leg_velocities(self):
        points = [Point.from_millis(0.0, 0.0, 0), Point.from_millis(0.001, 0.0, 10000), Point.from_millis(0.002, 0.0, 30000)]
        legs = leg_velocities(points)
        self.assertEqual(len(legs), 2)
        self.assertEqual((legs[0].start, legs[0].finish), (points[0], points[1]))
        self.assertAlmostEqual(legs[0].mph, velocity_mph(points[0], points[1]))
        self.assertAlmostEqual(legs[0].mph, 2 * legs[1].mph)
        self.assertEqual(leg_velocities(points[:1]), [])

if __name__ == '__main__':
    unittest.main()
