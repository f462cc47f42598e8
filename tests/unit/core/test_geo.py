#!/usr/bin/env python3
"""
Unit tests for haversine distance.
"""

import math
import unittest

from core.geo import Coordinate, distance_km, EARTH_RADIUS_KM

SAMPLE_POINTS = [
    Coordinate(0.0, 0.0),
    Coordinate(-23.5505, -46.6333),
    Coordinate(40.7128, -74.0060),
    Coordinate(51.5074, -0.1278),
    Coordinate(-33.8688, 151.2093),
    Coordinate(89.9, 179.9),
]


class TestDistanceKm(unittest.TestCase):

    def test_identical_points_are_zero(self):
        for point in SAMPLE_POINTS:
            self.assertEqual(distance_km(point, point), 0.0)

    def test_symmetric(self):
        for a in SAMPLE_POINTS:
            for b in SAMPLE_POINTS:
                self.assertAlmostEqual(distance_km(a, b), distance_km(b, a), places=9)

    def test_non_negative(self):
        for a in SAMPLE_POINTS:
            for b in SAMPLE_POINTS:
                self.assertGreaterEqual(distance_km(a, b), 0.0)

    def test_one_degree_of_longitude_on_equator(self):
        expected = EARTH_RADIUS_KM * math.pi / 180  # ~111.195 km
        self.assertAlmostEqual(distance_km(Coordinate(0, 0), Coordinate(0, 1)), expected, places=6)

    def test_roughly_ten_km(self):
        distance = distance_km(Coordinate(0, 0), Coordinate(0, 0.09))
        self.assertAlmostEqual(distance, 10.0075, places=3)

    def test_antipodal_points(self):
        distance = distance_km(Coordinate(0, 0), Coordinate(0, 180))
        self.assertAlmostEqual(distance, math.pi * EARTH_RADIUS_KM, places=6)

    def test_known_city_pair(self):
        """London to New York is about 5570 km."""
        london = Coordinate(51.5074, -0.1278)
        new_york = Coordinate(40.7128, -74.0060)
        self.assertAlmostEqual(distance_km(london, new_york), 5570, delta=10)

    def test_monotonic_for_small_distances(self):
        origin = Coordinate(10.0, 10.0)
        distances = [distance_km(origin, Coordinate(10.0, 10.0 + step / 100)) for step in range(1, 20)]
        self.assertEqual(distances, sorted(distances))

    def test_out_of_range_values_do_not_raise(self):
        distance = distance_km(Coordinate(100.0, 400.0), Coordinate(-95.0, -200.0))
        self.assertTrue(math.isfinite(distance))
        self.assertGreaterEqual(distance, 0.0)

    def test_non_finite_values_give_infinity(self):
        origin = Coordinate(0.0, 0.0)
        for point in (Coordinate(math.inf, 0.0), Coordinate(0.0, -math.inf), Coordinate(math.nan, 0.0)):
            with self.subTest(point=point):
                self.assertEqual(distance_km(origin, point), math.inf)
                self.assertEqual(distance_km(point, origin), math.inf)


if __name__ == '__main__':
    unittest.main()
