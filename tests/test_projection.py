"""
Tests for the plane projection.
"""

import math
import pickle
import unittest

from plane_projection import GeoPoint, PlaneProjection
from plane_projection.geo import Latitude, lat_degree_length, lon_degree_length, lon_diff
from plane_projection.unit import Degree, Kilometer, Meter, Mile, Radian

LUND = (55.7041417, 13.1913041)
MALMO = (55.6033090, 13.0019737)
BETWEEN = (55.6781798, 13.0587896)


class TestLonDiff(unittest.TestCase):
    """Test longitude difference wrapping."""

    def test_wrapping(self):
        """Differences are wrapped into [-180, 180]."""
        self.assertEqual(lon_diff(0.0, 0.0), 0.0)
        self.assertEqual(lon_diff(100.0, 0.0), 100.0)
        self.assertEqual(lon_diff(100.0, -100.0), -160.0)
        self.assertEqual(lon_diff(177.0, -177.0), -6.0)
        self.assertEqual(lon_diff(358.0, 0.0), -2.0)
        self.assertEqual(lon_diff(0.0, 358.0), 2.0)
        self.assertEqual(lon_diff(0.0, -180.0), 180.0)
        self.assertEqual(lon_diff(1.0, -180.0), -179.0)
        self.assertEqual(lon_diff(180.0, 0.0), 180.0)
        self.assertEqual(lon_diff(180.0, -1.0), -179.0)
        self.assertEqual(lon_diff(180.0, -180.0), 0.0)


class TestScales(unittest.TestCase):
    """Test the per-degree scales."""

    def test_equator(self):
        """Series values at the equator."""
        self.assertAlmostEqual(lat_degree_length(0.0), 110574.2727, places=6)
        self.assertAlmostEqual(lon_degree_length(0.0), 111319.458, places=6)

    def test_pole(self):
        """A degree of longitude vanishes at the pole."""
        self.assertAlmostEqual(lon_degree_length(90.0), 0.0, places=6)
        self.assertGreater(lat_degree_length(90.0), lat_degree_length(0.0))

    def test_projection_uses_series(self):
        """The instance scales are the series values at its latitude."""
        proj = PlaneProjection(55.65)
        self.assertEqual(proj.lat_scale, lat_degree_length(55.65))
        self.assertEqual(proj.lon_scale, lon_degree_length(55.65))
        self.assertAlmostEqual(proj.lat_scale, 111335.4, delta=0.5)
        self.assertAlmostEqual(proj.lon_scale, 62955.4, delta=0.5)

    def test_deterministic(self):
        """Two projections at the same latitude have identical scales."""
        first, second = PlaneProjection(55.65), PlaneProjection(55.65)
        self.assertEqual(first.lat_scale, second.lat_scale)
        self.assertEqual(first.lon_scale, second.lon_scale)
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))

    def test_out_of_range_latitude(self):
        """Out-of-range latitudes still give finite scales."""
        proj = PlaneProjection(123.0)
        self.assertTrue(math.isfinite(proj.lat_scale))
        self.assertTrue(math.isfinite(proj.lon_scale))


class TestDegreeBoundary(unittest.TestCase):
    """Test conversion of angles at the public boundary."""

    def test_plain_float_is_degrees(self):
        """A float latitude is read as degrees, never radians."""
        in_degrees = PlaneProjection(55.65)
        mistaken = PlaneProjection(math.radians(55.65))
        self.assertLess(in_degrees.lon_scale, 63_000)
        self.assertGreater(mistaken.lon_scale, 111_000)

    def test_angle_units_are_converted(self):
        """Degree, Radian and Latitude values give the degree-based scales."""
        expected = PlaneProjection(55.65)
        for latitude in (Degree(55.65), Radian(math.radians(55.65)), Latitude(55.65)):
            proj = PlaneProjection(latitude)
            self.assertAlmostEqual(proj.latitude, 55.65, places=9)
            self.assertAlmostEqual(proj.lon_scale, expected.lon_scale, places=6)
            self.assertAlmostEqual(proj.lat_scale, expected.lat_scale, places=6)

    def test_length_is_not_a_latitude(self):
        """A length quantity is rejected wherever an angle is expected."""
        with self.assertRaises(TypeError):
            PlaneProjection(Meter(55.65))
        with self.assertRaises(TypeError):
            PlaneProjection.from_bounds(Meter(55.6), 55.7)
        with self.assertRaises(TypeError):
            PlaneProjection(55.65).destination(MALMO, 1000.0, Kilometer(45))

    def test_heading_unit_in_destination(self):
        """Headings given as Degree match plain degrees."""
        proj = PlaneProjection(55.65)
        plain = proj.destination(MALMO, 1000.0, 45.0)
        typed = proj.destination(MALMO, 1000.0, Degree(45))
        self.assertAlmostEqual(plain[0], typed[0], places=12)
        self.assertAlmostEqual(plain[1], typed[1], places=12)


class TestValueSemantics(unittest.TestCase):
    """Test immutability and construction helpers."""

    def test_immutable(self):
        """Scales cannot be reassigned or deleted."""
        proj = PlaneProjection(55.65)
        with self.assertRaises(AttributeError):
            proj.lat_scale = 1.0
        with self.assertRaises(AttributeError):
            proj.extra = 1.0
        with self.assertRaises(AttributeError):
            del proj.lon_scale

    def test_unit_part_of_identity(self):
        """Projections in different units are not equal."""
        self.assertNotEqual(PlaneProjection(55.65), PlaneProjection(55.65, unit=Kilometer))

    def test_pickle(self):
        """A pickled projection restores with the same scales."""
        proj = PlaneProjection(55.65, unit=Mile)
        restored = pickle.loads(pickle.dumps(proj))
        self.assertEqual(restored, proj)
        self.assertEqual(restored.lon_scale, proj.lon_scale)

    def test_repr(self):
        """repr names the latitude and unit."""
        self.assertEqual(
            repr(PlaneProjection(10.5, unit=Kilometer)),
            "PlaneProjection(latitude=10.5, unit=Kilometer)",
        )

    def test_invalid_unit(self):
        """Only length unit classes select the output unit."""
        with self.assertRaises(TypeError):
            PlaneProjection(55.65, unit=Degree)
        with self.assertRaises(TypeError):
            PlaneProjection(55.65, unit="km")

    def test_from_bounds(self):
        """Centered on the middle of the range."""
        self.assertAlmostEqual(PlaneProjection.from_bounds(55.6, 55.7).latitude, 55.65)

    def test_from_points(self):
        """Centered on the mean latitude."""
        proj = PlaneProjection.from_points([LUND, GeoPoint.from_deg(*MALMO)], unit=Kilometer)
        self.assertAlmostEqual(proj.latitude, (LUND[0] + MALMO[0]) / 2)
        self.assertIs(proj.unit, Kilometer)
        with self.assertRaises(ValueError):
            PlaneProjection.from_points([])

    def test_construction_logs_scales(self):
        """Construction reports its scales at debug level."""
        with self.assertLogs("plane_projection.geo.projection", level="DEBUG") as logs:
            PlaneProjection(55.65)
        self.assertIn("55.650000", logs.output[0])


class TestDistance(unittest.TestCase):
    """Test distance and squared distance."""

    def setUp(self):
        """Projection through Lund and Malmo."""
        self.proj = PlaneProjection(55.65)

    def test_reference_distance(self):
        """From Lund C to Malmo C."""
        self.assertEqual(int(self.proj.distance(LUND, MALMO)), 16373)

    def test_symmetry(self):
        """Distance does not depend on direction."""
        self.assertAlmostEqual(self.proj.distance(LUND, MALMO), self.proj.distance(MALMO, LUND))

    def test_self_distance(self):
        """Distance from a point to itself is exactly zero."""
        self.assertEqual(self.proj.distance(LUND, LUND), 0.0)
        self.assertEqual(self.proj.distance_sq(LUND, LUND), 0.0)

    def test_square_consistency(self):
        """distance_sq is distance squared."""
        d = self.proj.distance(LUND, MALMO)
        d_sq = self.proj.distance_sq(LUND, MALMO)
        self.assertLess(abs(d_sq - d * d) / d_sq, 1e-9)
        self.assertEqual(self.proj.square_distance(LUND, MALMO), d_sq)

    def test_geopoint_input(self):
        """GeoPoint and tuple inputs agree."""
        typed = self.proj.distance(GeoPoint.from_deg(*LUND), GeoPoint.from_deg(*MALMO))
        self.assertAlmostEqual(typed, self.proj.distance(LUND, MALMO), delta=1e-6)

    def test_kilometers(self):
        """Kilometers divide the meters result by 1000."""
        meters = self.proj.distance(LUND, MALMO)
        kilometers = PlaneProjection(55.65, unit=Kilometer).distance(LUND, MALMO)
        self.assertAlmostEqual(kilometers, meters / 1000, delta=1e-9)

    def test_miles(self):
        """Miles scale by the statute mile."""
        meters = self.proj.distance(LUND, MALMO)
        miles = PlaneProjection(55.65, unit=Mile).distance(LUND, MALMO)
        self.assertAlmostEqual(miles * 1609.344, meters, delta=1e-6)

    def test_antimeridian(self):
        """Points either side of 180° are close together."""
        proj = PlaneProjection(0.0)
        d = proj.distance((0.0, 179.9), (0.0, -179.9))
        self.assertAlmostEqual(d, 0.2 * proj.lon_scale, delta=1e-3)

    def test_nan_propagates(self):
        """NaN input gives NaN output without raising."""
        self.assertTrue(math.isnan(self.proj.distance((math.nan, 13.0), MALMO)))
        self.assertTrue(math.isnan(self.proj.heading(MALMO, (55.0, math.nan))))

    def test_project(self):
        """Projection multiplies longitude by lon_scale and latitude by lat_scale."""
        x, y = self.proj.project((55.0, 13.0))
        self.assertEqual(x, 13.0 * self.proj.lon_scale)
        self.assertEqual(y, 55.0 * self.proj.lat_scale)


class TestHeading(unittest.TestCase):
    """Test heading computation."""

    def setUp(self):
        """Projection through Lund and Malmo."""
        self.proj = PlaneProjection(55.65)

    def test_cardinal_directions(self):
        """North, south, east and west."""
        self.assertEqual(int(self.proj.heading((55.70, 13.19), (55.80, 13.19))), 0)
        self.assertEqual(int(self.proj.heading((55.70, 13.19), (55.60, 13.19))), 180)
        self.assertEqual(int(self.proj.heading((55.70, 13.19), (55.70, 13.29))), 90)
        self.assertEqual(int(self.proj.heading((55.70, 13.19), (55.70, 13.09))), 270)

    def test_reference_headings(self):
        """Between Malmo C and Lund C."""
        self.assertEqual(int(self.proj.heading(MALMO, LUND)), 46)
        self.assertEqual(int(self.proj.heading(LUND, MALMO)), 180 + 46)

    def test_range(self):
        """Headings stay within [0, 360)."""
        for dlat in (-0.1, -1e-12, 0.0, 1e-12, 0.1):
            for dlon in (-0.1, -1e-12, 0.0, 1e-12, 0.1):
                if dlat == 0.0 and dlon == 0.0:
                    continue
                heading = self.proj.heading(MALMO, (MALMO[0] + dlat, MALMO[1] + dlon))
                self.assertGreaterEqual(heading, 0.0)
                self.assertLess(heading, 360.0)

    def test_tiny_westward_angle(self):
        """A heading just west of north does not round up to 360."""
        heading = self.proj.heading((0.0, 0.0), (1.0, -1e-300))
        self.assertEqual(heading, 0.0)

    def test_coincident_points(self):
        """Coincident points have heading 0."""
        self.assertEqual(self.proj.heading(LUND, LUND), 0.0)


class TestSegment(unittest.TestCase):
    """Test point-to-segment distance and nearest point."""

    def setUp(self):
        """Projection through Lund and Malmo."""
        self.proj = PlaneProjection(55.65)
        self.segment = (LUND, MALMO)

    def test_reference_distance(self):
        """Distance from a point between the cities to the straight line."""
        self.assertEqual(int(self.proj.distance_to_segment(BETWEEN, self.segment)), 3615)

    def test_endpoints(self):
        """Endpoints are on the segment."""
        self.assertEqual(self.proj.distance_to_segment(LUND, self.segment), 0.0)
        self.assertEqual(self.proj.distance_to_segment(MALMO, self.segment), 0.0)

    def test_degenerate_segment(self):
        """A zero-length segment reduces to point distance."""
        d = self.proj.distance_to_segment(BETWEEN, (LUND, LUND))
        self.assertAlmostEqual(d, self.proj.distance(BETWEEN, LUND))
        self.assertEqual(self.proj.point_on_line(BETWEEN, (LUND, LUND)).t, 0.0)

    def test_beyond_end(self):
        """Past the end the nearest point is the endpoint."""
        a, b, beyond = (55.60, 13.0), (55.70, 13.0), (55.80, 13.0)
        self.assertAlmostEqual(
            self.proj.distance_to_segment(beyond, (a, b)), self.proj.distance(beyond, b)
        )
        nearest = self.proj.point_on_line(beyond, (a, b))
        self.assertEqual(nearest.t, 1.0)
        self.assertEqual(nearest.point, b)

    def test_before_start(self):
        """Before the start the nearest point is the start."""
        a, b = (55.60, 13.0), (55.70, 13.0)
        nearest = self.proj.point_on_line((55.50, 13.1), (a, b))
        self.assertEqual(nearest.t, 0.0)
        self.assertEqual(nearest.point, a)

    def test_perpendicular_foot(self):
        """Inside the segment the nearest point is the perpendicular foot."""
        a, b, p = (55.60, 13.0), (55.70, 13.0), (55.65, 13.05)
        point, t = self.proj.point_on_line(p, (a, b))
        self.assertAlmostEqual(t, 0.5, places=9)
        self.assertAlmostEqual(point[0], 55.65, places=9)
        self.assertAlmostEqual(point[1], 13.0, places=9)
        self.assertAlmostEqual(
            self.proj.distance_to_segment(p, (a, b)), self.proj.distance(p, (55.65, 13.0)), delta=1e-6
        )

    def test_consistent_with_distance(self):
        """The nearest point lies at the segment distance."""
        point, t = self.proj.point_on_line(BETWEEN, self.segment)
        self.assertGreater(t, 0.0)
        self.assertLess(t, 1.0)
        self.assertAlmostEqual(
            self.proj.distance(BETWEEN, point),
            self.proj.distance_to_segment(BETWEEN, self.segment),
            delta=1e-6,
        )

    def test_antimeridian_segment(self):
        """A segment crossing 180° is the short one."""
        proj = PlaneProjection(0.0)
        segment = ((0.0, 179.9), (0.0, -179.9))
        d = proj.distance_to_segment((0.1, 180.0), segment)
        self.assertAlmostEqual(d, 0.1 * proj.lat_scale, delta=1e-3)
        point, t = proj.point_on_line((0.1, 180.0), segment)
        self.assertAlmostEqual(t, 0.5, places=6)
        self.assertAlmostEqual(abs(point[1]), 180.0, places=6)


class TestOffset(unittest.TestCase):
    """Test moving points on the plane."""

    def setUp(self):
        """Projection through Lund and Malmo."""
        self.proj = PlaneProjection(55.65)

    def test_offset_round_trip(self):
        """Offsets are measured back as the same vector."""
        moved = self.proj.offset(MALMO, 300.0, 400.0)
        self.assertAlmostEqual(self.proj.distance(MALMO, moved), 500.0, delta=1e-6)

    def test_destination(self):
        """Destination lies at the requested distance and heading."""
        target = self.proj.destination(MALMO, 1000.0, 90.0)
        self.assertAlmostEqual(self.proj.distance(MALMO, target), 1000.0, delta=1e-6)
        self.assertAlmostEqual(self.proj.heading(MALMO, target), 90.0, places=6)
        self.assertAlmostEqual(target[0], MALMO[0], places=9)

    def test_destination_wraps_longitude(self):
        """Crossing 180° eastward wraps to negative longitudes."""
        proj = PlaneProjection(0.0)
        lat, lon = proj.destination((0.0, 179.99), 0.02 * proj.lon_scale, 90.0)
        self.assertAlmostEqual(lon, -179.99, places=9)


if __name__ == "__main__":
    unittest.main()
