"""Tests for the distance between coordinates."""

import pytest
from hypothesis import given, strategies as st

from geoutils import distance

coordinates = st.tuples(
    st.floats(min_value=-90, max_value=90, allow_nan=False),
    st.floats(min_value=-180, max_value=180, allow_nan=False),
)


class TestDistance:
    """Tests for the haversine distance in meters."""

    def test_new_york_to_london(self):
        """Test a transatlantic distance."""
        meters = distance.distance((40.7128, -74.0060), (51.5074, -0.1278))

        # Expected distance is approximately 5570 km
        assert 5_500_000 < meters < 5_600_000

    def test_nearby_points(self):
        """Test a distance of about one degree of latitude."""
        meters = distance.distance((0.0, 0.0), (1.0, 0.0))

        assert meters == pytest.approx(111_195, rel=1e-3)

    def test_zero_distance(self):
        """Test distance to same point is zero."""
        assert distance.distance((40.7128, -74.0060), (40.7128, -74.0060)) == 0.0

    def test_antipodes(self):
        """Test opposite points are half a circumference apart."""
        meters = distance.distance((0.0, 0.0), (0.0, 180.0))

        assert meters == pytest.approx(distance.EARTH_MEAN_RADIUS * 3.141592653589793)

    def test_across_antimeridian(self):
        """Test points on both sides of the antimeridian are close."""
        assert distance.distance((0.0, 179.99), (0.0, -179.99)) < 2500

    def test_mean_radius(self):
        """Test the mean radius derived from the ellipsoid constants."""
        assert distance.EARTH_MEAN_RADIUS == pytest.approx(6_371_008.8, abs=1)

    def test_returns_float(self):
        """Test the result is a plain float, not a numpy scalar."""
        assert type(distance.distance((1.0, 2.0), (3.0, 4.0))) is float

    @given(coordinates, coordinates)
    def test_symmetric(self, origin, destination):
        """Test the distance doesn't depend on the direction."""
        assert distance.distance(origin, destination) == distance.distance(destination, origin)

    @given(coordinates)
    def test_same_point(self, point):
        """Test any point is at zero meters from itself."""
        assert distance.distance(point, point) == pytest.approx(0.0, abs=1e-6)
