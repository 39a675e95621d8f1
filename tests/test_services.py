"""Tests for the pure geo helpers in the application services."""

import pytest

from location_service.application.services import (
    LocationService,
    calculate_distance,
    generate_geohash,
    get_location_from_geohash,
    get_mock_cities,
)
from location_service.domain.models import Coordinates, Location

SAN_FRANCISCO = (37.7749, -122.4194)
NEW_YORK = (40.7128, -74.0060)


class TestCalculateDistance:
    """Tests for calculate_distance."""

    def test_san_francisco_to_new_york(self) -> None:
        """Given SF and NY, when calculating distance, then it is about 4129 km."""
        distance = calculate_distance(*SAN_FRANCISCO, *NEW_YORK)

        assert distance == pytest.approx(4129, abs=1.5)

    @pytest.mark.parametrize(
        "latitude,longitude",
        [(0.0, 0.0), (37.7749, -122.4194), (-33.8688, 151.2093), (90.0, 0.0), (-90.0, 180.0)],
    )
    def test_identical_points_are_zero(self, latitude: float, longitude: float) -> None:
        """Given the same point twice, when calculating distance, then it is zero."""
        assert calculate_distance(latitude, longitude, latitude, longitude) == 0

    def test_distance_is_symmetric(self) -> None:
        """Given two points, when swapping them, then the distance is unchanged."""
        london = (51.5074, -0.1278)
        paris = (48.8566, 2.3522)

        assert calculate_distance(*london, *paris) == pytest.approx(
            calculate_distance(*paris, *london)
        )

    def test_antipodal_points_are_half_circumference(self) -> None:
        """Given antipodal points, when calculating distance, then it is pi times Earth's radius."""
        assert calculate_distance(0.0, 0.0, 0.0, 180.0) == pytest.approx(20015.09, abs=0.1)


class TestGeohash:
    """Tests for geohash encoding and decoding."""

    def test_encode_uses_default_precision_of_five(self) -> None:
        """Given SF coordinates, when encoding without precision, then a 5 char hash is returned."""
        assert generate_geohash(*SAN_FRANCISCO) == "9q8yy"

    def test_encode_respects_precision(self) -> None:
        """Given a precision, when encoding, then the hash has that many characters."""
        for precision in (1, 3, 7, 9):
            assert len(generate_geohash(*SAN_FRANCISCO, precision)) == precision

    def test_longer_hash_extends_shorter_hash(self) -> None:
        """Given two precisions, when encoding the same point, then the shorter is a prefix."""
        assert generate_geohash(51.5074, -0.1278, 8).startswith(generate_geohash(51.5074, -0.1278))

    def test_encode_london(self) -> None:
        """Given London coordinates, when encoding, then the well-known cell is returned."""
        assert generate_geohash(51.5074, -0.1278) == "gcpvj"

    def test_decode_returns_coordinates(self) -> None:
        """Given a geohash, when decoding, then Coordinates with float fields are returned."""
        coordinates = get_location_from_geohash("9q8yy")

        assert isinstance(coordinates, Coordinates)
        assert isinstance(coordinates.latitude, float)
        assert isinstance(coordinates.longitude, float)

    @pytest.mark.parametrize("city", get_mock_cities(), ids=lambda c: c.city)
    def test_round_trip_stays_within_cell(self, city: Location) -> None:
        """Given a city, when encoding then decoding at precision 5, then the point stays in its cell."""
        decoded = get_location_from_geohash(generate_geohash(city.latitude, city.longitude, 5))

        assert abs(decoded.latitude - city.latitude) < 0.05
        assert abs(decoded.longitude - city.longitude) < 0.05
        assert calculate_distance(
            city.latitude, city.longitude, decoded.latitude, decoded.longitude
        ) < 5

    def test_higher_precision_round_trip_is_tighter(self) -> None:
        """Given precision 9, when round-tripping, then the error is below ten metres."""
        decoded = get_location_from_geohash(generate_geohash(*SAN_FRANCISCO, 9))

        assert calculate_distance(*SAN_FRANCISCO, decoded.latitude, decoded.longitude) < 0.01

    def test_decode_malformed_hash_raises(self) -> None:
        """Given characters outside the geohash alphabet, when decoding, then the error propagates."""
        with pytest.raises((ValueError, KeyError)):
            get_location_from_geohash("ail!")


class TestMockCities:
    """Tests for get_mock_cities."""

    def test_returns_five_cities_in_order(self) -> None:
        """Given no input, when getting mock cities, then the fixed list is returned in order."""
        cities = get_mock_cities()

        assert [(c.latitude, c.longitude, c.city, c.country) for c in cities] == [
            (37.7749, -122.4194, "San Francisco", "USA"),
            (40.7128, -74.0060, "New York", "USA"),
            (34.0522, -118.2437, "Los Angeles", "USA"),
            (51.5074, -0.1278, "London", "UK"),
            (48.8566, 2.3522, "Paris", "France"),
        ]

    def test_is_immutable_and_not_recomputed(self) -> None:
        """Given repeated calls, when getting mock cities, then the same tuple is returned."""
        assert isinstance(get_mock_cities(), tuple)
        assert get_mock_cities() is get_mock_cities()


def test_pure_helpers_are_available_on_the_service() -> None:
    """Given the LocationService class, when calling the static helpers, then they match the functions."""
    assert LocationService.generate_geohash(*SAN_FRANCISCO) == generate_geohash(*SAN_FRANCISCO)
    assert LocationService.calculate_distance(*SAN_FRANCISCO, *NEW_YORK) == calculate_distance(
        *SAN_FRANCISCO, *NEW_YORK
    )
    assert LocationService.get_mock_cities() is get_mock_cities()
    assert LocationService.get_location_from_geohash("gcpvj") == get_location_from_geohash("gcpvj")
