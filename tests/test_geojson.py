"""
Tests for the GeoJSON projection.
"""

import pytest
import datetime
from igc_tracklog.core.geojson import project_track, convert_to_geojson
from igc_tracklog.data.models import Fix, TrackGeometry
from igc_tracklog.exceptions import EmptyTrackPointsError

UTC = datetime.timezone.utc


@pytest.fixture
def two_points():
    """Two fixes, the second without pressure altitude."""
    return [
        Fix(
            timestamp=datetime.datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC),
            latitude=46.85646666666667,
            longitude=8.343216666666667,
            pressure_altitude=1345,
            gps_altitude=1414,
            phase="takingOff",
            activity="fly",
        ),
        Fix(
            timestamp=datetime.datetime(2024, 1, 1, 12, 5, 0, tzinfo=UTC),
            latitude=46.857,
            longitude=8.344,
            gps_altitude=1420,
            phase="soaring",
            activity="cruise",
        ),
    ]


@pytest.fixture
def three_points():
    """Three fixes climbing 20 m per sample."""
    return [
        Fix(timestamp=datetime.datetime(2024, 1, 1, 12, 0, tzinfo=UTC), latitude=46.0, longitude=8.0,
            pressure_altitude=1000, gps_altitude=1010, phase="start", activity="takeOff"),
        Fix(timestamp=datetime.datetime(2024, 1, 1, 12, 1, tzinfo=UTC), latitude=46.001, longitude=8.001,
            pressure_altitude=1020, gps_altitude=1030, phase="cruise", activity="fly"),
        Fix(timestamp=datetime.datetime(2024, 1, 1, 12, 2, tzinfo=UTC), latitude=46.002, longitude=8.002,
            gps_altitude=1040, phase="land", activity="landing"),
    ]


class TestProjectTrack:
    """Test cases for project_track."""

    def test_empty_track_raises(self):
        """Test that an empty fix sequence is rejected."""
        with pytest.raises(EmptyTrackPointsError, match="No trackPoints provided"):
            project_track([])

    def test_returns_geometry(self, two_points):
        """Test that the projection is a TrackGeometry with one entry per fix."""
        geometry = project_track(two_points)

        assert isinstance(geometry, TrackGeometry)
        assert len(geometry) == 2

    def test_coordinates_are_lon_lat_alt(self, two_points):
        """Test coordinate order and preferred altitude."""
        geometry = project_track(two_points)

        assert geometry.coordinates[0] == (8.343216666666667, 46.85646666666667, 1345)
        assert geometry.coordinates[1] == (8.344, 46.857, 1420)

    def test_altitude_without_any_reading_is_zero(self):
        """Test that fixes without altitudes project to 0 plus offset."""
        point = Fix(timestamp=datetime.datetime(2024, 1, 1, tzinfo=UTC), latitude=1.0, longitude=2.0)

        assert project_track([point]).coordinates[0][2] == 0
        assert project_track([point], altitude_offset=25).coordinates[0][2] == 25

    def test_annotations(self, two_points):
        """Test the parallel timestamp, phase and activity sequences."""
        geometry = project_track(two_points)

        assert geometry.timestamps == ("2024-01-01T12:00:00.000Z", "2024-01-01T12:05:00.000Z")
        assert geometry.phases == ("takingOff", "soaring")
        assert geometry.activities == ("fly", "cruise")

    def test_missing_markers_are_none(self):
        """Test that absent markers project to None."""
        point = Fix(timestamp=datetime.datetime(2024, 1, 1, tzinfo=UTC), latitude=1.0, longitude=2.0)
        geometry = project_track([point])

        assert geometry.phases == (None,)
        assert geometry.activities == (None,)

    def test_altitude_offset(self, two_points):
        """Test that the offset shifts every altitude."""
        geometry = project_track(two_points, altitude_offset=100)

        assert geometry.coordinates[0][2] == 1445
        assert geometry.coordinates[1][2] == 1520

    def test_vertical_speeds(self, three_points):
        """Test vertical speed as the altitude difference between samples."""
        geometry = project_track(three_points)

        assert geometry.vertical_speeds == (0, 20, 20)

    def test_vertical_speeds_with_offset(self, three_points):
        """Test that the offset leaves vertical speeds unchanged."""
        assert project_track(three_points, altitude_offset=50).vertical_speeds == (0, 20, 20)

    def test_single_point_vertical_speed(self, three_points):
        """Test that the first point always has vertical speed 0."""
        assert project_track(three_points[:1], altitude_offset=500).vertical_speeds == (0,)

    def test_descent_is_negative(self, three_points):
        """Test that a descent gives a negative vertical speed."""
        geometry = project_track(list(reversed(three_points)))
        assert geometry.vertical_speeds == (0, -20, -20)

    def test_reprojection_is_independent(self, three_points):
        """Test that projecting twice with different offsets does not interfere."""
        first = project_track(three_points)
        second = project_track(three_points, altitude_offset=10)

        assert [c[2] for c in first.coordinates] == [1000, 1020, 1040]
        assert [c[2] for c in second.coordinates] == [1010, 1030, 1050]


class TestConvertToGeoJSON:
    """Test cases for convert_to_geojson."""

    def test_feature_layout(self, two_points):
        """Test the Feature dictionary."""
        feature = convert_to_geojson(two_points)

        assert feature["type"] == "Feature"
        assert feature["geometry"]["type"] == "LineString"
        assert len(feature["geometry"]["coordinates"]) == 2
        assert feature["geometry"]["coordinates"][1] == [8.344, 46.857, 1420]
        assert feature["properties"]["timestamps"][0] == "2024-01-01T12:00:00.000Z"
        assert feature["properties"]["phases"] == ["takingOff", "soaring"]
        assert feature["properties"]["activities"] == ["fly", "cruise"]
        assert feature["properties"]["verticalSpeeds"] == [0, 75]

    def test_empty_track_raises(self):
        """Test that convert_to_geojson also rejects empty input."""
        with pytest.raises(EmptyTrackPointsError):
            convert_to_geojson([])
