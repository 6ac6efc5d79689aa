"""
GeoJSON projection of a fix sequence.
"""

import logging
from typing import Any, Dict, Sequence

from ..data.models import Fix, TrackGeometry, format_timestamp
from ..exceptions import EmptyTrackPointsError

# Configure logger
logger = logging.getLogger("igc_tracklog.core.geojson")


def project_track(track_points: Sequence[Fix], altitude_offset: float = 0) -> TrackGeometry:
    """
    Project fixes onto a LineString with per-point annotations.

    The altitude of each point is its preferred altitude (pressure, then GPS,
    then 0) plus the offset. The vertical speed of a point is its altitude
    minus the altitude of the point before it; the first point has 0.

    Args:
        track_points: Fixes in time order
        altitude_offset: Constant added to every altitude

    Returns:
        TrackGeometry: The projected track

    Raises:
        EmptyTrackPointsError: If no fixes are given
    """
    if not track_points:
        raise EmptyTrackPointsError("No trackPoints provided")

    altitudes = [point.preferred_altitude + altitude_offset for point in track_points]
    vertical_speeds = [0] + [
        altitude - previous for previous, altitude in zip(altitudes, altitudes[1:])
    ]

    geometry = TrackGeometry(
        coordinates=tuple(
            (point.longitude, point.latitude, altitude)
            for point, altitude in zip(track_points, altitudes)
        ),
        timestamps=tuple(format_timestamp(point.timestamp) for point in track_points),
        phases=tuple(point.phase for point in track_points),
        activities=tuple(point.activity for point in track_points),
        vertical_speeds=tuple(vertical_speeds),
    )
    logger.debug(f"Projected {len(geometry)} points with altitude offset {altitude_offset}")
    return geometry


def convert_to_geojson(track_points: Sequence[Fix], altitude_offset: float = 0) -> Dict[str, Any]:
    """Build the GeoJSON Feature dictionary for a fix sequence"""
    return project_track(track_points, altitude_offset).to_geojson()
