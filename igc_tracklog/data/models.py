"""
Data models for IGC Tracklog.
Contains classes representing the records of an IGC flight log and the
GeoJSON track derived from them.
"""

from dataclasses import dataclass, field, fields
from typing import Optional, Tuple, List, Dict, Any
import datetime
from enum import Enum

from ..config.constants import (
    FR_ID_RECORD,
    HEADER_RECORD,
    FIX_RECORD,
    LOGBOOK_RECORD,
    SECURITY_RECORD,
)


def format_timestamp(timestamp: datetime.datetime) -> str:
    """Format a UTC instant as ISO-8601 with milliseconds and a 'Z' suffix"""
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return timestamp.isoformat(timespec='milliseconds') + 'Z'


class RecordType(Enum):
    """Enum for the IGC record types handled by the parser"""
    FR_ID = FR_ID_RECORD
    HEADER = HEADER_RECORD
    FIX = FIX_RECORD
    LOGBOOK = LOGBOOK_RECORD
    SECURITY = SECURITY_RECORD
    OTHER = "OTHER"

    @classmethod
    def from_line(cls, line: str) -> "RecordType":
        """Classify a raw line by its first character"""
        if not line:
            return cls.OTHER
        try:
            return cls(line[0])
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class FlightMetadata:
    """
    Flight metadata collected from the H (header) records.
    Every field stays None until a matching header line is seen.
    """
    date: Optional[datetime.date] = None
    fix_accuracy: Optional[int] = None
    pilot: Optional[str] = None
    copilot: Optional[str] = None
    glider_model: Optional[str] = None
    glider_id: Optional[str] = None
    gps_datum: Optional[str] = None
    firmware_version: Optional[str] = None
    hardware_version: Optional[str] = None
    flight_recorder_type: Optional[str] = None
    gps_type: Optional[str] = None
    pressure_sensor_type: Optional[str] = None
    competition_id: Optional[str] = None
    competition_class: Optional[str] = None
    security: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the metadata to a dictionary, leaving out absent fields"""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, datetime.date):
                value = value.isoformat()
            result[f.name] = value
        return result


@dataclass(frozen=True)
class Fix:
    """
    Represents a valid IGC B record (GPS fix).
    Format: B<HHMMSS><DDMMmmm><N|S><DDDMMmmm><E|W><A|V><PPPPP><GGGGG>
    """
    timestamp: datetime.datetime
    latitude: float
    longitude: float
    pressure_altitude: Optional[int] = None
    gps_altitude: Optional[int] = None
    activity: Optional[str] = None
    phase: Optional[str] = None

    def __post_init__(self):
        """Validate data after initialization"""
        if not isinstance(self.timestamp, datetime.datetime):
            raise TypeError("timestamp must be a datetime")
        if not isinstance(self.latitude, (int, float)):
            raise TypeError("latitude must be a number")
        if not isinstance(self.longitude, (int, float)):
            raise TypeError("longitude must be a number")

        if not -90 <= self.latitude <= 90:
            raise ValueError("latitude must be between -90 and 90")
        if not -180 <= self.longitude <= 180:
            raise ValueError("longitude must be between -180 and 180")

    @property
    def preferred_altitude(self) -> int:
        """Pressure altitude if recorded, else GPS altitude, else 0"""
        if self.pressure_altitude is not None:
            return self.pressure_altitude
        if self.gps_altitude is not None:
            return self.gps_altitude
        return 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert the object to a dictionary"""
        return {
            "timestamp": format_timestamp(self.timestamp),
            "latitude": self.latitude,
            "longitude": self.longitude,
            "pressure_altitude": self.pressure_altitude,
            "gps_altitude": self.gps_altitude,
            "activity": self.activity,
            "phase": self.phase,
        }


@dataclass(frozen=True)
class TrackGeometry:
    """
    GeoJSON LineString projection of a fix sequence.
    All sequences run parallel to the coordinates.
    """
    coordinates: Tuple[Tuple[float, float, float], ...]
    timestamps: Tuple[str, ...]
    phases: Tuple[Optional[str], ...]
    activities: Tuple[Optional[str], ...]
    vertical_speeds: Tuple[float, ...]

    def __post_init__(self):
        size = len(self.coordinates)
        for name in ("timestamps", "phases", "activities", "vertical_speeds"):
            if len(getattr(self, name)) != size:
                raise ValueError(f"{name} must have one entry per coordinate")

    def __len__(self) -> int:
        return len(self.coordinates)

    def to_geojson(self) -> Dict[str, Any]:
        """Convert the geometry to a GeoJSON Feature dictionary"""
        return {
            "type": "Feature",
            "geometry": {
                "type": "LineString",
                "coordinates": [list(coordinate) for coordinate in self.coordinates],
            },
            "properties": {
                "timestamps": list(self.timestamps),
                "phases": list(self.phases),
                "activities": list(self.activities),
                "verticalSpeeds": list(self.vertical_speeds),
            },
        }


@dataclass
class IGCData:
    """Result of parsing a complete IGC file"""
    metadata: FlightMetadata
    track_points: List[Fix] = field(default_factory=list)
    geometry: Optional[TrackGeometry] = None

    @property
    def geojson(self) -> Optional[Dict[str, Any]]:
        """The GeoJSON Feature of the track, if one was projected"""
        return self.geometry.to_geojson() if self.geometry else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the object to a dictionary"""
        return {
            "metadata": self.metadata.to_dict(),
            "trackPoints": [point.to_dict() for point in self.track_points],
            "geoJSON": self.geojson,
        }
