"""
IGC Tracklog
Parses IGC flight logs into flight metadata, fixes and GeoJSON tracks.

Features:
- Decoding IGC header, fix, logbook and security records
- Reconstructing fix timestamps across UTC midnight
- Projecting the track to a GeoJSON LineString with phases and vertical speeds
"""

from . import config
from . import data
from .config.constants import APP_NAME, APP_VERSION, APP_AUTHOR, APP_LICENSE
from .core import parse_igc, convert_to_geojson, project_track, TrackAssembler, FixErrorPolicy
from .data import FlightMetadata, Fix, TrackGeometry, IGCData, decode_latitude, decode_longitude
from .exceptions import (
    IGCTracklogError,
    InputMissingError,
    StructuralParseError,
    EmptyTrackPointsError,
    InputDecodeError,
    InvalidPolicyError,
)

__version__ = APP_VERSION
__author__ = APP_AUTHOR
__license__ = APP_LICENSE

# Initialize logging when the package is imported
import logging
import sys

# Configure package logger
root_logger = logging.getLogger("igc_tracklog")
root_logger.setLevel(logging.INFO)

# Create console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.INFO)

# Create formatter
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
console_handler.setFormatter(formatter)

# Add handler to logger
root_logger.addHandler(console_handler)

root_logger.debug(f"Initializing {APP_NAME} v{APP_VERSION}")
