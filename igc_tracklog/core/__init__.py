"""
Core package for IGC Tracklog.
Contains track assembly, GeoJSON projection and the parse_igc entry point.
"""

from .track import TrackAssembler, FixErrorPolicy, ScanState
from .geojson import project_track, convert_to_geojson
from .tracklog import parse_igc

__all__ = [
    'TrackAssembler',
    'FixErrorPolicy',
    'ScanState',
    'project_track',
    'convert_to_geojson',
    'parse_igc'
]
