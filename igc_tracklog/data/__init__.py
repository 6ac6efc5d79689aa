"""
Data package for IGC Tracklog.
Contains data models, coordinate decoding and record parsers for IGC files.
"""

from .models import FlightMetadata, Fix, TrackGeometry, IGCData, RecordType, format_timestamp
from .coordinates import decode_latitude, decode_longitude
from .parser import IGCParser, parser

__all__ = [
    'FlightMetadata',
    'Fix',
    'TrackGeometry',
    'IGCData',
    'RecordType',
    'format_timestamp',
    'decode_latitude',
    'decode_longitude',
    'IGCParser',
    'parser'
]
