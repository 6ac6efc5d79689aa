"""
I/O package for IGC Tracklog.
Contains file reading and GeoJSON writing helpers.
"""

from .files import (
    read_igc_text,
    split_lines,
    list_igc_files,
    write_geojson,
    get_available_filename
)

__all__ = [
    'read_igc_text',
    'split_lines',
    'list_igc_files',
    'write_geojson',
    'get_available_filename'
]
