"""
Top level entry point of IGC Tracklog: turns a file or a string into IGCData.
"""

import logging
from typing import Optional, Union

from ..data.models import IGCData
from ..data.parser import IGCParser
from ..exceptions import InputMissingError
from ..config.settings import settings
from ..io.files import read_igc_text, split_lines
from .track import TrackAssembler, FixErrorPolicy
from .geojson import project_track

# Configure logger
logger = logging.getLogger("igc_tracklog.core.tracklog")


def parse_igc(filepath: Optional[str] = None,
              igc_string: Optional[str] = None,
              altitude_offset: Optional[float] = None,
              on_fix_error: Union[FixErrorPolicy, str, None] = None,
              header_window: Optional[int] = None) -> IGCData:
    """
    Parse an IGC flight log into metadata, fixes and a GeoJSON track.

    Args:
        filepath: Path to an IGC file; takes precedence over igc_string
        igc_string: Raw contents of an IGC file
        altitude_offset: Constant added to every GeoJSON altitude (default: from settings)
        on_fix_error: Policy for malformed B records (default: from settings)
        header_window: Number of leading lines searched for headers (default: from settings)

    Returns:
        IGCData: Metadata, fixes and the projected track

    Raises:
        InputMissingError: If neither filepath nor igc_string is given
        StructuralParseError: On a malformed B record when the policy is ABORT
        EmptyTrackPointsError: If the file holds no valid fix
    """
    if not filepath and not igc_string:
        raise InputMissingError("Either filepath or igc_string must be provided")

    if altitude_offset is None:
        altitude_offset = settings.get('altitude_offset', 0)
    if on_fix_error is None:
        on_fix_error = settings.get('on_fix_error')
    if header_window is None:
        header_window = settings.get('header_window_lines')

    if filepath:
        text = read_igc_text(filepath, encoding=settings.get('encoding'))
        source = str(filepath)
    else:
        text = igc_string
        source = "<string>"
    lines = split_lines(text)

    metadata = IGCParser.parse_metadata(lines[:header_window])
    track_points, metadata = TrackAssembler(on_fix_error).assemble(lines, metadata)
    geometry = project_track(track_points, altitude_offset)

    logger.info(f"Parsed {len(track_points)} fixes from {source}")
    return IGCData(metadata=metadata, track_points=track_points, geometry=geometry)
