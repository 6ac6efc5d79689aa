"""
Command-line interface for IGC Tracklog.
Converts IGC files to GeoJSON and prints a short summary per flight.
"""

import json
import logging
import os
from typing import List, Optional, Union

from ..core.tracklog import parse_igc
from ..core.track import FixErrorPolicy
from ..data.models import IGCData
from ..exceptions import IGCTracklogError
from ..config.constants import GEOJSON_EXTENSION
from ..config.settings import settings
from ..io.files import list_igc_files, write_geojson, get_available_filename

# Configure logger
logger = logging.getLogger("igc_tracklog.ui.cli")


class CLI:
    """
    Command-line interface for IGC Tracklog.
    Each input is parsed independently; a failing file does not stop the rest.
    """

    def __init__(self,
                 output_directory: Optional[str] = None,
                 altitude_offset: Optional[float] = None,
                 on_fix_error: Union[FixErrorPolicy, str, None] = None,
                 metadata_only: bool = False,
                 overwrite: bool = False):
        """Initialize the CLI."""
        self.output_directory = output_directory or settings.get('output_directory')
        self.altitude_offset = altitude_offset
        self.on_fix_error = on_fix_error
        self.metadata_only = metadata_only
        self.overwrite = overwrite

    def run(self, inputs: List[str]) -> int:
        """
        Convert every input file or directory.

        Args:
            inputs: IGC file paths or directories containing IGC files

        Returns:
            int: Exit code, 0 if every file was converted, 1 otherwise
        """
        files = self._collect_files(inputs)
        if not files:
            print("No IGC files found.")
            return 1

        failures = 0
        for filepath in files:
            if self.convert_file(filepath) is None:
                failures += 1

        if len(files) > 1:
            print(f"\nConverted {len(files) - failures} of {len(files)} files.")
        return 1 if failures else 0

    def convert_file(self, filepath: str) -> Optional[IGCData]:
        """
        Parse one IGC file, write its GeoJSON and print a summary.

        Returns:
            Optional[IGCData]: The parsed flight, or None if parsing failed
        """
        try:
            data = parse_igc(
                filepath=filepath,
                altitude_offset=self.altitude_offset,
                on_fix_error=self.on_fix_error,
            )
        except (IGCTracklogError, OSError) as e:
            logger.error(f"Error processing {filepath}: {e}")
            print(f"Error: {filepath}: {e}")
            return None

        if self.metadata_only:
            print(json.dumps(data.metadata.to_dict(), indent=2))
            return data

        output_path = self._output_path(filepath)
        try:
            write_geojson(data.geojson, output_path, indent=settings.get('geojson_indent'))
        except OSError as e:
            logger.error(f"Error writing {output_path}: {e}")
            print(f"Error: {output_path}: {e}")
            return None

        self._print_summary(filepath, output_path, data)
        return data

    def _collect_files(self, inputs: List[str]) -> List[str]:
        files = []
        for path in inputs:
            if os.path.isdir(path):
                found = list_igc_files(path)
                logger.info(f"Found {len(found)} IGC files in {path}")
                files.extend(found)
            else:
                files.append(path)
        return files

    def _output_path(self, filepath: str) -> str:
        stem = os.path.splitext(os.path.basename(filepath))[0]
        directory = self.output_directory or os.path.dirname(filepath)
        base_path = os.path.join(directory, stem)
        if self.overwrite:
            return base_path + GEOJSON_EXTENSION
        return get_available_filename(base_path, GEOJSON_EXTENSION)

    @staticmethod
    def _print_summary(filepath: str, output_path: str, data: IGCData) -> None:
        metadata = data.metadata
        points = data.track_points
        altitudes = [coordinate[2] for coordinate in data.geometry.coordinates]

        print(f"\n{os.path.basename(filepath)} -> {output_path}")
        print(f"  Fixes: {len(points)}")
        print(f"  Time range: {points[0].timestamp.isoformat()} to {points[-1].timestamp.isoformat()}")
        print(f"  Altitude range: {min(altitudes)}m - {max(altitudes)}m")
        if metadata.pilot:
            print(f"  Pilot: {metadata.pilot}")
        if metadata.glider_model:
            print(f"  Glider: {metadata.glider_model}")
        if metadata.date:
            print(f"  Date: {metadata.date.isoformat()}")
