"""
File utilities for IGC Tracklog.
"""

import os
import re
import json
import glob
import logging
from typing import List, Dict, Any, Optional

from ..config.constants import DEFAULT_ENCODING, DEFAULT_GEOJSON_INDENT, IGC_EXTENSION
from ..exceptions import InputDecodeError

# Configure logger
logger = logging.getLogger("igc_tracklog.io.files")

LINE_BREAK_PATTERN = re.compile(r'\r?\n')


def read_igc_text(filepath: str, encoding: Optional[str] = None) -> str:
    """
    Read a whole IGC file into memory.

    Args:
        filepath: Path to the IGC file
        encoding: Text encoding (default: UTF-8)

    Returns:
        str: The file contents

    Raises:
        OSError: If the file cannot be read
        InputDecodeError: If the file is not valid text in the given encoding
    """
    encoding = encoding or DEFAULT_ENCODING
    try:
        with open(filepath, 'r', encoding=encoding, newline='') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise InputDecodeError(f"{filepath} is not valid {encoding} text: {e}") from e
    logger.debug(f"Read {len(text)} characters from {filepath}")
    return text


def split_lines(text: str) -> List[str]:
    """Split IGC text on LF or CRLF line endings"""
    return LINE_BREAK_PATTERN.split(text)


def list_igc_files(directory: str) -> List[str]:
    """
    List all IGC files in the specified directory.

    Args:
        directory: Directory to search

    Returns:
        List[str]: IGC file paths, newest first
    """
    igc_files = [
        path for path in glob.glob(os.path.join(directory, "*"))
        if os.path.isfile(path) and os.path.splitext(path)[1].lower() == IGC_EXTENSION
    ]
    igc_files.sort(key=lambda x: os.path.getmtime(x), reverse=True)
    return igc_files


def write_geojson(feature: Dict[str, Any], filepath: str, indent: Optional[int] = DEFAULT_GEOJSON_INDENT) -> str:
    """
    Write a GeoJSON object to a file, creating the parent directory if needed.

    Args:
        feature: GeoJSON object
        filepath: Output path
        indent: JSON indentation, None for compact output

    Returns:
        str: The path written
    """
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filepath, 'w', encoding=DEFAULT_ENCODING) as f:
        json.dump(feature, f, indent=indent)

    logger.info(f"GeoJSON saved to {filepath}")
    return filepath


def get_available_filename(base_path: str, extension: str) -> str:
    """
    Generate a filename that doesn't already exist.

    Args:
        base_path: Base path and prefix for the filename
        extension: File extension

    Returns:
        str: base_path + extension, or base_path_<n> + extension if taken
    """
    directory = os.path.dirname(base_path)
    basename = os.path.splitext(os.path.basename(base_path))[0]

    if not extension.startswith('.'):
        extension = '.' + extension

    filepath = os.path.join(directory, f"{basename}{extension}")
    counter = 1
    while os.path.exists(filepath):
        filepath = os.path.join(directory, f"{basename}_{counter}{extension}")
        counter += 1

    return filepath
