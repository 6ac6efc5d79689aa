"""
Parser for the record types of an IGC flight log.
"""

import logging
import re
from typing import Dict, Iterable, Optional, Any
import datetime
from .models import Fix, FlightMetadata
from .coordinates import decode_latitude, decode_longitude
from ..exceptions import StructuralParseError
from ..config.constants import (
    FR_ID_RECORD,
    HEADER_RECORD,
    HEADER_KEY_LENGTH,
    HEADER_DATE_KEY,
    HEADER_FIX_ACCURACY_KEY,
    HEADER_TEXT_FIELDS,
    VOID_FIX,
    VOID_ALTITUDE,
    DAY_ROLLOVER_THRESHOLD_SECONDS,
)

# Configure logger
logger = logging.getLogger("igc_tracklog.parser")

# B HHMMSS DDMMmmm N DDDMMmmm E A PPPPP GGGGG, extensions after that are ignored
FIX_PATTERN = re.compile(
    r'^B(\d{2})(\d{2})(\d{2})'
    r'(\d{2})(\d{2})(\d{3})([NS])'
    r'(\d{3})(\d{2})(\d{3})([EW])'
    r'([AV])(-\d{4}|\d{5})(-\d{4}|\d{5})'
)
DATE_PATTERN = re.compile(r'(\d\d)(\d\d)(\d{2,3})')
DIGITS_PATTERN = re.compile(r'\d+')

ROLLOVER_THRESHOLD = datetime.timedelta(seconds=DAY_ROLLOVER_THRESHOLD_SECONDS)


class IGCParser:
    """
    Parses IGC header (H/A) and fix (B) records,
    returning typed objects: FlightMetadata and Fix.
    """

    @staticmethod
    def parse_fix(line: str,
                  date: datetime.date,
                  activity: Optional[str] = None,
                  phase: Optional[str] = None,
                  prev_timestamp: Optional[datetime.datetime] = None) -> Optional[Fix]:
        """
        Decode a single B record.

        Example B line:
        B0844504651388N00820593EA0134501414
        => B<time 08:44:50><lat 46 51.388 N><lon 008 20.593 E><valid><pressure 1345><gps 1414>

        Args:
            line: The raw B record
            date: Reference calendar date of the flight (UTC)
            activity: Running activity marker to attach to the fix
            phase: Running phase marker to attach to the fix
            prev_timestamp: Timestamp of the previously accepted fix

        Returns:
            Optional[Fix]: The decoded fix, or None for a void ('V') fix

        Raises:
            StructuralParseError: If the line does not match the B record layout
        """
        match = FIX_PATTERN.match(line)
        if not match:
            raise StructuralParseError("Invalid B record", line=line)

        (hours, minutes, seconds,
         lat_deg, lat_min, lat_frac, lat_hemisphere,
         lon_deg, lon_min, lon_frac, lon_hemisphere,
         validity, pressure_alt, gps_alt) = match.groups()

        if validity == VOID_FIX:
            logger.debug(f"Discarding void fix: {line}")
            return None

        try:
            timestamp = datetime.datetime(
                date.year, date.month, date.day,
                int(hours), int(minutes), int(seconds),
                tzinfo=datetime.timezone.utc
            )
            if prev_timestamp is not None and IGCParser._is_day_rollover(prev_timestamp, timestamp):
                timestamp += datetime.timedelta(days=1)

            return Fix(
                timestamp=timestamp,
                latitude=decode_latitude(lat_deg, lat_min, lat_frac, lat_hemisphere),
                longitude=decode_longitude(lon_deg, lon_min, lon_frac, lon_hemisphere),
                pressure_altitude=IGCParser._parse_altitude(pressure_alt),
                gps_altitude=IGCParser._parse_altitude(gps_alt),
                activity=activity,
                phase=phase,
            )
        except ValueError as e:
            raise StructuralParseError(f"Invalid B record: {e}", line=line) from e

    @staticmethod
    def _is_day_rollover(prev_timestamp: datetime.datetime, timestamp: datetime.datetime) -> bool:
        """True when the fix is more than an hour before its predecessor"""
        return timestamp < prev_timestamp - ROLLOVER_THRESHOLD

    @staticmethod
    def _parse_altitude(value: str) -> Optional[int]:
        # "00000" means the recorder had no altitude, not zero metres
        if value == VOID_ALTITUDE:
            return None
        return int(value)

    @staticmethod
    def parse_metadata(lines: Iterable[str]) -> FlightMetadata:
        """
        Collect flight metadata from the header window of an IGC file.

        Malformed date or accuracy records leave the field absent; unknown
        keys are ignored.

        Args:
            lines: Leading lines of the file (the header window)

        Returns:
            FlightMetadata: The collected metadata
        """
        values: Dict[str, Any] = {}

        for line in lines:
            if not line.startswith((HEADER_RECORD, FR_ID_RECORD)):
                continue

            key = line[:HEADER_KEY_LENGTH]
            remainder = line[HEADER_KEY_LENGTH:]

            if key == HEADER_DATE_KEY:
                date = IGCParser._parse_header_date(line)
                if date is not None:
                    values['date'] = date
            elif key == HEADER_FIX_ACCURACY_KEY:
                digits = DIGITS_PATTERN.search(remainder)
                if digits:
                    values['fix_accuracy'] = int(digits.group())
                else:
                    logger.warning(f"No fix accuracy in header record: {line}")
            elif key in HEADER_TEXT_FIELDS:
                text = IGCParser._parse_header_text(remainder)
                if text:
                    values[HEADER_TEXT_FIELDS[key]] = text

        return FlightMetadata(**values)

    @staticmethod
    def _parse_header_date(line: str) -> Optional[datetime.date]:
        """
        Parse a HFDTE record, e.g. HFDTE240624 or HFDTEDATE:240624,01.

        A two-digit year is read as 20YY; any other length as 19YYY.
        """
        match = DATE_PATTERN.search(line)
        if not match:
            logger.warning(f"No date in header record: {line}")
            return None

        day, month, year = match.groups()
        century = "20" if len(year) == 2 else "19"
        try:
            return datetime.date(int(century + year), int(month), int(day))
        except ValueError as e:
            logger.warning(f"Invalid date in header record: {line}. Error: {e}")
            return None

    @staticmethod
    def _parse_header_text(remainder: str) -> str:
        # HFPLTPILOTINCHARGE:Teddy Tester -> "Teddy Tester"
        if ':' in remainder:
            remainder = remainder.rsplit(':', 1)[1]
        return remainder.strip()


# Create a singleton instance of the parser
parser = IGCParser()
