"""
Constants for IGC Tracklog.
These are fixed values of the IGC format that don't change during execution.
"""

# Record type markers (first character of each line)
FR_ID_RECORD = 'A'
FIX_RECORD = 'B'
HEADER_RECORD = 'H'
LOGBOOK_RECORD = 'L'
SECURITY_RECORD = 'G'

# Header records are dispatched on their first five characters, e.g. HFDTE
HEADER_KEY_LENGTH = 5
HEADER_DATE_KEY = 'HFDTE'
HEADER_FIX_ACCURACY_KEY = 'HFFXA'

# Free-text header keys mapped to FlightMetadata field names
HEADER_TEXT_FIELDS = {
    'HFPLT': 'pilot',
    'HFCM2': 'copilot',
    'HFGTY': 'glider_model',
    'HFGID': 'glider_id',
    'HFDTM': 'gps_datum',
    'HFRFW': 'firmware_version',
    'HFRHW': 'hardware_version',
    'HFFTY': 'flight_recorder_type',
    'HFGPS': 'gps_type',
    'HFPRS': 'pressure_sensor_type',
    'HFCID': 'competition_id',
    'HFCCL': 'competition_class',
}

# The IGC standard places all header records within the first 30 lines
HEADER_WINDOW_LINES = 30

# L record keywords carrying flight state changes
ACTIVITY_MARKER = 'ACTIVITY'
PHASE_MARKER = 'PHASE'

# B record fields
VOID_FIX = 'V'
VOID_ALTITUDE = '00000'
SOUTH = 'S'
WEST = 'W'
FRACTION_DIGITS = 4

# A fix more than this many seconds before its predecessor belongs to the next UTC day
DAY_ROLLOVER_THRESHOLD_SECONDS = 3600

# File related constants
IGC_EXTENSION = '.igc'
GEOJSON_EXTENSION = '.geojson'
DEFAULT_ENCODING = 'utf-8'
DEFAULT_GEOJSON_INDENT = 2

# Fix error policies
ON_FIX_ERROR_ABORT = 'abort'
ON_FIX_ERROR_SKIP = 'skip'

# Application information
APP_NAME = "IGC Tracklog"
APP_VERSION = "1.0.0"
APP_AUTHOR = "Juan Luis Gabriel"
APP_LICENSE = "MIT License"
APP_DESCRIPTION = "Parse IGC flight logs into flight metadata, fixes and GeoJSON tracks"
