"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import datetime
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from igc_tracklog.config.settings import settings


@pytest.fixture(scope="session")
def project_root_dir():
    """Provide the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def data_dir(project_root_dir):
    """Provide the test data directory."""
    return project_root_dir / "tests" / "data"


@pytest.fixture
def short_igc_path(data_dir):
    """Provide the path of a short hand-written IGC file."""
    return data_dir / "short.igc"


@pytest.fixture
def short_igc_text(short_igc_path):
    """Provide the contents of the short IGC file."""
    return short_igc_path.read_text(encoding="utf-8")


@pytest.fixture
def sample_fix_line():
    """Provide a sample B record for testing."""
    return "B0844504651388N00820593EA0134501414"


@pytest.fixture
def sample_void_fix_line():
    """Provide a sample B record with a void ('V') validity flag."""
    return "B0844504651388N00820593EV0134501414"


@pytest.fixture
def flight_date():
    """Provide a reference flight date."""
    return datetime.date(2018, 6, 24)


@pytest.fixture
def recorded_igc_path(tmp_path):
    """Write an IGC file the way a flight recorder would, using aerofiles."""
    aerofiles_igc = pytest.importorskip("aerofiles.igc")

    path = tmp_path / "recorded.igc"
    with open(path, "wb") as fp:
        writer = aerofiles_igc.Writer(fp)
        writer.write_headers({
            'manufacturer_code': 'XCS',
            'logger_id': 'TBX',
            'date': datetime.date(2024, 6, 24),
            'fix_accuracy': 50,
            'pilot': 'Tobias Bieniek',
            'glider_type': 'Duo Discus',
            'glider_id': 'D-KKHH',
            'firmware_version': '2.2',
            'hardware_version': '2',
            'logger_type': 'LXNAVIGATION,LX8000F',
            'gps_receiver': 'uBLOX LEA-4S-2,16,max9000m',
            'pressure_sensor': 'INTERSEMA,MS5534A,max10000m',
            'competition_id': '2H',
            'competition_class': 'Doubleseater',
        })
        writer.write_comment('XCT', 'PHASE onGround')
        writer.write_fix(datetime.time(12, 0, 0), latitude=51.40375, longitude=6.41275,
                         valid=True, pressure_alt=-12, gps_alt=432)
        writer.write_comment('XCT', 'PHASE soaring')
        writer.write_fix(datetime.time(12, 0, 4), latitude=51.40380, longitude=6.41290,
                         valid=True, pressure_alt=20, gps_alt=460)
        writer.write_fix(datetime.time(12, 0, 8), latitude=51.40390, longitude=6.41300,
                         valid=False, pressure_alt=25, gps_alt=465)
        writer.write_fix(datetime.time(12, 0, 12), latitude=51.40400, longitude=6.41310,
                         valid=True, pressure_alt=40, gps_alt=480)
    return path


@pytest.fixture(autouse=True)
def default_settings():
    """Run every test against default settings."""
    config_file = settings.config_file
    settings.reset_to_defaults()
    yield settings
    settings.reset_to_defaults()
    settings.config_file = config_file
