"""
Sexagesimal coordinate decoding for IGC B records.

B records store latitude as DDMMmmm and longitude as DDDMMmmm, i.e. whole
degrees, whole minutes and thousandths of a minute, followed by a
hemisphere letter.
"""

from ..config.constants import SOUTH, WEST, FRACTION_DIGITS


def _to_degrees(degrees: str, minutes: str, fraction: str) -> float:
    return int(degrees) + float(f"{minutes}.{fraction.ljust(FRACTION_DIGITS, '0')}") / 60


def decode_latitude(degrees: str, minutes: str, fraction: str, hemisphere: str) -> float:
    """
    Decode an IGC latitude into signed decimal degrees.

    Args:
        degrees: Two-digit degrees field
        minutes: Two-digit minutes field
        fraction: Three-digit thousandths of a minute
        hemisphere: 'N' or 'S'

    Returns:
        float: Decimal degrees, negative in the southern hemisphere

    Raises:
        ValueError: If a field is not numeric
    """
    value = _to_degrees(degrees, minutes, fraction)
    return -value if hemisphere == SOUTH else value


def decode_longitude(degrees: str, minutes: str, fraction: str, hemisphere: str) -> float:
    """
    Decode an IGC longitude into signed decimal degrees.

    Same as decode_latitude with a three-digit degrees field and 'E'/'W'.
    """
    value = _to_degrees(degrees, minutes, fraction)
    return -value if hemisphere == WEST else value
