"""Custom exceptions for IGC Tracklog"""

from typing import Optional


class IGCTracklogError(Exception):
    """Base exception for IGC Tracklog"""
    pass


class InputMissingError(IGCTracklogError):
    """Raised when neither a file path nor an IGC string is supplied"""
    pass


class StructuralParseError(IGCTracklogError, ValueError):
    """Raised when a B record does not match the fixed fix layout"""

    def __init__(self, message: str, line: str = "", line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class EmptyTrackPointsError(IGCTracklogError):
    """Raised when a GeoJSON track is requested for zero fixes"""
    pass


class InputDecodeError(IGCTracklogError):
    """Raised when an IGC file cannot be decoded with the configured encoding"""
    pass


class InvalidPolicyError(IGCTracklogError, ValueError):
    """Raised when a fix error policy name is not recognised"""
    pass
