"""
Configuration package for IGC Tracklog.
Contains settings and constants used across the package.
"""

from .constants import *
from .settings import Settings, settings

__all__ = ['Settings', 'settings']
