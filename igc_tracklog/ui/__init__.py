"""
UI package for IGC Tracklog.
Contains the command-line interface.
"""

from .cli import CLI

__all__ = [
    'CLI'
]
