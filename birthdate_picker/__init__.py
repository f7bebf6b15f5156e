"""
birthdate-picker - Birthdate options labelled with their distance from today
"""

from .__version__ import __version__
from .core import BirthdatePicker
from .formatters import format_distance
from .cli.main import main

__all__ = ["BirthdatePicker", "format_distance", "main", "__version__"]
