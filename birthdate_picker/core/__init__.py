"""Core functionality for birthdate-picker"""

from .picker import BirthdatePicker

__all__ = ["BirthdatePicker"]
