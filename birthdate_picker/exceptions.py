"""Custom exceptions for birthdate-picker"""

from typing import Any, Optional


class BirthdatePickerError(Exception):
    """Base exception for all birthdate-picker errors."""
    pass


class InvariantViolationError(BirthdatePickerError):
    """Exception raised when a computed calendar difference breaks an ordering invariant.

    Only reachable when a caller passes a start date after the end date.
    """

    def __init__(self, quantity: str, value: int):
        self.quantity = quantity
        self.value = value
        super().__init__(
            f"Negative difference in {quantity}: {value}. Should not be reached."
        )


class InvalidDateError(BirthdatePickerError):
    """Exception raised when a date string cannot be parsed."""

    def __init__(self, value: Any, message: Optional[str] = None):
        self.value = value
        self.message = message

        error_msg = f"Invalid date '{value}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
