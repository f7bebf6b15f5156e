"""Birthdate option model"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union


@dataclass
class BirthdateOption:
    """One selectable day in the birthdate selector."""
    date: Union[date, datetime]
    value: str  # RFC 3339 timestamp posted by the form
    label: str  # Distance from this day to today

    def to_dict(self) -> dict:
        """Serializable form used for JSON output."""
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "value": self.value,
            "label": self.label,
        }

    def __str__(self) -> str:
        return f"{self.date.strftime('%Y-%m-%d')} ({self.label.rstrip()})"
