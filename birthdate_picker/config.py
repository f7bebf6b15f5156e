"""Configuration handling for birthdate-picker"""

from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Optional, Union

from birthdate_picker.constants import MIN_YEARS, MAX_YEARS, ORDER_CHOICES, OUTPUT_CHOICES


@dataclass
class Config:
    """Configuration for birthdate-picker with validation."""

    # Allowed age range
    min_years: int = MIN_YEARS
    max_years: int = MAX_YEARS

    # Reference day; None means "now" at the time options are built
    today: Optional[Union[date, datetime]] = None

    # Listing options
    order: str = "desc"  # desc (youngest first), asc
    limit: Optional[int] = None  # None = every day in range
    output: str = "table"  # table, json

    # Execution modes
    interactive: bool = False
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_years()
        self._validate_order()
        self._validate_limit()
        self._validate_output()

    def _validate_years(self):
        """Validate the age range is non-empty and not negative."""
        if self.min_years < 0:
            raise ValueError(f"min_years must not be negative, got {self.min_years}")
        if self.max_years <= self.min_years:
            raise ValueError(
                f"max_years must be greater than min_years, got {self.max_years} <= {self.min_years}"
            )

    def _validate_order(self):
        """Validate order is one of allowed values."""
        if self.order not in ORDER_CHOICES:
            raise ValueError(f"order must be one of {ORDER_CHOICES}, got '{self.order}'")

    def _validate_limit(self):
        """Validate limit is positive when set."""
        if self.limit is not None and self.limit <= 0:
            raise ValueError(f"limit must be positive, got {self.limit}")

    def _validate_output(self):
        """Validate output is one of allowed values."""
        if self.output not in OUTPUT_CHOICES:
            raise ValueError(f"output must be one of {OUTPUT_CHOICES}, got '{self.output}'")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
