"""Version information for birthdate-picker."""

__version__ = "0.1.0"
