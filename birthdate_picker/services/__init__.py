"""Services for birthdate-picker.

- calendar_service: calendar-aware date differences and subtraction
- range_service: enumerating the days of the allowed birthdate range
- option_service: turning days into labelled selector options
- display_service: rendering options to the terminal
"""
