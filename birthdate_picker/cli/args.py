"""Command-line argument parsing for birthdate-picker."""

import argparse
from typing import List, Optional

from birthdate_picker.__version__ import __version__
from birthdate_picker.constants import MIN_YEARS, MAX_YEARS, ORDER_CHOICES


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="List selectable birthdates labelled with their distance from today",
        epilog="Option values are RFC 3339 timestamps, ready to post from a form.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"birthdate-picker {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--min-years", type=int, default=MIN_YEARS, help=f"Minimum age (default: {MIN_YEARS})"
    )
    parser.add_argument(
        "--max-years", type=int, default=MAX_YEARS, help=f"Maximum age (default: {MAX_YEARS})"
    )
    parser.add_argument(
        "--today",
        metavar="DATE",
        help="Reference day as ISO 8601 (default: now)",
    )
    parser.add_argument(
        "--order",
        choices=ORDER_CHOICES,
        default="desc",
        help="desc lists the youngest birthdate first, asc the oldest (default: desc)",
    )
    parser.add_argument(
        "--limit", type=int, metavar="N", help="Only list the first N options"
    )
    parser.add_argument("--json", action="store_true", help="Print options as JSON")
    parser.add_argument(
        "--describe",
        metavar="DATE",
        help="Print the distance label for a single date and exit",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Pick a birthdate in an interactive TUI and print its value",
    )

    return parser.parse_args(argv)
