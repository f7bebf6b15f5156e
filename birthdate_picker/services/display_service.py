"""Display service for birthdate options"""
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from birthdate_picker.constants import COLUMNS
from birthdate_picker.formatters import format_date
from birthdate_picker.logging_config import get_logger
from birthdate_picker.models.option import BirthdateOption

console = Console()
logger = get_logger(__name__)


class DisplayService:
    def __init__(self, verbose: bool = False, output_console: Optional[Console] = None):
        self.verbose = verbose
        self.console = output_console or console

    def display_options(self, options: List[BirthdateOption], output: str = "table") -> None:
        """Display options as a table or as JSON."""
        if output == "json":
            self.display_json(options)
        else:
            self.display_option_table(options)

    def display_option_table(self, options: List[BirthdateOption]) -> None:
        """Display a table of options."""
        table = Table()

        for col in COLUMNS:
            table.add_column(col.label)

        # Match COLUMNS order: Date, Age, Value
        for option in options:
            table.add_row(format_date(option.date), option.label, option.value)

        self.console.print(table)

        if self.verbose and options:
            self.console.print(f"\nTotal options: {len(options)}")
            self.console.print(f"First: {options[0]}")
            self.console.print(f"Last: {options[-1]}")

    def display_json(self, options: List[BirthdateOption]) -> None:
        """Display options as a JSON array of {date, value, label}."""
        logger.debug(f"Writing {len(options)} options as JSON")
        self.console.print_json(data=[option.to_dict() for option in options])
