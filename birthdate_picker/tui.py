"""Interactive birthdate picker using Textual."""

from typing import Dict, List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import DataTable, Footer, Header, Static

from .__version__ import __version__
from .constants import COLUMNS
from .formatters import format_date
from .logging_config import get_logger
from .models.option import BirthdateOption

logger = get_logger(__name__)


class BirthdatePickerApp(App[str]):
    """Interactive birthdate selector.

    Exits with the RFC 3339 value of the chosen option, or None on quit.
    """

    TITLE = "Birthdate Picker"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen {
        background: $surface;
    }

    DataTable {
        height: 1fr;
    }

    #status-bar {
        dock: bottom;
        height: auto;
        background: $panel;
        padding: 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("o", "toggle_order", "Reverse Order"),
    ]

    def __init__(self, picker, options: Optional[List[BirthdateOption]] = None):
        super().__init__()
        self.picker = picker
        self.options = options or []
        self._options_by_value: Dict[str, BirthdateOption] = {}

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header(show_clock=False)
        yield DataTable(id="option-table", cursor_type="row", zebra_stripes=True)
        yield Static(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Set up the table when app starts."""
        table = self.query_one(DataTable)
        for col in COLUMNS:
            table.add_column(col.label, width=None, key=col.key)

        if not self.options:
            self.options = self.picker.get_options()

        self._populate_table()

    def _populate_table(self) -> None:
        """Add option rows to the table."""
        table = self.query_one(DataTable)
        table.clear()
        self._options_by_value = {}

        for option in self.options:
            self._options_by_value[option.value] = option
            table.add_row(
                format_date(option.date), option.label, option.value, key=option.value
            )

        logger.debug(f"Populated table with {len(self.options)} options")
        self._update_status(self.options[0] if self.options else None)

    def _update_status(self, option: Optional[BirthdateOption]) -> None:
        """Show the highlighted option in the status bar."""
        status = self.query_one("#status-bar", Static)
        if option is None:
            status.update("No birthdates in range")
        else:
            status.update(f"{len(self.options)} birthdates | {option}")

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Track the highlighted option."""
        if event.row_key is not None and event.row_key.value in self._options_by_value:
            self._update_status(self._options_by_value[event.row_key.value])

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Choose the selected option and exit with its value."""
        option = self._options_by_value.get(event.row_key.value)
        if option is not None:
            logger.info(f"Chose {option.value}")
            self.exit(option.value)

    def action_toggle_order(self) -> None:
        """Reverse the order of the options."""
        self.options.reverse()
        self._populate_table()
