"""Command-line entry point for birthdate-picker"""

import sys
from typing import List, Optional

from rich.console import Console

from birthdate_picker.cli.args import parse_args
from birthdate_picker.config import Config
from birthdate_picker.core import BirthdatePicker
from birthdate_picker.formatters import parse_date
from birthdate_picker.logging_config import setup_logging

console = Console()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        setup_logging(
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            tui_mode=parsed_args.interactive,
        )

        config = Config(
            min_years=parsed_args.min_years,
            max_years=parsed_args.max_years,
            today=parse_date(parsed_args.today) if parsed_args.today else None,
            order=parsed_args.order,
            limit=parsed_args.limit,
            output="json" if parsed_args.json else "table",
            interactive=parsed_args.interactive,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )

        if parsed_args.debug and not parsed_args.interactive:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        picker = BirthdatePicker(config, tui_mode=config.interactive)

        if parsed_args.describe:
            label = picker.describe(parse_date(parsed_args.describe))
            console.print(label, markup=False, highlight=False)
            return 0

        if config.interactive:
            from birthdate_picker.tui import BirthdatePickerApp
            chosen = BirthdatePickerApp(picker).run()
            if chosen is None:
                return 1
            console.print(chosen, markup=False, highlight=False)
            return 0

        picker.process_options()
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
