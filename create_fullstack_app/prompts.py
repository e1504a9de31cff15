"""Interactive selection of the frontend and database templates.

The pipeline only depends on the ``PromptProvider`` protocol; the Rich
implementation below is the one wired up by the CLI.
"""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from .models import DATABASE_CHOICES, FRONTEND_CHOICES
from .utils import console as default_console


class PromptProvider(Protocol):
    """Supplies the template kinds the user did not pass on the command line."""

    def choose_frontend(self) -> str:
        """Return the selected frontend kind."""
        ...

    def choose_database(self) -> str:
        """Return the selected database kind."""
        ...


class RichPromptProvider:
    """Single-choice prompts rendered with Rich.

    Each prompt lists its options in a table and blocks until one of the
    option values is entered. Pressing enter selects the first option.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def choose_frontend(self) -> str:
        return self._choose("What frontend do you want to use?", FRONTEND_CHOICES)

    def choose_database(self) -> str:
        return self._choose("What database do you want to use?", DATABASE_CHOICES)

    def _choose(self, message: str, choices: dict[str, str]) -> str:
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Option", style="cyan", no_wrap=True)
        table.add_column("Description")
        for value, label in choices.items():
            table.add_row(value, label)
        self.console.print(table)

        values = list(choices)
        return Prompt.ask(
            message,
            choices=values,
            default=values[0],
            console=self.console,
        )


class StaticPromptProvider:
    """Returns fixed answers; used for non-interactive runs and in tests."""

    def __init__(self, frontend: str, database: str) -> None:
        self.frontend = frontend
        self.database = database

    def choose_frontend(self) -> str:
        return self.frontend

    def choose_database(self) -> str:
        return self.database
