"""CLI result rendering with Rich views."""

from __future__ import annotations

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from presstrack.commands.types import CommandResult, CommandStatus

_ARTICLE_COLUMNS = (
    ("Headline", "title"),
    ("Contributors", "authors"),
    ("Interviewees", "sources"),
    ("Tags", "tags"),
    ("Outlets", "outlets"),
    ("Date", "publication_date"),
    ("Status", "status"),
    ("Link", "link"),
)


def _display(value: object) -> str:
    """Flatten one dumped article field into table text."""
    if isinstance(value, dict):
        return str(value.get("value", ""))
    if isinstance(value, list):
        return ", ".join(sorted(_display(item) for item in value)) or "-"
    return str(value)


class CliRenderer:
    """Render parse results with Rich structures and code-based policies."""

    def __init__(self, *, console: Console) -> None:
        """Store console used for rendering.

        Args:
            console: Rich console used for output rendering.
        """
        self._console = console

    def render(self, result: CommandResult) -> None:
        """Render one parse result.

        Args:
            result: Structured parse result.
        """
        if result.status == CommandStatus.OK:
            if result.code == "add_parsed" and self._render_article(result):
                return
            self._console.print(
                Panel(
                    Text(result.message),
                    title=Text(f"presstrack [{result.code}]"),
                    border_style="green",
                    expand=True,
                )
            )
            if result.data:
                self._console.print(
                    Panel(
                        JSON.from_data(result.data),
                        title="Data",
                        border_style="cyan",
                        expand=True,
                    )
                )
            return

        field = (result.data or {}).get("field")
        self._console.print(
            Panel(
                Text(result.message),
                title=Text(f"Error [{result.code}]" + (f" {field}" if field else "")),
                border_style="bold red",
                expand=True,
            )
        )

    def _render_article(self, result: CommandResult) -> bool:
        """Render a parsed `add` command as a two-column article table.

        Returns:
            ``True`` when the payload had the expected shape.
        """
        article = (result.data or {}).get("article")
        if not isinstance(article, dict):
            return False
        table = Table(title="New article", show_header=True, header_style="bold cyan")
        table.add_column("Field", style="bold", no_wrap=True)
        table.add_column("Value")
        for label, key in _ARTICLE_COLUMNS:
            table.add_row(label, Text(_display(article.get(key, "")) or "-"))
        self._console.print(table)
        return True
