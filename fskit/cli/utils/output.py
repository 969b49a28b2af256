"""Output formatting utilities for CLI."""

import json
from enum import Enum
from typing import Any, Dict, List, Optional

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table


class OutputFormat(Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class OutputFormatter:
    """Handle output formatting for different formats."""

    def __init__(self, format_type: str = "table", console: Optional[Console] = None):
        """
        Initialize output formatter.

        Args:
            format_type: Output format (table, json, yaml)
            console: Console to print to, a new one by default
        """
        self.console = console or Console()
        try:
            self.format = OutputFormat(format_type.lower())
        except ValueError:
            self.format = OutputFormat.TABLE

    def _dump(self, payload: Any):
        # Console.out skips wrapping, so long values (base64) stay on one line
        if self.format == OutputFormat.JSON:
            self.console.out(json.dumps(payload, indent=2, default=str), highlight=False)
        else:
            self.console.out(
                yaml.safe_dump(payload, default_flow_style=False).rstrip("\n"),
                highlight=False,
            )

    def print_list(
        self,
        items: List[Dict[str, Any]],
        columns: Optional[List[str]] = None,
        title: Optional[str] = None,
    ):
        """
        Print a list of items.

        Args:
            items: List of items to print
            columns: Column names to display (for table format)
            title: Table title (for table format)
        """
        if self.format != OutputFormat.TABLE:
            self._dump(items)
            return

        if not items:
            self.console.print("[dim]No entries found[/dim]")
            return

        if not columns:
            columns = list(items[0].keys())

        table = Table(title=title)
        for col in columns:
            table.add_column(col.replace("_", " ").title(), overflow="fold")

        for item in items:
            table.add_row(*(escape(str(item.get(col, ""))) for col in columns))

        self.console.print(table)

    def print_detail(
        self,
        item: Dict[str, Any],
        title: Optional[str] = None,
    ):
        """
        Print detailed view of a single item.

        Args:
            item: Item to print
            title: Optional title
        """
        if self.format != OutputFormat.TABLE:
            self._dump(item)
            return

        if title:
            self.console.print(f"[bold]{escape(title)}[/bold]\n")

        for key, value in item.items():
            formatted_key = key.replace("_", " ").title()

            if value is None:
                formatted_value = "[dim]Not set[/dim]"
            elif isinstance(value, bool):
                formatted_value = "[green]Yes[/green]" if value else "[red]No[/red]"
            else:
                formatted_value = escape(str(value))

            self.console.print(f"[cyan]{formatted_key}:[/cyan] {formatted_value}")

    def print_success(self, message: str):
        """Print success message."""
        if self.format != OutputFormat.TABLE:
            self._dump({"status": "success", "message": message})
        else:
            self.console.print(f"[green]✓[/green] {escape(message)}")

    def print_error(self, message: str, code: Optional[str] = None):
        """Print error message."""
        if self.format != OutputFormat.TABLE:
            payload = {"status": "error", "message": message}
            if code:
                payload["code"] = code
            self._dump(payload)
        else:
            prefix = f"[dim]{code}[/dim] " if code else ""
            self.console.print(f"[red]✗[/red] {prefix}{escape(message)}")

    def print_warning(self, message: str):
        """Print warning message."""
        if self.format != OutputFormat.TABLE:
            self._dump({"status": "warning", "message": message})
        else:
            self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")
