"""CLI context management."""

from dataclasses import dataclass

import typer
from rich.console import Console

from fskit.cli.utils.output import OutputFormatter
from fskit.core.exceptions import FilesystemError


@dataclass
class CLIContext:
    """Context object passed through CLI commands."""

    debug: bool
    formatter: OutputFormatter
    console: Console

    def fail(self, error: FilesystemError) -> "typer.Exit":
        """
        Report a library error and build the exit for the command.

        Usage: ``raise cli_ctx.fail(e)``

        Args:
            error: The error raised by an fskit operation

        Returns:
            typer.Exit with status 1
        """
        self.formatter.print_error(error.message, code=error.code)
        if self.debug and error.details:
            self.formatter.print_detail(error.details, title="Details")
        return typer.Exit(1)
