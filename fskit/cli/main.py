"""fskit command line tool."""

from typing import Optional

import typer
from rich.console import Console

from fskit.cli import __version__
from fskit.cli.commands import directories, files, images, paths
from fskit.cli.utils.context import CLIContext
from fskit.cli.utils.output import OutputFormatter
from fskit.infrastructure.logging import bind_context, setup_logging

app = typer.Typer(
    name="fskit",
    help="fskit - file, directory and image header utilities",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    pretty_exceptions_enable=False,
)

console = Console()


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        console.print(f"fskit v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug output and debug logging",
    ),
    output_format: str = typer.Option(
        "table",
        "--output",
        "-o",
        help="Output format: table, json, yaml",
    ),
):
    """
    fskit

    Thin command line front end over the fskit library. Every command exits
    with status 1 when the underlying operation fails.
    """
    setup_logging("DEBUG" if debug else None)
    bind_context(command=ctx.invoked_subcommand)

    ctx.obj = CLIContext(
        debug=debug,
        formatter=OutputFormatter(output_format, console=console),
        console=console,
    )


app.add_typer(paths.app, name="path", help="Inspect paths")
app.add_typer(directories.app, name="dir", help="Manage directories")
app.add_typer(files.app, name="file", help="Read, write, copy and remove files")
app.add_typer(images.app, name="image", help="Inspect PNG, JPEG and GIF files")


if __name__ == "__main__":
    app()
