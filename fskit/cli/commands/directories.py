"""Directory management commands."""

from typing import List, Optional

import typer
from rich.prompt import Confirm

from fskit.cli.utils.context import CLIContext
from fskit.core.exceptions import FilesystemError
from fskit.infrastructure.filesystem import (
    create_dir,
    read_dir_entries,
    read_dir_entries_ending_with,
    remove_dir,
    remove_dir_contents,
)

app = typer.Typer(help="Manage directories")


@app.command("create")
def create(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Directory to create"),
):
    """
    Create a directory and any missing parents. Fails if the path exists.

    Example:
        fskit dir create ./build/output
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        create_dir(path)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    cli_ctx.formatter.print_success(f"Directory '{path}' created")


@app.command("remove")
def remove(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Empty directory to remove"),
):
    """
    Remove an empty directory.

    Example:
        fskit dir remove ./build/output
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        remove_dir(path)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    cli_ctx.formatter.print_success(f"Directory '{path}' removed")


@app.command("clear")
def clear(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Directory to empty"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """
    Recursively remove everything inside a directory, keeping the directory.

    Example:
        fskit dir clear ./build --yes
    """
    cli_ctx: CLIContext = ctx.obj

    if not yes and not Confirm.ask(f"Remove everything inside '{path}'?"):
        cli_ctx.formatter.print_warning("Aborted")
        raise typer.Exit(1)

    try:
        remove_dir_contents(path)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    cli_ctx.formatter.print_success(f"Directory '{path}' cleared")


@app.command("list")
def list_entries(
    ctx: typer.Context,
    path: str = typer.Argument(".", help="Directory to list"),
    dirs: bool = typer.Option(False, "--dirs", help="List subdirectories instead of files"),
    suffix: Optional[List[str]] = typer.Option(
        None, "--suffix", "-s", help="Only entries ending with this (repeatable)"
    ),
):
    """
    List files (or subdirectories) of a directory.

    With --suffix, entries of either kind are matched by name and sorted.

    Example:
        fskit dir list ./images --suffix .png --suffix .jpg
        fskit dir list ./project --dirs
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        if suffix:
            names = read_dir_entries_ending_with(path, *suffix)
        else:
            names = read_dir_entries(path, dirs)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    cli_ctx.formatter.print_list(
        [{"name": name} for name in names],
        columns=["name"],
        title=path,
    )
