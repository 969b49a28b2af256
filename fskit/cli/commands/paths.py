"""Path inspection commands."""

from typing import List

import typer

from fskit.cli.utils.context import CLIContext
from fskit.core.exceptions import FilesystemError
from fskit.infrastructure.filesystem import is_valid_path_to, path_exists, split_path

app = typer.Typer(help="Inspect paths")


@app.command("exists")
def exists(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to check"),
):
    """
    Report whether a path exists. Exits 1 when it does not.

    Example:
        fskit path exists ./images/logo.png
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        found = path_exists(path)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    cli_ctx.formatter.print_detail({"path": path, "exists": found})
    if not found:
        raise typer.Exit(1)


@app.command("check")
def check(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to validate"),
    suffixes: List[str] = typer.Argument(..., help="Accepted name endings"),
):
    """
    Check that a path exists and ends with one of the given suffixes.

    Example:
        fskit path check ./images/logo.png .png .jpg
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        valid = is_valid_path_to(path, *suffixes)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    if valid:
        cli_ctx.formatter.print_success(f"{path} is valid")
    else:
        cli_ctx.formatter.print_error(
            f"{path} doesn't lead to any file with an ending like {', '.join(suffixes)}"
        )
        raise typer.Exit(1)


@app.command("split")
def split(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Path to split"),
):
    """
    Split a path into its directory (with trailing separator) and filename.

    Example:
        fskit path split a/b/c.png
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        directory, filename = split_path(path)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    cli_ctx.formatter.print_detail({"directory": directory, "filename": filename})
