"""File commands."""

import typer

from fskit.cli.utils.context import CLIContext
from fskit.core.exceptions import FilesystemError
from fskit.core.models import FileContainer
from fskit.infrastructure.filesystem import copy_file, read_file_as_string, remove_file

app = typer.Typer(help="Read, write, copy and remove files")


@app.command("cat")
def cat(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="File to print"),
):
    """
    Print a UTF-8 text file.

    Example:
        fskit file cat ./notes/todo.txt
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        content = read_file_as_string(path)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    typer.echo(content, nl=False)


@app.command("write")
def write(
    ctx: typer.Context,
    directory: str = typer.Argument(..., help="Target directory, created if missing"),
    filename: str = typer.Argument(..., help="Target file name"),
    text: str = typer.Argument(..., help="Content to write"),
):
    """
    Write text to a file, replacing any previous content.

    Example:
        fskit file write ./notes todo.txt "buy milk"
    """
    cli_ctx: CLIContext = ctx.obj

    container = FileContainer(path=directory, filename=filename)
    container.text = text

    try:
        container.write()
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    cli_ctx.formatter.print_success(
        f"Wrote {len(container.data)} bytes to '{container.full_path}'"
    )


@app.command("copy")
def copy(
    ctx: typer.Context,
    src: str = typer.Argument(..., help="Source file"),
    dst: str = typer.Argument(..., help="Destination file, created or truncated"),
):
    """
    Copy a file and flush the copy to disk.

    Example:
        fskit file copy ./a.png ./backup/a.png
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        copy_file(src, dst)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    cli_ctx.formatter.print_success(f"Copied '{src}' to '{dst}'")


@app.command("remove")
def remove(
    ctx: typer.Context,
    directory: str = typer.Argument(..., help="Directory holding the file"),
    filename: str = typer.Argument(..., help="File to remove"),
):
    """
    Remove one file.

    Example:
        fskit file remove ./notes todo.txt
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        remove_file(directory, filename)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    cli_ctx.formatter.print_success(f"Removed '{filename}' from '{directory}'")
