"""Image header commands."""

from dataclasses import asdict

import typer

from fskit.cli.utils.context import CLIContext
from fskit.cli.utils.output import OutputFormat
from fskit.core.exceptions import FilesystemError
from fskit.infrastructure.images import get_base64_from_png_file, get_image_config

app = typer.Typer(help="Inspect PNG, JPEG and GIF files")


@app.command("info")
def info(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Image file"),
):
    """
    Show format, size and colour mode read from the image header.

    Example:
        fskit image info ./images/logo.png
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        config = get_image_config(path)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    cli_ctx.formatter.print_detail(asdict(config), title=path)


@app.command("base64")
def encode(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Image file"),
):
    """
    Print the whole file as base64.

    With --output json or yaml the dimensions are included.

    Example:
        fskit image base64 ./images/logo.png > logo.b64
    """
    cli_ctx: CLIContext = ctx.obj

    try:
        encoded = get_base64_from_png_file(path)
    except FilesystemError as e:
        raise cli_ctx.fail(e)

    if cli_ctx.formatter.format == OutputFormat.TABLE:
        typer.echo(encoded.data)
    else:
        cli_ctx.formatter.print_detail(encoded._asdict())
