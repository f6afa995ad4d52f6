#!/usr/bin/env python3
"""Command line interface for the path normalizer using Typer."""

from typing import Annotated, Optional

import typer

from path_utils import (
    EmptyPathError,
    NormalizeOptions,
    PathFormat,
    __version__,
    detect_path_format,
    normalize_path,
    validate_path_input,
)

app = typer.Typer(
    name="normpath",
    help="Normalize paths between Windows and Unix conventions.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        typer.echo(f"normpath version {__version__}")
        raise typer.Exit()


@app.command()
def normpath(
    path: Annotated[str, typer.Argument(help="Path to normalize")],
    format: Annotated[
        Optional[PathFormat],
        typer.Option(
            "--format",
            "-f",
            help="Target format (default: keep the detected format)",
            case_sensitive=False,
        ),
    ] = None,
    absolute: Annotated[
        bool,
        typer.Option("--absolute", "-a", help="Resolve to an absolute path"),
    ] = False,
    base: Annotated[
        Optional[str],
        typer.Option(
            "--base", help="Base path for --absolute (default: current directory)"
        ),
    ] = None,
    detect: Annotated[
        bool,
        typer.Option("--detect", help="Print the detected format and exit"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Normalize PATH and print the result.

    Errors are written to stderr and exit with status 1.
    """
    if detect:
        try:
            validate_path_input(path)
        except EmptyPathError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(1)

        typer.echo(detect_path_format(path).value)
        return

    result = normalize_path(
        path, NormalizeOptions(format=format, absolute=absolute, base=base)
    )
    if not result.success:
        typer.echo(result.error, err=True)
        raise typer.Exit(1)

    typer.echo(result.path)


if __name__ == "__main__":
    app()
