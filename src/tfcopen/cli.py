"""
Command line entry point for tfcopen.

Finds the Terraform Cloud URL for the current directory and opens it in the
default browser, or prints it with --print.
"""

import logging
import sys

import typer

from . import __version__
from .errors import TfcOpenError
from .tools.opener import open_or_print_url
from .urls import get_url


app = typer.Typer(
    name="tfcopen",
    help="Open the Terraform Cloud workspace for the current directory.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("tfcopen")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.command()
def main(
    print_only: bool = typer.Option(
        False, "--print", "-p", help="Print the URL instead of opening it."
    ),
    registry: bool = typer.Option(
        False, "--registry", "-r", help="Open the TFC private module registry."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Log each directory examined."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Print version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Open (or print) the Terraform Cloud URL for the current directory."""
    _configure_logging(verbose)

    try:
        url = get_url(registry=registry)
    except TfcOpenError as e:
        typer.secho(f"error: {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if not open_or_print_url(url, print_only):
        typer.echo(f"could not open a browser, the URL is: {url}", err=True)


if __name__ == "__main__":
    app()
