"""Typer application root for the portfolio CLI."""

import logging
from importlib.metadata import PackageNotFoundError, version

import typer
from rich.console import Console

from portfolio_api.cli.manage import manage_app
from portfolio_api.cli.query import projects, search, skills, top_skills
from portfolio_api.config import get_settings
from portfolio_api.core import ConfigurationError
from portfolio_api.core.logging import configure_logging, suppress_third_party_loggers

console = Console()

app = typer.Typer(
    name="portfolio",
    help="Query and manage a single-profile portfolio.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            installed = version("portfolio-api")
        except PackageNotFoundError:
            installed = "0.0.0"
        console.print(f"portfolio {installed}")
        raise typer.Exit()


def _verbose_callback(value: bool) -> None:
    """Enable DEBUG-level logging when --verbose is passed."""
    if value:
        configure_logging(level=logging.DEBUG, force=True)
        suppress_third_party_loggers()


@app.callback()
def main(
    _version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    _verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable detailed debug output.",
        callback=_verbose_callback,
        is_eager=True,
    ),
) -> None:
    """Query and manage a single-profile portfolio."""
    try:
        get_settings()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e.message}")
        if e.details:
            console.print(f"  [dim]{e.details}[/dim]")
        raise typer.Exit(code=1) from None


app.add_typer(manage_app, name="manage", help="Manage stored profiles.")

# Query commands live at the top level.
app.command(name="search")(search)
app.command(name="projects")(projects)
app.command(name="skills")(skills)
app.command(name="top-skills")(top_skills)
