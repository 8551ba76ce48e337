"""
Main Typer application for projinit CLI.

This module defines the root command, which runs the setup wizard, and
registers the command groups.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from projinit import __version__
from projinit.catalog import load_catalog
from projinit.cli.commands import catalog
from projinit.cli.output import print_error, print_info, print_json, print_summary, print_warning
from projinit.cli.request import build_request
from projinit.config import ConfigurationError, load_settings
from projinit.errors import CatalogError, ValidationError, WizardConfigurationError
from projinit.storage.paths import get_log_path
from projinit.tui import run_wizard

logger = logging.getLogger(__name__)

EXIT_CANCELLED = 130
EXIT_USAGE = 2

# Create the main Typer app
app = typer.Typer(
    name="projinit",
    help="Create a new project from a starter template.",
    no_args_is_help=False,  # Running without args starts the wizard
    invoke_without_command=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"projinit version [green]{__version__}[/green]")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send debug logs to the log file so they never draw over the wizard."""
    if not verbose:
        logging.getLogger("projinit").setLevel(logging.WARNING)
        return
    log_path = get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_path,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug(f"projinit {__version__} logging to {log_path}")


# noinspection PyUnusedLocal
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    language: Annotated[
        str | None,
        typer.Option(
            "--lang",
            "-l",
            help="Project language.",
        ),
    ] = None,
    framework: Annotated[
        str | None,
        typer.Option(
            "--framework",
            "-f",
            help="Starter framework.",
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option(
            "--name",
            "-n",
            help="Project name (folder name).",
        ),
    ] = None,
    directory: Annotated[
        str | None,
        typer.Option(
            "--dir",
            "-d",
            help="Parent directory for the project.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file to use instead of ~/.projinit/config.yaml.",
        ),
    ] = None,
    no_tui: Annotated[
        bool,
        typer.Option(
            "--no-tui",
            help="Do not start the wizard; --name is required.",
        ),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output the result as JSON.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Write debug logs to ~/.projinit/projinit.log.",
        ),
    ] = False,
) -> None:
    """
    [bold blue]projinit[/bold blue] - project starter wizard

    Pick a language, a framework, optional libraries and a name, then get
    the project ready to scaffold.

    Run [bold]projinit[/bold] without arguments to start the wizard.
    """
    configure_logging(verbose)
    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = load_settings(config_path)
        options = load_catalog(settings.catalog_path)
        request = build_request(
            options,
            settings,
            run_wizard,
            language=language,
            framework=framework,
            name=name,
            dir=directory,
            no_tui=no_tui,
        )
    except ConfigurationError as e:
        print_error(f"config error: {e}")
        raise typer.Exit(EXIT_USAGE)
    except CatalogError as e:
        print_error(f"catalog error: {e}")
        raise typer.Exit(EXIT_USAGE)
    except (ValidationError, WizardConfigurationError) as e:
        print_error(str(e))
        raise typer.Exit(EXIT_USAGE)

    if request is None:
        print_warning("Cancelled")
        raise typer.Exit(EXIT_CANCELLED)

    logger.debug(f"Scaffold request: {request}")
    if json_output:
        print_json(request.to_dict())
    else:
        print_summary(request)


# Register command groups
app.add_typer(catalog.app, name="catalog")


if __name__ == "__main__":
    app()
