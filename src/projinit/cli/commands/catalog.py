"""
projinit catalog - Show the selectable options.

Usage:
    projinit catalog
    projinit catalog --json
    projinit catalog --file ./catalog.yaml
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from projinit.catalog import OptionCatalog, load_catalog
from projinit.cli.output import console, print_error, print_json
from projinit.errors import CatalogError

app = typer.Typer(
    name="catalog",
    help="Show languages, frameworks and libraries.",
    invoke_without_command=True,
)


def catalog_rows(catalog: OptionCatalog) -> list[dict]:
    """One row per (language, framework) pair in display order."""
    rows = []
    for language in sorted(catalog.languages(), key=str.lower):
        for framework in sorted(catalog.frameworks_for(language), key=str.lower):
            rows.append(
                {
                    "language": language,
                    "framework": framework,
                    "description": catalog.framework_description(language, framework),
                    "libraries": [lib.name for lib in catalog.libraries_for(language, framework)],
                }
            )
    return rows


@app.callback(invoke_without_command=True)
def show_catalog(
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Catalog file to show instead of the bundled one.",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show the option catalog."""
    try:
        catalog = load_catalog(file)
    except CatalogError as e:
        print_error(str(e))
        raise typer.Exit(2)

    rows = catalog_rows(catalog)
    if json_output:
        print_json(rows)
        return

    table = Table(title="Option catalog")
    table.add_column("Language", style="bold")
    table.add_column("Framework")
    table.add_column("Description", style="dim")
    table.add_column("Libraries")

    for row in rows:
        table.add_row(
            row["language"],
            row["framework"],
            row["description"],
            ", ".join(row["libraries"]) or "[dim]-[/dim]",
        )

    console.print(table)
