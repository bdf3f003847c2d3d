"""
Options Command - List the filter values available in an inventory.
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...core.errors import KglightError
from ...core.types import FilterDimension, FilterOptions
from ...graph.visualize import DIMENSION_LABELS
from ..renderers import JsonRenderer
from ..utils import echo_error, open_session

console = Console()


@click.command()
@click.argument("csv_file", required=False, type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def options(csv_file: Optional[str], as_json: bool):
    """List the legal filter values for each dimension."""
    renderer = JsonRenderer("options")

    try:
        session = open_session(csv_file)
    except KglightError as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(e.message)
        sys.exit(1)

    if as_json:
        renderer.render_success(session.options)
        return

    _print_options_table(session.options)


def _print_options_table(filter_options: FilterOptions) -> None:
    table = Table(title="Filter Options")
    table.add_column("Dimension", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Values")

    for dimension in FilterDimension:
        values = filter_options.for_dimension(dimension)
        table.add_row(
            DIMENSION_LABELS[dimension],
            str(len(values)),
            ", ".join(values) if values else "[dim]-[/dim]",
        )

    console.print(table)
