"""
Stats Command - Summarize the (optionally filtered) integration graph.
"""

import sys
from typing import Dict, Optional, Tuple

import click
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from ...core.errors import KglightError
from ..renderers import JsonRenderer
from ..utils import build_selection, echo_error, filter_options, open_session

console = Console()


# --- API Models ---
class StatsResponse(BaseModel):
    total_records: int
    filtered_records: int
    total_nodes: int
    total_edges: int
    orphans: int
    nodes_by_type: Dict[str, int]
    edges_by_type: Dict[str, int]
    edges_by_lifecycle: Dict[str, int]


@click.command()
@click.argument("csv_file", required=False, type=click.Path(dir_okay=False))
@filter_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(
    csv_file: Optional[str],
    lifecycle: Tuple[str, ...],
    capability: Tuple[str, ...],
    org_level1: Tuple[str, ...],
    org_level2: Tuple[str, ...],
    as_json: bool,
):
    """Show node and edge counts for the filtered inventory."""
    renderer = JsonRenderer("stats")

    try:
        session = open_session(csv_file)
    except KglightError as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(e.message)
        sys.exit(1)

    view = session.apply(build_selection(lifecycle, capability, org_level1, org_level2))
    graph_stats = session.graph().get_stats()

    response = StatsResponse(
        total_records=len(session.records),
        filtered_records=len(view.records),
        total_nodes=graph_stats["total_nodes"],
        total_edges=graph_stats["total_edges"],
        orphans=graph_stats["orphans"],
        nodes_by_type=graph_stats["nodes_by_type"],
        edges_by_type=graph_stats["edges_by_type"],
        edges_by_lifecycle=graph_stats["edges_by_lifecycle"],
    )

    if as_json:
        renderer.render_success(response)
        return

    click.echo("📊 Integration Graph Statistics:\n")
    click.echo(f"   Records: {response.filtered_records} of {response.total_records}")
    click.echo(f"   Systems: {response.total_nodes}")
    click.echo(f"   Integrations: {response.total_edges}")
    click.echo()

    _print_breakdown("Integrations by Type", response.edges_by_type)
    _print_breakdown("Integrations by Lifecycle", response.edges_by_lifecycle)
    _print_breakdown("Systems by Type", response.nodes_by_type)


def _print_breakdown(title: str, counts: Dict[str, int]) -> None:
    if not counts:
        return
    table = Table(title=title)
    table.add_column("Value", style="cyan")
    table.add_column("Count", justify="right")
    for key, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])):
        table.add_row(key, str(count))
    console.print(table)
