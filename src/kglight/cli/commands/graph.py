"""
Graph Command - Generate the interactive visualization.

Applies the requested filters to the inventory and writes an HTML page
with a D3 force layout, or prints the filtered nodes and edges as JSON.
"""

import contextlib
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import click
from pydantic import BaseModel

from ...config import load_settings
from ...core.errors import KglightError
from ...core.types import Edge, Node
from ...graph.visualize import write_visualization
from ..renderers import JsonRenderer
from ..utils import (
    build_selection,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    filter_options,
    open_session,
    parse_color_overrides,
)


# --- API Models ---
class GraphResponse(BaseModel):
    """Structured response for `graph --json`."""
    nodes: List[Node]
    edges: List[Edge]
    selection: Dict[str, List[str]]
    colors: Dict[str, str]


@click.command()
@click.argument("csv_file", required=False, type=click.Path(dir_okay=False))
@filter_options
@click.option("--color", "colors", multiple=True, metavar="TYPE=#HEX", help="Edge color for an Integration-Type (repeatable)")
@click.option("-o", "--output", default=None, help="Output HTML file (default from config: graph.html)")
@click.option("--json", "as_json", is_flag=True, help="Output nodes and edges as JSON to stdout")
@click.option("--open", "open_browser", is_flag=True, help="Open the generated page in a browser")
def graph(
    csv_file: Optional[str],
    lifecycle: Tuple[str, ...],
    capability: Tuple[str, ...],
    org_level1: Tuple[str, ...],
    org_level2: Tuple[str, ...],
    colors: Tuple[str, ...],
    output: Optional[str],
    as_json: bool,
    open_browser: bool,
):
    """
    Render the integration graph for CSV_FILE.

    Filters are OR within an option and AND across options:

    \b
      kglight graph inventory.csv -l Active -l Pilot -c Billing
      kglight graph inventory.csv --org-level1 Finance --color Batch=#ff8800
    """
    overrides = parse_color_overrides(colors)
    selection = build_selection(lifecycle, capability, org_level1, org_level2)
    renderer = JsonRenderer("graph")

    # Keep incidental stdout out of the JSON envelope
    context_manager = renderer.capture() if as_json else contextlib.nullcontext()

    try:
        with context_manager:
            settings = load_settings()
            session = open_session(csv_file, overrides, settings)
    except KglightError as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(e.message)
        sys.exit(1)

    view = session.apply(selection)

    if as_json:
        renderer.render_success(GraphResponse(
            nodes=view.nodes,
            edges=view.edges,
            selection=selection.to_dict(),
            colors=session.edge_colors(),
        ))
        return

    if view.node_count == 0:
        echo_warning("No integrations match the active filters")

    output_path = Path(output or settings.output)
    written = write_visualization(session, output_path, open_browser=open_browser)

    echo_success(f"Generated: {written}")
    echo_info(f"{view.node_count} systems, {view.edge_count} integrations")
    echo_info(f"Open: file://{written.absolute()}")
