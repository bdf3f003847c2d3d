"""
Visualization Engine.

Renders one GraphView as a standalone HTML page driven by D3.js.

Key Features:
- Force Layout: link, charge and center forces with node dragging.
- Tooltips: node degree and edge details (types, lifecycle, capability).
- Edge Colors: legend with a color picker per Integration-Type.
- Filter Panel: the option menus with the active selection highlighted.

Filtering and normalization happen in Python before rendering; the page
only draws what it is given.
"""

import json
import logging
import webbrowser
from pathlib import Path
from typing import Any, Dict, Union

from ..config import NEUTRAL_COLOR
from ..core.session import GraphSession
from ..core.types import FilterDimension

logger = logging.getLogger(__name__)

DIMENSION_LABELS: Dict[FilterDimension, str] = {
    FilterDimension.LIFECYCLE: "Lifecycle",
    FilterDimension.CAPABILITY: "Capabilities",
    FilterDimension.ORG_LEVEL1: "Org Level 1",
    FilterDimension.ORG_LEVEL2: "Org Level 2",
}

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Integration Graph</title>
    <script src="https://d3js.org/d3.v7.min.js"></script>
    <style>
        :root {
            --bg-base: #0a0a0a;
            --bg-elevated: #111111;
            --bg-surface: #171717;
            --border-subtle: #262626;
            --border-default: #333333;
            --text-primary: #fafafa;
            --text-secondary: #a1a1aa;
            --text-tertiary: #71717a;
            --accent: #3b82f6;
            --node-fill: #69b3a2;
            --font-sans: -apple-system, BlinkMacSystemFont, "Segoe UI", "Inter", Roboto, sans-serif;
            --font-mono: "SF Mono", "Fira Code", monospace;
            --radius-md: 6px;
        }

        * { box-sizing: border-box; }

        body {
            margin: 0;
            height: 100vh;
            background: var(--bg-base);
            color: var(--text-primary);
            font-family: var(--font-sans);
            display: flex;
            flex-direction: column;
            overflow: hidden;
        }

        .header {
            height: 56px;
            border-bottom: 1px solid var(--border-subtle);
            display: flex;
            align-items: center;
            padding: 0 16px;
            background: var(--bg-elevated);
            gap: 16px;
        }

        .brand { font-weight: 700; font-size: 16px; }
        .counts { color: var(--text-secondary); font-size: 12px; }

        .main { flex: 1; display: flex; min-height: 0; }

        .sidebar {
            width: 280px;
            border-right: 1px solid var(--border-subtle);
            background: var(--bg-elevated);
            overflow-y: auto;
            padding: 12px 16px;
        }

        .section-title {
            font-size: 11px;
            text-transform: uppercase;
            letter-spacing: 0.05em;
            color: var(--text-tertiary);
            margin: 16px 0 8px;
        }

        .filters-note {
            font-size: 11px;
            color: var(--text-tertiary);
            margin-bottom: 4px;
        }

        .chips { display: flex; flex-wrap: wrap; gap: 4px; }

        .filter-label {
            font-size: 11px;
            color: var(--text-secondary);
            margin: 10px 0 4px;
        }

        .chip {
            font-size: 11px;
            padding: 2px 8px;
            border-radius: 10px;
            border: 1px solid var(--border-default);
            color: var(--text-secondary);
        }

        .chip.active {
            border-color: var(--accent);
            color: var(--text-primary);
            background: rgba(59, 130, 246, 0.15);
        }

        .legend-row {
            display: flex;
            align-items: center;
            gap: 8px;
            font-size: 12px;
            margin-bottom: 6px;
        }

        .legend-row input[type=color] {
            width: 28px;
            height: 20px;
            border: none;
            background: none;
            padding: 0;
            cursor: pointer;
        }

        #graph-container { flex: 1; position: relative; }
        #graph { width: 100%; height: 100%; display: block; }

        .tooltip {
            position: absolute;
            pointer-events: none;
            background: var(--bg-surface);
            border: 1px solid var(--border-default);
            border-radius: var(--radius-md);
            padding: 8px 10px;
            font-size: 12px;
            opacity: 0;
            max-width: 360px;
        }

        .tooltip table { border-collapse: collapse; }
        .tooltip th { text-align: left; color: var(--text-tertiary); font-weight: 500; padding-right: 10px; }
        .tooltip td { font-family: var(--font-mono); }

        .empty {
            position: absolute;
            top: 50%;
            left: 50%;
            transform: translate(-50%, -50%);
            color: var(--text-tertiary);
        }
    </style>
</head>
<body>
    <div class="header">
        <div class="brand">Integration Graph</div>
        <div class="counts" id="counts"></div>
    </div>
    <div class="main">
        <div class="sidebar">
            <div class="section-title">Edge Types</div>
            <div id="legend"></div>
            <div class="section-title">Active Filters</div>
            <div class="filters-note">Highlighted values are applied. Change them with <code>kglight graph -l / -c / --org-level1 / --org-level2</code>.</div>
            <div id="filters"></div>
        </div>
        <div id="graph-container">
            <svg id="graph"></svg>
        </div>
    </div>
    <div class="tooltip" id="tooltip"></div>

    <script>
        const DATA = __GRAPH_DATA__;

        const state = {
            colors: Object.assign({}, DATA.colors),
        };

        function esc(value) {
            return String(value == null ? '' : value)
                .replace(/&/g, '&amp;').replace(/</g, '&lt;')
                .replace(/>/g, '&gt;').replace(/"/g, '&quot;');
        }

        function edgeColor(type) {
            return state.colors[type] || DATA.neutral;
        }

        // ============================================================
        // SIDEBAR
        // ============================================================
        function renderLegend() {
            const legend = document.getElementById('legend');
            legend.innerHTML = '';
            Object.keys(state.colors).sort().forEach(type => {
                const row = document.createElement('div');
                row.className = 'legend-row';
                row.innerHTML = `<input type="color" value="${esc(state.colors[type])}"><span>${esc(type)}</span>`;
                row.querySelector('input').addEventListener('input', e => {
                    state.colors[type] = e.target.value;
                    d3.selectAll('line.edge').style('stroke', d => edgeColor(d.type));
                });
                legend.appendChild(row);
            });
        }

        function renderFilters() {
            const container = document.getElementById('filters');
            DATA.dimensions.forEach(([key, label]) => {
                const selected = new Set(DATA.selection[key] || []);
                const title = document.createElement('div');
                title.className = 'filter-label';
                title.textContent = selected.size ? `${label} (${selected.size})` : label;
                container.appendChild(title);

                const chips = document.createElement('div');
                chips.className = 'chips';
                (DATA.options[key] || []).forEach(value => {
                    const chip = document.createElement('span');
                    chip.className = selected.has(value) ? 'chip active' : 'chip';
                    chip.textContent = value;
                    chips.appendChild(chip);
                });
                container.appendChild(chips);
            });
        }

        // ============================================================
        // TOOLTIPS
        // ============================================================
        const tooltip = d3.select('#tooltip');

        function showTooltip(event, html) {
            tooltip.html(html)
                .style('left', (event.pageX + 12) + 'px')
                .style('top', (event.pageY - 28) + 'px')
                .transition().duration(200).style('opacity', 0.95);
        }

        function hideTooltip() {
            tooltip.transition().duration(500).style('opacity', 0);
        }

        function nodeTooltipHTML(d) {
            return `<strong>${esc(d.id)}</strong>
                <table>
                    <tr><th>Type</th><td>${esc(d.type)}</td></tr>
                    <tr><th>Produces</th><td>${d.out_degree}</td></tr>
                    <tr><th>Consumes</th><td>${d.in_degree}</td></tr>
                </table>`;
        }

        function edgeTooltipHTML(d) {
            return `<table>
                    <tr><th>Producer</th><td>${esc(d.source.id)} (${esc(d.source.type)})</td></tr>
                    <tr><th>Consumer</th><td>${esc(d.target.id)} (${esc(d.target.type)})</td></tr>
                    <tr><th>Integration-Type</th><td>${esc(d.type)}</td></tr>
                    <tr><th>Lifecycle</th><td>${esc(d.lifecycle)}</td></tr>
                    <tr><th>Capability</th><td>${esc(d.capability)}</td></tr>
                </table>`;
        }

        // ============================================================
        // GRAPH
        // ============================================================
        function drawGraph() {
            const container = document.getElementById('graph-container');
            const width = container.clientWidth;
            const height = container.clientHeight;
            const svg = d3.select('#graph').attr('viewBox', [0, 0, width, height]);
            svg.selectAll('*').remove();

            document.getElementById('counts').textContent =
                `${DATA.nodes.length} systems · ${DATA.edges.length} integrations`;

            if (DATA.nodes.length === 0) {
                const empty = document.createElement('div');
                empty.className = 'empty';
                empty.textContent = 'No integrations match the active filters';
                container.appendChild(empty);
                return;
            }

            const nodes = DATA.nodes.map(n => Object.assign({}, n));
            const links = DATA.edges.map(e => Object.assign({}, e));

            const simulation = d3.forceSimulation(nodes)
                .force('link', d3.forceLink(links).id(d => d.id).distance(DATA.layout.distance))
                .force('charge', d3.forceManyBody().strength(DATA.layout.charge))
                .force('center', d3.forceCenter(width / 2, height / 2));

            const link = svg.append('g')
                .attr('class', 'links')
                .selectAll('line')
                .data(links)
                .join('line')
                .attr('class', 'edge')
                .style('stroke', d => edgeColor(d.type))
                .style('stroke-width', '2px')
                .on('mouseover', (event, d) => showTooltip(event, edgeTooltipHTML(d)))
                .on('mouseout', hideTooltip);

            const node = svg.append('g')
                .attr('class', 'nodes')
                .selectAll('g')
                .data(nodes)
                .join('g')
                .call(drag(simulation))
                .on('mouseover', (event, d) => showTooltip(event, nodeTooltipHTML(d)))
                .on('mouseout', hideTooltip);

            node.append('circle')
                .attr('r', 6)
                .style('fill', 'var(--node-fill)');

            node.append('text')
                .text(d => d.id)
                .attr('y', -10)
                .style('text-anchor', 'middle')
                .style('font-size', '10px')
                .style('fill', '#ccc');

            simulation.on('tick', () => {
                link
                    .attr('x1', d => d.source.x)
                    .attr('y1', d => d.source.y)
                    .attr('x2', d => d.target.x)
                    .attr('y2', d => d.target.y);

                node.attr('transform', d => `translate(${d.x},${d.y})`);
            });
        }

        function drag(simulation) {
            function dragstarted(event) {
                if (!event.active) simulation.alphaTarget(0.3).restart();
                event.subject.fx = event.subject.x;
                event.subject.fy = event.subject.y;
            }
            function dragged(event) {
                event.subject.fx = event.x;
                event.subject.fy = event.y;
            }
            function dragended(event) {
                if (!event.active) simulation.alphaTarget(0);
                event.subject.fx = null;
                event.subject.fy = null;
            }
            return d3.drag().on('start', dragstarted).on('drag', dragged).on('end', dragended);
        }

        renderLegend();
        renderFilters();
        drawGraph();
    </script>
</body>
</html>
"""

# Force simulation parameters
LINK_DISTANCE = 50
CHARGE_STRENGTH = -150


def build_payload(session: GraphSession) -> Dict[str, Any]:
    """Assemble everything the page needs from the session's current view."""
    view = session.view
    graph = session.graph()

    nodes = []
    for node in view.nodes:
        in_degree, out_degree = graph.degree(node.id)
        nodes.append({**node.model_dump(), "in_degree": in_degree, "out_degree": out_degree})

    return {
        "nodes": nodes,
        "edges": [edge.model_dump() for edge in view.edges],
        "colors": session.edge_colors(),
        "neutral": session.colors.default or NEUTRAL_COLOR,
        "options": session.options.model_dump(),
        "selection": view.selection.to_dict(),
        "dimensions": [[d.value, label] for d, label in DIMENSION_LABELS.items()],
        "layout": {"distance": LINK_DISTANCE, "charge": CHARGE_STRENGTH},
    }


def generate_html(session: GraphSession) -> str:
    """Generate the HTML content for the session's current view."""
    json_data = json.dumps(build_payload(session))
    # Keep the embedded JSON from closing the script tag
    json_data = json_data.replace("</", "<\\/")
    return HTML_TEMPLATE.replace("__GRAPH_DATA__", json_data)


def write_visualization(
    session: GraphSession,
    output_path: Union[str, Path] = "graph.html",
    open_browser: bool = False,
) -> Path:
    """Write the visualization to disk and optionally open it."""
    out_file = Path(output_path)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(generate_html(session), encoding="utf-8")
    logger.debug("Wrote visualization to %s", out_file)

    if open_browser:
        webbrowser.open(out_file.resolve().as_uri())

    return out_file
