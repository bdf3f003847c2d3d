"""
Unit tests for the visualization module.

Ensures that:
1. The HTML embeds the filtered graph, options, selection and colors.
2. The D3 force layout, drag and tooltip hooks are present.
3. Embedded data cannot break out of the script tag.
"""

import json
import re
from unittest.mock import patch

import pytest

from kglight.core.session import GraphSession
from kglight.core.types import FilterSelection
from kglight.graph.visualize import build_payload, generate_html, write_visualization


def _embedded_data(html: str) -> dict:
    match = re.search(r"const DATA = (.*?);\n", html)
    assert match, "graph data not embedded"
    return json.loads(match.group(1))


class TestVisualize:
    @pytest.fixture
    def session(self, org_records):
        return GraphSession(org_records)

    def test_generate_html_structure(self, session):
        html = generate_html(session)

        assert "<!DOCTYPE html>" in html
        assert "d3.v7.min.js" in html
        assert "__GRAPH_DATA__" not in html

    def test_force_layout_and_interaction(self, session):
        html = generate_html(session)

        assert "d3.forceSimulation" in html
        assert "d3.forceLink" in html
        assert "d3.forceManyBody" in html
        assert "d3.forceCenter" in html
        assert "d3.drag()" in html
        assert "edgeTooltipHTML" in html
        assert 'type="color"' in html

    def test_filter_panel_labels_applied_selection(self, session):
        html = generate_html(session)

        assert "Active Filters" in html
        assert "kglight graph -l / -c / --org-level1 / --org-level2" in html

    def test_payload_reflects_filtered_view(self, session):
        session.apply(FilterSelection(lifecycle={"Active"}))
        data = _embedded_data(generate_html(session))

        assert [n["id"] for n in data["nodes"]] == ["Billing", "Ledger", "CRM"]
        assert [(e["source"], e["target"]) for e in data["edges"]] == [
            ("Billing", "Ledger"), ("CRM", "Billing"),
        ]
        assert data["selection"]["lifecycle"] == ["Active"]
        # Options still come from the full inventory
        assert data["options"]["lifecycle"] == ["Active", "Deprecated", "Pilot"]

    def test_nodes_carry_degree(self, session):
        payload = build_payload(session)
        billing = next(n for n in payload["nodes"] if n["id"] == "Billing")
        assert billing["in_degree"] == 1
        assert billing["out_degree"] == 1

    def test_edge_capability_is_raw(self, session):
        payload = build_payload(session)
        assert payload["edges"][0]["capability"] == '["Invoicing", "Payments"]'

    def test_colors_include_overrides_and_neutral(self, session):
        session.set_color("REST-API", "#010203")
        payload = build_payload(session)
        assert payload["colors"]["REST-API"] == "#010203"
        assert payload["colors"]["SMTP"] == payload["neutral"]

    def test_script_tag_is_escaped(self, record_factory):
        session = GraphSession([record_factory("</script><b>", "B")])
        html = generate_html(session)
        assert "</script><b>" not in html
        data = _embedded_data(html)
        assert data["nodes"][0]["id"] == "</script><b>"

    def test_empty_view(self, session):
        session.apply(FilterSelection(lifecycle={"Nope"}))
        data = _embedded_data(generate_html(session))
        assert data["nodes"] == []
        assert data["edges"] == []


class TestWriteVisualization:
    def test_writes_file(self, org_records, tmp_path):
        out = write_visualization(GraphSession(org_records), tmp_path / "out" / "graph.html")
        assert out.exists()
        assert "d3.forceSimulation" in out.read_text(encoding="utf-8")

    def test_open_browser(self, org_records, tmp_path):
        with patch("kglight.graph.visualize.webbrowser.open") as mock_open:
            out = write_visualization(GraphSession(org_records), tmp_path / "graph.html", open_browser=True)
        mock_open.assert_called_once_with(out.resolve().as_uri())
