"""
Graph Session - explicit context for one loaded inventory.

Holds everything the presentation layer needs between redraws: the
read-only record set, the option menus derived once at load, the color
assignment and the current selection. Every update rebuilds the view from
the full record set.
"""

import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence, Union

from .colors import ColorAssignment
from .filters import filter_records
from .graph import IntegrationGraph
from .loader import load_inventory
from .normalize import normalize
from .options import derive_filter_options
from .types import FilterDimension, FilterOptions, FilterSelection, GraphView, InventoryRecord

logger = logging.getLogger(__name__)


class GraphSession:
    """
    One inventory, one user session.

    Example:
        session = GraphSession.from_csv("inventory.csv")
        view = session.update_selection(FilterDimension.LIFECYCLE, {"Active"})
        session.set_color("Batch", "#ff8800")
    """

    def __init__(
        self,
        records: Sequence[InventoryRecord],
        colors: Optional[ColorAssignment] = None,
    ):
        self._records = tuple(records)
        self.options: FilterOptions = derive_filter_options(self._records)
        self.colors = colors or ColorAssignment()
        self.selection = FilterSelection()
        self.view: GraphView = self._build(self.selection)

    @classmethod
    def from_csv(
        cls,
        path: Union[str, Path],
        color_overrides: Optional[Mapping[str, str]] = None,
    ) -> "GraphSession":
        """Load an inventory file and open a session on it."""
        return cls(load_inventory(path), colors=ColorAssignment(color_overrides))

    @property
    def records(self) -> tuple:
        return self._records

    def _build(self, selection: FilterSelection) -> GraphView:
        filtered = filter_records(self._records, selection)
        nodes, edges = normalize(filtered)
        return GraphView(selection=selection, records=filtered, nodes=nodes, edges=edges)

    def apply(self, selection: FilterSelection) -> GraphView:
        """Replace the whole selection and rebuild the view."""
        self.selection = selection
        self.view = self._build(selection)
        logger.debug(
            "Applied selection %s: %d nodes, %d edges",
            selection.to_dict(), self.view.node_count, self.view.edge_count,
        )
        return self.view

    def update_selection(self, dimension: FilterDimension, values: Iterable[str]) -> GraphView:
        """Replace the selection of a single dimension and rebuild the view."""
        return self.apply(self.selection.with_values(dimension, values))

    def clear_filters(self) -> GraphView:
        return self.apply(FilterSelection())

    def set_color(self, integration_type: str, color: str) -> None:
        """Override the color of one integration type; read on the next redraw."""
        self.colors.set(integration_type, color)

    def reset(self) -> GraphView:
        """Drop all filters and color overrides."""
        self.colors.reset()
        return self.clear_filters()

    def graph(self) -> IntegrationGraph:
        """Analysis graph over the current view."""
        return IntegrationGraph(self.view.nodes, self.view.edges)

    def edge_colors(self) -> dict:
        """Colors for every integration type in the full inventory."""
        types = sorted({r.integration_type for r in self._records if r.integration_type})
        return self.colors.for_types(types)
