"""Loads the relationship CSV and runs every shaping step in order."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union

import networkx as nx
import pandas as pd

from .edges import Edge, derive_edges
from .graph import apply_centrality, apply_sizes, build_graph
from .nodes import Node, derive_nodes
from .plotly_graph.colors import CategoryStyle, apply_styles, build_category_styles, distinct_categories
from .records import RelationshipRecord, read_relationship_file

logger = logging.getLogger(__name__)

NODE_COLUMNS = ["id", "label", "group", "color", "shape", "size"]
EDGE_COLUMNS = ["from", "to", "label", "arrows"]
CAPABILITY_COLUMNS = ["name", "category", "definition", "degree_centrality", "closeness_centrality"]


@dataclass(frozen=True)
class CapabilityReport:
    records: List[RelationshipRecord]
    nodes: List[Node]
    edges: List[Edge]
    styles: Dict[str, CategoryStyle]
    graph: nx.MultiDiGraph

    def node_table(self) -> pd.DataFrame:
        rows = [
            {"id": n.id, "label": n.id, "group": n.group, "color": n.color, "shape": n.shape, "size": n.size}
            for n in self.nodes
        ]
        return pd.DataFrame(rows, columns=NODE_COLUMNS)

    def edge_table(self) -> pd.DataFrame:
        rows = [{"from": e.source, "to": e.target, "label": e.label, "arrows": "to"} for e in self.edges]
        return pd.DataFrame(rows, columns=EDGE_COLUMNS)

    def capability_table(self) -> pd.DataFrame:
        rows = [
            {
                "name": n.id,
                "category": n.category,
                "definition": n.definition,
                "degree_centrality": n.degree_centrality,
                "closeness_centrality": n.closeness_centrality,
            }
            for n in self.nodes
        ]
        return pd.DataFrame(rows, columns=CAPABILITY_COLUMNS)


def build_report_from_records(records: List[RelationshipRecord]) -> CapabilityReport:
    nodes = derive_nodes(records)
    styles = build_category_styles(distinct_categories(nodes))
    nodes = apply_styles(nodes, styles)
    edges = derive_edges(records)

    g = build_graph(nodes, edges)
    nodes = apply_sizes(apply_centrality(nodes, g))

    logger.info("Report ready: %d capabilities in %d categories", len(nodes), len(styles))
    return CapabilityReport(records=records, nodes=nodes, edges=edges, styles=styles, graph=g)


def build_report(path: Union[str, Path]) -> CapabilityReport:
    """Raises LoadError if the CSV cannot be read."""
    return build_report_from_records(read_relationship_file(path))
