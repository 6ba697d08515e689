"""Directed capability graph, centrality scores and node sizing."""
from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Dict, Iterable, List, Tuple

import networkx as nx

from .edges import Edge
from .nodes import Node

logger = logging.getLogger(__name__)


def build_graph(nodes: Iterable[Node], edges: Iterable[Edge]) -> nx.MultiDiGraph:
    """Parallel arcs and self-loops are kept as separate arcs."""
    g = nx.MultiDiGraph()
    for n in nodes:
        g.add_node(n.id, category=n.category, group=n.group)
    for e in edges:
        g.add_edge(e.source, e.target, label=e.label)
    logger.info("Built capability graph: %d nodes, %d edges", g.number_of_nodes(), g.number_of_edges())
    return g


def _finite_or_zero(value) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def compute_centrality(g: nx.MultiDiGraph) -> Dict[str, Tuple[int, float]]:
    """
    node id -> (degree, closeness)

    degree counts every incident arc, in and out.
    closeness is the normalized (Wasserman-Faust) closeness over outgoing
    paths; networkx measures incoming distance on digraphs, hence the reverse.
    """
    if g.number_of_nodes() == 0:
        return {}

    degree = dict(g.degree())
    closeness = nx.closeness_centrality(g.reverse(copy=False), wf_improved=True)

    return {
        node_id: (int(degree.get(node_id, 0)), _finite_or_zero(closeness.get(node_id, 0.0)))
        for node_id in g.nodes
    }


def apply_centrality(nodes: Iterable[Node], g: nx.MultiDiGraph) -> List[Node]:
    scores = compute_centrality(g)
    out: List[Node] = []
    for n in nodes:
        deg, clo = scores.get(n.id, (0, 0.0))
        out.append(replace(n, degree_centrality=deg, closeness_centrality=clo))
    return out


def node_size(degree: int) -> float:
    return (degree + 1) * 5


def apply_sizes(nodes: Iterable[Node]) -> List[Node]:
    return [replace(n, size=node_size(n.degree_centrality)) for n in nodes]
