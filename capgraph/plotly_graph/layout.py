from __future__ import annotations
from typing import Dict, Tuple

import networkx as nx


def graph_layout(
    g: nx.MultiDiGraph,
    seed: int = 42,
    scale: float = 1.0,
) -> Dict[str, Tuple[float, float]]:
    """
    Deterministic force-directed positions.
    - Same seed and graph give the same layout.
    - Arc direction and multiplicity are ignored for placement.
    """
    if g.number_of_nodes() == 0:
        return {}
    if g.number_of_nodes() == 1:
        only = next(iter(g.nodes))
        return {only: (0.0, 0.0)}

    simple = nx.Graph(g.to_undirected(as_view=True))
    k = 1.5 / (simple.number_of_nodes() ** 0.5)
    pos = nx.spring_layout(simple, seed=seed, k=k, scale=scale)
    return {node: (float(xy[0]), float(xy[1])) for node, xy in pos.items()}
