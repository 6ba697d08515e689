from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List

from ..nodes import Node

# ColorBrewer "Set1"
COLOR_PALETTE = [
    "#E41A1C", "#377EB8", "#4DAF4A", "#984EA3", "#FF7F00",
    "#FFFF33", "#A65628", "#F781BF", "#999999"
]

# plotly marker symbols
NODE_SHAPES = [
    "circle", "square", "diamond", "triangle-up", "star",
    "hexagon", "triangle-down", "pentagon", "cross"
]


@dataclass(frozen=True)
class CategoryStyle:
    category: str
    group: int
    color: str
    shape: str


def distinct_categories(nodes: Iterable[Node]) -> List[str]:
    return list(dict.fromkeys(n.category for n in nodes))


def build_category_styles(categories: Iterable[str]) -> Dict[str, CategoryStyle]:
    """
    Map each category to a 1-based group (first-seen order) plus a colour and
    marker symbol, both cycling through their fixed lists.
    """
    styles: Dict[str, CategoryStyle] = {}
    for category in categories:
        if category in styles:
            continue
        group = len(styles) + 1
        styles[category] = CategoryStyle(
            category=category,
            group=group,
            color=COLOR_PALETTE[(group - 1) % len(COLOR_PALETTE)],
            shape=NODE_SHAPES[(group - 1) % len(NODE_SHAPES)],
        )
    return styles


def apply_styles(nodes: Iterable[Node], styles: Dict[str, CategoryStyle]) -> List[Node]:
    styled: List[Node] = []
    for node in nodes:
        style = styles[node.category]
        styled.append(replace(node, group=style.group, color=style.color, shape=style.shape))
    return styled
