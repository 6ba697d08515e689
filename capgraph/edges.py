from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .records import RelationshipRecord


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    label: str = ""


def normalize_label(relation: str) -> str:
    return (relation or "").replace(" ", "_")


def derive_edges(records: Iterable[RelationshipRecord]) -> List[Edge]:
    """One directed edge per record, c_name -> sub_name. Parallel edges are kept."""
    return [
        Edge(source=rec.c_name, target=rec.sub_name, label=normalize_label(rec.relation))
        for rec in records
    ]
