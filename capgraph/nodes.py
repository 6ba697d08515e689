from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .records import RelationshipRecord

OTHER_CATEGORY = "Other"


@dataclass(frozen=True)
class Node:
    id: str
    category: str = OTHER_CATEGORY
    definition: Optional[str] = None
    group: int = 0
    color: str = ""
    shape: str = ""
    degree_centrality: int = 0
    closeness_centrality: float = 0.0
    size: float = 5.0


def _candidates(records: Iterable[RelationshipRecord]) -> Iterable[Tuple[str, Optional[str], Optional[str]]]:
    for rec in records:
        yield rec.c_name, rec.category, rec.definition
        yield rec.sub_name, None, None


def derive_nodes(records: Iterable[RelationshipRecord]) -> List[Node]:
    """
    One node per distinct name, in first-seen order.
    The first candidate for a name decides its category/definition:
    a capability met first as a sub_name keeps blank attributes even if a
    later row lists it as c_name.
    """
    first_seen: Dict[str, Node] = {}
    for name, category, definition in _candidates(records):
        if name in first_seen:
            continue
        first_seen[name] = Node(
            id=name,
            category=category or OTHER_CATEGORY,
            definition=definition,
        )
    return list(first_seen.values())
