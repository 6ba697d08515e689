from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class NodeOut(BaseModel):
    id: str
    label: str
    group: int
    color: str
    shape: str
    size: float

class EdgeOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    label: str = ""
    arrows: str = "to"

class GraphOut(BaseModel):
    nodes: List[NodeOut]
    edges: List[EdgeOut]

class CapabilityRow(BaseModel):
    name: str
    category: str
    definition: Optional[str] = None
    degree_centrality: int
    closeness_centrality: float

class CapabilityPage(BaseModel):
    rows: List[CapabilityRow]
    page: int
    page_size: int
    total: int
    pages: int
