# /netops_graph/models.py

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

# Shared Pydantic data structures for entities, relations and graph views.

class Entity(BaseModel):
    id: Optional[str] = Field(default=None, description="Store-assigned element id; None until persisted.")
    label: str = Field(description="The category of the entity (e.g., Device, Fault, Solution).")
    labels: List[str] = Field(default_factory=list, description="The full label set as read back from the store.")
    type: str = Field(default="", description="A free-form secondary classification.")
    properties: Dict[str, Any] = Field(default_factory=dict, description="Entity fields; always includes 'name'.")

    @property
    def name(self) -> Optional[str]:
        return self.properties.get("name")


class Relation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, description="Store-assigned element id; None until persisted.")
    type: str = Field(description="The kind of relationship (e.g., CAUSED_BY, SOLVED_BY, CONTAINS).")
    start_node: str = Field(alias="startNode", description="The element id of the source entity.")
    end_node: str = Field(alias="endNode", description="The element id of the target entity.")
    properties: Dict[str, Any] = Field(default_factory=dict, description="Relation fields such as 'weight' and 'timestamp'.")


class GraphEdge(BaseModel):
    id: str
    type: str
    source: str
    target: str
    properties: Dict[str, Any] = Field(default_factory=dict)


class PathSegment(BaseModel):
    """One hop of a traversal path, in traversal order."""
    start: Entity
    relation: GraphEdge
    end: Entity


class GraphData(BaseModel):
    nodes: List[Entity] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_edge_endpoints(self):
        node_ids = {node.id for node in self.nodes}
        for edge in self.edges:
            if edge.source not in node_ids or edge.target not in node_ids:
                raise ValueError(
                    f"Edge '{edge.id}' references a node outside the graph ({edge.source} -> {edge.target})."
                )
        return self


class Ontology(BaseModel):
    node_types: List[str]
    edge_labels: List[str]
