from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from api.dependencies import get_graph_service
from netops_graph.models import Entity, GraphData, Ontology, Relation
from netops_graph.service import KnowledgeGraphService

router = APIRouter(
    prefix="/graph",
    tags=["Knowledge Graph"]
)

# --- Pydantic Models ---
class EntityCreateRequest(BaseModel):
    label: str = Field(description="The entity category, e.g. Device, Fault or Solution.")
    type: str = ""
    properties: Dict[str, Any] = Field(description="Entity fields; must include 'name'.")

class RelationCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(description="The relation kind, e.g. CAUSED_BY.")
    start_node: str = Field(alias="startNode")
    end_node: str = Field(alias="endNode")
    properties: Dict[str, Any] = Field(default_factory=dict)


# --- API Endpoints ---

@router.post("/entities", response_model=Entity, status_code=201)
def create_entity(request: EntityCreateRequest, service: KnowledgeGraphService = Depends(get_graph_service)):
    """Persists a new entity and returns it with its store-assigned id."""
    entity = Entity(label=request.label, type=request.type, properties=request.properties)
    return service.create_entity(entity)


@router.post("/relations", response_model=Relation, status_code=201)
def create_relation(request: RelationCreateRequest, service: KnowledgeGraphService = Depends(get_graph_service)):
    """Links two existing entities. Unknown endpoints give a 404 and nothing is written."""
    relation = Relation(
        type=request.type,
        start_node=request.start_node,
        end_node=request.end_node,
        properties=request.properties,
    )
    return service.create_relation(relation)


@router.get("/entities/{entity_id}/related", response_model=GraphData)
def query_related_entities(
    entity_id: str,
    depth: Optional[int] = Query(None, description="Maximum hop count; defaults to the configured depth."),
    service: KnowledgeGraphService = Depends(get_graph_service),
):
    return service.query_related_entities(entity_id, depth)


@router.get("/faults/{fault_id}/path", response_model=GraphData)
def analyze_fault_path(fault_id: str, service: KnowledgeGraphService = Depends(get_graph_service)):
    """Returns the CAUSED_BY chains from a fault to its root causes."""
    return service.analyze_fault_path(fault_id)


@router.get("/search", response_model=List[Entity])
def search_entities(keyword: str = Query(""), service: KnowledgeGraphService = Depends(get_graph_service)):
    return service.search_entities(keyword)


@router.get("/ontology", response_model=Ontology)
def get_ontology(service: KnowledgeGraphService = Depends(get_graph_service)):
    """Lists the labels and relation types the graph accepts."""
    return service.ontology
