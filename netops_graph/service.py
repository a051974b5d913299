# /netops_graph/service.py

from typing import List

from netops_graph.database import GraphDBInterface
from netops_graph.models import Entity, GraphData, Ontology, Relation
from netops_graph.ontology import get_default_ontology
from netops_graph.path_merger import merge_paths
from netops_graph.search import SearchIndex
from netops_graph.store import EntityStore, RelationStore
from netops_graph.traversal import TraversalEngine


class KnowledgeGraphService:
    """
    The operation set of the graph knowledge layer. Traversal results always pass through
    the path merger before they are returned.
    """
    def __init__(self, db_client: GraphDBInterface, ontology: Ontology = None):
        self.db_client = db_client
        self.ontology = ontology or get_default_ontology()
        self.entities = EntityStore(db_client, self.ontology)
        self.relations = RelationStore(db_client, self.ontology)
        self.traversal = TraversalEngine(db_client, self.ontology)
        self.search = SearchIndex(db_client, self.ontology)

    def create_entity(self, entity: Entity) -> Entity:
        return self.entities.create_entity(entity)

    def create_relation(self, relation: Relation) -> Relation:
        return self.relations.create_relation(relation)

    def query_related_entities(self, entity_id: str, depth: int = None) -> GraphData:
        return merge_paths(self.traversal.related_paths(entity_id, depth))

    def analyze_fault_path(self, fault_id: str) -> GraphData:
        return merge_paths(self.traversal.fault_paths(fault_id))

    def search_entities(self, keyword: str) -> List[Entity]:
        return self.search.search_entities(keyword)

    def verify_connectivity(self) -> bool:
        return self.db_client.verify_connectivity()
