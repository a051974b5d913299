# /netops_graph/store.py

import datetime
from typing import Any, Dict

from netops_graph.database import GraphDBInterface
from netops_graph.errors import ConnectivityError, NotFoundError, ValidationError
from netops_graph.logger import get_logger
from netops_graph.models import Entity, Ontology, Relation
from netops_graph.ontology import CAUSED_BY, get_default_ontology, validate_label, validate_relation_type
from netops_graph.records import node_to_entity

logger = get_logger(__name__)

RESERVED_ENTITY_PROPERTIES = ("type",)

RESOLVE_ENDPOINTS_QUERY = """
MATCH (n) WHERE elementId(n) IN $ids
RETURN elementId(n) AS id
"""

CAUSED_BY_REACHES_QUERY = """
MATCH (end) WHERE elementId(end) = $end_id
MATCH (start) WHERE elementId(start) = $start_id
RETURN EXISTS { MATCH (end)-[:CAUSED_BY*]->(start) } AS reaches
"""


def _utc_now() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def _is_storable(value) -> bool:
    if value is None or isinstance(value, (str, int, float, bool)):
        return True
    if isinstance(value, (list, tuple)):
        return all(isinstance(item, (str, int, float, bool)) for item in value)
    return False


def _check_properties(properties: Dict[str, Any], owner: str):
    for key, value in properties.items():
        if not isinstance(key, str) or not key:
            raise ValidationError(f"{owner} property names must be non-empty strings, got {key!r}.")
        if not _is_storable(value):
            raise ValidationError(
                f"{owner} property '{key}' has unsupported value type {type(value).__name__}."
            )


def _create_node(tx, query: str, props: Dict[str, Any], entity_type: str):
    record = tx.run(query, props=props, entity_type=entity_type).single()
    return record["n"] if record else None


def _create_edge(tx, query: str, start_id: str, end_id: str, props: Dict[str, Any], check_cycle: bool):
    found = {record["id"] for record in tx.run(RESOLVE_ENDPOINTS_QUERY, ids=[start_id, end_id])}
    missing = [node_id for node_id in dict.fromkeys([start_id, end_id]) if node_id not in found]
    if missing:
        raise NotFoundError(f"Entity not found: {', '.join(missing)}", missing_ids=missing)

    if check_cycle:
        if start_id == end_id:
            raise ValidationError(f"A CAUSED_BY relation from '{start_id}' to itself would form a cycle.")
        reaches = tx.run(CAUSED_BY_REACHES_QUERY, start_id=start_id, end_id=end_id).single()
        if reaches and reaches["reaches"]:
            raise ValidationError(
                f"A CAUSED_BY relation from '{start_id}' to '{end_id}' would close a CAUSED_BY cycle."
            )

    record = tx.run(query, start_id=start_id, end_id=end_id, props=props).single()
    if record is None:
        return None
    return record["r"], record["start"], record["end"]


class EntityStore:
    """Persists typed entities (nodes) in the graph store."""
    def __init__(self, db_client: GraphDBInterface, ontology: Ontology = None):
        self.db_client = db_client
        self.ontology = ontology or get_default_ontology()

    def create_entity(self, entity: Entity) -> Entity:
        """
        Writes one node under the entity's label and returns it with its store-assigned id.

        `createdAt` is kept when the caller already supplied it, `updatedAt` is always refreshed.
        The label is validated against the ontology before it is placed in the query text.
        """
        label = validate_label(entity.label, self.ontology)
        name = entity.properties.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Entity property 'name' is required and must be a non-empty string.")
        for key in RESERVED_ENTITY_PROPERTIES:
            if key in entity.properties:
                raise ValidationError(f"Entity property '{key}' is reserved; use the entity's '{key}' field.")
        _check_properties(entity.properties, "Entity")

        properties = dict(entity.properties)
        now = _utc_now()
        if not properties.get("createdAt"):
            properties["createdAt"] = now
        properties["updatedAt"] = now

        query = f"CREATE (n:`{label}` $props) SET n.type = $entity_type RETURN n"
        node = self.db_client.execute_write(
            _create_node, query=query, props=properties, entity_type=entity.type
        )
        if node is None:
            raise ConnectivityError(f"Graph store returned no node after creating a '{label}' entity.")

        created = node_to_entity(node, self.ontology)
        logger.info(f"Created {label} entity '{name}' with id {created.id}")
        return created


class RelationStore:
    """Persists typed, directed relations between two existing entities."""
    def __init__(self, db_client: GraphDBInterface, ontology: Ontology = None):
        self.db_client = db_client
        self.ontology = ontology or get_default_ontology()

    def create_relation(self, relation: Relation) -> Relation:
        relation_type = validate_relation_type(relation.type, self.ontology)
        weight = relation.properties.get("weight")
        if weight is not None and (isinstance(weight, bool) or not isinstance(weight, (int, float))):
            raise ValidationError(f"Relation weight must be numeric, got {weight!r}.")
        _check_properties(relation.properties, "Relation")

        properties = dict(relation.properties)
        if not properties.get("timestamp"):
            properties["timestamp"] = _utc_now()

        query = f"""
        MATCH (start) WHERE elementId(start) = $start_id
        MATCH (end) WHERE elementId(end) = $end_id
        CREATE (start)-[r:`{relation_type}` $props]->(end)
        RETURN r, start, end
        """
        result = self.db_client.execute_write(
            _create_edge,
            query=query,
            start_id=relation.start_node,
            end_id=relation.end_node,
            props=properties,
            check_cycle=relation_type == CAUSED_BY,
        )
        if result is None:
            raise ConnectivityError(f"Graph store returned no relationship after creating a {relation_type} relation.")

        rel, start, end = result
        created = Relation(
            id=rel.element_id,
            type=rel.type,
            start_node=start.element_id,
            end_node=end.element_id,
            properties=dict(rel.items()),
        )
        logger.info(f"Created {relation_type} relation {created.start_node} -> {created.end_node} with id {created.id}")
        return created
