# /netops_graph/records.py
# Conversions from neo4j driver graph types to the layer's pydantic models.

from typing import List

from netops_graph.models import Entity, GraphEdge, Ontology, PathSegment
from netops_graph.ontology import primary_label


def node_to_entity(node, ontology: Ontology) -> Entity:
    properties = dict(node.items())
    entity_type = properties.pop("type", None) or ""
    return Entity(
        id=node.element_id,
        label=primary_label(node.labels, ontology),
        labels=sorted(node.labels),
        type=str(entity_type),
        properties=properties,
    )


def relationship_to_edge(relationship) -> GraphEdge:
    # Direction comes from the relationship itself, not from the order it was traversed in.
    return GraphEdge(
        id=relationship.element_id,
        type=relationship.type,
        source=relationship.start_node.element_id,
        target=relationship.end_node.element_id,
        properties=dict(relationship.items()),
    )


def path_to_segments(path, ontology: Ontology) -> List[PathSegment]:
    nodes = list(path.nodes)
    return [
        PathSegment(
            start=node_to_entity(nodes[index], ontology),
            relation=relationship_to_edge(relationship),
            end=node_to_entity(nodes[index + 1], ontology),
        )
        for index, relationship in enumerate(path.relationships)
    ]
