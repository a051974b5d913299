# /netops_graph/traversal.py

from typing import List

from netops_graph.config import settings
from netops_graph.database import GraphDBInterface
from netops_graph.errors import ValidationError
from netops_graph.logger import get_logger
from netops_graph.models import Ontology, PathSegment
from netops_graph.ontology import CAUSED_BY, FAULT_LABEL, get_default_ontology, validate_depth
from netops_graph.records import path_to_segments

logger = get_logger(__name__)


def _collect_paths(tx, query: str, **params):
    return [(record["path"], record.get("truncated", False)) for record in tx.run(query, **params)]


class TraversalEngine:
    """
    Issues the two path-shaped queries of the layer. Both return raw paths, one list of
    segments per path in store order; deduplication is left to the path merger.
    """
    def __init__(self, db_client: GraphDBInterface, ontology: Ontology = None,
                 default_depth: int = None, max_depth: int = None, max_fault_hops: int = None):
        self.db_client = db_client
        self.ontology = ontology or get_default_ontology()
        self.default_depth = default_depth or settings.DEFAULT_TRAVERSAL_DEPTH
        self.max_depth = max_depth or settings.MAX_TRAVERSAL_DEPTH
        self.max_fault_hops = max_fault_hops or settings.FAULT_CHAIN_MAX_HOPS

    def related_paths(self, entity_id: str, depth: int = None) -> List[List[PathSegment]]:
        """Every path of 1..depth hops from `entity_id`, any relation type, direction ignored."""
        _check_entity_id(entity_id)
        depth = validate_depth(self.default_depth if depth is None else depth, self.max_depth)

        # depth is a validated int; Cypher does not accept parameters as pattern bounds
        query = f"""
        MATCH path = (n)-[*1..{depth}]-(related)
        WHERE elementId(n) = $entity_id
        RETURN path
        """
        rows = self.db_client.execute_read(_collect_paths, query=query, entity_id=entity_id)
        logger.info(f"Neighborhood of {entity_id} at depth {depth}: {len(rows)} path(s)")
        return [path_to_segments(path, self.ontology) for path, _ in rows]

    def fault_paths(self, fault_id: str) -> List[List[PathSegment]]:
        """
        Every CAUSED_BY chain from the fault to a root cause, i.e. a node with no outgoing
        CAUSED_BY edge. Chains longer than `max_fault_hops` are cut at the bound and logged.
        """
        _check_entity_id(fault_id)
        hops = self.max_fault_hops
        query = f"""
        MATCH path = (fault:`{FAULT_LABEL}`)-[:`{CAUSED_BY}`*1..{hops}]->(cause)
        WHERE elementId(fault) = $fault_id
        WITH path, cause, EXISTS {{ MATCH (cause)-[:`{CAUSED_BY}`]->() }} AS has_next
        WHERE NOT has_next OR length(path) = {hops}
        RETURN path, has_next AS truncated
        """
        rows = self.db_client.execute_read(_collect_paths, query=query, fault_id=fault_id)
        truncated = sum(1 for _, cut in rows if cut)
        if truncated:
            logger.warning(f"Fault chain from {fault_id} truncated at {hops} hops on {truncated} path(s)")
        logger.info(f"Fault analysis of {fault_id}: {len(rows)} path(s)")
        return [path_to_segments(path, self.ontology) for path, _ in rows]


def _check_entity_id(entity_id):
    if not isinstance(entity_id, str) or not entity_id:
        raise ValidationError(f"Entity id must be a non-empty string, got {entity_id!r}.")
