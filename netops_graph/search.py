# /netops_graph/search.py

from typing import List

from netops_graph.config import settings
from netops_graph.database import GraphDBInterface
from netops_graph.errors import ValidationError
from netops_graph.logger import get_logger
from netops_graph.models import Entity, Ontology
from netops_graph.ontology import get_default_ontology
from netops_graph.records import node_to_entity

logger = get_logger(__name__)

SEARCH_QUERY = """
MATCH (n)
WHERE n.name CONTAINS $keyword OR n.description CONTAINS $keyword
RETURN n
LIMIT $limit
"""


def _search_nodes(tx, keyword: str, limit: int):
    return [record["n"] for record in tx.run(SEARCH_QUERY, keyword=keyword, limit=limit)]


class SearchIndex:
    """Case-sensitive substring lookup over entity names and descriptions."""
    def __init__(self, db_client: GraphDBInterface, ontology: Ontology = None, limit: int = None):
        self.db_client = db_client
        self.ontology = ontology or get_default_ontology()
        self.limit = limit or settings.SEARCH_RESULT_LIMIT

    def search_entities(self, keyword: str) -> List[Entity]:
        if keyword is not None and not isinstance(keyword, str):
            raise ValidationError(f"Search keyword must be a string, got {type(keyword).__name__}.")
        # A blank keyword would match every node; it matches nothing instead.
        if not keyword or not keyword.strip():
            return []

        nodes = self.db_client.execute_read(_search_nodes, keyword=keyword, limit=self.limit)
        logger.info(f"Search for '{keyword}' matched {len(nodes)} entit(ies)")
        return [node_to_entity(node, self.ontology) for node in nodes]
