from functools import lru_cache

from fastapi import Depends

from corpus.service import CorpusService
from netops_graph.database import GraphDBInterface, Neo4jDatabase
from netops_graph.service import KnowledgeGraphService


@lru_cache
def get_database() -> GraphDBInterface:
    """One driver (and connection pool) per process."""
    return Neo4jDatabase()


def get_graph_service(db_client: GraphDBInterface = Depends(get_database)) -> KnowledgeGraphService:
    return KnowledgeGraphService(db_client)


@lru_cache
def get_corpus_service() -> CorpusService:
    return CorpusService()


def close_database():
    if get_database.cache_info().currsize:
        get_database().close()
        get_database.cache_clear()
