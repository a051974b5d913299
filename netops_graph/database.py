# /netops_graph/database.py

from abc import ABC, abstractmethod
from typing import Any, Callable

from neo4j import GraphDatabase
from neo4j.exceptions import DriverError, Neo4jError

from netops_graph.config import settings
from netops_graph.errors import ConnectivityError
from netops_graph.logger import get_logger

logger = get_logger(__name__)


class GraphDBInterface(ABC):
    """
    An abstract base class defining the standard interface for interacting with a graph database.
    Each call runs `work(tx, **params)` inside exactly one transaction on a session that is
    released before the call returns.
    """
    @abstractmethod
    def execute_read(self, work: Callable[..., Any], **params) -> Any:
        pass

    @abstractmethod
    def execute_write(self, work: Callable[..., Any], **params) -> Any:
        pass

    @abstractmethod
    def verify_connectivity(self) -> bool:
        pass

    @abstractmethod
    def close(self):
        pass


class Neo4jDatabase(GraphDBInterface):
    """Concrete implementation of the GraphDBInterface for Neo4j."""
    def __init__(self, uri: str = None, user: str = None, password: str = None, database: str = None):
        uri = uri or settings.NEO4J_URI
        user = user or settings.NEO4J_USERNAME
        password = password or settings.NEO4J_PASSWORD
        if not all([uri, user, password]):
            raise ValueError("Neo4j credentials not found in settings or .env file.")
        self._driver = GraphDatabase.driver(
            uri,
            auth=(user, password),
            max_connection_pool_size=settings.NEO4J_MAX_CONNECTION_POOL_SIZE,
            connection_timeout=settings.NEO4J_CONNECTION_TIMEOUT,
        )
        self._database = database or settings.NEO4J_DATABASE

    def execute_read(self, work: Callable[..., Any], **params) -> Any:
        """Runs `work` in a managed read transaction so the driver can route it to a reader."""
        try:
            with self._driver.session(database=self._database) as session:
                return session.execute_read(work, **params)
        except (DriverError, Neo4jError) as e:
            logger.warning(f"Read transaction failed: {e}")
            raise ConnectivityError(f"Graph store read failed: {e}") from e

    def execute_write(self, work: Callable[..., Any], **params) -> Any:
        """Runs `work` in a managed write transaction."""
        try:
            with self._driver.session(database=self._database) as session:
                return session.execute_write(work, **params)
        except (DriverError, Neo4jError) as e:
            logger.warning(f"Write transaction failed: {e}")
            raise ConnectivityError(f"Graph store write failed: {e}") from e

    def verify_connectivity(self) -> bool:
        try:
            self._driver.verify_connectivity()
        except (DriverError, Neo4jError) as e:
            logger.error(f"Neo4j connection failed: {e}")
            return False
        logger.info("Neo4j connection succeeded.")
        return True

    def close(self):
        self._driver.close()
