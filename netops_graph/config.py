from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    """
    Centralized settings for the graph knowledge layer. Pydantic's BaseSettings will
    automatically load these from environment variables or a .env file.
    """
    # --- Neo4j Connection ---
    NEO4J_URI: str = Field("neo4j://localhost:7687", description="Bolt/neo4j URI of the graph store.")
    NEO4J_USERNAME: str = Field("neo4j", description="Username for the graph store.")
    NEO4J_PASSWORD: str = Field("neo4j", description="Password for the graph store.")
    NEO4J_DATABASE: Optional[str] = Field(None, description="Target database name; None uses the server default.")
    NEO4J_MAX_CONNECTION_POOL_SIZE: int = Field(50, description="Upper bound on pooled driver connections.")
    NEO4J_CONNECTION_TIMEOUT: float = Field(30.0, description="Seconds to wait when opening a connection.")

    # --- Traversal Parameters ---
    DEFAULT_TRAVERSAL_DEPTH: int = Field(2, description="Hop count used when a neighborhood query gives no depth.")
    MAX_TRAVERSAL_DEPTH: int = Field(5, description="Largest hop count a neighborhood query may request.")
    FAULT_CHAIN_MAX_HOPS: int = Field(10, description="Longest CAUSED_BY chain followed by fault path analysis.")
    SEARCH_RESULT_LIMIT: int = Field(20, description="Maximum number of entities returned by a search.")

    # --- Ontology Registry ---
    ALLOWED_LABELS: List[str] = Field(
        default=["Device", "Fault", "RootCause", "Solution", "Expert", "Alarm", "Log"],
        description="Node labels that may be interpolated into Cypher.",
    )
    ALLOWED_RELATION_TYPES: List[str] = Field(
        default=["CAUSED_BY", "SOLVED_BY", "CONTAINS", "CONNECTED_TO", "TRIGGERS", "HANDLED_BY", "RELATED_TO"],
        description="Relationship types that may be interpolated into Cypher.",
    )

    # --- Service ---
    LOG_LEVEL: str = Field("INFO", description="Level for the JSON loggers.")
    CORS_ORIGINS: List[str] = Field(default=["http://localhost", "http://localhost:3000"])

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

settings = Settings()
