# /netops_graph/errors.py


class GraphLayerError(Exception):
    """Base class for every failure raised by the graph knowledge layer."""


class ValidationError(GraphLayerError):
    """Input rejected before any store call (bad label, missing name, bad depth, CAUSED_BY cycle)."""


class NotFoundError(GraphLayerError):
    """A write referenced an entity id that does not exist in the store."""

    def __init__(self, message: str, missing_ids=None):
        super().__init__(message)
        self.missing_ids = list(missing_ids or [])


class ConnectivityError(GraphLayerError):
    """The graph store was unreachable or the transaction failed."""
