"""
Error taxonomy for the weighted graph.

Every error is a contract violation by the caller; nothing here is retried
or recovered internally.
"""


class GraphError(ValueError):
    """Base class for graph contract violations."""


class DuplicateVertexError(GraphError):
    """add_vertex was called with a vertex already in the graph."""


class UnknownVertexError(GraphError):
    """An operation referenced a vertex that was never added."""


class InvalidWeightError(GraphError):
    """An edge weight was not a strictly positive integer."""


class PathNotFoundError(GraphError):
    """Dijkstra finished every vertex but end has no path from start."""
