"""Exceptions raised by treeiter.

Traversal itself has no recoverable errors: an engine either has more
nodes or it is exhausted. Everything here signals misuse of the API and
is raised immediately, before any engine state is touched.
"""


class TreeIterError(Exception):
    """Base class for all treeiter errors."""
    pass


class InvalidOrderError(TreeIterError, ValueError):
    """Raised when a traversal order cannot be resolved."""
    pass


class ConfigurationError(TreeIterError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass


class NodeCapabilityError(TreeIterError, TypeError):
    """Raised when a node does not expose the children access an adapter needs."""
    pass


class CursorError(TreeIterError, RuntimeError):
    """Base class for mutable cursor misuse."""
    pass


class CursorActiveError(CursorError):
    """Raised when a second cursor is requested while one is still live."""
    pass


class CursorReleasedError(CursorError):
    """Raised when a cursor is used or released after it was released."""
    pass
