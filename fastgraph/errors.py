"""Exception hierarchy for graph construction and queries.

Every error raised by fastgraph reflects a caller logic error (wrong id width,
wrong arguments) rather than a transient condition, so none of them is retried
internally. Each class also derives from the closest builtin category so code
that already catches ``ValueError`` or ``NotImplementedError`` keeps working.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all fastgraph errors."""


class InvalidArgumentError(GraphError, ValueError):
    """An argument does not satisfy an operation's precondition.

    Raised, for example, by ``opposite(u, e)`` when ``u`` is not an endpoint
    of ``e``.
    """


class UnsupportedError(GraphError, NotImplementedError):
    """The graph kind does not define the requested operation.

    Raised by ``reverse(e)`` on directed graphs.
    """


class CapacityExceededError(GraphError, ValueError):
    """A vertex or edge count does not fit the chosen identifier width."""
