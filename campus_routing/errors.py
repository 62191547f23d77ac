"""
Exceptions raised by the routing engines.

Unreachable targets are not errors: engines report them as an empty route or
an infinite distance.
"""


class RoutingError(Exception):
    """Base exception for route computation failures."""


class NotComputedError(RoutingError, RuntimeError):
    """Raised when an engine is queried before its computation has run."""
