"""
Query errors — one exception per ErrorKind.

Raised by the geocoding and weather abilities, caught only by the
orchestrator, which turns them into a Failure state.
"""

from models import ErrorKind


class QueryError(Exception):
    """Base error for a failed query cycle."""

    kind: ErrorKind = ErrorKind.NETWORK_ERROR


class EmptyInputError(QueryError):
    kind = ErrorKind.EMPTY_INPUT


class NotFoundError(QueryError):
    kind = ErrorKind.NOT_FOUND


class NetworkError(QueryError):
    kind = ErrorKind.NETWORK_ERROR
