from src.exceptions.base import QueryAgentError


class UsageError(QueryAgentError):
    """Exception for command line invocations without a query."""

    pass
