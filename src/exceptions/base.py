class QueryAgentError(Exception):
    """Base exception for all weather query agent errors."""

    pass
