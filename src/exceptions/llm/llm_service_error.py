from src.exceptions.base import QueryAgentError


class LLMServiceError(QueryAgentError):
    """Base exception for language model service errors."""

    pass
