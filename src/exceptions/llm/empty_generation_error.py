from src.exceptions.llm.llm_service_error import LLMServiceError


class EmptyGenerationError(LLMServiceError):
    """Exception for a successful generation response that carries no text."""

    pass
