from src.exceptions.llm.llm_service_error import LLMServiceError


class InvalidPromptError(LLMServiceError):
    """Exception for a generation requested with an empty prompt."""

    pass
