from src.exceptions.llm.llm_service_error import LLMServiceError


class ModelUnavailableError(LLMServiceError):
    """Exception for an unreachable or failing generation endpoint."""

    pass
