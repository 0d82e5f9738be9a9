from src.exceptions.llm.empty_generation_error import EmptyGenerationError
from src.exceptions.llm.invalid_prompt_error import InvalidPromptError
from src.exceptions.llm.llm_service_error import LLMServiceError
from src.exceptions.llm.model_unavailable_error import ModelUnavailableError

__all__ = [
    "EmptyGenerationError",
    "InvalidPromptError",
    "LLMServiceError",
    "ModelUnavailableError",
]
