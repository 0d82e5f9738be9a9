from src.exceptions.base import QueryAgentError
from src.exceptions.cli import UsageError
from src.exceptions.llm import (
    EmptyGenerationError,
    InvalidPromptError,
    LLMServiceError,
    ModelUnavailableError,
)
from src.exceptions.weather import (
    MalformedWeatherResponseError,
    MissingCredentialError,
    WeatherAPIError,
    WeatherServiceError,
)

__all__ = [
    "EmptyGenerationError",
    "InvalidPromptError",
    "LLMServiceError",
    "MalformedWeatherResponseError",
    "MissingCredentialError",
    "ModelUnavailableError",
    "QueryAgentError",
    "UsageError",
    "WeatherAPIError",
    "WeatherServiceError",
]
