from src.exceptions.base import QueryAgentError


class WeatherServiceError(QueryAgentError):
    """Base exception for weather service errors."""

    pass
