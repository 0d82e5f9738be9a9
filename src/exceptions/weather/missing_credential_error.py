from src.exceptions.weather.weather_service_error import WeatherServiceError


class MissingCredentialError(WeatherServiceError):
    """Exception for a weather request attempted without an API key."""

    pass
