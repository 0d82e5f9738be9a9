from src.exceptions.weather.weather_service_error import WeatherServiceError


class MalformedWeatherResponseError(WeatherServiceError):
    """Exception for successful weather responses missing required fields."""

    pass
