from src.exceptions.weather.malformed_weather_response_error import MalformedWeatherResponseError
from src.exceptions.weather.missing_credential_error import MissingCredentialError
from src.exceptions.weather.weather_api_error import WeatherAPIError
from src.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = [
    "MalformedWeatherResponseError",
    "MissingCredentialError",
    "WeatherAPIError",
    "WeatherServiceError",
]
