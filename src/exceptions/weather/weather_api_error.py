from typing import Optional

from src.exceptions.weather.weather_service_error import WeatherServiceError


class WeatherAPIError(WeatherServiceError):
    """Exception for failed requests to the weather API.

    ``status_code`` is None when no HTTP response was received
    (timeout or transport failure).
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
