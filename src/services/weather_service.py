from typing import Any, Dict

import httpx
import structlog
from pydantic import ValidationError

from src.config.config import Config
from src.exceptions.weather import (
    MalformedWeatherResponseError,
    MissingCredentialError,
    WeatherAPIError,
)
from src.models.weather.weather import OpenWeatherMapResponse, WeatherReading

logger = structlog.get_logger(__name__)


class WeatherService:
    """
    Service for fetching current weather from the OpenWeatherMap API.

    One request per lookup, no retries and no caching. Failures are raised as
    WeatherServiceError subclasses so the caller can decide to answer without
    weather data.
    """

    def __init__(self, settings: Config):
        """Initialize the weather service."""
        self.base_url = settings.openweather_base_url
        self.api_key = settings.openweather_api_key
        self.units = settings.openweather_units

        self.timeout = httpx.Timeout(settings.request_timeout_seconds)

    async def _make_request(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make an HTTP request to the OpenWeatherMap API.

        Args:
            params: Query parameters

        Returns:
            JSON response from the API

        Raises:
            MissingCredentialError: If no API key is configured
            WeatherAPIError: For non-success statuses, timeouts and transport errors
            MalformedWeatherResponseError: If the body is not a JSON object
        """
        if not self.api_key:
            raise MissingCredentialError("OpenWeatherMap API key is not configured")

        # Add API key to parameters
        params = {**params, "units": self.units, "appid": self.api_key}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                logger.info("Making API request", url=self.base_url, query=params.get("q"))

                response = await client.get(self.base_url, params=params)

        except httpx.TimeoutException:
            logger.warning("Request timeout", url=self.base_url)
            raise WeatherAPIError("Weather API request timed out")

        except httpx.RequestError as e:
            logger.warning("Request error", error=str(e))
            raise WeatherAPIError(f"Weather API request failed: {str(e)}")

        if not 200 <= response.status_code < 300:
            logger.warning(
                "API request failed",
                status_code=response.status_code,
                response_text=response.text,
            )
            raise WeatherAPIError(
                f"Weather API returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedWeatherResponseError(f"Weather API returned invalid JSON: {str(e)}")

        if not isinstance(data, dict):
            raise MalformedWeatherResponseError("Weather API returned a non-object body")
        return data

    async def fetch_weather(self, location: str) -> WeatherReading:
        """
        Get current weather for a location.

        Args:
            location: Human readable place name

        Returns:
            WeatherReading with the current conditions

        Raises:
            MissingCredentialError: If no API key is configured
            WeatherAPIError: For failed requests
            MalformedWeatherResponseError: If required fields are missing
        """
        logger.info("Fetching current weather", location=location)

        data = await self._make_request({"q": location})

        try:
            response = OpenWeatherMapResponse(**data)
        except ValidationError as e:
            logger.error("Failed to parse weather data", location=location, error=str(e))
            raise MalformedWeatherResponseError(
                f"Invalid weather data received for {location}: {str(e)}"
            )

        reading = WeatherReading.from_openweather_response(response)
        logger.info("Successfully fetched current weather", location=reading.location_name)
        return reading
