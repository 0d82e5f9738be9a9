import structlog

from agent.prompts import (
    GENERAL_RESPONSE_PROMPT,
    SYSTEM_PROMPT,
    WEATHER_CONTEXT,
    WEATHER_RESPONSE_PROMPT,
    WEATHER_UNAVAILABLE_NOTE,
)
from src.models.weather.weather import WeatherReading
from src.services.llm_service import LLMService

logger = structlog.get_logger(__name__)


def _number(value: float) -> str:
    # 18.0 -> "18", 3.6 -> "3.6"
    return f"{value:g}"


def render_weather_context(reading: WeatherReading) -> str:
    """Render every field of a reading as the context block given to the model."""
    return WEATHER_CONTEXT.format(
        location_name=reading.location_name,
        temperature=_number(reading.temperature_c),
        feels_like=_number(reading.feels_like_c),
        conditions=reading.condition_description,
        humidity=_number(reading.humidity_pct),
        wind_speed=_number(reading.wind_speed),
        pressure=_number(reading.pressure_hpa),
    )


class ResponseComposer:
    """Builds the final prompt for a query and asks the model for the answer."""

    def __init__(self, llm_service: LLMService):
        self.llm_service = llm_service

    async def compose_with_weather(self, query: str, reading: WeatherReading) -> str:
        """
        Answer a query using fetched weather data.

        Args:
            query: Original user query
            reading: Current weather for the requested location

        Returns:
            The model's answer
        """
        prompt = WEATHER_RESPONSE_PROMPT.format(
            query=query,
            context=render_weather_context(reading),
        )
        logger.debug("Composing weather response", location=reading.location_name)
        return await self.llm_service.generate(prompt, context=SYSTEM_PROMPT)

    async def compose_general(self, query: str, weather_unavailable: bool = False) -> str:
        """
        Answer a query directly, without weather data.

        Args:
            query: Original user query
            weather_unavailable: The query wanted weather data but it could not be fetched

        Returns:
            The model's answer
        """
        prompt = GENERAL_RESPONSE_PROMPT.format(query=query)
        if weather_unavailable:
            prompt = f"{prompt}\n\n{WEATHER_UNAVAILABLE_NOTE}"

        logger.debug("Composing general response", weather_unavailable=weather_unavailable)
        return await self.llm_service.generate(prompt, context=SYSTEM_PROMPT)
