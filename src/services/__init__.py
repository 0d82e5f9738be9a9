from src.services.llm_service import LLMService
from src.services.weather_service import WeatherService

__all__ = ["LLMService", "WeatherService"]
