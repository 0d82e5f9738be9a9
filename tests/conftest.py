from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config.config import Config
from src.models.weather.weather import WeatherReading


@pytest.fixture
def test_config():
    """Configuration with a weather key, isolated from any local .env file."""
    return Config(
        _env_file=None,
        openweather_api_key="test-weather-key",
        openweather_base_url="https://api.openweathermap.org/data/2.5/weather",
        ollama_host="http://localhost:11434",
        ollama_model="llama3.2:latest",
        confidence_threshold=0.8,
        request_timeout_seconds=5,
    )


@pytest.fixture
def config_without_key():
    """Configuration with no weather API key."""
    return Config(_env_file=None, openweather_api_key=None)


@pytest.fixture
def paris_reading():
    """Sample weather reading for Paris."""
    return WeatherReading(
        location_name="Paris",
        temperature_c=18,
        feels_like_c=17,
        condition_description="clear sky",
        humidity_pct=40,
        wind_speed=10,
        pressure_hpa=1015,
    )


@pytest.fixture
def tokyo_reading():
    """Sample weather reading for Tokyo."""
    return WeatherReading(
        location_name="Tokyo",
        temperature_c=24.5,
        feels_like_c=25.1,
        condition_description="light rain",
        humidity_pct=82,
        wind_speed=3.6,
        pressure_hpa=1008,
    )


@pytest.fixture
def openweather_payload():
    """Current weather API response for London."""
    return {
        "coord": {"lon": -0.1278, "lat": 51.5074},
        "weather": [{"id": 801, "main": "Clouds", "description": "few clouds", "icon": "02d"}],
        "base": "stations",
        "main": {
            "temp": 15.5,
            "feels_like": 14.8,
            "temp_min": 12.3,
            "temp_max": 18.7,
            "pressure": 1013,
            "humidity": 65,
        },
        "visibility": 10000,
        "wind": {"speed": 3.5, "deg": 180},
        "dt": 1696161600,
        "sys": {"country": "GB", "sunrise": 1696138800, "sunset": 1696182000},
        "timezone": 3600,
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def mock_llm_service():
    """Mock language model service."""
    mock_service = MagicMock()
    mock_service.generate = AsyncMock()
    return mock_service


@pytest.fixture
def echo_llm_service():
    """Language model double that answers with the prompt it was given."""
    mock_service = MagicMock()
    mock_service.generate = AsyncMock(side_effect=lambda prompt, context=None: prompt)
    return mock_service


@pytest.fixture
def mock_weather_service():
    """Mock weather service for testing."""
    mock_service = MagicMock()
    mock_service.fetch_weather = AsyncMock()
    return mock_service


@pytest.fixture
def make_response():
    """Factory for stand-ins of httpx.Response."""
    def _make_response(status_code=200, json_data=None, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        if isinstance(json_data, Exception):
            response.json.side_effect = json_data
        else:
            response.json.return_value = json_data
        return response

    return _make_response
