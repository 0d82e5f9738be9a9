import pytest

from agent.prompts import SYSTEM_PROMPT, WEATHER_UNAVAILABLE_NOTE
from agent.response_composer import ResponseComposer, render_weather_context
from src.exceptions.llm import ModelUnavailableError


class TestResponseComposer:
    """Test cases for the ResponseComposer class."""

    def test_render_weather_context(self, paris_reading):
        """Test every reading field is rendered."""
        context = render_weather_context(paris_reading)

        assert context == (
            "Weather data for Paris:\n"
            "- Temperature: 18°C\n"
            "- Feels like: 17°C\n"
            "- Conditions: clear sky\n"
            "- Humidity: 40%\n"
            "- Wind: 10 m/s\n"
            "- Pressure: 1015 hPa"
        )

    def test_render_weather_context_keeps_decimals(self, tokyo_reading):
        """Test fractional values are not rounded away."""
        context = render_weather_context(tokyo_reading)

        assert "24.5°C" in context
        assert "25.1°C" in context
        assert "3.6 m/s" in context
        assert "82%" in context

    @pytest.mark.asyncio
    async def test_compose_with_weather_prompt(self, echo_llm_service, paris_reading):
        """Test the augmented prompt carries the query and the weather data."""
        composer = ResponseComposer(echo_llm_service)

        prompt = await composer.compose_with_weather("Should I bring a jacket in Paris?", paris_reading)

        for expected in ("18", "clear sky", "40%", "10"):
            assert expected in prompt
        assert 'User asked: "Should I bring a jacket in Paris?"' in prompt
        assert "practical recommendations" in prompt
        echo_llm_service.generate.assert_called_once()
        assert echo_llm_service.generate.call_args[1]["context"] == SYSTEM_PROMPT

    @pytest.mark.asyncio
    async def test_compose_general_prompt(self, echo_llm_service):
        """Test the plain prompt has no weather context."""
        composer = ResponseComposer(echo_llm_service)

        prompt = await composer.compose_general("Tell me a joke")

        assert prompt == 'User asked: "Tell me a joke"\n\nProvide a helpful response.'
        assert "Weather data for" not in prompt
        echo_llm_service.generate.assert_called_once()

    @pytest.mark.asyncio
    async def test_compose_general_when_weather_unavailable(self, echo_llm_service):
        """Test the plain prompt warns the model when weather could not be fetched."""
        composer = ResponseComposer(echo_llm_service)

        prompt = await composer.compose_general("Weather in Tokyo?", weather_unavailable=True)
        plain = await composer.compose_general("Weather in Tokyo?")

        assert prompt == f"{plain}\n\n{WEATHER_UNAVAILABLE_NOTE}"
        assert "could not be retrieved" in prompt

    @pytest.mark.asyncio
    async def test_compose_errors_propagate(self, mock_llm_service, paris_reading):
        """Test client errors reach the caller unmodified."""
        error = ModelUnavailableError("Language model request failed with status 500")
        mock_llm_service.generate.side_effect = error
        composer = ResponseComposer(mock_llm_service)

        with pytest.raises(ModelUnavailableError) as exc_info:
            await composer.compose_with_weather("Weather in Paris?", paris_reading)
        assert exc_info.value is error

        with pytest.raises(ModelUnavailableError):
            await composer.compose_general("Tell me a joke")
