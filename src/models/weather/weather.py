from typing import List, Optional

from pydantic import BaseModel, Field


class WeatherCondition(BaseModel):
    """Weather condition details."""

    id: Optional[int] = Field(None, description="Weather condition ID")
    main: Optional[str] = Field(None, description="Main weather condition (e.g., Rain, Snow, Clear)")
    description: str = Field(..., description="Detailed weather description")


class MainWeatherData(BaseModel):
    """Main weather measurements."""

    temp: float = Field(..., description="Current temperature")
    feels_like: float = Field(..., description="Human perception of temperature")
    pressure: float = Field(..., description="Atmospheric pressure in hPa")
    humidity: float = Field(..., ge=0, le=100, description="Humidity percentage")


class WindData(BaseModel):
    """Wind information."""

    speed: float = Field(..., ge=0, description="Wind speed")


class OpenWeatherMapResponse(BaseModel):
    """
    The subset of the OpenWeatherMap current weather response the agent relies on.

    Every field read when rendering a reading is required so that an
    incomplete response fails validation instead of being filled with defaults.
    """

    weather: List[WeatherCondition] = Field(..., min_length=1, description="Weather conditions")
    main: MainWeatherData = Field(..., description="Main weather data")
    wind: WindData = Field(..., description="Wind information")
    name: str = Field(..., description="City name")


class WeatherReading(BaseModel):
    """Current weather for one location, as presented to the language model."""

    location_name: str = Field(..., description="Resolved location name")
    temperature_c: float = Field(..., description="Temperature in Celsius")
    feels_like_c: float = Field(..., description="Feels like temperature in Celsius")
    condition_description: str = Field(..., description="Weather description")
    humidity_pct: float = Field(..., ge=0, le=100, description="Humidity percentage")
    wind_speed: float = Field(..., ge=0, description="Wind speed")
    pressure_hpa: float = Field(..., description="Atmospheric pressure in hPa")

    @classmethod
    def from_openweather_response(cls, response: OpenWeatherMapResponse) -> "WeatherReading":
        """
        Create a WeatherReading from OpenWeatherMap API response.

        Args:
            response: Validated OpenWeatherMap API response

        Returns:
            WeatherReading: Reading built from the primary weather condition
        """
        return cls(
            location_name=response.name,
            temperature_c=response.main.temp,
            feels_like_c=response.main.feels_like,
            condition_description=response.weather[0].description,
            humidity_pct=response.main.humidity,
            wind_speed=response.wind.speed,
            pressure_hpa=response.main.pressure,
        )
