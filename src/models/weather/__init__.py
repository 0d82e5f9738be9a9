from src.models.weather.weather import OpenWeatherMapResponse, WeatherReading

__all__ = ["OpenWeatherMapResponse", "WeatherReading"]
