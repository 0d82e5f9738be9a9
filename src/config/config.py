from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Every setting has a default so the agent runs against a local Ollama
    daemon out of the box. The OpenWeatherMap key is the only value that must
    be supplied; it is optional here so that a missing key is reported when a
    weather lookup is attempted rather than at startup.
    """

    # OpenWeatherMap Configuration
    openweather_api_key: Optional[str] = Field(
        default=None, description="OpenWeatherMap API key for weather data"
    )
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="OpenWeatherMap current weather endpoint",
    )
    openweather_units: str = Field(default="metric", description="Unit system for weather data")

    # Ollama Configuration
    ollama_host: str = Field(default="http://localhost:11434", description="Ollama server URL")
    ollama_model: str = Field(default="llama3.2:latest", description="Model used for generation")
    ollama_temperature: float = Field(default=0.3, ge=0, le=2, description="Sampling temperature")
    ollama_num_ctx: int = Field(default=8192, ge=1, description="Context window size in tokens")

    # Agent Configuration
    confidence_threshold: float = Field(
        default=0.8,
        ge=0,
        le=1,
        description="Minimum classifier confidence required to fetch weather data",
    )
    request_timeout_seconds: float = Field(
        default=60.0, gt=0, description="Timeout applied to each outbound HTTP request"
    )

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="WARNING", description="Logging level")
    log_to_file: bool = Field(default=False, description="Also write logs to the logs directory")

    @field_validator("openweather_api_key")
    def validate_openweather_api_key(cls, v):
        """Treat a blank key as not configured."""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("ollama_host")
    def validate_ollama_host(cls, v):
        return v.rstrip("/")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @property
    def generate_url(self) -> str:
        """Full URL of the Ollama generation endpoint."""
        return f"{self.ollama_host}/api/generate"

    def get_logs_directory(self) -> Path:
        """Get the directory log files are written to."""
        return Path("logs")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

