from typing import Optional

from pydantic import BaseModel, Field


class IntentDecision(BaseModel):
    """Whether a query needs live weather data, and for which location."""

    needs_weather: bool = Field(..., description="Weather data should be fetched")
    location: Optional[str] = Field(None, description="Location extracted from the query")
    confidence: Optional[float] = Field(
        None, ge=0, le=1, description="Classifier confidence, when reported"
    )

    @property
    def wants_fetch(self) -> bool:
        return self.needs_weather and bool(self.location and self.location.strip())
