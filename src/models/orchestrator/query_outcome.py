from typing import Literal, Optional

from pydantic import BaseModel, Field


class QueryOutcome(BaseModel):
    """Result of routing one query through the agent."""

    response: str = Field(..., description="Answer text shown to the user")
    route: Literal["general", "weather", "fallback"] = Field(
        ..., description="Which composition path produced the answer"
    )
    location: Optional[str] = Field(None, description="Location weather was requested for")
    weather_error: Optional[str] = Field(None, description="Why the weather fetch failed")
    processing_time: float = Field(..., ge=0, description="Seconds spent on the query")
