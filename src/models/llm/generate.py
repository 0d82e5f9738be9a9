from typing import Optional

from pydantic import BaseModel, Field


class GenerateOptions(BaseModel):
    """Sampling options for the Ollama generate endpoint."""

    temperature: float = Field(..., description="Sampling temperature")
    num_ctx: int = Field(..., description="Context window size in tokens")


class OllamaGenerateRequest(BaseModel):
    """Request body for a non-streaming Ollama generation."""

    model: str = Field(..., description="Model identifier")
    prompt: str = Field(..., description="Full prompt text")
    stream: bool = Field(False, description="Always false, the agent waits for the full response")
    options: GenerateOptions


class OllamaGenerateResponse(BaseModel):
    """The part of the Ollama generate response the agent reads."""

    response: Optional[str] = Field(None, description="Generated text")
