from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from src.config.config import Config
from src.exceptions.llm import EmptyGenerationError, InvalidPromptError, ModelUnavailableError
from src.models.llm import GenerateOptions, OllamaGenerateRequest, OllamaGenerateResponse

logger = structlog.get_logger(__name__)


class LLMService:
    """
    Client for a locally hosted Ollama generation endpoint.

    Each call is a single non-streaming request; failures are raised to the
    caller without retrying.
    """

    def __init__(self, settings: Config):
        self.url = settings.generate_url
        self.model = settings.ollama_model
        self.options = GenerateOptions(
            temperature=settings.ollama_temperature,
            num_ctx=settings.ollama_num_ctx,
        )
        self.timeout = httpx.Timeout(settings.request_timeout_seconds)

    def build_request(self, prompt: str, context: Optional[str] = None) -> OllamaGenerateRequest:
        """Build the request body, prepending the context separated by a blank line."""
        if not prompt or not prompt.strip():
            raise InvalidPromptError("Prompt must not be empty")

        full_prompt = f"{context}\n\n{prompt}" if context else prompt
        return OllamaGenerateRequest(
            model=self.model,
            prompt=full_prompt,
            stream=False,
            options=self.options,
        )

    async def generate(self, prompt: str, context: Optional[str] = None) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Task specific instruction
            context: Optional system directive placed ahead of the prompt

        Returns:
            The generated text, unparsed

        Raises:
            ModelUnavailableError: If the endpoint cannot be reached, times out
                or answers with a non-success status
            InvalidPromptError: If the prompt is empty or whitespace only
            EmptyGenerationError: If the endpoint answers without any text
        """
        body = self.build_request(prompt, context)

        logger.debug(
            "Sending generation request",
            url=self.url,
            model=self.model,
            prompt_length=len(body.prompt),
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.url, json=body.model_dump())

        except httpx.TimeoutException:
            logger.warning("Generation request timed out", url=self.url)
            raise ModelUnavailableError(f"Language model request to {self.url} timed out")

        except httpx.RequestError as e:
            logger.warning("Generation request failed", url=self.url, error=str(e))
            raise ModelUnavailableError(f"Language model at {self.url} is unreachable: {str(e)}")

        if not 200 <= response.status_code < 300:
            logger.warning(
                "Generation request rejected",
                status_code=response.status_code,
                response_text=response.text,
            )
            raise ModelUnavailableError(
                f"Language model request failed with status {response.status_code}"
            )

        try:
            data = OllamaGenerateResponse(**response.json())
        except (ValueError, TypeError, ValidationError) as e:
            logger.warning("Generation response could not be decoded", error=str(e))
            raise ModelUnavailableError(f"Language model returned an invalid response: {str(e)}")

        if not data.response or not data.response.strip():
            raise EmptyGenerationError("Language model returned no text")

        logger.debug("Generation completed", response_length=len(data.response))
        return data.response
