import json

import structlog
from pydantic import ValidationError

from agent.prompts import CLASSIFICATION_PROMPT, SYSTEM_PROMPT
from src.models.intent import (
    ClassificationResult,
    IntentDecision,
    ParsedIntent,
    UnparseableIntent,
)
from src.services.llm_service import LLMService

logger = structlog.get_logger(__name__)

# Accepted names for the "fetch weather" flag, in order of precedence
NEEDS_WEATHER_KEYS = ("needsWeather", "needsWeatherData", "fetch")


def parse_intent(raw: str) -> ClassificationResult:
    """
    Parse raw classifier output into a decision.

    The output must be exactly one JSON object carrying a boolean weather
    flag, an optional location string and an optional numeric confidence.
    Anything else (prose around the JSON, wrong field types, a missing flag)
    is reported as unparseable instead of raising.
    """
    try:
        data = json.loads(raw.strip())
    except ValueError as e:
        return UnparseableIntent(raw=raw, reason=f"invalid JSON: {e}")

    if not isinstance(data, dict):
        return UnparseableIntent(raw=raw, reason="expected a JSON object")

    key = next((k for k in NEEDS_WEATHER_KEYS if k in data), None)
    if key is None:
        return UnparseableIntent(raw=raw, reason="missing weather flag")

    needs_weather = data[key]
    if not isinstance(needs_weather, bool):
        return UnparseableIntent(raw=raw, reason=f"{key} is not a boolean")

    location = data.get("location")
    if location is not None and not isinstance(location, str):
        return UnparseableIntent(raw=raw, reason="location is not a string")

    confidence = data.get("confidence")
    if confidence is not None and (
        isinstance(confidence, bool) or not isinstance(confidence, (int, float))
    ):
        return UnparseableIntent(raw=raw, reason="confidence is not a number")

    if location is not None:
        location = location.strip() or None

    try:
        decision = IntentDecision(
            needs_weather=needs_weather,
            location=location,
            confidence=confidence,
        )
    except ValidationError as e:
        return UnparseableIntent(raw=raw, reason=str(e))

    return ParsedIntent(decision=decision)


class IntentClassifier:
    """Decides through the language model whether a query needs weather data."""

    def __init__(self, llm_service: LLMService, confidence_threshold: float = 0.8):
        self.llm_service = llm_service
        self.confidence_threshold = confidence_threshold

    def apply_confidence_gate(self, decision: IntentDecision) -> IntentDecision:
        """Drop an affirmative decision whose reported confidence is below the threshold."""
        if (
            decision.needs_weather
            and decision.confidence is not None
            and decision.confidence < self.confidence_threshold
        ):
            logger.info(
                "Weather intent below confidence threshold",
                confidence=decision.confidence,
                threshold=self.confidence_threshold,
            )
            return decision.model_copy(update={"needs_weather": False})
        return decision

    async def classify(self, query: str) -> IntentDecision:
        """
        Classify a user query.

        Model failures propagate. Output that cannot be parsed is treated as a
        general query that needs no weather data.

        Args:
            query: Raw user query

        Returns:
            IntentDecision after confidence gating
        """
        raw = await self.llm_service.generate(
            CLASSIFICATION_PROMPT.format(query=query),
            context=SYSTEM_PROMPT,
        )

        result = parse_intent(raw)
        if isinstance(result, UnparseableIntent):
            logger.warning(
                "Classifier output could not be parsed, answering as a general query",
                reason=result.reason,
                raw_output=result.raw,
            )
            return IntentDecision(needs_weather=False)

        decision = self.apply_confidence_gate(result.decision)
        logger.info(
            "Query classified",
            needs_weather=decision.needs_weather,
            location=decision.location,
            confidence=decision.confidence,
        )
        return decision
