from datetime import datetime
from typing import Optional

import structlog

from agent.intent_classifier import IntentClassifier
from agent.response_composer import ResponseComposer
from src.config.config import Config
from src.exceptions.weather import WeatherServiceError
from src.models.orchestrator.query_outcome import QueryOutcome
from src.services.llm_service import LLMService
from src.services.weather_service import WeatherService

logger = structlog.get_logger(__name__)

WEATHER_UNAVAILABLE_NOTICE = "Note: live weather data for {location} could not be retrieved."


class QueryRouter:
    """
    Routes a query through classification, an optional weather lookup and
    response composition.

    A failed weather lookup never fails the query; the answer is composed
    without weather data instead. Language model failures are not handled
    here and reach the caller.
    """

    def __init__(
            self,
            settings: Config,
            llm_service: Optional[LLMService] = None,
            weather_service: Optional[WeatherService] = None,
            classifier: Optional[IntentClassifier] = None,
            composer: Optional[ResponseComposer] = None,
    ):
        """Initialize the router, building any collaborator not supplied from the settings."""
        self.settings = settings

        llm_service = llm_service or LLMService(self.settings)
        self.weather_service = weather_service or WeatherService(self.settings)
        self.classifier = classifier or IntentClassifier(
            llm_service,
            confidence_threshold=self.settings.confidence_threshold,
        )
        self.composer = composer or ResponseComposer(llm_service)

    async def handle_query(self, query: str) -> QueryOutcome:
        """
        Answer a natural language query.

        Args:
            query: The raw query from the user

        Returns:
            QueryOutcome with the answer and the route that produced it

        Raises:
            LLMServiceError: If the language model fails during
                classification or composition
        """
        start_time = datetime.now()
        logger.info("Processing query", query=query, query_length=len(query))

        decision = await self.classifier.classify(query)

        if not decision.wants_fetch:
            response = await self.composer.compose_general(query)
            return self._outcome(start_time, response, route="general")

        try:
            reading = await self.weather_service.fetch_weather(decision.location)

        except WeatherServiceError as e:
            logger.warning(
                "Weather lookup failed, answering without weather data",
                location=decision.location,
                error_type=type(e).__name__,
                error=str(e),
            )
            response = await self.composer.compose_general(query, weather_unavailable=True)
            notice = WEATHER_UNAVAILABLE_NOTICE.format(location=decision.location)
            return self._outcome(
                start_time,
                f"{notice}\n\n{response}",
                route="fallback",
                location=decision.location,
                weather_error=f"{type(e).__name__}: {str(e)}",
            )

        response = await self.composer.compose_with_weather(query, reading)
        return self._outcome(start_time, response, route="weather", location=decision.location)

    @staticmethod
    def _outcome(start_time: datetime, response: str, **fields) -> QueryOutcome:
        outcome = QueryOutcome(
            response=response,
            processing_time=(datetime.now() - start_time).total_seconds(),
            **fields,
        )
        logger.info(
            "Query processed successfully",
            route=outcome.route,
            location=outcome.location,
            processing_time=outcome.processing_time,
            response_length=len(outcome.response),
        )
        return outcome
