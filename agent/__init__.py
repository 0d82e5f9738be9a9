from agent.intent_classifier import IntentClassifier, parse_intent
from agent.query_router import QueryRouter
from agent.response_composer import ResponseComposer

__all__ = ["IntentClassifier", "QueryRouter", "ResponseComposer", "parse_intent"]
