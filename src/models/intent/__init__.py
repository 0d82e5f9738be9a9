from src.models.intent.classification_result import (
    ClassificationResult,
    ParsedIntent,
    UnparseableIntent,
)
from src.models.intent.intent_decision import IntentDecision

__all__ = [
    "ClassificationResult",
    "IntentDecision",
    "ParsedIntent",
    "UnparseableIntent",
]
