from typing import Literal, Union

from pydantic import BaseModel, Field

from src.models.intent.intent_decision import IntentDecision


class ParsedIntent(BaseModel):
    """Classifier output that parsed into a decision."""

    kind: Literal["parsed"] = "parsed"
    decision: IntentDecision


class UnparseableIntent(BaseModel):
    """Classifier output that could not be read as a decision."""

    kind: Literal["unparseable"] = "unparseable"
    raw: str = Field(..., description="Raw model output")
    reason: str = Field(..., description="Why parsing failed")


ClassificationResult = Union[ParsedIntent, UnparseableIntent]
