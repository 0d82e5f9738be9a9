from src.models.orchestrator.query_outcome import QueryOutcome

__all__ = ["QueryOutcome"]
