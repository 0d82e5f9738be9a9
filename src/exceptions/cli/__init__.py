from src.exceptions.cli.usage_error import UsageError

__all__ = ["UsageError"]
