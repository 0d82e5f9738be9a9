from src.models.llm.generate import GenerateOptions, OllamaGenerateRequest, OllamaGenerateResponse

__all__ = ["GenerateOptions", "OllamaGenerateRequest", "OllamaGenerateResponse"]
