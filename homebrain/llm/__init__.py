"""
LLM backends for chat and summaries.
"""

from typing import Optional

from homebrain.llm.base import LLMBackend, LLMChoice, LLMResponse
from homebrain.llm.simple import SimpleLLM


def create_llm(
    backend: str = "openai",
    model: Optional[str] = None,
    **kwargs,
) -> LLMBackend:
    """
    Factory function to create LLM backend.

    Args:
        backend: "openai" or "simple"
        model: Model name (backend-specific)
        **kwargs: Backend-specific options

    Returns:
        LLMBackend instance
    """
    if backend == "openai":
        from homebrain.llm.openai_llm import OpenAILLM

        return OpenAILLM(model=model or "gpt-4o-mini", **kwargs)
    elif backend == "simple":
        return SimpleLLM()
    else:
        raise ValueError(f"Unknown LLM backend: {backend}")


__all__ = ["LLMBackend", "LLMChoice", "LLMResponse", "SimpleLLM", "create_llm"]
