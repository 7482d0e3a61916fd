"""
LLM using the OpenAI chat completions API.

Any OpenAI-compatible server (vLLM, Ollama's /v1, llama.cpp) works by
setting ``base_url``.
"""

import logging
import os
import time
from typing import Optional

from openai import AsyncOpenAI

from homebrain.llm.base import LLMBackend, LLMChoice, LLMResponse

logger = logging.getLogger(__name__)


class OpenAILLM(LLMBackend):
    """
    LLM using OpenAI API (GPT-4o, GPT-4o-mini) or a compatible server.

    Requires OPENAI_API_KEY environment variable for api.openai.com.
    """

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        max_tokens: int = 400,
    ):
        """
        Initialize OpenAI LLM.

        Args:
            model: Model name
            api_key: API key (or set OPENAI_API_KEY env)
            base_url: OpenAI-compatible server URL (default: api.openai.com)
            max_tokens: Completion token cap
        """
        api_key = api_key or os.environ.get("OPENAI_API_KEY")
        if not api_key and not base_url:
            raise ValueError("OpenAI API key required. Set OPENAI_API_KEY environment variable.")

        self.model = model
        self.max_tokens = max_tokens
        # Self-hosted servers usually ignore the key but the client requires one
        self._client = AsyncOpenAI(api_key=api_key or "not-needed", base_url=base_url)

        logger.info("OpenAI LLM ready: %s", model)

    async def complete(self, messages: list[dict[str, str]]) -> LLMResponse:
        """Generate completions using OpenAI."""
        start = time.perf_counter()
        response = await self._client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_tokens=self.max_tokens,
        )
        latency = (time.perf_counter() - start) * 1000

        return LLMResponse(
            choices=[
                LLMChoice(content=c.message.content, finish_reason=c.finish_reason)
                for c in response.choices
            ],
            model=response.model or self.model,
            tokens_used=response.usage.total_tokens if response.usage else 0,
            latency_ms=latency,
        )

    async def aclose(self) -> None:
        await self._client.close()
