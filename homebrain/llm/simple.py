"""Rule-based stand-in LLM for running without a model server."""

import logging
import re

from homebrain.llm.base import LLMBackend, LLMChoice, LLMResponse

logger = logging.getLogger(__name__)


class SimpleLLM(LLMBackend):
    """
    Simple rule-based "LLM" for testing without a real LLM.

    Answers from the last user message with canned phrases.
    """

    model = "simple"

    # Keys are whole-word patterns
    RESPONSES = {
        "hello": "Hello! How can I help your family today?",
        "hi": "Hi there! What can I do for you?",
        "thanks?": "You're welcome!",
        "calendar": "I can add events to the family calendar. Try \"Add dentist appointment Thursday\".",
        "tasks?": "I can create tasks and mark them done. Try \"Mark homework as done\".",
        "dinner": "Check the meal plan for today's dinner.",
        "bye": "See you later!",
    }

    def __init__(self):
        logger.info("Using simple rule-based responses (no LLM)")

    async def complete(self, messages: list[dict[str, str]]) -> LLMResponse:
        prompt = ""
        for message in reversed(messages):
            if message.get("role") == "user":
                prompt = message.get("content", "").lower()
                break

        for key, response in self.RESPONSES.items():
            if re.search(rf"\b{key}\b", prompt):
                return LLMResponse(choices=[LLMChoice(content=response)], model=self.model)

        return LLMResponse(
            choices=[LLMChoice(content="I'm not sure how to help with that. Try asking about your calendar, tasks, lists, or meals!")],
            model=self.model,
        )
