"""
Wiring of the command pipeline's collaborators.

Everything is constructed explicitly and handed to the server, so tests
and deployments choose their own store, LLM and transcriber.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from homebrain.chat import ChatOrchestrator
from homebrain.commands.executor import CommandExecutor
from homebrain.config import Config, get_config
from homebrain.llm import LLMBackend, create_llm
from homebrain.resilience import RetryPolicy
from homebrain.store.base import DataStore
from homebrain.store.memory import MemoryDataStore
from homebrain.stt.transcriber import Transcriber, create_transcriber
from homebrain.summary import SummaryService

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """The collaborators one running server shares across requests."""

    store: DataStore
    llm: LLMBackend
    transcriber: Transcriber
    config: Config = field(default_factory=get_config)

    def __post_init__(self):
        llm_policy = RetryPolicy(
            timeout=self.config.llm.timeout,
            retries=self.config.llm.retries,
            jitter=self.config.retry_jitter,
        )
        self.executor = CommandExecutor(self.store)
        self.chat = ChatOrchestrator(
            self.store,
            self.llm,
            history_limit=self.config.chat.history_limit,
            policy=llm_policy,
            assistant_name=self.config.chat.assistant_name,
        )
        self.summaries = SummaryService(self.store, self.llm, policy=llm_policy)

    async def aclose(self) -> None:
        await self.llm.aclose()
        await self.transcriber.backend.aclose()


def build_services(config: Optional[Config] = None, store: Optional[DataStore] = None) -> Services:
    """
    Build services from configuration.

    Args:
        config: Configuration (default: global config)
        store: Data store (default: a fresh in-memory store)
    """
    config = config or get_config()

    llm_kwargs = {}
    if config.llm.backend == "openai":
        llm_kwargs = {"base_url": config.llm.base_url, "max_tokens": config.llm.max_tokens}
    llm = create_llm(config.llm.backend, model=config.llm.model, **llm_kwargs)

    if store is None:
        logger.warning("No data store configured, using an in-memory store")
        store = MemoryDataStore()

    return Services(
        store=store,
        llm=llm,
        transcriber=create_transcriber(config),
        config=config,
    )
