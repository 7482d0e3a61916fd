"""
Exception types shared across the command pipeline.
"""


class HomeBrainError(Exception):
    """Base class for all HomeBrain errors."""


class NotFoundError(HomeBrainError):
    """The actor has no resolvable family context."""


class TranscriptionError(HomeBrainError):
    """Speech-to-text failed or returned nothing usable."""


class PersistenceError(HomeBrainError):
    """A data-store write failed."""


class StoreUnavailableError(PersistenceError):
    """The backing data store is not reachable."""


class LLMError(HomeBrainError):
    """The LLM collaborator failed to produce a completion."""
