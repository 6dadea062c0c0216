from abc import ABC, abstractmethod


class CompletionBackend(ABC):
    """
    Abstract completion boundary.
    The responder depends ONLY on this interface.
    """

    @abstractmethod
    async def complete(self, query: str) -> str:
        """Return reply text for a user query."""
        raise NotImplementedError
