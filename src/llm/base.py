"""Base class for advice providers backing the guide chat."""

from abc import ABC, abstractmethod


class BaseAdviceProvider(ABC):
    """Abstract base class for advice providers.

    Implementations never raise from request_advice: failures are turned
    into a user-safe message at this boundary.
    """

    provider_name: str  # e.g., "gemini"

    @abstractmethod
    async def request_advice(self, message: str) -> str:
        """Answer a visitor's question.

        Args:
            message: The visitor's raw question text.

        Returns:
            Text to show as the assistant reply.
        """
        pass

    @property
    @abstractmethod
    def default_model(self) -> str:
        """Model used for this provider."""
        pass

    @property
    def is_configured(self) -> bool:
        """Whether the provider can reach its backing service."""
        return True
