"""Advice providers for the guide chat, with Langfuse observability."""

from llm.base import BaseAdviceProvider
from llm.gemini_provider import GeminiProvider

# Provider registry for easy lookup
PROVIDERS = {
    "gemini": GeminiProvider,
}


def get_provider(name: str = "gemini", model: str | None = None) -> BaseAdviceProvider:
    """Get an advice provider by name.

    Args:
        name: Provider name ("gemini").
        model: Optional model override for the provider.

    Returns:
        Initialized provider instance.

    Raises:
        ValueError: If provider name is not recognized.
    """
    if name not in PROVIDERS:
        raise ValueError(
            f"Unknown provider: {name}. Available: {list(PROVIDERS.keys())}"
        )
    return PROVIDERS[name](model=model)


__all__ = [
    "BaseAdviceProvider",
    "GeminiProvider",
    "PROVIDERS",
    "get_provider",
]
