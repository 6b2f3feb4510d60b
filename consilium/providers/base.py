"""Abstract base for the director backend."""

from abc import ABC, abstractmethod


class ProviderError(Exception):
    """Raised when a provider call fails."""

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.status_code = status_code
        super().__init__(f"[{provider_name}] {message}")


class AIProvider(ABC):
    """Abstract base for the backend that voices the personas."""

    @abstractmethod
    def name(self) -> str:
        """Return the short provider name (e.g. 'gemini')."""
        ...

    @abstractmethod
    def model_string(self) -> str:
        """Return the actual model identifier string."""
        ...

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Send the prompt and return the raw text payload.

        Args:
            prompt: The full director prompt.

        Returns:
            The text of the first candidate's first content part.

        Raises:
            ProviderError: On non-success status, transport failure, or empty payload.
        """
        ...
