from __future__ import annotations

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """A chat model reachable with one system prompt and one user turn."""

    @abstractmethod
    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Return the raw text of the model's reply. Errors propagate."""

    @property
    @abstractmethod
    def provider_name(self) -> str: ...

    @property
    @abstractmethod
    def model_name(self) -> str: ...
