from __future__ import annotations

import logging

from setmystay.config import settings
from setmystay.llm.base import LLMProvider

logger = logging.getLogger(__name__)

_provider_instance: LLMProvider | None = None


def _build_provider(name: str) -> LLMProvider:
    if name == "claude":
        from setmystay.llm.claude_provider import ClaudeProvider

        return ClaudeProvider()
    if name == "openai":
        from setmystay.llm.openai_provider import OpenAIProvider

        return OpenAIProvider()
    raise ValueError(f"Unknown LLM provider: {name}")


def get_llm_provider() -> LLMProvider:
    """Smart-sort ranking backend, built once per process."""
    global _provider_instance
    if _provider_instance is None:
        _provider_instance = _build_provider(settings.llm_provider)
        logger.info(
            "Using %s (%s) for smart sort",
            _provider_instance.provider_name,
            _provider_instance.model_name,
        )
    return _provider_instance
