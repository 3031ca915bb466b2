"""Provider registry for LLM backends."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lawvely.llm.client import LLMClient

from lawvely.llm.providers.openai_compat import OpenAICompatClient

PROVIDER_REGISTRY: dict[str, type[LLMClient]] = {
    "openai": OpenAICompatClient,
    "vllm": OpenAICompatClient,
}

__all__ = ["PROVIDER_REGISTRY", "OpenAICompatClient"]
