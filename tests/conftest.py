"""Shared test fixtures and helpers."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Callable

import pytest

from lawvely.core.config import LLMConfig
from lawvely.legislation.models import LegislationSummary
from lawvely.llm.client import LLMClient


class FakeLLM(LLMClient):
    """Scripted LLM client.

    ``reply`` is either a fixed string, an exception to raise, or a callable
    receiving the message list and returning one of those.
    """

    def __init__(
        self,
        reply: str | Exception | Callable[[list[dict]], str | Exception] = "",
        delay: float = 0.0,
    ) -> None:
        super().__init__(LLMConfig(provider="openai", api_key="test-key"))
        self._reply = reply
        self._delay = delay
        self.calls: list[dict] = []
        self.closed = False

    async def chat(
        self,
        messages: list[dict],
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str:
        self.calls.append(
            {"messages": messages, "max_tokens": max_tokens, "temperature": temperature}
        )
        if self._delay:
            await asyncio.sleep(self._delay)
        reply = self._reply(messages) if callable(self._reply) else self._reply
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def is_available(self) -> bool:
        return True

    async def close(self) -> None:
        self.closed = True


def system_prompt(messages: list[dict]) -> str:
    return next((m["content"] for m in messages if m["role"] == "system"), "")


def routed_reply(
    *,
    title: str = "Animal Welfare Act 2006",
    summary: str = "The Animal Welfare Act 2006 relates to the care of animals.",
    sub_sections: str = "The subsections of Animal Welfare Act 2006 cover licensing.",
    categories: str = "Animal Welfare, Justice",
    date: str = "8 November 2006",
) -> Callable[[list[dict]], str]:
    """Build a FakeLLM handler that answers each pipeline prompt."""

    def handler(messages: list[dict]) -> str:
        prompt = system_prompt(messages)
        if "Extract the title" in prompt:
            return title
        if "relates to" in prompt:
            return summary
        if "sub-section" in prompt:
            return sub_sections
        if "classifies texts" in prompt:
            return categories
        if "enacted" in prompt:
            return date
        raise AssertionError(f"Unexpected prompt: {prompt!r}")

    return handler


def make_record(
    legislation_id: str = "animal-welfare-act-2006",
    *,
    title: str = "Animal Welfare Act 2006",
    categories: list[str] | None = None,
    summary: str = "The Animal Welfare Act 2006 relates to the care of animals.",
    sub_sections: str = "The subsections cover licensing for pet shops.",
) -> LegislationSummary:
    return LegislationSummary(
        id=legislation_id,
        title=title,
        url=f"https://www.legislation.gov.uk/{legislation_id}",
        summary_of_legislation=summary,
        summary_of_sub_sections=sub_sections,
        categories=categories or ["Animal Welfare"],
        legislation_date="8 November 2006",
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()
