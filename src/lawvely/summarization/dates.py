"""Enactment date extraction."""

from __future__ import annotations

import logging

from lawvely.core.errors import LLMError, SummarizationError
from lawvely.llm.client import LLMClient

logger = logging.getLogger(__name__)

NO_DATE = "NO_DATE"
DATE_MAX_TOKENS = 30

_SYSTEM_PROMPT = (
    "Find the date on which the following legislation was enacted or made. "
    "Reply with only the date in a human-readable form such as '1 March 2019'. "
    f"If the text contains no such date, reply with exactly {NO_DATE}."
)


def normalize_date_reply(reply: str) -> str:
    """Map a raw model reply to a date string or the ``NO_DATE`` sentinel."""
    cleaned = reply.strip().strip(".\"'`")
    if not cleaned or cleaned.upper() == NO_DATE:
        return NO_DATE
    return cleaned


class DateExtractor:
    """Asks the model for the date a piece of legislation was enacted."""

    def __init__(self, llm: LLMClient) -> None:
        self._llm = llm

    async def extract_date(self, raw_text: str) -> str:
        try:
            reply = await self._llm.generate(
                raw_text,
                system_prompt=_SYSTEM_PROMPT,
                max_tokens=DATE_MAX_TOKENS,
                temperature=0.0,
            )
        except LLMError as exc:
            logger.error("Error extracting legislation date: %s", exc)
            raise SummarizationError("Failed to extract date from legislation text.") from exc
        return normalize_date_reply(reply)
