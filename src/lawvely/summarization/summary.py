"""Title extraction and plain-language summaries of legislation text."""

from __future__ import annotations

import asyncio
import logging

from pydantic import BaseModel

from lawvely.core.errors import LLMError, SummarizationError
from lawvely.llm.client import LLMClient

logger = logging.getLogger(__name__)

TITLE_MAX_TOKENS = 50
SUMMARY_MAX_TOKENS = 400
SUMMARY_TEMPERATURE = 0.7


class GeneratedSummaries(BaseModel):
    """Model-generated text for one piece of legislation."""

    title: str
    summary_of_legislation: str
    summary_of_sub_sections: str


class SummaryGenerator:
    """Generates a title and two layman summaries from raw legislation text."""

    def __init__(self, llm: LLMClient) -> None:
        self._llm = llm

    async def extract_title(self, raw_text: str) -> str:
        try:
            title = await self._llm.generate(
                raw_text,
                system_prompt="Extract the title of the following text.",
                max_tokens=TITLE_MAX_TOKENS,
            )
        except LLMError as exc:
            logger.error("Error extracting title: %s", exc)
            raise SummarizationError("Failed to extract title from legislation text.") from exc
        return title.strip()

    async def generate_summaries(self, raw_text: str) -> GeneratedSummaries:
        """Extract the title, then write both summaries concurrently."""
        title = await self.extract_title(raw_text)

        user_prompt = (
            "Summarize and explain the following legal text concisely, "
            f"and in layman's terms:\n\n{raw_text}"
        )
        legislation_messages = [
            {
                "role": "system",
                "content": (
                    f'Begin the summary with "The {title} relates to..." You are an '
                    "assistant that explains legal texts concisely in a summary, and in "
                    "layman's terms. Ensure the text is shorter than the original text."
                ),
            },
            {"role": "user", "content": user_prompt},
        ]
        sub_section_messages = [
            {
                "role": "system",
                "content": (
                    "Explain each sub-section of the act in a step-by-step manner, "
                    f'starting with "The subsections of {title} cover...". '
                    "Make it simple and easy to understand."
                ),
            },
            {"role": "user", "content": user_prompt},
        ]

        try:
            summary, sub_sections = await asyncio.gather(
                self._llm.chat(
                    legislation_messages,
                    max_tokens=SUMMARY_MAX_TOKENS,
                    temperature=SUMMARY_TEMPERATURE,
                ),
                self._llm.chat(
                    sub_section_messages,
                    max_tokens=SUMMARY_MAX_TOKENS,
                    temperature=SUMMARY_TEMPERATURE,
                ),
            )
        except LLMError as exc:
            logger.error("Error generating summaries for %r: %s", title, exc)
            raise SummarizationError(
                "Failed to generate summaries for legislation text."
            ) from exc

        return GeneratedSummaries(
            title=title,
            summary_of_legislation=summary.strip(),
            summary_of_sub_sections=sub_sections.strip(),
        )
