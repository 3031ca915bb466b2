"""Category classifier for legislation summaries.

Assigns one or more taxonomy labels to a piece of legislation using a
three-step cascade:

1. Ask the language model for comma-separated labels and keep the ones
   that exactly match the taxonomy.
2. If none survive, score each label by how often its words occur in the
   text and take the best non-zero score.
3. If every score is zero, take the label most similar to the text by
   character-bigram overlap.

Step 3 always produces a label, so a successful classification is never
empty. Only a failure of the model call in step 1 can fail the whole
operation.
"""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import Literal, Union

from pydantic import BaseModel

from lawvely.classification.taxonomy import TAXONOMY
from lawvely.classification.text import dice_similarity, token_frequencies, tokenize
from lawvely.core.errors import ClassificationUpstreamError, LLMError, LLMTimeoutError
from lawvely.llm.client import LLMClient

logger = logging.getLogger(__name__)

CLASSIFY_MAX_TOKENS = 100
CLASSIFY_TEMPERATURE = 0.7


class ClassificationStage(StrEnum):
    """Cascade step that produced a classification."""

    MODEL = "model"
    TOKEN_FREQUENCY = "token_frequency"
    FUZZY = "fuzzy"


class ClassificationSuccess(BaseModel):
    """Categories assigned to a text, with the step that assigned them."""

    kind: Literal["success"] = "success"
    categories: list[str]
    stage: ClassificationStage


class UpstreamFailure(BaseModel):
    """The model call failed for a reason other than a timeout."""

    kind: Literal["upstream_failure"] = "upstream_failure"
    reason: str


ClassificationOutcome = Union[ClassificationSuccess, UpstreamFailure]


def combine_text(title: str, summary_of_sub_sections: str) -> str:
    """Build the text blob that is the unit of classification."""
    return f"Title: {title}\nSummaryOfSubsections: {summary_of_sub_sections}"


def parse_model_categories(response: str, taxonomy: tuple[str, ...] = TAXONOMY) -> list[str]:
    """Split a comma-separated model reply and keep exact taxonomy matches.

    Order and duplicates are preserved as the model emitted them.
    """
    candidates = [part.strip() for part in response.split(",")]
    return [candidate for candidate in candidates if candidate in taxonomy]


class CategoryClassifier:
    """Assigns taxonomy labels to legislation.

    Args:
        llm: Gateway used for the model-based step.
        taxonomy: Ordered labels; earlier labels win ties.
        model_timeout: Optional bound in seconds on the model call. A call
            that exceeds it is abandoned and the token-frequency step runs
            instead.
    """

    def __init__(
        self,
        llm: LLMClient,
        taxonomy: tuple[str, ...] = TAXONOMY,
        model_timeout: float | None = None,
    ) -> None:
        if not taxonomy:
            raise ValueError("Taxonomy must contain at least one label")
        self._llm = llm
        self._taxonomy = tuple(taxonomy)
        self._model_timeout = model_timeout

    @property
    def taxonomy(self) -> tuple[str, ...]:
        return self._taxonomy

    async def classify(self, title: str, summary_of_sub_sections: str) -> list[str]:
        """Return the categories for a piece of legislation.

        Raises:
            ClassificationUpstreamError: The model call failed.
        """
        outcome = await self.classify_outcome(title, summary_of_sub_sections)
        if isinstance(outcome, UpstreamFailure):
            raise ClassificationUpstreamError(outcome.reason)
        return outcome.categories

    async def classify_outcome(
        self, title: str, summary_of_sub_sections: str
    ) -> ClassificationOutcome:
        """Run the cascade and report the result without raising."""
        combined = combine_text(title, summary_of_sub_sections)

        try:
            categories = await self._classify_with_model(combined)
        except (LLMTimeoutError, asyncio.TimeoutError):
            logger.warning("Model classification timed out for %r", title)
            categories = []
        except LLMError as exc:
            logger.error("Error generating categories for %r: %s", title, exc)
            return UpstreamFailure(reason=str(exc))

        if categories:
            return ClassificationSuccess(categories=categories, stage=ClassificationStage.MODEL)

        logger.warning(
            "No valid categories assigned by the model. "
            "Falling back to token-frequency categorisation."
        )
        label, score = self.best_by_token_frequency(combined)
        if score > 0:
            logger.info("Selected category based on token frequency: %s", label)
            return ClassificationSuccess(
                categories=[label], stage=ClassificationStage.TOKEN_FREQUENCY
            )

        logger.warning("No taxonomy words found in text. Falling back to fuzzy matching.")
        label = self.best_by_similarity(combined)
        logger.info("Selected category based on fuzzy match: %s", label)
        return ClassificationSuccess(categories=[label], stage=ClassificationStage.FUZZY)

    async def _classify_with_model(self, combined: str) -> list[str]:
        messages = [
            {
                "role": "system",
                "content": (
                    "You are a helpful assistant that classifies texts into specific "
                    f"categories. The available categories are: {', '.join(self._taxonomy)}. "
                    "Assign one or more of these categories to the text. Ensure that at "
                    "least one category is always assigned. Reply with the category "
                    "names separated by commas."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Based on the following text, assign the most relevant "
                    f"categories:\n\n{combined}"
                ),
            },
        ]
        call = self._llm.chat(
            messages,
            max_tokens=CLASSIFY_MAX_TOKENS,
            temperature=CLASSIFY_TEMPERATURE,
        )
        if self._model_timeout is not None:
            response = await asyncio.wait_for(call, timeout=self._model_timeout)
        else:
            response = await call
        return parse_model_categories(response, self._taxonomy)

    def best_by_token_frequency(self, text: str) -> tuple[str, int]:
        """Return the highest-scoring label and its score.

        A label scores the summed frequency in ``text`` of each of its own
        tokens. The first label reaching the maximum wins.
        """
        frequencies = token_frequencies(text)
        best_label = self._taxonomy[0]
        best_score = -1
        for label in self._taxonomy:
            score = sum(frequencies.get(token, 0) for token in tokenize(label))
            if score > best_score:
                best_label, best_score = label, score
        return best_label, best_score

    def best_by_similarity(self, text: str) -> str:
        """Return the label most similar to ``text``; the first maximum wins."""
        ratings = [(label, dice_similarity(text, label)) for label in self._taxonomy]
        logger.debug("Fuzzy match ratings: %s", ratings)
        best_label, best_rating = ratings[0]
        for label, rating in ratings[1:]:
            if rating > best_rating:
                best_label, best_rating = label, rating
        return best_label
