"""Exception hierarchy shared across Lawvely modules."""

from __future__ import annotations


class LawvelyError(Exception):
    """Base class for all errors raised by Lawvely."""


class LLMError(LawvelyError):
    """The language-model gateway failed to produce a completion."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LLMTimeoutError(LLMError):
    """The gateway call did not complete within the configured timeout."""


class ClassificationUpstreamError(LawvelyError):
    """Model-based classification failed and no local result could replace it."""


class SummarizationError(LawvelyError):
    """Title, summary or date generation failed."""


class FetchError(LawvelyError):
    """Legislation text could not be fetched from its source URL."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class StorageError(LawvelyError):
    """A record could not be written to the legislation store."""
