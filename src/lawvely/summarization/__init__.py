"""Model-backed title, summary and date generation."""

from lawvely.summarization.dates import NO_DATE, DateExtractor
from lawvely.summarization.summary import GeneratedSummaries, SummaryGenerator

__all__ = ["NO_DATE", "DateExtractor", "GeneratedSummaries", "SummaryGenerator"]
