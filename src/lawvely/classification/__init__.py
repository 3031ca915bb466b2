"""Legislation category classification.

Provides the fixed category taxonomy and the model-first classifier with
token-frequency and fuzzy-match fallbacks.
"""

from lawvely.classification.classifier import (
    CategoryClassifier,
    ClassificationOutcome,
    ClassificationStage,
    ClassificationSuccess,
    UpstreamFailure,
)
from lawvely.classification.taxonomy import TAXONOMY, is_category

__all__ = [
    "TAXONOMY",
    "CategoryClassifier",
    "ClassificationOutcome",
    "ClassificationStage",
    "ClassificationSuccess",
    "UpstreamFailure",
    "is_category",
]
