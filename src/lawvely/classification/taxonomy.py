"""The fixed legislation category taxonomy."""

from __future__ import annotations

# Declaration order is significant: classifier ties go to the earlier label.
TAXONOMY: tuple[str, ...] = (
    "Finance",
    "Housing",
    "Transportation",
    "Health",
    "Environment",
    "Energy",
    "Education",
    "Justice",
    "Trade",
    "Consumer",
    "Governance",
    "Technology",
    "Animal Welfare",
)


def is_category(label: str, taxonomy: tuple[str, ...] = TAXONOMY) -> bool:
    """Exact, case-sensitive membership test."""
    return label in taxonomy
