"""Narrative foresight briefs."""

from __future__ import annotations

from dataclasses import dataclass, field

_INSIGHTS = (
    "AI Accelaration continues to increase.",
    "Meaning stability show signs of decline",
    "Systemic risk is moderately high.",
)


@dataclass
class ForesightBrief:
    """A titled brief with a summary and key insights."""

    title: str
    summary: str
    key_insights: list[str] = field(default_factory=list)


class ForesightReporter:
    """Produces the civilization outlook brief."""

    def generate_brief(self) -> ForesightBrief:
        """Return the current outlook brief."""
        return ForesightBrief(
            title="Civilization Outlook Report",
            summary="Analysis of current technological and societal dynamic",
            key_insights=list(_INSIGHTS),
        )