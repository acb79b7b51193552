"""Plain-language explanations of how a signal was assessed."""

from __future__ import annotations

from dataclasses import dataclass, field

HIGH_IMPACT_THRESHOLD = 0.7


@dataclass
class Explanation:
    """A titled explanation with a summary and the reasoning steps behind it."""

    title: str
    summary: str
    reasoning_steps: list[str] = field(default_factory=list)


class ExplanationEngine:
    """Builds explanations for evaluated signals."""

    def generate_explanation(
        self, context: str, value: float, confidence: float
    ) -> Explanation:
        """Explain the evaluation of ``context`` at ``value`` with ``confidence``."""
        return Explanation(
            title=f"Explaination for{context}",
            summary=(
                f"The system evaluated the signal{context}"
                f"with Value{value:f}"
                f"and confidence{confidence:f}"
            ),
            reasoning_steps=self._build_reasoning(context, value),
        )

    @staticmethod
    def _build_reasoning(context: str, value: float) -> list[str]:
        impact = (
            "High impact signal detected"
            if value > HIGH_IMPACT_THRESHOLD
            else "Moderate or low impact signal"
        )
        return [
            f"Collected signals related to {context}",
            "Detected trend pattern in signal data",
            impact,
            "Aggregated into system-level indicator",
        ]