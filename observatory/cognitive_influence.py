"""Estimate of the risk of large-scale cognitive manipulation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

_RISK_WEIGHTS = {
    "misinformation rate": 0.40,
    "outrage amplification": 0.35,
    "Ai_generated content ratio": 0.25,
}

_CONFIDENCE_KEYS = (
    "misinformation rate",
    "outrage amplification",
    "ai-generated content ratio",
)


def _clamp_unit(score: float) -> float:
    if score > 1.0:
        score = 1.0
    if score < 0.0:
        score = 0.0
    return score


@dataclass
class CognitiveInfluenceResult:
    """Outcome of a cognitive influence evaluation."""

    model_name: str
    manipulation_risk_index: float
    confidence: float
    summary: str


class CognitiveInfluenceModel:
    """Weights misinformation, outrage and generated-content signals into a risk index."""

    def evaluate(self, signals: Mapping[str, float]) -> CognitiveInfluenceResult:
        """Score ``signals`` and report the risk with a confidence."""
        risk = self._compute_manipulation_risk(signals)
        confidence = self._estimate_confidence(signals)
        return CognitiveInfluenceResult(
            model_name="cognitive Influence Model",
            manipulation_risk_index=risk,
            confidence=confidence,
            summary=(
                f"Cognitive Simulation risk estimated at{risk:f}"
                f"with confidence{confidence:f}"
            ),
        )

    @staticmethod
    def _compute_manipulation_risk(signals: Mapping[str, float]) -> float:
        score = sum(
            weight * signals.get(key, 0.0) for key, weight in _RISK_WEIGHTS.items()
        )
        return _clamp_unit(score)

    @staticmethod
    def _estimate_confidence(signals: Mapping[str, float]) -> float:
        return sum(key in signals for key in _CONFIDENCE_KEYS) / 3.0