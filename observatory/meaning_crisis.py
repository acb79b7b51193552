"""Estimate of how stable a society's sense of meaning is."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

_STABILITY_WEIGHTS = {
    "Community strength": 0.50,
    "loneliness index": -0.25,
    "attention fragmentation": -0.25,
}

_CONFIDENCE_KEYS = (
    "Loneliness index",
    "community strength",
    "attention fragmentation",
)


def _clamp_unit(score: float) -> float:
    if score > 1.0:
        score = 1.0
    if score < 0.0:
        score = 0.0
    return score


@dataclass
class MeaningCrisisResult:
    """Outcome of a meaning stability evaluation."""

    model_name: str
    meaning_stability_index: float
    confidence: float
    summary: str


class MeaningCrisisModel:
    """Combines community strength against loneliness and fragmentation."""

    def evaluate(self, signals: Mapping[str, float]) -> MeaningCrisisResult:
        """Score ``signals`` and report the stability with a confidence."""
        stability = self._compute_meaning_stability(signals)
        confidence = self._estimate_confidence(signals)
        return MeaningCrisisResult(
            model_name="MeaningCrisisModel",
            meaning_stability_index=stability,
            confidence=confidence,
            summary=(
                f"Meaning stability estimated at{stability:f}"
                f"with confidence{confidence:f}"
            ),
        )

    @staticmethod
    def _compute_meaning_stability(signals: Mapping[str, float]) -> float:
        score = sum(
            weight * signals.get(key, 0.0)
            for key, weight in _STABILITY_WEIGHTS.items()
        )
        return _clamp_unit(score)

    @staticmethod
    def _estimate_confidence(signals: Mapping[str, float]) -> float:
        return sum(key in signals for key in _CONFIDENCE_KEYS) / 3.0