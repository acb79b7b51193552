"""Estimate of how fast technology is accelerating."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

_ACCELERATION_WEIGHTS = {
    "ai_growth": 0.45,
    "compute growth": 0.35,
    "open source growth": 0.20,
}

_CONFIDENCE_KEYS = (
    "ai_agents",
    "compute_growth",
    "open source growth",
)


def _clamp_unit(score: float) -> float:
    if score > 1.0:
        score = 1.0
    if score < 0.0:
        score = 0.0
    return score


@dataclass
class TechAccelerationResult:
    """Outcome of a technology acceleration evaluation."""

    model_name: str
    acceleration_index: float
    confidence: float
    summary: str


class TechAccelerationModel:
    """Weights AI, compute and open-source growth into an acceleration index."""

    def evaluate(self, signals: Mapping[str, float]) -> TechAccelerationResult:
        """Score ``signals`` and report the acceleration with a confidence."""
        acceleration = self._compute_acceleration_index(signals)
        confidence = self._estimate_confidence(signals)
        return TechAccelerationResult(
            model_name="TechAccelarationModel",
            acceleration_index=acceleration,
            confidence=confidence,
            summary=(
                f"Technology acceleration estimated at{acceleration:f}"
                f"with confidence{confidence:f}"
            ),
        )

    @staticmethod
    def _compute_acceleration_index(signals: Mapping[str, float]) -> float:
        score = sum(
            weight * signals.get(key, 0.0)
            for key, weight in _ACCELERATION_WEIGHTS.items()
        )
        return _clamp_unit(score)

    @staticmethod
    def _estimate_confidence(signals: Mapping[str, float]) -> float:
        return sum(key in signals for key in _CONFIDENCE_KEYS) / 3.0