"""Alerts raised when risk readings cross a threshold."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

ALERT_THRESHOLD = 0.7
HIGH_RISK_CATEGORY = "High Risk"


@dataclass
class RiskAlert:
    """A single alert about a risk reading."""

    category: str
    message: str
    severity: float


class RiskAlertEngine:
    """Turns raw risk readings into alerts for readings above the threshold."""

    def generate_alerts(self, risk_inputs: Iterable[float]) -> list[RiskAlert]:
        """Return one alert per reading strictly above the threshold, in input order."""
        return [
            self._build_alert(HIGH_RISK_CATEGORY, risk)
            for risk in risk_inputs
            if risk > ALERT_THRESHOLD
        ]

    @staticmethod
    def _build_alert(category: str, severity: float) -> RiskAlert:
        return RiskAlert(
            category=category,
            message=f"Risk level exceeded threshold{severity:f}",
            severity=severity,
        )