"""Headline metrics for the observatory dashboard."""

from __future__ import annotations

from dataclasses import dataclass

_HEADLINE_VALUES = (
    ("AI Acceleration", 0.78),
    ("Meaning Stability Index", 0.52),
    ("Systemic Risk Index", 0.66),
)


@dataclass
class DashboardMetric:
    """A named value with a coarse trend label."""

    name: str
    value: float
    trend: str


def _trend_for(value: float) -> str:
    if value > 0.7:
        return "HIGH"
    if value > 0.4:
        return "MEDIUM"
    return "LOW"


class DashboardGenerator:
    """Produces the fixed set of dashboard metrics."""

    def generate(self) -> list[DashboardMetric]:
        """Return the headline metrics, each labelled with its trend."""
        return [self._build_metric(name, value) for name, value in _HEADLINE_VALUES]

    @staticmethod
    def _build_metric(name: str, value: float) -> DashboardMetric:
        return DashboardMetric(name=name, value=value, trend=_trend_for(value))