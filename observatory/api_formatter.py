"""Text payloads for the observatory's API."""

from __future__ import annotations

from collections.abc import Sequence

from observatory.dashboard import DashboardMetric
from observatory.risk_alerts import RiskAlert


class APIFormatter:
    """Renders dashboards and alerts as JSON-like text."""

    def format_dashboard(self, metrics: Sequence[DashboardMetric]) -> str:
        """Render ``metrics`` under a ``dashboard`` key."""
        items = ",".join(
            f'{{"name":"{m.name}","value":{m.value:g},"trend":"{m.trend}"}}'
            for m in metrics
        )
        return f'{{ "dashboard": [\n{items}]}}'

    def format_alerts(self, alerts: Sequence[RiskAlert]) -> str:
        """Render ``alerts`` under an ``alerts`` key, entries separated by ';'."""
        items = ";".join(
            f'{{"category":"{a.category}","message":"{a.message}",'
            f'"severity":{a.severity:g}}}'
            for a in alerts
        )
        return f'{{ "alerts": [{items}]}}\n'