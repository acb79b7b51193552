"""A single observation handed to the observatory."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DataPacket:
    """An observation from one source, carrying named numeric metrics."""

    source: str = ""
    type: str = ""
    metrics: dict[str, float] = field(default_factory=dict)

    def add_metric(self, key: str, value: float) -> None:
        """Set the metric ``key`` to ``value``, replacing any earlier value."""
        self.metrics[key] = float(value)

    def get_metric(self, key: str) -> float:
        """Return the metric ``key``, or 0.0 when it was never set."""
        return self.metrics.get(key, 0.0)