"""Chart data ready for export to a plotting front end."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class ChartPoint:
    """One labelled value on a chart."""

    label: str
    value: float


@dataclass
class ChartData:
    """A titled series of chart points."""

    title: str
    points: list[ChartPoint] = field(default_factory=list)


class VisualizationExporter:
    """Builds chart data from plain values."""

    def build_line_chart(self, title: str, values: Sequence[float]) -> ChartData:
        """Label ``values`` T0, T1, ... in order."""
        return ChartData(
            title=title,
            points=[ChartPoint(f"T{i}", value) for i, value in enumerate(values)],
        )

    def build_bar_chart(
        self, title: str, labels: Sequence[str], values: Sequence[float]
    ) -> ChartData:
        """Pair each label with the value at the same position.

        Extra values are ignored; fewer values than labels is an error.
        """
        if len(values) < len(labels):
            raise ValueError(
                f"{len(labels)} labels but only {len(values)} values"
            )
        return ChartData(
            title=title,
            points=[ChartPoint(label, value) for label, value in zip(labels, values)],
        )