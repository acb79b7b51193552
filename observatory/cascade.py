"""Collapse estimates for chains of infrastructure."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

UNSTABLE_BELOW = 0.5


@dataclass
class InfrastructureNode:
    """A piece of infrastructure; stability runs from 0 (unstable) to 1 (stable)."""

    name: str
    stability: float


class CascadeSimulator:
    """Scores how much a set of nodes contributes to a collapse."""

    def simulate_cascade(self, nodes: Iterable[InfrastructureNode]) -> float:
        """Sum the instability of every node whose stability is below 0.5."""
        return sum(
            (1.0 - node.stability for node in nodes if node.stability < UNSTABLE_BELOW),
            0.0,
        )