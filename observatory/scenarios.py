"""Future scenarios and their scoring."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Scenario:
    """A possible future described by its risk and growth factors."""

    name: str
    risk_factor: float
    growth_factor: float


@dataclass
class ScenarioResult:
    """The score a scenario received."""

    scenario_name: str
    outcome_score: float


class ScenarioEngine:
    """Scores scenarios as growth minus risk."""

    def run_scenario(self, scenario: Scenario) -> ScenarioResult:
        """Score a single scenario."""
        return ScenarioResult(
            scenario_name=scenario.name,
            outcome_score=scenario.growth_factor - scenario.risk_factor,
        )

    def run_all(self, scenarios: Iterable[Scenario]) -> list[ScenarioResult]:
        """Score every scenario, keeping their order."""
        return [self.run_scenario(s) for s in scenarios]


class ScenarioLoader:
    """Supplies the built-in scenario set."""

    def load_default_scenarios(self) -> list[Scenario]:
        """Return the default scenarios."""
        return [
            Scenario("AI Acceleration", 0.6, 0.9),
            Scenario("Compute Oligonopoly", 0.8, 0.5),
            Scenario("Open source Explosion", 0.4, 0.9),
        ]