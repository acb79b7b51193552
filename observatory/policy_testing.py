"""A sandbox for trying out policy interventions."""

from __future__ import annotations

from dataclasses import dataclass

BASELINE_EFFECTIVENESS = 0.5


@dataclass
class PolicyTestResult:
    """How effective a tested policy turned out to be."""

    policy_name: str
    effectiveness: float


class PolicyTestEnvironment:
    """Evaluates policies against a fixed baseline."""

    def test_policy(self, policy_name: str) -> PolicyTestResult:
        """Evaluate ``policy_name``; every policy currently gets the baseline score."""
        return PolicyTestResult(
            policy_name=policy_name, effectiveness=BASELINE_EFFECTIVENESS
        )