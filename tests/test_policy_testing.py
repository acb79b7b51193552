import pytest

from observatory.policy_testing import PolicyTestEnvironment, PolicyTestResult


@pytest.mark.parametrize("name", ["compute cap", "", "open weights"])
def test_policy_result_keeps_name(name):
    result = PolicyTestEnvironment().test_policy(name)
    assert result.policy_name == name


def test_policy_effectiveness_is_baseline():
    result = PolicyTestEnvironment().test_policy("compute cap")
    assert result == PolicyTestResult("compute cap", 0.5)


def test_effectiveness_is_within_unit_range():
    result = PolicyTestEnvironment().test_policy("anything")
    assert 0.0 <= result.effectiveness <= 1.0