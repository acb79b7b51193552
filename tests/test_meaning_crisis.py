import pytest

from observatory.meaning_crisis import MeaningCrisisModel


@pytest.fixture
def model():
    return MeaningCrisisModel()


def test_empty_signals(model):
    result = model.evaluate({})
    assert result.model_name == "MeaningCrisisModel"
    assert result.meaning_stability_index == 0.0
    assert result.confidence == 0.0
    assert result.summary == (
        "Meaning stability estimated at0.000000with confidence0.000000"
    )


def test_community_strength_raises_stability(model):
    weak = model.evaluate({"Community strength": 0.2}).meaning_stability_index
    strong = model.evaluate({"Community strength": 0.8}).meaning_stability_index
    assert strong > weak > 0.0


def test_loneliness_lowers_stability(model):
    base = model.evaluate({"Community strength": 1.0}).meaning_stability_index
    lonely = model.evaluate(
        {"Community strength": 1.0, "loneliness index": 0.8}
    ).meaning_stability_index
    assert lonely < base


def test_fragmentation_lowers_stability(model):
    base = model.evaluate({"Community strength": 1.0}).meaning_stability_index
    fragmented = model.evaluate(
        {"Community strength": 1.0, "attention fragmentation": 0.8}
    ).meaning_stability_index
    assert fragmented < base


def test_stability_clamped_low(model):
    result = model.evaluate({"loneliness index": 1.0, "attention fragmentation": 1.0})
    assert result.meaning_stability_index == 0.0


def test_stability_clamped_high(model):
    assert model.evaluate({"Community strength": 40.0}).meaning_stability_index == 1.0


def test_full_confidence_with_confidence_keys(model):
    signals = {
        "Loneliness index": 0.5,
        "community strength": 0.5,
        "attention fragmentation": 0.5,
    }
    assert model.evaluate(signals).confidence == 1.0


def test_stability_key_spelling_does_not_count_for_confidence(model):
    result = model.evaluate({"Community strength": 0.6, "loneliness index": 0.1})
    assert result.confidence == 0.0
    assert result.meaning_stability_index > 0.0


def test_confidence_key_spelling_does_not_count_for_stability(model):
    result = model.evaluate({"community strength": 0.9})
    assert result.meaning_stability_index == 0.0
    assert result.confidence == pytest.approx(1 / 3)


def test_summary_reports_values(model):
    result = model.evaluate({"Community strength": 0.9, "attention fragmentation": 0.2})
    assert f"{result.meaning_stability_index:f}" in result.summary
    assert result.summary.endswith(f"with confidence{result.confidence:f}")