# observatory

A small library for collecting signals, scoring a few societal indicators,
building report structures and running simple "what if" simulations.
It has no runtime dependencies beyond the Python standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Signal pipeline

```python
from observatory.data_packet import DataPacket
from observatory.observatory_engine import ObservatoryEngine

packet = DataPacket(source="feed", type="growth")
packet.add_metric("ai_growth", 0.8)

engine = ObservatoryEngine()
engine.initialize()          # prints "Observatory - Initialization complete"
engine.submit_signal(packet)
normalised = engine.run()    # prints "Observatory - Running Updates"
```

- `DataPacket` (in `observatory.data_packet`) holds `source`, `type` and a
  `metrics` dict. `add_metric(key, value)` sets a metric; `get_metric(key)`
  returns it, or `0.0` if it was never set.
- `SignalRegistry` (in `observatory.signal_registry`) stores copies of packets
  in arrival order. `all_signals()` returns copies, so changing them does not
  change the registry. `clear()` empties it, and `len()` gives the count.
- `PipelineController` (in `observatory.pipeline_controller`) keeps packets in
  a registry. `process_pipeline()` prints `Warning - Empty signal detected`
  for each packet without metrics. It then returns copies of all packets with
  every metric value set to `100.0`. The stored packets are not changed.
- `ObservatoryEngine` (in `observatory.observatory_engine`) wraps a controller.
  Its `initialized` property shows whether `initialize()` has been called.
  `run()` returns the list that `process_pipeline()` produces.

## Indicator models

Each model takes a mapping from signal names to values. It returns a
dataclass with the model name, an index clamped to 0–1, a confidence and a
text summary. The index is a weighted sum of the signals used for scoring,
and missing signals count as 0. The confidence is the share of three named
signals that are present. Those confidence names are not always the same
strings as the scoring names, so check the exact keys below.

| Model (module) | Scoring keys and weights | Confidence keys |
| --- | --- | --- |
| `CognitiveInfluenceModel` (`observatory.cognitive_influence`) | `"misinformation rate"` 0.40, `"outrage amplification"` 0.35, `"Ai_generated content ratio"` 0.25 | `"misinformation rate"`, `"outrage amplification"`, `"ai-generated content ratio"` |
| `MeaningCrisisModel` (`observatory.meaning_crisis`) | `"Community strength"` 0.50, `"loneliness index"` −0.25, `"attention fragmentation"` −0.25 | `"Loneliness index"`, `"community strength"`, `"attention fragmentation"` |
| `TechAccelerationModel` (`observatory.tech_acceleration`) | `"ai_growth"` 0.45, `"compute growth"` 0.35, `"open source growth"` 0.20 | `"ai_agents"`, `"compute_growth"`, `"open source growth"` |

Each model's `evaluate(signals)` method returns its own result type:

- `CognitiveInfluenceResult` with `manipulation_risk_index`
- `MeaningCrisisResult` with `meaning_stability_index`
- `TechAccelerationResult` with `acceleration_index`

```python
from observatory.tech_acceleration import TechAccelerationModel

result = TechAccelerationModel().evaluate({"ai_growth": 0.9, "open source growth": 0.5})
print(result.acceleration_index, result.confidence)
```

## Reports

- `RiskAlertEngine.generate_alerts(risk_inputs)` (in `observatory.risk_alerts`)
  returns a `RiskAlert` with category `"High Risk"` for each reading strictly
  above 0.7. The alerts keep the order of the input.
- `DashboardGenerator.generate()` (in `observatory.dashboard`) returns three
  fixed `DashboardMetric`s:
  - AI Acceleration 0.78
  - Meaning Stability Index 0.52
  - Systemic Risk Index 0.66

  Each metric has a trend label: `HIGH` above 0.7, `MEDIUM` above 0.4,
  otherwise `LOW`.
- `ExplanationEngine.generate_explanation(context, value, confidence)` (in
  `observatory.explanation`) returns an `Explanation` with a title, a summary
  and four reasoning steps. The third step depends on whether `value` is above
  0.7.
- `ForesightReporter.generate_brief()` (in `observatory.foresight`) returns a
  fixed `ForesightBrief` with three key insights.
- `VisualizationExporter` (in `observatory.visualization`) builds `ChartData`
  made of `ChartPoint`s:
  - `build_line_chart(title, values)` labels the points `T0`, `T1`, and so on.
  - `build_bar_chart(title, labels, values)` pairs labels with values. It
    ignores extra values and raises `ValueError` when there are fewer values
    than labels.
- `APIFormatter` (in `observatory.api_formatter`) renders dashboard metrics
  and alerts as JSON-like text with `format_dashboard(metrics)` and
  `format_alerts(alerts)`. The output is not always valid JSON:
  - alert entries are separated by `;`
  - text is inserted without escaping

## Simulations

```python
from observatory.scenarios import ScenarioEngine, ScenarioLoader
from observatory.cascade import CascadeSimulator, InfrastructureNode

results = ScenarioEngine().run_all(ScenarioLoader().load_default_scenarios())
score = CascadeSimulator().simulate_cascade([InfrastructureNode("grid", 0.3)])  # 0.7
```

- `ScenarioEngine` scores each `Scenario` as `growth_factor - risk_factor` and
  returns a `ScenarioResult`. `ScenarioLoader.load_default_scenarios()` returns
  three built-in scenarios.
- `CascadeSimulator.simulate_cascade(nodes)` adds `1 - stability` for every
  `InfrastructureNode` whose stability is below 0.5.
- `PolicyTestEnvironment.test_policy(name)` (in `observatory.policy_testing`)
  returns a `PolicyTestResult`. Every policy currently gets an effectiveness
  of 0.5.

## What this package does not do

This is a library only. It has:

- no command-line tool
- no server or HTTP API; `APIFormatter` only builds strings
- no storage, because signals live in memory for the life of a
  `SignalRegistry`
- no formatter for foresight briefs

The dashboard, brief and policy results are fixed values and are not derived
from submitted signals.