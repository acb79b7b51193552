from observatory.data_packet import DataPacket
from observatory.observatory_engine import ObservatoryEngine


def test_initialize_announces(capsys):
    ObservatoryEngine().initialize()
    assert capsys.readouterr().out == "Observatory - Initialization complete\n"


def test_run_announces_then_processes(capsys):
    engine = ObservatoryEngine()
    engine.submit_signal(DataPacket(source="blank"))
    engine.run()
    assert capsys.readouterr().out.splitlines() == [
        "Observatory - Running Updates",
        "Warning - Empty signal detected",
    ]


def test_run_returns_normalised_signals():
    engine = ObservatoryEngine()
    packet = DataPacket(source="feed")
    packet.add_metric("level", 0.4)
    engine.submit_signal(packet)
    result = engine.run()
    assert len(result) == 1
    assert result[0].source == "feed"
    assert result[0].get_metric("level") == 100.0


def test_run_with_no_signals_returns_empty(capsys):
    engine = ObservatoryEngine()
    assert engine.run() == []
    assert capsys.readouterr().out == "Observatory - Running Updates\n"