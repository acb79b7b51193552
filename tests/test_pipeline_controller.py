from observatory.data_packet import DataPacket
from observatory.pipeline_controller import PipelineController


def _packet(source, **metrics):
    packet = DataPacket(source=source)
    for key, value in metrics.items():
        packet.add_metric(key, value)
    return packet


def test_empty_signal_warns(capsys):
    controller = PipelineController()
    controller.ingest_signal(_packet("blank"))
    controller.process_pipeline()
    assert capsys.readouterr().out == "Warning - Empty signal detected\n"


def test_one_warning_per_empty_signal(capsys):
    controller = PipelineController()
    controller.ingest_signal(_packet("a"))
    controller.ingest_signal(_packet("b", level=0.3))
    controller.ingest_signal(_packet("c"))
    controller.process_pipeline()
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Warning - Empty signal detected"] * 2


def test_non_empty_signals_are_silent(capsys):
    controller = PipelineController()
    controller.ingest_signal(_packet("a", level=0.3))
    controller.process_pipeline()
    assert capsys.readouterr().out == ""


def test_normalisation_sets_every_metric():
    controller = PipelineController()
    controller.ingest_signal(_packet("a", x=0.1, y=7.0))
    controller.ingest_signal(_packet("b", z=-3.0))
    result = controller.process_pipeline()
    assert [p.source for p in result] == ["a", "b"]
    assert result[0].metrics == {"x": 100.0, "y": 100.0}
    assert result[1].metrics == {"z": 100.0}


def test_ingested_packet_is_untouched():
    controller = PipelineController()
    packet = _packet("a", x=0.1)
    controller.ingest_signal(packet)
    controller.process_pipeline()
    assert packet.get_metric("x") == 0.1


def test_stored_signals_are_untouched_by_processing():
    controller = PipelineController()
    controller.ingest_signal(_packet("a", x=0.1))
    first = controller.process_pipeline()
    first[0].add_metric("x", -1.0)
    second = controller.process_pipeline()
    assert second[0].get_metric("x") == 100.0


def test_empty_pipeline_returns_nothing(capsys):
    controller = PipelineController()
    assert controller.process_pipeline() == []
    assert capsys.readouterr().out == ""