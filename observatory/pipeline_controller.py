"""Validation and normalisation of received signals."""

from __future__ import annotations

from observatory.data_packet import DataPacket
from observatory.signal_registry import SignalRegistry

NORMALIZED_VALUE = 100.0
EMPTY_SIGNAL_WARNING = "Warning - Empty signal detected"


class PipelineController:
    """Collects packets and runs them through validation and normalisation."""

    def __init__(self) -> None:
        self._registry = SignalRegistry()

    def ingest_signal(self, packet: DataPacket) -> None:
        """Add ``packet`` to the pipeline."""
        self._registry.register_signal(packet)

    def process_pipeline(self) -> list[DataPacket]:
        """Validate the stored signals and return normalised copies of them.

        The stored signals themselves are not changed.
        """
        self._validate_signals()
        return self._normalize_signals()

    def _validate_signals(self) -> None:
        for signal in self._registry.all_signals():
            if not signal.metrics:
                print(EMPTY_SIGNAL_WARNING)

    def _normalize_signals(self) -> list[DataPacket]:
        signals = self._registry.all_signals()
        for signal in signals:
            signal.metrics = dict.fromkeys(signal.metrics, NORMALIZED_VALUE)
        return signals