"""Top-level entry into the observatory."""

from __future__ import annotations

from observatory.data_packet import DataPacket
from observatory.pipeline_controller import PipelineController


class ObservatoryEngine:
    """Accepts signals and runs the processing pipeline over them."""

    def __init__(self) -> None:
        self._pipeline = PipelineController()
        self._initialized = False

    @property
    def initialized(self) -> bool:
        """Whether :meth:`initialize` has been called."""
        return self._initialized

    def initialize(self) -> None:
        """Mark the observatory ready and announce it."""
        self._initialized = True
        print("Observatory - Initialization complete")

    def submit_signal(self, packet: DataPacket) -> None:
        """Hand ``packet`` to the pipeline."""
        self._pipeline.ingest_signal(packet)

    def run(self) -> list[DataPacket]:
        """Run one pass of the pipeline and return the normalised signals."""
        print("Observatory - Running Updates")
        return self._pipeline.process_pipeline()