"""Storage for the packets the observatory has received."""

from __future__ import annotations

import copy

from observatory.data_packet import DataPacket


class SignalRegistry:
    """Keeps independent copies of registered packets, in arrival order."""

    def __init__(self) -> None:
        self._signals: list[DataPacket] = []

    def register_signal(self, packet: DataPacket) -> None:
        """Store a copy of ``packet``."""
        self._signals.append(copy.deepcopy(packet))

    def all_signals(self) -> list[DataPacket]:
        """Return copies of every stored packet; changing them leaves the registry alone."""
        return copy.deepcopy(self._signals)

    def clear(self) -> None:
        """Forget every stored packet."""
        self._signals.clear()

    def __len__(self) -> int:
        return len(self._signals)