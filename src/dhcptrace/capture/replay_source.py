"""
Replay capture source for testing without a live device.
"""
from collections import deque
from typing import Iterable, Optional

from scapy.packet import Packet
from scapy.utils import rdpcap

from .icapture_source import ICaptureSource


class ReplayCaptureSource(ICaptureSource):
    """Serves a fixed sequence of frames in order, then reports exhausted."""

    def __init__(self, frames: Iterable[Packet]):
        self._frames = deque(frames)
        self.opened = False
        self.closed = False

    @classmethod
    def from_pcap(cls, path: str) -> "ReplayCaptureSource":
        return cls(rdpcap(path))

    def open(self) -> None:
        self.opened = True

    def close(self) -> None:
        self.closed = True

    def next_frame(self, timeout: Optional[float] = None) -> Optional[Packet]:
        if not self._frames:
            return None
        return self._frames.popleft()

    @property
    def exhausted(self) -> bool:
        return not self._frames
