from abc import ABC, abstractmethod
from typing import Optional

from scapy.packet import Packet


class ICaptureSource(ABC):
    """
    Ordered stream of link-layer frames.

    Sources are context managers: ``__exit__`` always closes, so the capture
    handle is released however the consumer stops.
    """

    @abstractmethod
    def open(self) -> None:
        """Acquire the capture handle. Raises CaptureError on failure."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the capture handle. Safe to call more than once."""
        pass

    @abstractmethod
    def next_frame(self, timeout: Optional[float] = None) -> Optional[Packet]:
        """Next frame in arrival order, or None if none arrived within ``timeout``."""
        pass

    @property
    @abstractmethod
    def exhausted(self) -> bool:
        """True once no more frames can ever be returned."""
        pass

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
