"""
Live capture from a network device using Scapy.
"""
import logging
import queue
import threading
from typing import Dict, List, Optional, Tuple

from scapy.all import AsyncSniffer, Scapy_Exception, conf, get_if_addr, get_if_list, in6_getifaddr
from scapy.packet import Packet

from ..exceptions import CaptureError
from .icapture_source import ICaptureSource

logger = logging.getLogger(__name__)

NO_ADDRESS = "0.0.0.0"


def list_devices() -> List[Tuple[str, List[str]]]:
    """Capture devices with their IPv4 and IPv6 addresses."""
    try:
        names = get_if_list()
    except (OSError, Scapy_Exception) as e:
        raise CaptureError(f"Error during listing all network devices: {e}") from e

    ipv6: Dict[str, List[str]] = {}
    try:
        for address, _scope, name in in6_getifaddr():
            ipv6.setdefault(name, []).append(address)
    except (OSError, Scapy_Exception) as e:
        logger.debug("IPv6 addresses unavailable: %s", e)

    devices = []
    for name in names:
        try:
            address = get_if_addr(name)
        except (OSError, Scapy_Exception, ValueError):
            address = NO_ADDRESS
        addresses = [address] if address != NO_ADDRESS else []
        addresses.extend(ipv6.get(name, []))
        devices.append((name, addresses))
    return devices


class ScapyCaptureSource(ICaptureSource):
    """
    Promiscuous capture on one device.

    The L2 socket is opened synchronously in ``open()`` so a bad device fails
    there; an AsyncSniffer thread then feeds frames into a FIFO queue that the
    single consumer drains through ``next_frame()``.
    """

    def __init__(self, device: str, buffer_size: int = 10000):
        self.device = device
        self._queue: "queue.Queue[Packet]" = queue.Queue(maxsize=buffer_size)
        self._socket = None
        self._sniffer: Optional[AsyncSniffer] = None
        self._lock = threading.Lock()
        self.stats: Dict[str, int] = {
            'frames_total': 0,
            'drops_total': 0,
        }

    def _on_frame(self, frame: Packet) -> None:
        try:
            self._queue.put_nowait(frame)
            self.stats['frames_total'] += 1
        except queue.Full:
            self.stats['drops_total'] += 1

    def open(self) -> None:
        with self._lock:
            if self._sniffer is not None:
                return
            try:
                self._socket = conf.L2listen(iface=self.device, promisc=True)
            except (OSError, Scapy_Exception, ValueError) as e:
                raise CaptureError(f"Error during opening device name {self.device}: {e}") from e

            self._sniffer = AsyncSniffer(
                opened_socket=self._socket,
                prn=self._on_frame,
                store=False,  # frames only live in our queue
            )
            self._sniffer.start()
            logger.debug("Sniffer started on %s", self.device)

    def close(self) -> None:
        with self._lock:
            if self._sniffer is not None and self._sniffer.running:
                self._sniffer.stop()
            self._sniffer = None
            if self._socket is not None:
                self._socket.close()
                self._socket = None
                logger.debug(
                    "Capture on %s closed (%d frames, %d dropped)",
                    self.device, self.stats['frames_total'], self.stats['drops_total'],
                )

    def next_frame(self, timeout: Optional[float] = None) -> Optional[Packet]:
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    @property
    def exhausted(self) -> bool:
        sniffer = self._sniffer
        alive = sniffer is not None and sniffer.thread is not None and sniffer.thread.is_alive()
        return not alive and self._queue.empty()
