"""
Capture -> filter -> decode -> {print, correlate}.

One packet is fully handled before the next frame is read, so report order
and span order match capture order.
"""
import logging
import threading
from typing import Any, Callable, Dict, Optional

from ..capture.dhcp_layer import to_dhcp_packet
from ..capture.icapture_source import ICaptureSource
from ..decoding.formatter import format_packet
from ..tracing.correlator import TransactionCorrelator

logger = logging.getLogger(__name__)

# Seconds to wait for a frame before re-checking the stop signal
POLL_INTERVAL = 0.2


class DecodeLoop:
    """
    Drives one capture source.

    ``sink`` receives each formatted report (printing is off when it is None);
    ``correlator`` receives each packet (tracing is off when it is None).
    """

    def __init__(self,
                 source: ICaptureSource,
                 sink: Optional[Callable[[str], Any]] = None,
                 correlator: Optional[TransactionCorrelator] = None,
                 poll_interval: float = POLL_INTERVAL):
        self.source = source
        self.sink = sink
        self.correlator = correlator
        self.poll_interval = poll_interval
        self.stats: Dict[str, int] = {
            'frames_total': 0,
            'dhcp_total': 0,
        }

    def run(self, stop: Optional[threading.Event] = None) -> Dict[str, int]:
        """Process frames until ``stop`` is set or the source runs dry."""
        stop = stop or threading.Event()

        with self.source:
            while not stop.is_set():
                frame = self.source.next_frame(timeout=self.poll_interval)
                if frame is None:
                    if self.source.exhausted:
                        break
                    continue

                self.stats['frames_total'] += 1
                packet = to_dhcp_packet(frame)
                if packet is None:
                    continue

                self.stats['dhcp_total'] += 1
                if self.sink is not None:
                    self.sink(format_packet(packet))
                if self.correlator is not None:
                    self.correlator.on_packet(packet)

        logger.debug("Decode loop stopped: %s", self.stats)
        return dict(self.stats)
