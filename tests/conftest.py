import os
import sys

import pytest

# Add src to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
src_path = os.path.join(project_root, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from scapy.layers.dhcp import BOOTP, DHCP
from scapy.layers.inet import IP, UDP
from scapy.layers.l2 import Ether

from dhcptrace.tracing.backend import ISpanBackend, OpenTelemetrySpanBackend

CLIENT_MAC = "02:42:ac:11:00:02"
SERVER_MAC = "aa:bb:cc:dd:ee:ff"
LEASED_IP = "192.168.1.100"
SERVER_IP = "192.168.1.1"
BROADCAST = "255.255.255.255"
XID = 0x12345678

CLIENT_MESSAGES = {"discover", "request", "decline", "release", "inform"}


def mac2bytes(mac: str) -> bytes:
    return bytes.fromhex(mac.replace(":", ""))


def build_dhcp_frame(message_type=None, xid=XID, options=(), yiaddr="0.0.0.0",
                     siaddr="0.0.0.0", giaddr="0.0.0.0", ciaddr="0.0.0.0"):
    """Ether/IP/UDP/BOOTP/DHCP frame, re-dissected the way a capture would be."""
    from_client = message_type is None or message_type in CLIENT_MESSAGES
    dhcp_options = []
    if message_type is not None:
        dhcp_options.append(("message-type", message_type))
    dhcp_options.extend(options)
    dhcp_options.append("end")

    if from_client:
        l2 = Ether(src=CLIENT_MAC, dst="ff:ff:ff:ff:ff:ff")
        l3 = IP(src="0.0.0.0", dst=BROADCAST) / UDP(sport=68, dport=67)
    else:
        l2 = Ether(src=SERVER_MAC, dst=CLIENT_MAC)
        l3 = IP(src=SERVER_IP, dst=BROADCAST) / UDP(sport=67, dport=68)

    frame = (
        l2 / l3 /
        BOOTP(op=1 if from_client else 2, xid=xid, chaddr=mac2bytes(CLIENT_MAC),
              ciaddr=ciaddr, yiaddr=yiaddr, siaddr=siaddr, giaddr=giaddr) /
        DHCP(options=dhcp_options)
    )
    return Ether(bytes(frame))


def build_dns_frame():
    frame = Ether(src=CLIENT_MAC) / IP(src="10.0.0.2", dst="10.0.0.1") / UDP(sport=5353, dport=53)
    return Ether(bytes(frame))


def dora_frames(xid=XID):
    return [
        build_dhcp_frame("discover", xid, options=[("param_req_list", [1, 3, 6])]),
        build_dhcp_frame("offer", xid, options=[("server_id", SERVER_IP), ("lease_time", 3600)],
                         yiaddr=LEASED_IP, siaddr=SERVER_IP),
        build_dhcp_frame("request", xid, options=[("requested_addr", LEASED_IP), ("server_id", SERVER_IP)]),
        build_dhcp_frame("ack", xid, options=[("server_id", SERVER_IP), ("lease_time", 3600)],
                         yiaddr=LEASED_IP, siaddr=SERVER_IP),
    ]


class RecordedSpan:
    def __init__(self, name, parent=None, tags=None):
        self.name = name
        self.parent = parent
        self.tags = dict(tags or {})
        self.finish_count = 0


class RecordingBackend(ISpanBackend):
    """Keeps every span it is asked to create, in creation order."""

    def __init__(self):
        self.spans = []

    def start_root_span(self, name, tags=None):
        span = RecordedSpan(name, tags=tags)
        self.spans.append(span)
        return span

    def start_child_span(self, name, parent):
        span = RecordedSpan(name, parent=parent)
        self.spans.append(span)
        return span

    def set_tag(self, span, key, value):
        span.tags[key] = value

    def finish(self, span):
        span.finish_count += 1

    @property
    def roots(self):
        return [s for s in self.spans if s.parent is None]

    @property
    def children(self):
        return [s for s in self.spans if s.parent is not None]


@pytest.fixture
def recording_backend():
    return RecordingBackend()


@pytest.fixture
def span_exporter():
    return InMemorySpanExporter()


@pytest.fixture
def otel_backend(span_exporter):
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    backend = OpenTelemetrySpanBackend(provider)
    yield backend
    backend.shutdown()
