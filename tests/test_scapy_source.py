import pytest

from dhcptrace.capture import scapy_source
from dhcptrace.capture.scapy_source import ScapyCaptureSource, list_devices
from dhcptrace.exceptions import CaptureError


def test_open_unknown_device_raises_capture_error():
    source = ScapyCaptureSource("nosuchdev0")
    with pytest.raises(CaptureError) as excinfo:
        source.open()
    assert "nosuchdev0" in str(excinfo.value)


def test_close_twice_after_failed_open():
    source = ScapyCaptureSource("nosuchdev0")
    with pytest.raises(CaptureError):
        source.open()
    source.close()
    source.close()
    assert source.exhausted


def test_unopened_source_has_no_frames():
    source = ScapyCaptureSource("nosuchdev0")
    assert source.next_frame(timeout=0.01) is None
    assert source.exhausted


def test_context_manager_propagates_open_failure():
    with pytest.raises(CaptureError):
        with ScapyCaptureSource("nosuchdev0"):
            pass


def test_list_devices_wraps_enumeration_failure(monkeypatch):
    def fail():
        raise OSError("permission denied")

    monkeypatch.setattr(scapy_source, "get_if_list", fail)
    with pytest.raises(CaptureError) as excinfo:
        list_devices()
    assert "permission denied" in str(excinfo.value)


def test_list_devices_collects_ipv4_and_ipv6(monkeypatch):
    ipv4 = {"eth0": "10.0.0.2", "lo": "127.0.0.1", "dummy0": "0.0.0.0"}
    monkeypatch.setattr(scapy_source, "get_if_list", lambda: ["lo", "eth0", "dummy0"])
    monkeypatch.setattr(scapy_source, "get_if_addr", lambda name: ipv4[name])
    monkeypatch.setattr(scapy_source, "in6_getifaddr", lambda: [
        ("::1", 0x10, "lo"),
        ("fe80::1", 0x20, "eth0"),
        ("2001:db8::2", 0x00, "eth0"),
    ])

    assert list_devices() == [
        ("lo", ["127.0.0.1", "::1"]),
        ("eth0", ["10.0.0.2", "fe80::1", "2001:db8::2"]),
        ("dummy0", []),
    ]


def test_list_devices_without_ipv6(monkeypatch):
    def no_ipv6():
        raise OSError("ipv6 disabled")

    monkeypatch.setattr(scapy_source, "get_if_list", lambda: ["eth0"])
    monkeypatch.setattr(scapy_source, "get_if_addr", lambda name: "10.0.0.2")
    monkeypatch.setattr(scapy_source, "in6_getifaddr", no_ipv6)

    assert list_devices() == [("eth0", ["10.0.0.2"])]
