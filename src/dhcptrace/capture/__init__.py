"""
Frame capture sources and the DHCPv4 layer adaptor.
"""

from .icapture_source import ICaptureSource
from .scapy_source import ScapyCaptureSource, list_devices
from .replay_source import ReplayCaptureSource
from .dhcp_layer import is_dhcpv4, parse_options, to_dhcp_packet

__all__ = [
    'ICaptureSource',
    'ReplayCaptureSource',
    'ScapyCaptureSource',
    'is_dhcpv4',
    'list_devices',
    'parse_options',
    'to_dhcp_packet',
]
