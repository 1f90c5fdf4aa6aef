# DHCP packet data model
"""
Packet data models for dhcptrace.

THESE MODELS ARE IMMUTABLE. A DhcpPacket is built once per captured frame,
handed to the formatter and the correlator, then dropped.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .options import Operation, OptionType, option_name

ZERO_ADDRESS = "0.0.0.0"
"""Sentinel used by BOOTP for an address field that is not set."""


@dataclass(frozen=True)
class DhcpOption:
    """
    One type/length/data record from the option area.

    The length byte is implied by ``len(data)``; Pad and End never appear
    here because they carry no data.
    """
    type: int
    """Option code (see OptionType). Codes outside the table are kept as-is."""

    data: bytes = b""
    """Raw payload. DO NOT modify this - create new objects instead."""

    @property
    def type_name(self) -> str:
        return option_name(self.type)


@dataclass(frozen=True)
class DhcpPacket:
    """
    A decoded DHCPv4 message.

    Address fields are dotted-quad strings; ``0.0.0.0`` means "absent".
    """
    operation: Union[Operation, int]
    xid: int
    """Transaction id chosen by the client (32-bit unsigned)."""

    client_mac: str
    """Client hardware address, e.g. ``02:42:ac:11:00:02``."""

    client_ip: str = ZERO_ADDRESS
    your_client_ip: str = ZERO_ADDRESS
    next_server_ip: str = ZERO_ADDRESS
    relay_agent_ip: str = ZERO_ADDRESS

    options: Tuple[DhcpOption, ...] = field(default_factory=tuple)
    """Options in wire order."""

    def __post_init__(self):
        # Ensure options is a tuple (immutable)
        if not isinstance(self.options, tuple):
            object.__setattr__(self, 'options', tuple(self.options))

    def find_option(self, code: int) -> Optional[DhcpOption]:
        """First option with the given code, or None."""
        for option in self.options:
            if option.type == code:
                return option
        return None

    @property
    def message_type_option(self) -> Optional[DhcpOption]:
        return self.find_option(OptionType.MessageType)
