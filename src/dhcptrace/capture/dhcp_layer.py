"""
Frame -> DhcpPacket adaptor.

scapy does the Ethernet/IP/UDP/BOOTP dissection. The option area is walked
here as raw type/length/data records so every option keeps its exact bytes,
which scapy's own DHCP option parsing does not preserve.
"""
import logging
from typing import List, Optional

from scapy.layers.dhcp import BOOTP, DHCP
from scapy.packet import Packet
from scapy.utils import str2mac

from ..models.options import Operation, OptionType
from ..models.packet import DhcpOption, DhcpPacket

logger = logging.getLogger(__name__)

DEFAULT_HW_LEN = 6


def is_dhcpv4(frame: Packet) -> bool:
    """True for frames carrying a BOOTP message with the DHCP magic cookie."""
    return frame.haslayer(DHCP)


def parse_options(data: bytes) -> List[DhcpOption]:
    """
    Split the option area (after the magic cookie) into records.

    Pad bytes are skipped and End stops the walk. A record whose length runs
    past the end of the buffer keeps whatever bytes are present.
    """
    options = []
    i = 0
    while i < len(data):
        code = data[i]
        if code == OptionType.Pad:
            i += 1
            continue
        if code == OptionType.End:
            break
        if i + 1 >= len(data):
            logger.debug("Option %d has no length byte, dropping", code)
            break
        length = data[i + 1]
        value = data[i + 2:i + 2 + length]
        if len(value) < length:
            logger.debug("Option %d truncated: %d of %d bytes", code, len(value), length)
        options.append(DhcpOption(type=code, data=bytes(value)))
        i += 2 + length
    return options


def _operation(op: int):
    try:
        return Operation(op)
    except ValueError:
        return op


def to_dhcp_packet(frame: Packet) -> Optional[DhcpPacket]:
    """Build a DhcpPacket from a captured frame, None if it is not DHCPv4."""
    if not is_dhcpv4(frame):
        return None

    bootp = frame[BOOTP]
    hw_len = bootp.hlen or DEFAULT_HW_LEN
    chaddr = bytes(bootp.chaddr)[:hw_len]

    return DhcpPacket(
        operation=_operation(bootp.op),
        xid=bootp.xid,
        client_mac=str2mac(chaddr),
        client_ip=bootp.ciaddr,
        your_client_ip=bootp.yiaddr,
        next_server_ip=bootp.siaddr,
        relay_agent_ip=bootp.giaddr,
        options=tuple(parse_options(bytes(frame[DHCP]))),
    )
