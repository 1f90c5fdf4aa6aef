"""Multi-line text report for one DHCP packet."""
from typing import List

from ..models.options import operation_name
from ..models.packet import ZERO_ADDRESS, DhcpPacket
from .option_decoder import NAME_WIDTH, render_option

INDENT = "  "


def _field_line(label: str, value) -> str:
    return f"{INDENT}{label:<{NAME_WIDTH}} : {value}\n"


def format_packet(packet: DhcpPacket) -> str:
    """
    Render a packet as:

        Request from 0.0.0.0 / 02:42:ac:11:00:02
          MessageType     : Discover
          ...
          YourClientIP    : 192.168.1.100
          Xid             : 305419896

    Address lines are only emitted when the address is set; the Xid line
    always is.
    """
    lines: List[str] = [
        f"{operation_name(packet.operation)} from {packet.client_ip} / {packet.client_mac}\n"
    ]

    for option in packet.options:
        lines.append(f"{INDENT}{render_option(option)}\n")

    for label, address in (
        ("YourClientIP", packet.your_client_ip),
        ("NextServerIP", packet.next_server_ip),
        ("RelayAgentIP", packet.relay_agent_ip),
    ):
        if address != ZERO_ADDRESS:
            lines.append(_field_line(label, address))

    lines.append(_field_line("Xid", packet.xid))
    return "".join(lines)
