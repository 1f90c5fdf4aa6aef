"""
DHCP packet data models.
"""

from .options import MessageType, Operation, OptionType, message_type_name, operation_name, option_name
from .packet import ZERO_ADDRESS, DhcpOption, DhcpPacket

__all__ = [
    'DhcpOption',
    'DhcpPacket',
    'MessageType',
    'Operation',
    'OptionType',
    'ZERO_ADDRESS',
    'message_type_name',
    'operation_name',
    'option_name',
]
