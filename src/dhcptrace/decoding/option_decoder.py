"""
DHCP option value decoding.

This module is deterministic and best-effort:
- It never throws on malformed/truncated option payloads
- A payload whose length does not fit its option renders as "INVALID"
- Option codes it does not know render as their raw byte values

Which rendering applies is decided by OPTION_CATEGORIES, a plain table from
option code to category. Adding an option is one line in that table.
"""
from __future__ import annotations

from enum import Enum
import struct
from typing import Callable, Dict

from ..models.options import OptionType, message_type_name, option_name
from ..models.packet import DhcpOption

INVALID = "INVALID"

# Width of the name column in rendered option lines
NAME_WIDTH = 15


class OptionCategory(Enum):
    STRING = "string"
    MESSAGE_TYPE = "message_type"
    IPV4 = "ipv4"
    UINT32 = "uint32"
    PARAMETER_LIST = "parameter_list"
    RAW = "raw"


OPTION_CATEGORIES: Dict[int, OptionCategory] = {
    OptionType.Hostname: OptionCategory.STRING,
    OptionType.MeritDumpFile: OptionCategory.STRING,
    OptionType.DomainName: OptionCategory.STRING,
    OptionType.RootPath: OptionCategory.STRING,
    OptionType.ExtensionsPath: OptionCategory.STRING,
    OptionType.NISDomain: OptionCategory.STRING,
    OptionType.NetBIOSTCPScope: OptionCategory.STRING,
    OptionType.XFontServer: OptionCategory.STRING,
    OptionType.XDisplayManager: OptionCategory.STRING,
    OptionType.Message: OptionCategory.STRING,
    OptionType.DomainSearch: OptionCategory.STRING,

    OptionType.MessageType: OptionCategory.MESSAGE_TYPE,

    OptionType.SubnetMask: OptionCategory.IPV4,
    OptionType.ServerID: OptionCategory.IPV4,
    OptionType.BroadcastAddr: OptionCategory.IPV4,
    OptionType.SolicitAddr: OptionCategory.IPV4,
    OptionType.RequestIP: OptionCategory.IPV4,

    OptionType.T1: OptionCategory.UINT32,
    OptionType.T2: OptionCategory.UINT32,
    OptionType.LeaseTime: OptionCategory.UINT32,
    OptionType.PathMTUAgingTimeout: OptionCategory.UINT32,
    OptionType.ARPTimeout: OptionCategory.UINT32,
    OptionType.TCPKeepAliveInterval: OptionCategory.UINT32,

    OptionType.ParameterRequestList: OptionCategory.PARAMETER_LIST,
}


def category_of(code: int) -> OptionCategory:
    return OPTION_CATEGORIES.get(code, OptionCategory.RAW)


def _decode_string(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _decode_message_type(data: bytes) -> str:
    if len(data) != 1:
        return INVALID
    return message_type_name(data[0])


def _decode_ipv4(data: bytes) -> str:
    if len(data) < 4:
        return INVALID
    return "{}.{}.{}.{}".format(data[0], data[1], data[2], data[3])


def _decode_uint32(data: bytes) -> str:
    if len(data) != 4:
        return INVALID
    return str(struct.unpack("!I", data)[0])


def _decode_parameter_list(data: bytes) -> str:
    return ",".join(option_name(code) for code in data)


def _decode_raw(data: bytes) -> str:
    return "[" + " ".join(str(b) for b in data) + "]"


_DECODERS: Dict[OptionCategory, Callable[[bytes], str]] = {
    OptionCategory.STRING: _decode_string,
    OptionCategory.MESSAGE_TYPE: _decode_message_type,
    OptionCategory.IPV4: _decode_ipv4,
    OptionCategory.UINT32: _decode_uint32,
    OptionCategory.PARAMETER_LIST: _decode_parameter_list,
    OptionCategory.RAW: _decode_raw,
}


def decode_option(code: int, data: bytes) -> str:
    """Decode one option payload into its display value (best-effort)."""
    return _DECODERS[category_of(code)](bytes(data))


def decode(option: DhcpOption) -> str:
    return decode_option(option.type, option.data)


def render_option(option: DhcpOption) -> str:
    """Name column plus decoded value, e.g. ``LeaseTime       : 3600``."""
    return f"{option.type_name:<{NAME_WIDTH}} : {decode(option)}"
