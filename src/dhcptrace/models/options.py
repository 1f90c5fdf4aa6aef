"""
DHCPv4 code tables.

Option codes follow RFC 2132 (plus the handful of later options commonly seen
on the wire). Member names are what shows up in reports and as span tag keys,
so they are part of the output format.
"""
from enum import IntEnum
from typing import Union


class Operation(IntEnum):
    """BOOTP op field."""
    Request = 1
    Reply = 2


class MessageType(IntEnum):
    """Values carried by the MessageType option (53)."""
    Unspecified = 0
    Discover = 1
    Offer = 2
    Request = 3
    Decline = 4
    Ack = 5
    Nak = 6
    Release = 7
    Inform = 8


class OptionType(IntEnum):
    Pad = 0
    SubnetMask = 1
    TimeOffset = 2
    Router = 3
    TimeServer = 4
    NameServer = 5
    DomainNameServer = 6
    LogServer = 7
    CookieServer = 8
    LPRServer = 9
    ImpressServer = 10
    ResourceLocationServer = 11
    Hostname = 12
    BootFileSize = 13
    MeritDumpFile = 14
    DomainName = 15
    SwapServer = 16
    RootPath = 17
    ExtensionsPath = 18
    IPForwarding = 19
    NonLocalSourceRouting = 20
    PolicyFilter = 21
    MaxDatagramReassembly = 22
    DefaultIPTTL = 23
    PathMTUAgingTimeout = 24
    PathMTUPlateauTable = 25
    InterfaceMTU = 26
    AllSubnetsLocal = 27
    BroadcastAddr = 28
    PerformMaskDiscovery = 29
    MaskSupplier = 30
    RouterDiscovery = 31
    SolicitAddr = 32
    StaticRoutes = 33
    TrailerEncapsulation = 34
    ARPTimeout = 35
    EthernetEncapsulation = 36
    TCPDefaultTTL = 37
    TCPKeepAliveInterval = 38
    TCPKeepAliveGarbage = 39
    NISDomain = 40
    NISServers = 41
    NTPServers = 42
    VendorSpecific = 43
    NetBIOSNameServer = 44
    NetBIOSDatagramServer = 45
    NetBIOSNodeType = 46
    NetBIOSTCPScope = 47
    XFontServer = 48
    XDisplayManager = 49
    RequestIP = 50
    LeaseTime = 51
    OptionOverload = 52
    MessageType = 53
    ServerID = 54
    ParameterRequestList = 55
    Message = 56
    MaxMessageSize = 57
    T1 = 58
    T2 = 59
    ClassID = 60
    ClientID = 61
    NISPlusDomain = 64
    NISPlusServers = 65
    TFTPServerName = 66
    BootFileName = 67
    ClientFQDN = 81
    RelayAgentInfo = 82
    DomainSearch = 119
    ClasslessStaticRoute = 121
    End = 255


def option_name(code: int) -> str:
    """Name of an option code, ``Unknown(<code>)`` outside the table."""
    try:
        return OptionType(code).name
    except ValueError:
        return f"Unknown({code})"


def message_type_name(code: int) -> str:
    try:
        return MessageType(code).name
    except ValueError:
        return "Unknown"


def operation_name(op: Union[Operation, int]) -> str:
    try:
        return Operation(op).name
    except ValueError:
        return "Unknown"
