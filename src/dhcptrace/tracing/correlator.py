"""
Transaction correlation.

Groups DHCP packets by transaction id (xid) into one trace per exchange:
a root span "dhcp" per xid and one instantaneous child span per packet.
The root span is finished when an Ack is seen.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import threading
from typing import Any, Dict, Mapping

from ..decoding.option_decoder import decode
from ..models.options import MessageType, operation_name
from ..models.packet import DhcpPacket
from .backend import ISpanBackend

logger = logging.getLogger(__name__)

ROOT_SPAN_NAME = "dhcp"
TERMINAL_MESSAGE_TYPE = MessageType.Ack.name


@dataclass
class Transaction:
    xid: int
    root_span: Any
    closed: bool = False
    packets: int = 0


def resolve_message_type(packet: DhcpPacket) -> str:
    """Decoded value of the first MessageType option, "" if there is none."""
    option = packet.message_type_option
    if option is None:
        return ""
    return decode(option)


class TransactionCorrelator:
    """
    Owns the xid -> Transaction table.

    Entries are never evicted: a transaction that never sees an Ack keeps
    its root span open for the lifetime of the correlator.
    """

    def __init__(self, backend: ISpanBackend):
        self.backend = backend
        self._transactions: Dict[int, Transaction] = {}
        self._lock = threading.Lock()

    @property
    def transactions(self) -> Mapping[int, Transaction]:
        return dict(self._transactions)

    @property
    def open_count(self) -> int:
        return sum(1 for t in self._transactions.values() if not t.closed)

    @property
    def closed_count(self) -> int:
        return sum(1 for t in self._transactions.values() if t.closed)

    def _transaction_for(self, xid: int) -> Transaction:
        transaction = self._transactions.get(xid)
        if transaction is None:
            root = self.backend.start_root_span(ROOT_SPAN_NAME, {"Xid": str(xid)})
            transaction = Transaction(xid=xid, root_span=root)
            self._transactions[xid] = transaction
            logger.debug("Opened transaction %d", xid)
        return transaction

    def on_packet(self, packet: DhcpPacket) -> Transaction:
        """Record one packet as a child span of its transaction."""
        with self._lock:
            transaction = self._transaction_for(packet.xid)
            message_type = resolve_message_type(packet)

            span = self.backend.start_child_span(message_type, transaction.root_span)
            self._tag_packet(span, packet)
            self.backend.finish(span)
            transaction.packets += 1

            if message_type == TERMINAL_MESSAGE_TYPE and not transaction.closed:
                self.backend.finish(transaction.root_span)
                transaction.closed = True
                logger.debug("Closed transaction %d after %d packets", packet.xid, transaction.packets)

            return transaction

    def _tag_packet(self, span: Any, packet: DhcpPacket) -> None:
        tags = {
            "Operation": operation_name(packet.operation),
            "ClientIP": packet.client_ip,
            "ClientMAC": packet.client_mac,
            "YourClientIP": packet.your_client_ip,
            "NextServerIP": packet.next_server_ip,
            "RelayAgentIP": packet.relay_agent_ip,
        }
        for key, value in tags.items():
            self.backend.set_tag(span, key, value)
        for option in packet.options:
            self.backend.set_tag(span, option.type_name, decode(option))
