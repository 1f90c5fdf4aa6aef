"""
Span backends and DHCP transaction correlation.
"""

from .backend import ISpanBackend, NoopSpanBackend, OpenTelemetrySpanBackend
from .correlator import Transaction, TransactionCorrelator, resolve_message_type

__all__ = [
    'ISpanBackend',
    'NoopSpanBackend',
    'OpenTelemetrySpanBackend',
    'Transaction',
    'TransactionCorrelator',
    'resolve_message_type',
]
