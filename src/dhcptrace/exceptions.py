"""Errors raised by dhcptrace."""


class DhcpTraceError(Exception):
    """Base exception for dhcptrace."""
    pass


class CaptureError(DhcpTraceError):
    """A capture device could not be opened or enumerated."""
    pass


class TracingConfigError(DhcpTraceError):
    """The tracing backend could not be built from the given settings."""
    pass
