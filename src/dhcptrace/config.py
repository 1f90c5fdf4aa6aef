"""
Runtime configuration.

Built by the CLI from its flags; nothing is read from or written to disk.
"""
from dataclasses import dataclass
import logging
from urllib.parse import urlparse

from .exceptions import TracingConfigError

DEFAULT_TRACING_ENDPOINT = "http://127.0.0.1:9411/api/v2/spans"
DEFAULT_SERVICE_NAME = "dhcp-packet-analyzer"


@dataclass(frozen=True)
class AnalyzerConfig:
    device: str = ""
    """Capture device. Empty means "list devices" mode."""

    print_packets: bool = True
    tracing_enabled: bool = False
    tracing_endpoint: str = DEFAULT_TRACING_ENDPOINT
    service_name: str = DEFAULT_SERVICE_NAME
    log_level: int = logging.INFO

    @property
    def list_mode(self) -> bool:
        return not self.device

    def validate(self) -> None:
        """Reject settings that cannot work before any capture is opened."""
        if not self.tracing_enabled:
            return
        parsed = urlparse(self.tracing_endpoint)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise TracingConfigError(
                f"Invalid tracing endpoint {self.tracing_endpoint!r}: expected an http(s) URL"
            )
