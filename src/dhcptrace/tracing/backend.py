"""
Span backends.

The correlator only talks to ISpanBackend, so the decode path is the same
whether spans go to a Zipkin collector or nowhere at all.
"""
from abc import ABC, abstractmethod
import logging
from typing import Any, Dict, Optional

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.exporter.zipkin.json import ZipkinExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from ..config import DEFAULT_SERVICE_NAME, DEFAULT_TRACING_ENDPOINT
from ..exceptions import TracingConfigError

logger = logging.getLogger(__name__)


class ISpanBackend(ABC):
    """Minimal span capability: start root, start child, tag, finish."""

    @abstractmethod
    def start_root_span(self, name: str, tags: Optional[Dict[str, Any]] = None) -> Any:
        """Start a span with no parent and return its handle."""
        pass

    @abstractmethod
    def start_child_span(self, name: str, parent: Any) -> Any:
        """Start a span parented to ``parent`` and return its handle."""
        pass

    @abstractmethod
    def set_tag(self, span: Any, key: str, value: Any) -> None:
        pass

    @abstractmethod
    def finish(self, span: Any) -> None:
        pass

    def shutdown(self) -> None:
        """Flush and release exporter resources."""
        pass


class NoopSpanBackend(ISpanBackend):
    """Backend used when tracing is disabled. Handles are plain objects."""

    def start_root_span(self, name: str, tags: Optional[Dict[str, Any]] = None) -> Any:
        return object()

    def start_child_span(self, name: str, parent: Any) -> Any:
        return object()

    def set_tag(self, span: Any, key: str, value: Any) -> None:
        pass

    def finish(self, span: Any) -> None:
        pass


class OpenTelemetrySpanBackend(ISpanBackend):
    """
    OpenTelemetry SDK backend.

    Uses its own TracerProvider rather than the global one. Pass ``provider``
    to route spans somewhere else (tests use an in-memory exporter).
    """

    def __init__(self, provider: TracerProvider):
        self._provider = provider
        self._tracer = provider.get_tracer("dhcptrace")

    @classmethod
    def for_zipkin(cls,
                   endpoint: str = DEFAULT_TRACING_ENDPOINT,
                   service_name: str = DEFAULT_SERVICE_NAME) -> "OpenTelemetrySpanBackend":
        """Build a backend exporting to a Zipkin v2 JSON collector."""
        try:
            exporter = ZipkinExporter(endpoint=endpoint)
            provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
            provider.add_span_processor(BatchSpanProcessor(exporter))
        except Exception as e:
            raise TracingConfigError(f"Unable to create Zipkin tracer for {endpoint}: {e}") from e

        logger.info("Pushing DHCP spans to %s as %s", endpoint, service_name)
        return cls(provider)

    def start_root_span(self, name: str, tags: Optional[Dict[str, Any]] = None) -> Any:
        # An empty context guarantees a new trace even if a span is active
        return self._tracer.start_span(name, context=Context(), attributes=tags)

    def start_child_span(self, name: str, parent: Any) -> Any:
        return self._tracer.start_span(name, context=trace.set_span_in_context(parent))

    def set_tag(self, span: Any, key: str, value: Any) -> None:
        span.set_attribute(key, value)

    def finish(self, span: Any) -> None:
        span.end()

    def shutdown(self) -> None:
        self._provider.shutdown()
