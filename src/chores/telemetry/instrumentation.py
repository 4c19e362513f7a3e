"""OpenTelemetry instrumentation setup."""

import logging
from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.semconv.resource import ResourceAttributes

from chores.config import Settings
from chores.models.chore import Chore

logger = logging.getLogger(__name__)


class TelemetryManager:
    """Manages OpenTelemetry instrumentation."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.tracer_provider: TracerProvider | None = None

    def setup(self) -> None:
        """Initialize OpenTelemetry tracing."""
        if not self.settings.otel_enabled:
            logger.info("OpenTelemetry is disabled")
            return

        logger.info("Initializing OpenTelemetry instrumentation")
        self._setup_tracing(self._create_resource())
        logger.info("OpenTelemetry instrumentation initialized successfully")

    def _create_resource(self) -> Resource:
        """Create resource with service attributes."""
        attributes = {
            ResourceAttributes.SERVICE_NAME: self.settings.otel_service_name,
            ResourceAttributes.DEPLOYMENT_ENVIRONMENT: self.settings.environment,
        }
        attributes.update(self.settings.get_resource_attributes())
        return Resource.create(attributes)

    def _setup_tracing(self, resource: Resource) -> None:
        """Setup trace provider and exporters."""
        self.tracer_provider = TracerProvider(resource=resource)

        if self.settings.otel_traces_exporter == "otlp":
            endpoint = self.settings.otel_exporter_otlp_endpoint
            if not endpoint.endswith("/v1/traces"):
                endpoint = f"{endpoint.rstrip('/')}/v1/traces"
            otlp_exporter = OTLPSpanExporter(
                endpoint=endpoint,
                headers=self.settings.get_otlp_headers(),
            )
            self.tracer_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))
            logger.info(f"OTLP trace exporter configured: {endpoint}")

        elif self.settings.otel_traces_exporter == "console":
            self.tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
            logger.info("Console trace exporter configured")

        trace.set_tracer_provider(self.tracer_provider)

    def shutdown(self) -> None:
        """Shutdown telemetry providers."""
        if self.tracer_provider:
            self.tracer_provider.shutdown()
        logger.info("OpenTelemetry shutdown complete")


def set_span_attributes(span: Any, **attributes: Any) -> None:
    """Set multiple attributes on a span, skipping None values."""
    for key, value in attributes.items():
        if value is None:
            continue
        if isinstance(value, (bool, int, float, str)):
            span.set_attribute(key, value)
        else:
            span.set_attribute(key, str(value))


def create_chore_span_attributes(chore: Chore) -> dict[str, Any]:
    """Span attributes describing a chore and its recurrence."""
    attributes: dict[str, Any] = {
        "chore.id": chore.id,
        "chore.household_id": chore.household_id,
        "chore.is_recurring": chore.is_recurring,
        "chore.due_date": chore.due_date.isoformat() if chore.due_date else None,
    }

    rule = chore.recurrence_rule
    if rule is not None:
        attributes["chore.recurrence.type"] = str(getattr(rule.type, "value", rule.type))
        attributes["chore.recurrence.interval"] = rule.interval
        if rule.end_date is not None:
            attributes["chore.recurrence.end_date"] = rule.end_date.isoformat()

    return attributes
