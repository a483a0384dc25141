"""
OpenTelemetry initialization for the back-office gateway
Traces incoming Flask requests and the outgoing httpx calls to the remote API
"""
import os
import logging
from typing import Optional

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.resources import Resource, SERVICE_NAME, SERVICE_VERSION
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.flask import FlaskInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

logger = logging.getLogger(__name__)


def init_telemetry(app) -> Optional[TracerProvider]:
    """
    Set up the global tracer provider when ENABLE_TRACING is on.

    Returns:
        TracerProvider instance if tracing is enabled, None otherwise
    """
    if not app.config.get('ENABLE_TRACING'):
        logger.info("OpenTelemetry tracing is disabled")
        return None

    try:
        service_name = os.environ.get('NAME', 'backoffice-gateway')
        resource = Resource.create({
            SERVICE_NAME: service_name,
            SERVICE_VERSION: os.environ.get('VERSION', '1.0.0'),
            "service.environment": os.environ.get('FLASK_ENV', 'development'),
        })
        provider = TracerProvider(resource=resource)

        # the exporter appends /v1/traces itself
        otlp_endpoint = os.environ.get('OTEL_EXPORTER_OTLP_ENDPOINT', 'http://localhost:4318')
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, timeout=30)))
        trace.set_tracer_provider(provider)

        logger.info(f"OpenTelemetry tracing initialized for {service_name} -> {otlp_endpoint}")
        return provider

    except Exception as e:
        logger.error(f"Failed to initialize OpenTelemetry: {e}", exc_info=True)
        return None


def instrument_app(app):
    """Instrument Flask and httpx once tracing is initialized"""
    if not app.config.get('ENABLE_TRACING'):
        return

    try:
        FlaskInstrumentor().instrument_app(app)
        HTTPXClientInstrumentor().instrument()
        logger.info("OpenTelemetry instrumentation completed")
    except Exception as e:
        logger.error(f"Failed to instrument application: {e}", exc_info=True)

