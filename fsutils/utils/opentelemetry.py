"""\
OpenTelemetry
=============

Author: Akshay Mestry <xa@mes3.dev>
Created on: Friday, July 04 2025
Last updated on: Monday, October 19 2026

This module provides `OpenTelemetry` integration for fsutils. The
copy operations emit spans through the `OpenTelemetry` API, which stay
no-ops until an application installs a tracer provider, for instance
with `get_tracer`.
"""

from __future__ import annotations

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
    OTLPSpanExporter,
)
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.export import ConsoleSpanExporter
from opentelemetry.sdk.trace.export import SimpleSpanProcessor

from fsutils.core.config import Config

__all__: list[str] = ["get_tracer"]


def get_tracer(
    config: Config | None = None,
    name: str | None = None,
) -> trace.Tracer:
    """Configure and return a tracer with proper integration.

    This function sets up `OpenTelemetry TracerProvider` based on the
    telemetry configuration. With telemetry disabled a bare provider is
    installed, in debug mode spans are printed to the console, and
    otherwise they are exported over OTLP.

    :param config: An optional configuration object to initialise the
        tracer. If not provided, a default `Config` instance is created.
    :param name: Override for the service name, defaults to `None`. If
        not provided, uses the name from the configuration.
    :return: A configured `OpenTelemetry Tracer` instance.
    """
    if config is None:
        config = Config()
    telemetry = config.telemetry
    service = name or telemetry.name or config.name
    resource = Resource.create(
        {
            "service.name": service,
            "service.version": config.version,
            "deployment.environment": (
                "development" if telemetry.debug else "production"
            ),
            "telemetry.sdk.name": "fsutils",
        }
    )
    provider = TracerProvider(resource=resource)
    if telemetry.enable:
        if telemetry.debug:
            processor = SimpleSpanProcessor(ConsoleSpanExporter())
        else:
            processor = BatchSpanProcessor(OTLPSpanExporter())
        provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)
    return trace.get_tracer(service)
