"""Tracing helpers for the Janus CLI."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from typing import Any, Iterator

from opentelemetry import trace

_TRACER_NAME = "janus"


def _as_bool(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def initialize_tracing(service_name: str, *, exporter: Any | None = None) -> bool:
    """Install an SDK tracer provider when ``JANUS_TRACING`` is enabled.

    Spans go to ``exporter`` or, by default, a console exporter on stderr.
    Requires ``opentelemetry-sdk``; without it, or when tracing is disabled
    (``JANUS_DISABLE_TRACING`` wins), spans go to the API's no-op tracer and
    this returns False.
    """
    if _as_bool(os.environ.get("JANUS_DISABLE_TRACING")):
        return False
    if not _as_bool(os.environ.get("JANUS_TRACING")):
        return False

    try:
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import (
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError:
        return False

    configured_service = os.environ.get("OTEL_SERVICE_NAME", service_name)
    provider = TracerProvider(
        resource=Resource.create({"service.name": configured_service})
    )
    provider.add_span_processor(
        SimpleSpanProcessor(exporter or ConsoleSpanExporter(out=sys.stderr))
    )
    trace.set_tracer_provider(provider)
    return True


@contextmanager
def trace_operation(name: str, **attributes: Any) -> Iterator[Any]:
    """Run a block inside a span; ``None`` attribute values are dropped."""
    tracer = trace.get_tracer(_TRACER_NAME)
    with tracer.start_as_current_span(name) as span:
        for key, value in attributes.items():
            if value is not None:
                span.set_attribute(f"janus.{key}", value)
        yield span
