"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from opentelemetry import trace

from mcpsample.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_PROMPT_NAME,
    ATTR_RESOURCE_URI,
    ATTR_TOOL_NAME,
    _INSTRUMENTATION_NAME,
    configure_telemetry,
    get_tracer,
)


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        tracer = get_tracer("test.module")
        assert isinstance(tracer, trace.Tracer)

    def test_default_name(self) -> None:
        tracer = get_tracer()
        assert isinstance(tracer, trace.Tracer)

    def test_noop_span(self) -> None:
        """Without SDK configured, spans should be no-ops."""
        tracer = get_tracer("test.noop")
        with tracer.start_as_current_span("mcp.tools/list") as span:
            span.set_attribute(ATTR_METHOD, "tools/list")


class TestConfigureTelemetry:
    def test_raises_without_sdk(self) -> None:
        with patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}):
            with pytest.raises(ImportError, match="opentelemetry-sdk"):
                configure_telemetry()

    def test_installs_provider(self) -> None:
        pytest.importorskip("opentelemetry.sdk.trace")

        with patch.object(trace, "set_tracer_provider") as set_provider:
            configure_telemetry(service_name="test-svc", export_to_console=True)

        [provider] = set_provider.call_args.args
        assert provider.resource.attributes["service.name"] == "test-svc"

    def test_otlp_raises_without_exporter(self) -> None:
        pytest.importorskip("opentelemetry.sdk.trace")

        with patch.dict(
            "sys.modules",
            {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
        ):
            with pytest.raises(ImportError, match="opentelemetry-exporter-otlp"):
                configure_telemetry(
                    export_to_console=False,
                    otlp_endpoint="http://localhost:4317",
                )


class TestAttributeConstants:
    @pytest.mark.parametrize(
        "key", [ATTR_METHOD, ATTR_TOOL_NAME, ATTR_RESOURCE_URI, ATTR_PROMPT_NAME, ATTR_ERROR_CODE]
    )
    def test_namespaced(self, key: str) -> None:
        assert key.startswith("mcpsample.")

    def test_instrumentation_name(self) -> None:
        assert _INSTRUMENTATION_NAME == "mcpsample"
