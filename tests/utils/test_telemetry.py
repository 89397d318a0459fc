"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from opentelemetry import trace

from modelhub.core.catalog.models import CostTier, ModelCapabilities, ModelConfig
from modelhub.utils.telemetry import (
    ATTR_BACKEND,
    ATTR_COST_TIER,
    ATTR_DISCOVERED_COUNT,
    ATTR_INPUT,
    ATTR_MODEL,
    ATTR_PROVIDER,
    OTLP_ENDPOINT_ENV,
    _INSTRUMENTATION_NAME,
    configure_telemetry,
    get_tracer,
    record_model,
)


def _sdk_available() -> bool:
    try:
        import opentelemetry.sdk.trace  # noqa: F401
    except ImportError:
        return False
    return True


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
        with tracer.start_as_current_span("test") as span:
            span.set_attribute(ATTR_INPUT, "gemini/flash")


class TestRecordModel:
    def test_sets_model_attributes(self) -> None:
        span = MagicMock()
        model = ModelConfig(
            id="gpt-4o",
            name="GPT-4o",
            backend="openai",
            capabilities=ModelCapabilities(cost_tier=CostTier.STANDARD),
        )

        record_model(span, model)

        span.set_attribute.assert_any_call(ATTR_MODEL, "gpt-4o")
        span.set_attribute.assert_any_call(ATTR_BACKEND, "openai")
        span.set_attribute.assert_any_call(ATTR_COST_TIER, "standard")


class TestConfigureTelemetry:
    def test_raises_without_sdk(self) -> None:
        with patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}):
            with pytest.raises(ImportError, match="opentelemetry-sdk"):
                configure_telemetry()

    def test_configures_with_console(self, monkeypatch: pytest.MonkeyPatch) -> None:
        if not _sdk_available():
            pytest.skip("opentelemetry-sdk not installed")
        from opentelemetry.sdk.trace import TracerProvider

        monkeypatch.delenv(OTLP_ENDPOINT_ENV, raising=False)
        with patch("modelhub.utils.telemetry.trace.set_tracer_provider") as set_provider:
            configure_telemetry(service_name="test-svc", export_to_console=True)

        provider = set_provider.call_args.args[0]
        assert isinstance(provider, TracerProvider)
        assert provider.resource.attributes["service.name"] == "test-svc"

    def test_otlp_raises_without_exporter(self) -> None:
        if not _sdk_available():
            pytest.skip("opentelemetry-sdk not installed")

        with patch.dict(
            "sys.modules",
            {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
        ):
            with pytest.raises(ImportError, match="opentelemetry-exporter-otlp"):
                configure_telemetry(
                    export_to_console=False,
                    otlp_endpoint="http://localhost:4317",
                )

    def test_endpoint_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        if not _sdk_available():
            pytest.skip("opentelemetry-sdk not installed")

        monkeypatch.setenv(OTLP_ENDPOINT_ENV, "http://collector:4317")
        with patch("modelhub.utils.telemetry._span_processors", return_value=[]) as processors:
            with patch("modelhub.utils.telemetry.trace.set_tracer_provider"):
                configure_telemetry(export_to_console=False)

        processors.assert_called_once_with(False, "http://collector:4317")

    def test_explicit_endpoint_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        if not _sdk_available():
            pytest.skip("opentelemetry-sdk not installed")

        monkeypatch.setenv(OTLP_ENDPOINT_ENV, "http://collector:4317")
        with patch("modelhub.utils.telemetry._span_processors", return_value=[]) as processors:
            with patch("modelhub.utils.telemetry.trace.set_tracer_provider"):
                configure_telemetry(otlp_endpoint="http://other:4317")

        processors.assert_called_once_with(True, "http://other:4317")


class TestAttributeConstants:
    def test_constants_are_namespaced(self) -> None:
        for attr in (ATTR_INPUT, ATTR_MODEL, ATTR_PROVIDER, ATTR_BACKEND, ATTR_COST_TIER, ATTR_DISCOVERED_COUNT):
            assert attr.startswith("modelhub.")

    def test_instrumentation_name(self) -> None:
        assert _INSTRUMENTATION_NAME == "modelhub"
