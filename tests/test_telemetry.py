"""
Tests for failure-path logging and OpenTelemetry recording.
"""

import logging
import threading
from unittest.mock import Mock, patch

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from arg_validators import (
    NullArgumentError,
    OutOfRangeArgumentError,
    validate_not_null,
    validate_range,
)
from arg_validators.utils.telemetry import (
    VIOLATION_EVENT_NAME,
    ArgumentTracer,
    get_tracer,
    report_violation,
)


@pytest.fixture
def mock_tracer():
    tracer = ArgumentTracer("test_service")
    tracer.violation_counter = Mock()
    with patch("arg_validators.utils.telemetry.get_tracer", return_value=tracer):
        yield tracer


class TestReportViolation:
    """Test reporting of guard failures."""

    def test_returns_same_error(self, mock_tracer):
        error = NullArgumentError("client")
        assert report_violation(error, "validate_not_null") is error

    def test_counts_violation(self, mock_tracer):
        with pytest.raises(NullArgumentError):
            validate_not_null(None, "client")

        mock_tracer.violation_counter.add.assert_called_once_with(1, {
            "violation_type": "NullArgumentError",
            "validator": "validate_not_null",
            "param_name": "client",
        })

    def test_success_records_nothing(self, mock_tracer, caplog):
        caplog.set_level(logging.DEBUG, logger="arg_validators")

        validate_not_null("value", "client")
        validate_range(5, 1, 10, "count")

        mock_tracer.violation_counter.add.assert_not_called()
        assert not [r for r in caplog.records if r.name.startswith("arg_validators")]

    def test_logs_failure_at_debug(self, mock_tracer, caplog):
        caplog.set_level(logging.DEBUG, logger="arg_validators")

        with pytest.raises(OutOfRangeArgumentError):
            validate_range(11, 1, 10, "count")

        records = [r for r in caplog.records if r.name == "arg_validators.utils.telemetry"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert "validate_range" in records[0].getMessage()
        assert "'count'" in records[0].getMessage()

    def test_counter_failure_does_not_mask_error(self, mock_tracer, caplog):
        mock_tracer.violation_counter.add.side_effect = RuntimeError("exporter down")

        with pytest.raises(NullArgumentError):
            validate_not_null(None, "client")

        assert any(
            "Failed to record argument violation metric" in r.getMessage()
            for r in caplog.records if r.levelno == logging.WARNING
        )


class TestSpanEvents:
    """Test span events emitted for violations."""

    def test_event_added_to_current_span(self):
        exporter = InMemorySpanExporter()
        provider = TracerProvider()
        provider.add_span_processor(SimpleSpanProcessor(exporter))
        otel_tracer = provider.get_tracer(__name__)

        with otel_tracer.start_as_current_span("create_user"):
            with pytest.raises(NullArgumentError):
                validate_not_null(None, "user")

        spans = exporter.get_finished_spans()
        assert len(spans) == 1

        events = spans[0].events
        assert len(events) == 1
        assert events[0].name == VIOLATION_EVENT_NAME
        assert events[0].attributes["param_name"] == "user"
        assert events[0].attributes["violation_type"] == "NullArgumentError"
        assert events[0].attributes["message"] == "Value cannot be null. (Parameter 'user')"

    def test_no_span_is_fine(self):
        with pytest.raises(NullArgumentError):
            validate_not_null(None, "user")


def test_get_tracer_returns_shared_instance():
    assert get_tracer() is get_tracer()
    assert isinstance(get_tracer(), ArgumentTracer)


def test_get_tracer_creates_one_instance_across_threads():
    workers = 8
    barrier = threading.Barrier(workers)
    created = []

    def first_failure():
        barrier.wait()
        created.append(get_tracer())

    with patch("arg_validators.utils.telemetry._global_tracer", None), \
            patch("arg_validators.utils.telemetry.ArgumentTracer", side_effect=lambda name: Mock()) as factory:
        threads = [threading.Thread(target=first_failure) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    assert factory.call_count == 1
    assert len(created) == workers
    assert all(tracer is created[0] for tracer in created)


if __name__ == "__main__":
    pytest.main([__file__])
