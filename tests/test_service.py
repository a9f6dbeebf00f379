"""Tests for the log service pipeline."""

from __future__ import annotations

import threading

import pytest
from conftest import CountingSanitizer, Emitted, MyType, RecordingBackend

from logfacade.errors import ValidationError
from logfacade.record import MAX_MESSAGE_LENGTH, MAX_OPERATION_NAME_LENGTH
from logfacade.sanitizer import PassThroughSanitizer
from logfacade.service import LogService
from logfacade.severity import Severity

MY_TYPE = f"{MyType.__module__}.{MyType.__qualname__}"

SIMPLE_METHODS = [
    ("log_debug", Severity.DEBUG),
    ("log_configuration", Severity.CONFIGURATION),
    ("log_message", Severity.MESSAGE),
    ("log_warning", Severity.WARNING),
    ("log_failure", Severity.FAILURE),
    ("log_security", Severity.SECURITY),
]

ERROR_METHODS = [
    ("log_warning", Severity.WARNING),
    ("log_failure", Severity.FAILURE),
    ("log_security", Severity.SECURITY),
]


class TestDispatch:
    """Tests for records reaching the backend."""

    @pytest.mark.parametrize("method,severity", SIMPLE_METHODS)
    def test_each_method_maps_to_its_severity(self, service, backend, method, severity):
        """Test every log method emits at its fixed severity."""
        getattr(service, method)(MyType, "save", "disk full")
        assert backend.records == [Emitted(MY_TYPE, "save", severity, "disk full", None)]

    @pytest.mark.parametrize("method,severity", ERROR_METHODS)
    def test_error_is_attached(self, service, backend, method, severity):
        """Test the error-attaching form forwards the error."""
        error = RuntimeError("boom")
        getattr(service, method)(MyType, "save", "write failed", error)
        assert backend.records[0].error is error
        assert backend.records[0].severity == severity

    def test_warning_scenario(self, service, backend):
        """Test log_warning with warning enabled reaches the backend intact."""
        service.log_warning(MyType, "save", "disk full")
        record = backend.records[0]
        assert record.origin == MY_TYPE
        assert record.label == "save"
        assert record.severity == Severity.WARNING
        assert record.message == "disk full"

    def test_string_and_module_origins(self, service, backend):
        """Test origins given as strings or modules."""
        import json

        service.log_message("billing.invoices", "send", "sent")
        service.log_message(json, "dump", "dumped")
        assert [r.origin for r in backend.records] == ["billing.invoices", "json"]

    def test_instance_origin_uses_its_class(self, service, backend):
        """Test an instance origin resolves to its class name."""
        service.log_message(MyType(), "run", "ran")
        assert backend.records[0].origin == MY_TYPE

    def test_boundary_lengths_accepted(self, service, backend):
        """Test values exactly at the length limits are accepted."""
        service.log_failure(
            MyType, "x" * MAX_OPERATION_NAME_LENGTH, "m" * MAX_MESSAGE_LENGTH
        )
        assert len(backend.records) == 1


class TestSeverityGating:
    """Tests for the enabled check."""

    def test_disabled_severity_is_a_no_op(self, counting_sanitizer):
        """Test a disabled severity performs no sanitization and no emission."""
        backend = RecordingBackend(threshold=Severity.FAILURE)
        service = LogService(backend, counting_sanitizer)

        service.log_warning(MyType, "save", "disk full")

        assert backend.records == []
        assert counting_sanitizer.seen == []
        assert backend.enabled_checks == [(MY_TYPE, Severity.WARNING)]

    def test_security_passes_failure_threshold(self):
        """Test SECURITY is emitted when only FAILURE and above are enabled."""
        backend = RecordingBackend(threshold=Severity.FAILURE)
        service = LogService(backend)

        service.log_security(MyType, "login", "token reuse")
        service.log_warning(MyType, "login", "slow")

        assert [r.severity for r in backend.records] == [Severity.SECURITY]

    @pytest.mark.parametrize("method,_severity", SIMPLE_METHODS)
    def test_valid_calls_never_raise_when_disabled(self, method, _severity):
        """Test valid input returns normally even when nothing is enabled."""
        backend = RecordingBackend(threshold=Severity.SECURITY)
        service = LogService(backend)
        getattr(service, method)(MyType, "op", "msg")
        assert all(r.severity == Severity.SECURITY for r in backend.records)


class TestValidation:
    """Tests for argument validation."""

    @pytest.mark.parametrize("origin", [None, ""])
    def test_empty_origin_rejected(self, service, backend, origin):
        """Test a missing origin fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            service.log_message(origin, "op", "msg")
        assert exc_info.value.field == "origin"
        assert backend.records == []

    @pytest.mark.parametrize("operation_name", [None, ""])
    def test_empty_operation_name_rejected(self, service, backend, operation_name):
        """Test a missing operation name fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            service.log_message(MyType, operation_name, "msg")
        assert exc_info.value.field == "operation_name"
        assert backend.records == []

    def test_long_operation_name_rejected(self, service, backend):
        """Test an operation name over 64 characters fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            service.log_failure(MyType, "x" * 65, "msg")
        assert exc_info.value.field == "operation_name"
        assert "64" in str(exc_info.value)
        assert backend.records == []

    @pytest.mark.parametrize("message", [None, ""])
    def test_empty_message_rejected(self, service, backend, message):
        """Test a missing message fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            service.log_debug(MyType, "op", message)
        assert exc_info.value.field == "message"
        assert backend.records == []

    def test_long_message_rejected(self, service, backend):
        """Test a message over 256 characters fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            service.log_warning(MyType, "op", "m" * 257)
        assert exc_info.value.field == "message"
        assert "256" in str(exc_info.value)

    @pytest.mark.parametrize("method,_severity", ERROR_METHODS)
    def test_explicit_none_error_rejected(self, service, backend, method, _severity):
        """Test passing error=None to an error-attaching method fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            getattr(service, method)(MyType, "op", "msg", None)
        assert exc_info.value.field == "error"
        assert backend.records == []

    def test_non_exception_error_rejected(self, service, backend):
        """Test an error that is not an exception fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            service.log_failure(MyType, "op", "msg", "not an exception")
        assert exc_info.value.field == "error"

    @pytest.mark.parametrize(
        "origin,operation_name,message,field",
        [
            (MyType, b"op", "msg", "operation_name"),
            (MyType, "op", b"msg", "message"),
            (MyType, "op", bytearray(b"msg"), "message"),
            (b"billing", "op", "msg", "origin"),
        ],
    )
    def test_bytes_rejected(self, service, backend, origin, operation_name, message, field):
        """Test bytes are not decoded into strings."""
        with pytest.raises(ValidationError) as exc_info:
            service.log_message(origin, operation_name, message)
        assert exc_info.value.field == field
        assert "must be a non-empty string" in str(exc_info.value)
        assert backend.records == []

    def test_checks_run_in_order(self, service):
        """Test the first failing field is the one reported."""
        with pytest.raises(ValidationError) as exc_info:
            service.log_failure("", "x" * 65, "", None)
        assert exc_info.value.field == "origin"

        with pytest.raises(ValidationError) as exc_info:
            service.log_failure(MyType, "x" * 65, "", None)
        assert exc_info.value.field == "operation_name"

    def test_validation_runs_before_enabled_check(self):
        """Test invalid input is rejected even when the severity is disabled."""
        backend = RecordingBackend(threshold=Severity.SECURITY)
        service = LogService(backend)
        with pytest.raises(ValidationError):
            service.log_debug(MyType, "op", "")
        assert backend.enabled_checks == []

    def test_validation_error_is_value_error(self, service):
        """Test ValidationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            service.log_message(MyType, "", "msg")


class TestSanitizer:
    """Tests for sanitizer handling."""

    def test_default_is_pass_through(self, service):
        """Test a new service uses the pass-through sanitizer."""
        assert isinstance(service.sanitizer, PassThroughSanitizer)

    def test_set_sanitizer_applies_once_per_field(self, service, backend, counting_sanitizer):
        """Test operation name and message pass through the sanitizer exactly once."""
        service.set_sanitizer(counting_sanitizer)
        service.log_warning("billing", "save", "disk full")

        assert counting_sanitizer.seen == ["save", "disk full"]
        assert backend.records[0] == Emitted(
            "billing", "SAVE", Severity.WARNING, "DISK FULL", None
        )

    def test_origin_is_never_sanitized(self, service, backend, counting_sanitizer):
        """Test the origin bypasses the sanitizer."""
        service.set_sanitizer(counting_sanitizer)
        service.log_message("billing.invoices", "send", "sent")

        assert "billing.invoices" not in counting_sanitizer.seen
        assert backend.records[0].origin == "billing.invoices"

    def test_replacing_sanitizer(self, service, backend, counting_sanitizer):
        """Test a later set_sanitizer replaces the earlier one."""
        service.set_sanitizer(counting_sanitizer)
        service.set_sanitizer(PassThroughSanitizer())
        service.log_message(MyType, "op", "msg")

        assert counting_sanitizer.seen == []
        assert backend.records[0].message == "msg"

    def test_sanitizer_set_on_another_thread_is_used(self, service, backend, counting_sanitizer):
        """Test a sanitizer installed on one thread applies to calls on another."""
        installed = threading.Event()

        def install() -> None:
            service.set_sanitizer(counting_sanitizer)
            installed.set()

        def log() -> None:
            installed.wait(timeout=5)
            service.log_warning("billing", "save", "disk full")

        installer = threading.Thread(target=install)
        caller = threading.Thread(target=log)
        caller.start()
        installer.start()
        installer.join()
        caller.join()

        assert counting_sanitizer.seen == ["save", "disk full"]
        assert backend.records[0].message == "DISK FULL"

    def test_none_sanitizer_rejected(self, service):
        """Test set_sanitizer refuses None."""
        with pytest.raises(ValidationError):
            service.set_sanitizer(None)
