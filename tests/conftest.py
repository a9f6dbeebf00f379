"""Pytest configuration and shared fixtures for logfacade tests."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

import pytest

from logfacade.backends.base import LogBackend
from logfacade.config import ENV_PROVIDER, ENV_SANITIZER, LoggingSettings
from logfacade.providers.base import LogProvider
from logfacade.providers.registry import ProviderRegistry, set_registry
from logfacade.sanitizer import Sanitizer
from logfacade.service import LogService
from logfacade.severity import Severity


@dataclass(frozen=True)
class Emitted:
    """One record as seen by the recording backend."""

    origin: str
    label: str
    severity: Severity
    message: str
    error: BaseException | None


class RecordingBackend(LogBackend):
    """Backend that keeps emitted records in memory."""

    def __init__(self, threshold: Severity = Severity.DEBUG) -> None:
        self.threshold = threshold
        self.records: list[Emitted] = []
        self.enabled_checks: list[tuple[str, Severity]] = []

    def is_enabled(self, origin: str, severity: Severity) -> bool:
        self.enabled_checks.append((origin, severity))
        return severity >= self.threshold

    def emit(
        self,
        origin: str,
        label: str,
        severity: Severity,
        message: str,
        error: BaseException | None = None,
    ) -> None:
        self.records.append(Emitted(origin, label, severity, message, error))


class CountingSanitizer(Sanitizer):
    """Upper-cases its input and remembers every value it saw."""

    name: ClassVar[str] = "counting"

    def __init__(self) -> None:
        self.seen: list[str] = []

    def sanitize(self, untrusted: str) -> str:
        self.seen.append(untrusted)
        return untrusted.upper()


class RecordingProvider(LogProvider):
    """Provider whose service writes to a RecordingBackend."""

    name: ClassVar[str] = "recording"

    def __init__(self, settings: LoggingSettings | None = None) -> None:
        super().__init__(settings)
        self.backend = RecordingBackend()
        self._service = LogService(self.backend)

    def get_service(self) -> LogService:
        return self._service


class MyType:
    """Stand-in calling unit used as a log origin."""


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep configuration env vars and the default registry out of every test."""
    monkeypatch.delenv(ENV_PROVIDER, raising=False)
    monkeypatch.delenv(ENV_SANITIZER, raising=False)
    set_registry(None)
    yield
    set_registry(None)


@pytest.fixture
def backend() -> RecordingBackend:
    """Create a backend with every severity enabled."""
    return RecordingBackend()


@pytest.fixture
def service(backend: RecordingBackend) -> LogService:
    """Create a log service over the recording backend."""
    return LogService(backend)


@pytest.fixture
def counting_sanitizer() -> CountingSanitizer:
    """Create a sanitizer that records its inputs."""
    return CountingSanitizer()


@pytest.fixture
def registry() -> ProviderRegistry:
    """Create a fresh registry with default settings and the recording provider."""
    registry = ProviderRegistry(settings=LoggingSettings(), discover=False)
    registry.register_provider("recording", RecordingProvider)
    return registry
