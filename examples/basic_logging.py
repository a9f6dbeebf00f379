#!/usr/bin/env python3
"""
Basic Logging Usage Example

This example demonstrates the core functionality of logfacade:
- Resolving the configured provider and its log service
- Logging at each severity, including SECURITY
- Swapping the sanitizer at runtime
- Plugging in a custom provider

Usage:
    python examples/basic_logging.py
    LOGFACADE_SANITIZER=control,redact python examples/basic_logging.py
"""

from logfacade import (
    LogProvider,
    LogService,
    ProviderRegistry,
    RedactingSanitizer,
    StdlibBackend,
    ValidationError,
    get_provider,
)
from logfacade.console import configure_console


class Storage:
    """Calling unit used as the log origin."""


class AuditProvider(LogProvider):
    """Provider that always redacts secrets."""

    name = "audit"

    def __init__(self, settings=None):
        super().__init__(settings)
        self._service = LogService(StdlibBackend(), RedactingSanitizer())

    def get_service(self):
        return self._service


def main():
    """Run basic logging examples."""

    configure_console("debug")

    print("=" * 70)
    print("logfacade - Basic Usage Example")
    print("=" * 70)

    # Example 1: Default provider
    print("\n[Example 1] Logging through the default provider")
    print("-" * 70)

    log = get_provider().get_service()
    log.log_debug(Storage, "open", "opening volume")
    log.log_configuration(Storage, "open", "block size 4096")
    log.log_message(Storage, "save", "saved 12 records")
    log.log_warning(Storage, "save", "disk 91% full")
    log.log_failure(Storage, "save", "write failed", OSError(28, "No space left on device"))
    log.log_security(Storage, "mount", "mount attempted by unknown uid")

    # Example 2: Validation
    print("\n[Example 2] Invalid calls are rejected")
    print("-" * 70)

    try:
        log.log_failure(Storage, "x" * 65, "msg")
    except ValidationError as e:
        print(f"✗ {e.field}: {e}")

    # Example 3: Sanitizer swap
    print("\n[Example 3] Redacting secrets")
    print("-" * 70)

    log.set_sanitizer(RedactingSanitizer())
    log.log_warning(Storage, "connect", "retrying postgres://app:hunter2@db/main")

    # Example 4: Custom provider
    print("\n[Example 4] Custom provider in an application-owned registry")
    print("-" * 70)

    registry = ProviderRegistry()
    registry.register_provider("audit", AuditProvider)
    audit = registry.get_provider("audit").get_service()
    audit.log_security(Storage, "login", "login with password=letmein rejected")
    print(f"Registered providers: {', '.join(registry.list_providers())}")

    print("\n" + "=" * 70)
    print("Examples complete!")
    print("=" * 70)


if __name__ == "__main__":
    main()
