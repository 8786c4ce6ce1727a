"""Error Hierarchy - typed, categorized exceptions for every strkit failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Argument errors subclass ValueError as well, so plain `except ValueError` still works
    - to_response() produces the uniform error envelope used by the dispatch shell
    - Every function outside this taxonomy is total and never raises on bad offsets

Design Decisions:
    - Single hierarchy with StrkitError base: the dispatch shell catches one type
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    UNSUPPORTED = "unsupported"
    RESOURCE_NOT_FOUND = "resource_not_found"
    SYSTEM = "system"


@dataclass
class ErrorContext:
    """Context attached to an error for logging and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    argument: str | None = None
    debug_info: dict[str, Any] | None = None


class StrkitError(Exception):
    """Base exception for all strkit errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to the standardized error envelope."""
        return {
            "status": "error",
            "error_code": self.code,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "argument": self.context.argument,
                    "debug_info": self.context.debug_info,
                },
            },
        }


# ─── Argument Errors ────────────────────────────────────────────

class InvalidArgumentError(StrkitError, ValueError):
    """An argument is outside the domain the operation accepts."""
    def __init__(
        self, message: str, argument: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.argument = argument
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx,
        )
        self.argument = argument


class UnsupportedAlgorithmError(StrkitError, ValueError):
    """Hash algorithm name not recognized."""
    def __init__(self, algorithm: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.argument = "algo"
        super().__init__(
            f"Unsupported hash algorithm '{algorithm}'",
            "UNSUPPORTED_ALGORITHM", ErrorCategory.UNSUPPORTED,
            ErrorSeverity.ERROR, ctx,
        )
        self.algorithm = algorithm


# ─── System Errors ──────────────────────────────────────────────

class InsufficientEntropyError(StrkitError):
    """The OS random source could not supply the requested bytes."""
    def __init__(self, requested_bytes: int, context: ErrorContext | None = None):
        super().__init__(
            f"Could not gather {requested_bytes} bytes of entropy",
            "INSUFFICIENT_ENTROPY", ErrorCategory.SYSTEM,
            ErrorSeverity.CRITICAL, context,
        )
        self.requested_bytes = requested_bytes


# ─── Dispatch Errors ────────────────────────────────────────────

class UnknownOperationError(StrkitError):
    """Requested operation is not registered."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Operation '{operation}' does not exist.",
            "UNKNOWN_OPERATION", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.operation = operation


class RequestValidationError(StrkitError):
    """Request shape or arguments do not match the operation signature."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
