"""TestPlane error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Discovery
- 4xxx: Run
- 6xxx: Cancellation
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Discovery (3xxx)
    DISCOVERY_FAILED = 3001
    DISCOVERY_TIMEOUT = 3002

    # Run (4xxx)
    RUN_FAILED = 4001
    RUN_TIMEOUT = 4002

    # Cancellation (6xxx)
    CANCELLED = 6001


@dataclass(frozen=True)
class TestPlaneError(Exception):
    """Base error with structured context for hosting layers."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'DISCOVERY_FAILED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TestPlaneError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class DiscoveryError(TestPlaneError):
    """The discovery provider itself failed (not a per-file parse error)."""

    @classmethod
    def failed(cls, reason: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_FAILED,
            message=f"Test discovery failed: {reason}",
            retryable=True,
            details={"reason": reason},
        )

    @classmethod
    def timed_out(cls, seconds: float) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_TIMEOUT,
            message=f"Test discovery timed out after {seconds}s",
            retryable=True,
            details={"timeout_sec": seconds},
        )


class RunError(TestPlaneError):
    """The run provider failed."""

    @classmethod
    def failed(cls, reason: str) -> "RunError":
        return cls(
            code=ErrorCode.RUN_FAILED,
            message=f"Test run failed: {reason}",
            retryable=True,
            details={"reason": reason},
        )

    @classmethod
    def timed_out(cls, seconds: float) -> "RunError":
        return cls(
            code=ErrorCode.RUN_TIMEOUT,
            message=f"Test run timed out after {seconds}s",
            retryable=True,
            details={"timeout_sec": seconds},
        )


class TestsCancelledError(TestPlaneError):
    """Raised when the user stopped a discovery or run.

    Not a failure: callers use it to tell "stopped" apart from "broken".
    """

    @classmethod
    def during(cls, operation: str) -> "TestsCancelledError":
        return cls(
            code=ErrorCode.CANCELLED,
            message=f"Test {operation} was cancelled",
            details={"operation": operation},
        )

