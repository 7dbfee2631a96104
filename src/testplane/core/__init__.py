"""Core module exports."""

from testplane.core.errors import (
    ConfigError,
    DiscoveryError,
    ErrorCode,
    RunError,
    TestPlaneError,
    TestsCancelledError,
)
from testplane.core.logging import (
    clear_operation_id,
    configure_logging,
    get_logger,
    get_operation_id,
    set_operation_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "DiscoveryError",
    "ErrorCode",
    "RunError",
    "TestPlaneError",
    "TestsCancelledError",
    # Logging
    "clear_operation_id",
    "configure_logging",
    "get_logger",
    "get_operation_id",
    "set_operation_id",
]
