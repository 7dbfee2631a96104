"""Config module exports."""

from testplane.config.loader import load_config
from testplane.config.models import (
    LifecycleConfig,
    LoggingConfig,
    LogOutputConfig,
    TestPlaneConfig,
)

__all__ = [
    "load_config",
    "LifecycleConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "TestPlaneConfig",
]
