"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TESTPLANE__SECTION__KEY)
3. Repo YAML (.testplane/config.yaml)
4. Global YAML (~/.config/testplane/config.yaml)
5. Built-in defaults (this file)

Examples:
    TESTPLANE__LOGGING__LEVEL=DEBUG
    TESTPLANE__LIFECYCLE__DISCOVERY_TIMEOUT_SEC=60
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TESTPLANE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every lifecycle transition.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class LifecycleConfig(BaseModel):
    """Test lifecycle manager configuration.

    Env vars:
        TESTPLANE__LIFECYCLE__DISCOVERY_TIMEOUT_SEC: Discovery provider timeout
        TESTPLANE__LIFECYCLE__RUN_TIMEOUT_SEC: Run provider timeout
    """

    discovery_timeout_sec: float | None = Field(
        default=None,
        description="Fail discovery if the provider takes longer than this. "
        "None waits indefinitely.",
    )
    run_timeout_sec: float | None = Field(
        default=None,
        description="Fail a run if the provider takes longer than this. "
        "RISK: Too low kills slow integration suites mid-run.",
    )
    view_output_action: str = Field(
        default="View Test Output",
        description="Follow-up action offered alongside error notifications.",
    )

    @field_validator("discovery_timeout_sec", "run_timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class TestPlaneConfig(BaseModel):
    """Root configuration for TestPlane."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    lifecycle: LifecycleConfig = Field(default_factory=LifecycleConfig)
