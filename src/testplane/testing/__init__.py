"""Test inventory module - discovery, execution and result rollups."""

from testplane.testing.cancellation import CancellationScope, current_cancellation
from testplane.testing.models import (
    RunAll,
    RunFailed,
    RunSelection,
    RunTarget,
    TestFile,
    TestFolder,
    TestFunction,
    Tests,
    TestStatus,
    TestsToRun,
    TestSuite,
)
from testplane.testing.ops import TestManager
from testplane.testing.registry import DiscoveredTestsRegistry, get_discovered_tests
from testplane.testing.selection import resolve_value_as_test_to_run
from testplane.testing.tree import flatten_test_files

__all__ = [
    "TestManager",
    "Tests",
    "TestsToRun",
    "TestFolder",
    "TestFile",
    "TestSuite",
    "TestFunction",
    "TestStatus",
    "RunAll",
    "RunFailed",
    "RunSelection",
    "RunTarget",
    "CancellationScope",
    "current_cancellation",
    "DiscoveredTestsRegistry",
    "get_discovered_tests",
    "resolve_value_as_test_to_run",
    "flatten_test_files",
]
