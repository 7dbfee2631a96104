"""Shared fixtures for test inventory tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from testplane.testing.models import TestFile, TestFunction, Tests, TestSuite
from testplane.testing.registry import DiscoveredTestsRegistry, default_registry
from testplane.testing.tree import flatten_test_files


def make_function(file_name: str, name: str) -> TestFunction:
    return TestFunction(name=name, name_to_run=f"{file_name}::{name}")


def make_test_files() -> list[TestFile]:
    """Three files across a/b and a/c, with a nested suite in x_test.

    a/b/x_test.py
        test_one
        XSuite
            test_two
            Inner
                test_three
    a/b/y_test.py
        test_four
    a/c/z_test.py   (empty)
    """
    x = "a/b/x_test.py"
    inner = TestSuite(
        name="Inner",
        name_to_run=f"{x}::XSuite::Inner",
        xml_name="a.b.x_test.XSuite.Inner",
        functions=[make_function(f"{x}::XSuite::Inner", "test_three")],
    )
    x_suite = TestSuite(
        name="XSuite",
        name_to_run=f"{x}::XSuite",
        xml_name="a.b.x_test.XSuite",
        functions=[make_function(f"{x}::XSuite", "test_two")],
        suites=[inner],
    )
    return [
        TestFile(
            name=x,
            name_to_run=x,
            xml_name="a.b.x_test",
            functions=[make_function(x, "test_one")],
            suites=[x_suite],
        ),
        TestFile(
            name="a/b/y_test.py",
            name_to_run="a/b/y_test.py",
            xml_name="a.b.y_test",
            functions=[make_function("a/b/y_test.py", "test_four")],
        ),
        TestFile(name="a/c/z_test.py", name_to_run="a/c/z_test.py", xml_name="a.c.z_test"),
    ]


@pytest.fixture
def test_files() -> list[TestFile]:
    """Unflattened files, see make_test_files()."""
    return make_test_files()


@pytest.fixture
def inventory(test_files: list[TestFile]) -> Tests:
    """Flattened inventory built from the test_files fixture."""
    return flatten_test_files(test_files)


@pytest.fixture
def registry() -> DiscoveredTestsRegistry:
    """A fresh, injectable registry."""
    return DiscoveredTestsRegistry()


@pytest.fixture
def clean_default_registry() -> Generator[DiscoveredTestsRegistry, None, None]:
    """Clear the process-wide registry, restore after test."""
    original = default_registry.get()
    default_registry.clear()
    yield default_registry
    if original is None:
        default_registry.clear()
    else:
        default_registry.set(original)
