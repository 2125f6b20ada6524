"""
Self-test suite: the framework checked with itself.

Each procedure builds its own logs or trees and records a failure in the log
it is handed when the observed behaviour differs from the expected one.
"""

from __future__ import annotations

import io

from ttest.core.factory import create_test
from ttest.core.log import ScopedLog
from ttest.core.nodes import TestNode


def logging_test(log: ScopedLog) -> None:
    """Flat log: qualification, conditional appends and the bare-name form."""
    test_log = ScopedLog(qualifying_name="test")

    test_log.append("1")
    test_log.append_if("2", False)
    test_log.append_if("3", True)
    test_log.append()

    sink = io.StringIO()
    test_log.report(sink)

    log.append_if("incorrect log", sink.getvalue() != "test::1\ntest::3\ntest\n")


def hierarchy_test(log: ScopedLog) -> None:
    """Nested groups: error count and scope chains of every failure."""
    first = create_test("A", lambda sublog: sublog.append())
    second = create_test("B", lambda sublog: sublog.append())
    third = create_test("C", lambda sublog: sublog.append())

    compound = create_test("compound", [
        first,
        create_test("sub", [second, third]),
    ])

    compound.run()
    log.append_if("error count", compound.error_count() != 3)

    sink = io.StringIO()
    compound.report(sink)

    # Sibling order is not guaranteed, so compare sorted lines.
    messages = sorted(sink.getvalue().splitlines())
    expected = ["compound::A", "compound::sub::B", "compound::sub::C"]
    log.append_if("mismatch", messages != expected)


def build_selftest() -> TestNode:
    return create_test("ttest", [
        create_test("logging", logging_test),
        create_test("hierarchy", hierarchy_test),
    ])


__all__ = ["build_selftest", "hierarchy_test", "logging_test"]
