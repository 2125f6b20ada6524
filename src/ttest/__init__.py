"""
ttest: compose test procedures into named groups, run the tree, and get a
flat list of failures scoped like ``suite::group::test::message``.

Example:
    from ttest import create_test

    def check_parser(log):
        log.append_if("empty input accepted", parse("") is not None)

    suite = create_test("project", [
        create_test("parser", check_parser),
    ])
    suite.run()
    suite.report(sys.stderr)
"""

from ttest.core import (
    SCOPE_SEPARATOR,
    NodeKind,
    ScopedLog,
    TestNode,
    TestProcedure,
    create_test,
    format_message,
    group,
    leaf,
)
from ttest.runner import ExitPolicy, RunOutcome, run_suite

__all__ = [
    "SCOPE_SEPARATOR",
    "ScopedLog",
    "format_message",
    "NodeKind",
    "TestNode",
    "TestProcedure",
    "create_test",
    "group",
    "leaf",
    "ExitPolicy",
    "RunOutcome",
    "run_suite",
]
