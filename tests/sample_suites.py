"""Suites importable by the CLI tests."""

from ttest.core.factory import create_test


def _fail(log):
    log.append("failed")


def _pass(log):
    pass


passing = create_test("green", [create_test("ok", _pass)])

failing = create_test("red", [
    create_test("ok", _pass),
    create_test("sub", [create_test("bad", _fail)]),
])


def build_failing():
    return create_test("built", [create_test("bad", _fail)])


suite = create_test("default", [create_test("ok", _pass)])

not_a_node = 42
