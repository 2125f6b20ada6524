"""
Factory helpers for building test trees.

Usage mirrors how a suite is usually written, one nested expression:

    suite = create_test("project", [
        create_test("parser", parser_test),
        create_test("io", [
            create_test("read", read_test),
            create_test("write", write_test),
        ]),
        build_engine_tests(),
    ])
"""

from __future__ import annotations

from typing import Iterable, Union

from ttest.core.nodes import NodeKind, TestNode, TestProcedure


def leaf(name: str, procedure: TestProcedure) -> TestNode:
    """Create a leaf node wrapping a single test procedure."""
    if not callable(procedure):
        raise TypeError(f"leaf '{name}' expects a callable, got {type(procedure).__name__}")
    return TestNode(kind=NodeKind.LEAF, name=name, procedure=procedure)


def group(name: str, children: Iterable[TestNode]) -> TestNode:
    """Create a group node from child nodes.

    Children are kept by reference; the same node may be passed to several groups.
    """
    members = list(children)
    for child in members:
        if not isinstance(child, TestNode):
            raise TypeError(f"group '{name}' expects TestNode children, got {type(child).__name__}")
    return TestNode(kind=NodeKind.GROUP, name=name, children=members)


def create_test(name: str, test: Union[TestProcedure, Iterable[TestNode]]) -> TestNode:
    """Create a leaf from a callable or a group from an iterable of nodes."""
    if isinstance(test, TestNode):
        raise TypeError(f"create_test('{name}') expects a list of nodes, not a single node")
    if callable(test):
        return leaf(name, test)
    if isinstance(test, (str, bytes)):
        raise TypeError(f"create_test('{name}') expects a callable or nodes, got {type(test).__name__}")
    try:
        members = list(test)
    except TypeError:
        raise TypeError(f"create_test('{name}') expects a callable or nodes, got {type(test).__name__}") from None
    return group(name, members)


__all__ = ["create_test", "group", "leaf"]
