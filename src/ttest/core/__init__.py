"""
Test tree core.

Components:
- ScopedLog: thread-safe failure log bound to a qualifying name
- TestNode: leaf or group node owning one ScopedLog
- create_test / leaf / group: construction helpers
"""

from ttest.core.factory import create_test, group, leaf
from ttest.core.log import SCOPE_SEPARATOR, ScopedLog, format_message
from ttest.core.nodes import NodeKind, TestNode, TestProcedure

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
]
