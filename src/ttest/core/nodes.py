"""
Composable test tree.

A TestNode is one of two variants:
- leaf: wraps a test procedure that receives the node's ScopedLog
- group: wraps an ordered list of child TestNodes

Running a group runs each child and then incorporates the child's log into
the group's own, so every failure carries the full scope chain down to the
leaf that produced it.

Caller contracts:
- Call ``run()`` once per node per reporting cycle. Logs are additive; a
  second run re-executes everything and appends on top of the first. A leaf
  run twice holds twice its messages. A group run twice incorporates each
  child's whole accumulated log again, so a child failing once per run
  contributes 1 + 2 = 3 entries after two runs.
- Children are shared references. The same node may appear under several
  parents or in several trees, but sharing one node between two parents of
  the same tree counts its failures once per parent.
- Child execution order is not guaranteed. Procedures must be self-contained
  and safe to run in any order, including concurrently with their siblings.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import IO, Any, Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from ttest.core.log import ScopedLog

logger = logging.getLogger(__name__)

TestProcedure = Callable[[ScopedLog], None]


class NodeKind(str, Enum):
    """Variant tag of a TestNode."""

    LEAF = "leaf"
    GROUP = "group"


class TestNode(BaseModel):
    """A leaf test or a group of tests, each owning one ScopedLog."""

    # Keep pytest from collecting this class.
    __test__ = False

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: NodeKind
    name: str
    procedure: Optional[TestProcedure] = None
    children: List["TestNode"] = Field(default_factory=list)

    _log: ScopedLog = PrivateAttr()

    @model_validator(mode="after")
    def _check_payload(self) -> "TestNode":
        if self.kind == NodeKind.LEAF:
            if self.procedure is None:
                raise ValueError(f"leaf '{self.name}' requires a procedure")
            if self.children:
                raise ValueError(f"leaf '{self.name}' cannot have children")
        elif self.procedure is not None:
            raise ValueError(f"group '{self.name}' cannot have a procedure")
        return self

    def model_post_init(self, __context: Any) -> None:
        self._log = ScopedLog(qualifying_name=self.name)

    @property
    def log(self) -> ScopedLog:
        return self._log

    @property
    def is_leaf(self) -> bool:
        return self.kind == NodeKind.LEAF

    @property
    def is_group(self) -> bool:
        return self.kind == NodeKind.GROUP

    def run(self) -> None:
        """Execute this node, leaving its log populated with all failures below it."""
        logger.debug("Running %s node %s", self.kind.value, self.name)
        if self.kind == NodeKind.LEAF:
            self.procedure(self._log)
        else:
            self._run_children()
        logger.debug("Finished %s with %d error(s)", self.name, self._log.size())

    def _run_children(self) -> None:
        # Each child is joined before its log is incorporated.
        for child in self.children:
            child.run()
            self._log.incorporate(child.log)

    def error_count(self) -> int:
        return self._log.size()

    def report(self, sink: IO) -> None:
        self._log.report(sink)

    def describe(self) -> str:
        """Human-readable outline of the subtree."""
        if self.is_leaf:
            return self.name
        inner = ", ".join(child.describe() for child in self.children)
        return f"{self.name}[{inner}]"


TestNode.model_rebuild()


__all__ = ["NodeKind", "TestNode", "TestProcedure"]
