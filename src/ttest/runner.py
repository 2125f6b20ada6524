"""
Suite driver: run a root node once, write its report, decide an exit status.

The exit status is a caller decision. ``ExitPolicy.REPORT_ONLY`` reproduces
the classic behaviour of printing the failure count and exiting 0 regardless;
``ExitPolicy.FAIL_ON_ERRORS`` exits 1 when any failure was recorded.
"""

from __future__ import annotations

import importlib
import logging
from enum import Enum
from typing import IO, List

from pydantic import BaseModel

from ttest.core.nodes import TestNode
from ttest.errors import TargetError
from ttest.utils.logging import log_calls

logger = logging.getLogger(__name__)


class ExitPolicy(str, Enum):
    """How a run's failure count maps to a process exit status."""

    REPORT_ONLY = "report-only"
    FAIL_ON_ERRORS = "fail-on-errors"

    def exit_code(self, error_count: int) -> int:
        if self == ExitPolicy.FAIL_ON_ERRORS and error_count:
            return 1
        return 0


class RunOutcome(BaseModel):
    """Result of running one suite."""

    name: str
    error_count: int
    messages: List[str]
    exit_code: int = 0

    @property
    def succeeded(self) -> bool:
        return self.error_count == 0


def summary_line(outcome: RunOutcome) -> str:
    if outcome.error_count:
        return f"There were {outcome.error_count} errors"
    return "Success."


@log_calls()
def run_suite(
    root: TestNode,
    *,
    report_sink: IO,
    policy: ExitPolicy = ExitPolicy.REPORT_ONLY,
) -> RunOutcome:
    """
    Run a test tree and write its report.

    Args:
        root: Root node; it should not have been run before in this cycle
        report_sink: Text or binary stream receiving one line per failure
        policy: Exit status policy

    Returns:
        RunOutcome with the failure count, messages and chosen exit code
    """
    root.run()
    count = root.error_count()
    root.report(report_sink)
    logger.info("Suite %s finished with %d error(s)", root.name, count)
    return RunOutcome(
        name=root.name,
        error_count=count,
        messages=list(root.log.messages),
        exit_code=policy.exit_code(count),
    )


def resolve_target(target: str) -> TestNode:
    """
    Resolve ``package.module:attribute`` to a TestNode.

    The attribute may be a TestNode or a zero-argument callable returning one.
    A bare module path looks for an attribute named ``suite``.

    Raises:
        TargetError: If the module, attribute or resulting object is unusable
    """
    module_name, _, attr_path = target.partition(":")
    if not module_name:
        raise TargetError(target, "Target must look like 'package.module:attribute'")
    attr_path = attr_path or "suite"

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetError(target, "Cannot import module", cause=exc) from exc

    obj = module
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise TargetError(target, f"Attribute '{part}' not found", cause=exc) from exc

    if not isinstance(obj, TestNode) and callable(obj):
        logger.debug("Calling factory %s to build suite", attr_path)
        obj = obj()

    if not isinstance(obj, TestNode):
        raise TargetError(target, f"Expected a TestNode, got {type(obj).__name__}")
    return obj


__all__ = ["ExitPolicy", "RunOutcome", "resolve_target", "run_suite", "summary_line"]
