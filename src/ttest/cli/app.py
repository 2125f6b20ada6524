"""
ttest CLI: run a test tree and report its failures.

The failure report (one scoped message per line) goes to stderr or to the
file given with --output; the human summary goes to stdout.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console

from ttest.core.nodes import TestNode
from ttest.errors import TargetError
from ttest.runner import ExitPolicy, RunOutcome, resolve_target, run_suite, summary_line
from ttest.utils.logging import configure_logging

app = typer.Typer(help="ttest CLI: run hierarchical test suites and report scoped failures.")
console = Console()
err_console = Console(stderr=True)

FAIL_ON_ERRORS_HELP = "Exit with status 1 when any failure is reported (default: report only, exit 0)"


def _execute(root: TestNode, *, fail_on_errors: bool, output: str | None) -> None:
    policy = ExitPolicy.FAIL_ON_ERRORS if fail_on_errors else ExitPolicy.REPORT_ONLY

    if output and not Path(output).parent.exists():
        err_console.print(f"[red]Path not found:[/red] {Path(output).parent}")
        raise typer.Exit(code=2)

    if output:
        with open(output, "w", encoding="utf-8") as sink:
            outcome = run_suite(root, report_sink=sink, policy=policy)
    else:
        outcome = run_suite(root, report_sink=sys.stderr, policy=policy)

    _render_summary(outcome)
    if outcome.exit_code:
        raise typer.Exit(code=outcome.exit_code)


def _render_summary(outcome: RunOutcome) -> None:
    color = "green" if outcome.succeeded else "red"
    console.print(f"[{color}]{summary_line(outcome)}[/{color}]")


@app.command()
def selftest(
    fail_on_errors: bool = typer.Option(
        False, "--fail-on-errors/--report-only", envvar="TTEST_FAIL_ON_ERRORS", help=FAIL_ON_ERRORS_HELP
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Write the failure report to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Run the framework's own test suite."""
    configure_logging(verbose)
    from ttest.selftest import build_selftest

    _execute(build_selftest(), fail_on_errors=fail_on_errors, output=output)


@app.command()
def run(
    target: str = typer.Argument(..., help="Suite to run, as 'package.module:attribute'"),
    fail_on_errors: bool = typer.Option(
        False, "--fail-on-errors/--report-only", envvar="TTEST_FAIL_ON_ERRORS", help=FAIL_ON_ERRORS_HELP
    ),
    output: str | None = typer.Option(None, "--output", "-o", help="Write the failure report to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Run a suite built by user code."""
    configure_logging(verbose)
    try:
        root = resolve_target(target)
    except TargetError as exc:
        err_console.print(f"[red]Cannot load suite:[/red] {exc}")
        raise typer.Exit(code=2)

    _execute(root, fail_on_errors=fail_on_errors, output=output)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
