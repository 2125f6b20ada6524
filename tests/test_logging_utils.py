"""Tests for the call-logging decorator."""

import io
import logging

import pytest

from ttest.core.factory import create_test
from ttest.runner import run_suite
from ttest.utils.logging import log_calls


def test_run_suite_logs_outline_and_outcome(caplog):
    """Trees are logged as outlines and outcomes as failure counts."""
    root = create_test("root", [create_test("A", lambda log: log.append()), create_test("sub", [])])

    with caplog.at_level(logging.DEBUG, logger="ttest.runner"):
        run_suite(root, report_sink=io.StringIO())

    text = caplog.text
    assert "Calling run_suite(root[A, sub[]]" in text
    assert "run_suite returned root: 1 error(s)" in text


def test_plain_values_use_repr(caplog):
    @log_calls("ttest.tests")
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="ttest.tests"):
        assert add(2, b=3) == 5

    assert ".add(2, b=3)" in caplog.text
    assert "add returned 5" in caplog.text


def test_exceptions_are_logged_and_reraised(caplog):
    @log_calls("ttest.tests")
    def explode():
        raise RuntimeError("boom")

    with caplog.at_level(logging.DEBUG, logger="ttest.tests"):
        with pytest.raises(RuntimeError):
            explode()

    assert "Error in" in caplog.text
    assert "boom" in caplog.text
