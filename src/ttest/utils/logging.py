from __future__ import annotations
import logging
import time
from functools import wraps
from typing import Any, Callable


def _brief(value: Any) -> str:
    """Short form for log lines: test trees as outlines, not recursive reprs."""
    describe = getattr(value, "describe", None)
    if callable(describe):
        return describe()
    error_count = getattr(value, "error_count", None)
    if isinstance(error_count, int):
        return f"{getattr(value, 'name', type(value).__name__)}: {error_count} error(s)"
    return repr(value)


def log_calls(logger_name: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator to log calls and their duration at DEBUG level.

    Test-tree arguments are logged as outlines (``root[A, sub[B]]``) and run
    outcomes as failure counts. Exceptions are logged and re-raised.
    """

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = logger_name or func.__module__
        logger = logging.getLogger(name)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            if logger.isEnabledFor(logging.DEBUG):
                shown = [_brief(a) for a in args] + [f"{k}={_brief(v)}" for k, v in kwargs.items()]
                logger.debug("Calling %s(%s)", func.__qualname__, ", ".join(shown))
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.exception("Error in %s: %s", func.__qualname__, e)
                raise
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "%s returned %s in %.3fs", func.__qualname__, _brief(result), time.perf_counter() - started
                )
            return result

        return _wrapper

    return _decorator


def configure_logging(verbose: bool = False) -> None:
    """Route library logs to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
