from __future__ import annotations

"""Errors raised by the driver layer around the test tree."""


class TargetError(RuntimeError):
    """A run target could not be resolved to a TestNode."""

    def __init__(self, target: str, message: str, *, cause: Exception | None = None):
        self.target = target
        self.message = message
        self.cause = cause
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        base = f"{self.message} ({self.target})"
        if self.cause:
            return f"{base}: {type(self.cause).__name__}: {self.cause}"
        return base

    def __str__(self) -> str:
        return self._build_message()


__all__ = ["TargetError"]
