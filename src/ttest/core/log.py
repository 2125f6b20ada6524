"""
Scoped error log.

A ScopedLog is an append-only, thread-safe list of failure messages bound to
one qualifying name. Every stored message is either the name itself or
``name::suffix``. Incorporating another log re-qualifies each of its messages
with this log's name, which is how nested scope chains like ``A::B::C`` form.

Note: the log itself is thread-safe, but two logs reporting to the same sink
from different threads may still interleave their lines.
"""

from __future__ import annotations

import io
import threading
from typing import IO, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, PrivateAttr

SCOPE_SEPARATOR = "::"


def format_message(qualifying_name: str, message: str = "") -> str:
    """Qualify a message with a scope name.

    Args:
        qualifying_name: Name of the owning scope
        message: Suffix to attach; empty means the bare name

    Returns:
        ``qualifying_name`` or ``qualifying_name::message``
    """
    if not message:
        return qualifying_name
    return f"{qualifying_name}{SCOPE_SEPARATOR}{message}"


def _is_binary(sink: IO) -> bool:
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in str(getattr(sink, "mode", ""))


class ScopedLog(BaseModel):
    """Thread-safe failure log bound to a qualifying name."""

    model_config = ConfigDict(frozen=True)

    qualifying_name: str

    _messages: List[str] = PrivateAttr(default_factory=list)
    _append_lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)
    _incorporate_lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    def size(self) -> int:
        with self._append_lock:
            return len(self._messages)

    def __len__(self) -> int:
        return self.size()

    @property
    def messages(self) -> Tuple[str, ...]:
        """Snapshot of the stored messages in insertion order."""
        with self._append_lock:
            return tuple(self._messages)

    def append(self, message: str = "") -> None:
        """Record a failure, qualified with this log's name."""
        entry = format_message(self.qualifying_name, message)
        with self._append_lock:
            self._messages.append(entry)

    def append_if(self, message: object, condition: Optional[object] = None) -> None:
        """Record a failure only when ``condition`` is truthy.

        Called with a single condition (``append_if(failed)``, ``append_if(len(errors))``)
        it records the bare qualifying name.
        """
        if condition is None:
            if isinstance(message, str):
                raise TypeError("append_if() with a message requires a condition")
            message, condition = "", message
        if condition:
            self.append(message)

    def incorporate(self, other: ScopedLog) -> None:
        """Append every message of ``other``, re-qualified with this log's name.

        Batches from concurrent incorporate calls stay contiguous; direct
        appends from other threads may still land in between.
        """
        with self._incorporate_lock:
            for message in other.messages:
                self.append(message)

    def report(self, sink: IO) -> None:
        """Write one line per message to a text or binary sink."""
        lines = "".join(f"{message}\n" for message in self.messages)
        if _is_binary(sink):
            sink.write(lines.encode("utf-8"))
        else:
            sink.write(lines)


__all__ = ["SCOPE_SEPARATOR", "ScopedLog", "format_message"]
