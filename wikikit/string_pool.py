"""String interning with identity-based handles."""

from __future__ import annotations

import contextlib
import threading
from typing import ContextManager

__all__ = [
    "InternedString",
    "StringPool",
    "UnsafeStringPool",
    "global_string_pool",
]

# Per-entry bookkeeping overhead counted by memory_usage().
_ENTRY_OVERHEAD = 32


class _Entry:
    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text


class InternedString:
    """Handle to a string stored in a pool.

    Two handles are equal when they refer to the same pool entry. A handle
    also compares equal to a plain ``str`` with the same text. A default
    handle refers to nothing and is falsy.
    """

    __slots__ = ("_entry",)

    def __init__(self) -> None:
        self._entry: _Entry | None = None

    @classmethod
    def _of(cls, entry: _Entry) -> InternedString:
        handle = cls()
        handle._entry = entry
        return handle

    def view(self) -> str:
        """The interned text, or an empty string for a null handle."""
        return self._entry.text if self._entry is not None else ""

    def __len__(self) -> int:
        return len(self.view())

    def __bool__(self) -> bool:
        return self._entry is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, InternedString):
            return self._entry is other._entry
        if isinstance(other, str):
            return self.view() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.view())

    def __str__(self) -> str:
        return self.view()

    def __repr__(self) -> str:
        if self._entry is None:
            return "InternedString()"
        return f"InternedString({self._entry.text!r})"


class _PoolBase:
    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}
        self._total_size = 0

    def _guard(self) -> ContextManager[object]:
        return contextlib.nullcontext()

    def intern(self, s: str) -> InternedString:
        """Return the handle for ``s``, adding it to the pool if new."""
        with self._guard():
            entry = self._entries.get(s)
            if entry is None:
                entry = _Entry(s)
                self._entries[s] = entry
                self._total_size += len(s.encode("utf-8"))
            return InternedString._of(entry)

    def contains(self, s: str) -> bool:
        """True if ``s`` has been interned."""
        with self._guard():
            return s in self._entries

    def find(self, s: str) -> InternedString:
        """Return the handle for ``s`` if interned, else a null handle."""
        with self._guard():
            entry = self._entries.get(s)
        return InternedString._of(entry) if entry is not None else InternedString()

    def __len__(self) -> int:
        with self._guard():
            return len(self._entries)

    def memory_usage(self) -> int:
        """Approximate bytes used: UTF-8 text plus a fixed per-entry overhead."""
        with self._guard():
            return self._total_size + len(self._entries) * _ENTRY_OVERHEAD

    def clear(self) -> None:
        """Drop every interned string."""
        with self._guard():
            self._entries.clear()
            self._total_size = 0

    def reserve(self, count: int) -> None:
        """Hint at the expected number of strings; dictionaries grow on demand."""
        if count < 0:
            raise ValueError("count must not be negative")


class StringPool(_PoolBase):
    """Thread-safe string pool."""

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()

    def _guard(self) -> ContextManager[object]:
        return self._lock

    def intern(self, s: str) -> InternedString:
        return super().intern(s)

    def contains(self, s: str) -> bool:
        return super().contains(s)

    def find(self, s: str) -> InternedString:
        return super().find(s)

    def __len__(self) -> int:
        return super().__len__()

    def memory_usage(self) -> int:
        return super().memory_usage()

    def clear(self) -> None:
        super().clear()

    def reserve(self, count: int) -> None:
        super().reserve(count)


class UnsafeStringPool(_PoolBase):
    """String pool without locking, for single-threaded use."""

    def intern(self, s: str) -> InternedString:
        return super().intern(s)

    def contains(self, s: str) -> bool:
        return super().contains(s)

    def find(self, s: str) -> InternedString:
        return super().find(s)

    def __len__(self) -> int:
        return super().__len__()

    def memory_usage(self) -> int:
        return super().memory_usage()

    def clear(self) -> None:
        super().clear()

    def reserve(self, count: int) -> None:
        super().reserve(count)


_GLOBAL_POOL = StringPool()


def global_string_pool() -> StringPool:
    """The process-wide shared pool."""
    return _GLOBAL_POOL