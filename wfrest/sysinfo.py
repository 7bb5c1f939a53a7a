"""Per-thread cached operating-system thread identifiers."""

from __future__ import annotations

import threading

_local = threading.local()


def _cache_tid() -> None:
    if getattr(_local, "tid", 0) == 0:
        _local.tid = threading.get_native_id()
        _local.tid_str = f"{_local.tid:5d} "


def tid() -> int:
    """Return the native id of the calling thread, cached after the first call."""
    _cache_tid()
    return _local.tid


def tid_str() -> str:
    """Return the thread id right-aligned in five columns plus a space, for logs."""
    _cache_tid()
    return _local.tid_str