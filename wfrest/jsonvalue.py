"""A mutable JSON document with C++-style placeholder and watcher semantics.

Indexing an object with a missing key yields a placeholder that turns into a
real member once something is assigned or pushed through it. Indexing an
existing member or array element yields a watcher that shares the underlying
container, so changes made through it show up in the enclosing document.
"""

from __future__ import annotations

import copy as _copy
import json as _json
import os
from collections.abc import Iterator, Mapping
from typing import Any, Union

from .jsonfmt import dump_value

_Container = Union[dict, list]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _to_native(value: Any) -> Any:
    """Convert a Python or Json value to the stored form (numbers become float)."""
    if isinstance(value, Json):
        return _copy.deepcopy(value._value) if value._valid else None
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        native = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, not {type(key).__name__}")
            native[key] = _to_native(item)
        return native
    if isinstance(value, (list, tuple)):
        return [_to_native(item) for item in value]
    raise TypeError(f"cannot store {type(value).__name__} in a JSON value")


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return "string"
    if isinstance(value, float):
        return "number"
    if isinstance(value, dict):
        return "object"
    return "array"


_CLEARED = {
    "string": lambda: "",
    "number": lambda: 0.0,
    "object": dict,
    "array": list,
    "true": lambda: True,
    "false": lambda: False,
    "null": lambda: None,
}


class Json:
    """A JSON value: null, boolean, number, string, array or object."""

    def __init__(self, value: Any = None) -> None:
        self._value: Any = _to_native(value)
        self._parent: _Container | None = None
        self._key: str | int | None = None
        self._valid = True

    # ----------------------------------------------------------- construction
    @staticmethod
    def _watcher(value: Any, parent: _Container, key: str | int) -> Json:
        js = Json.__new__(Json)
        js._value = value
        js._parent = parent
        js._key = key
        js._valid = True
        return js

    @staticmethod
    def _invalid() -> Json:
        js = Json.__new__(Json)
        js._value = None
        js._parent = None
        js._key = None
        js._valid = False
        return js

    @classmethod
    def parse(cls, source: Any = None) -> Json:
        """Parse JSON text from a str, bytes, readable file object or path.

        Text that is not valid JSON yields a Json whose is_valid() is False.
        A source of None yields a null value.
        """
        if source is None:
            return Json()
        if isinstance(source, os.PathLike):
            with open(source, "rb") as handle:
                data = handle.read()
        elif isinstance(source, (str, bytes, bytearray)):
            data = source
        elif hasattr(source, "read"):
            data = source.read()
        else:
            raise TypeError(f"cannot parse JSON from {type(source).__name__}")
        if isinstance(data, (bytes, bytearray)):
            try:
                data = bytes(data).decode("utf-8")
            except UnicodeDecodeError:
                return Json._invalid()
        try:
            native = _json.loads(data, parse_int=float, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            return Json._invalid()
        js = Json.__new__(Json)
        js._value = native
        js._parent = None
        js._key = None
        js._valid = True
        return js

    # ------------------------------------------------------------ inspection
    def _kind(self) -> str | None:
        return _kind(self._value) if self._valid else None

    def _is_root_null(self) -> bool:
        return self._valid and self._value is None and self._parent is None

    def _is_placeholder(self) -> bool:
        return self._valid and self._value is None and self._parent is not None

    def _materialize(self, container: _Container) -> None:
        self._parent[self._key] = container
        self._value = container

    def type_str(self) -> str:
        return self._kind() or "unknown"

    def is_null(self) -> bool:
        return self._kind() == "null"

    def is_number(self) -> bool:
        return self._kind() == "number"

    def is_boolean(self) -> bool:
        return self._kind() in ("true", "false")

    def is_object(self) -> bool:
        return self._kind() == "object"

    def is_array(self) -> bool:
        return self._kind() == "array"

    def is_string(self) -> bool:
        return self._kind() == "string"

    def is_valid(self) -> bool:
        return self._valid

    def size(self) -> int:
        """Number of elements of an array or members of an object; 1 otherwise."""
        if self.is_array() or self.is_object():
            return len(self._value)
        return 1

    def __len__(self) -> int:
        return self.size()

    def empty(self) -> bool:
        """True for null and for empty arrays and objects."""
        kind = self._kind()
        if kind == "null":
            return True
        if kind in ("array", "object"):
            return not self._value
        return False

    def key(self) -> str:
        """The member name this value was reached by, or "" if none."""
        return self._key if isinstance(self._key, str) else ""

    def has(self, key: str) -> bool:
        return self.is_object() and key in self._value

    def get(self) -> Any:
        """Return a copy of the value as plain Python data."""
        if not self._valid:
            return None
        return _copy.deepcopy(self._value)

    def copy(self) -> Json:
        """Return an independent root copy of this value."""
        return Json(self)

    def dump(self, spaces: int = 0) -> str:
        """Serialise to text; spaces > 0 indents each level by that many spaces."""
        if not self._valid:
            return ""
        return dump_value(self._value, spaces)

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"Json({self.dump()})"

    # --------------------------------------------------------------- access
    def __getitem__(self, key: str | int) -> Json:
        if isinstance(key, bool):
            raise TypeError("JSON keys must be str or int")
        if isinstance(key, str):
            if self._is_root_null():
                self._value = {}
            elif self.is_object() and key in self._value:
                return self._watcher(self._value[key], self._value, key)
            if self._is_placeholder():
                self._materialize({})
            if not self.is_object():
                return Json()
            return self._watcher(None, self._value, key)
        if isinstance(key, int):
            if not self.is_array() or key < 0 or key >= len(self._value):
                return Json()
            return self._watcher(self._value[key], self._value, key)
        raise TypeError("JSON keys must be str or int")

    def _set_member(self, key: str, native: Any) -> None:
        if self._is_root_null():
            self._value = {}
        elif self._is_placeholder():
            self._materialize({})
        if not self.is_object():
            raise TypeError(f"cannot set a member on a JSON {self.type_str()}")
        self._value[key] = native

    def __setitem__(self, key: str | int, value: Any) -> None:
        native = _to_native(value)
        if isinstance(key, bool):
            raise TypeError("JSON keys must be str or int")
        if isinstance(key, str):
            self._set_member(key, native)
            return
        if isinstance(key, int):
            if not self.is_array():
                raise TypeError(f"cannot index a JSON {self.type_str()} by position")
            if key < 0 or key >= len(self._value):
                raise IndexError(f"array index {key} out of range")
            self._value[key] = native
            return
        raise TypeError("JSON keys must be str or int")

    def push_back(self, *args: Any) -> None:
        """Add a member with push_back(key, value), or an element with push_back(value).

        A plain list or tuple given as the single argument is appended element
        by element; wrap it in Json to append it as one nested array.
        """
        if len(args) == 2:
            key, value = args
            if not isinstance(key, str):
                raise TypeError("JSON object keys must be str")
            self._set_member(key, _to_native(value))
            return
        if len(args) != 1:
            raise TypeError(f"push_back takes 1 or 2 arguments, got {len(args)}")
        (value,) = args
        if isinstance(value, (list, tuple)):
            items = [_to_native(item) for item in value]
            if not items:
                return
        else:
            items = [_to_native(value)]
        if self._is_placeholder():
            self._materialize([])
        elif self._is_root_null():
            self._value = []
        if not self.is_array():
            raise TypeError(f"cannot append to a JSON {self.type_str()}")
        self._value.extend(items)

    def erase(self, key: str | int) -> None:
        """Remove an object member or array element; missing ones are ignored."""
        if isinstance(key, str):
            if self.is_object():
                self._value.pop(key, None)
        elif isinstance(key, int) and not isinstance(key, bool):
            if self.is_array() and 0 <= key < len(self._value):
                del self._value[key]

    def clear(self) -> None:
        """Reset to the empty value of the same type and detach from any parent."""
        kind = self._kind() or "null"
        self._value = _CLEARED[kind]()
        self._parent = None
        self._key = None
        self._valid = True

    # ------------------------------------------------------------ iteration
    def _entries(self) -> list[tuple[str | int, Any]]:
        if self.is_object():
            return list(self._value.items())
        if self.is_array():
            return list(enumerate(self._value))
        return []

    def __iter__(self) -> Iterator[Json]:
        container = self._value
        for key, item in self._entries():
            yield self._watcher(item, container, key)

    def __reversed__(self) -> Iterator[Json]:
        container = self._value
        for key, item in reversed(self._entries()):
            yield self._watcher(item, container, key)