"""Serialisation of JSON values to compact or indented text."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_ESCAPES = {
    "\r": "\\r",
    "\n": "\\n",
    "\f": "\\f",
    "\b": "\\b",
    '"': '\\"',
    "\t": "\\t",
    "\\": "\\\\",
}

_TRANSLATION = {
    code: _ESCAPES.get(chr(code), f"\\u{code:04x}") for code in range(0x20)
}
_TRANSLATION.update({ord(char): escaped for char, escaped in _ESCAPES.items()})


def escape_string(text: str) -> str:
    """Escape text for use inside a JSON string literal, without the quotes.

    Text ends at the first NUL character, as stored strings are NUL-terminated.
    Other control characters without a short escape become lowercase \\u00XX.
    """
    nul = text.find("\0")
    if nul != -1:
        text = text[:nul]
    return text.translate(_TRANSLATION)


def format_number(number: float) -> str:
    """Format a number with up to 15 significant digits, like printf's %.15g."""
    if isinstance(number, bool):
        raise TypeError("a boolean is not a JSON number")
    return "%.15g" % float(number)


def dump_value(value: Any, spaces: int = 0) -> str:
    """Serialise a JSON value built from dicts, lists, str, numbers, bools and None.

    With spaces of 0 the output is compact; otherwise every nesting level is
    indented by that many spaces and keys are followed by ": ".
    """
    if spaces < 0:
        raise ValueError("indentation cannot be negative")
    out: list[str] = []
    _convert(value, spaces, 0, out)
    return "".join(out)


def _convert(value: Any, spaces: int, depth: int, out: list[str]) -> None:
    if value is None:
        out.append("null")
    elif value is True:
        out.append("true")
    elif value is False:
        out.append("false")
    elif isinstance(value, str):
        out.append(f'"{escape_string(value)}"')
    elif isinstance(value, (int, float)):
        out.append(format_number(value))
    elif isinstance(value, Mapping):
        _convert_object(value, spaces, depth, out)
    elif isinstance(value, (list, tuple)):
        _convert_array(value, spaces, depth, out)
    else:
        raise TypeError(f"cannot serialise {type(value).__name__} as JSON")


def _convert_array(items: Any, spaces: int, depth: int, out: list[str]) -> None:
    if spaces == 0:
        out.append("[")
        for n, item in enumerate(items):
            if n:
                out.append(",")
            _convert(item, 0, 0, out)
        out.append("]")
        return
    padding = " " * spaces
    out.append("[\n")
    for n, item in enumerate(items):
        if n:
            out.append(",\n")
        out.append(padding * (depth + 1))
        _convert(item, spaces, depth + 1, out)
    out.append("\n")
    out.append(padding * depth)
    out.append("]")


def _convert_object(obj: Mapping, spaces: int, depth: int, out: list[str]) -> None:
    separator = ":" if spaces == 0 else ": "
    padding = " " * spaces
    out.append("{" if spaces == 0 else "{\n")
    for n, (key, item) in enumerate(obj.items()):
        if not isinstance(key, str):
            raise TypeError(f"JSON object keys must be str, not {type(key).__name__}")
        if n:
            out.append("," if spaces == 0 else ",\n")
        if spaces:
            out.append(padding * (depth + 1))
        out.append(f'"{escape_string(key)}"')
        out.append(separator)
        _convert(item, spaces, depth + 1, out)
    if spaces:
        out.append("\n")
        out.append(padding * depth)
    out.append("}")