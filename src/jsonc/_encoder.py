"""
Circular-reference-safe JSON serialization.

Walks a value graph depth first, keeping the ids of the containers on the
current path in a visit set. Meeting one of them again is a cycle: it is
emitted as the string "[Circular]" (or raised, when handling is off) instead
of being descended into. Containers leave the set when their emission ends,
on every exit path, so the same value shared by sibling branches is not a
cycle and serializes each time.
"""

import dataclasses
import functools
import math
import types
from collections.abc import Mapping
from typing import Any
from typing import Final

from ._config import MAX_INDENT
from ._config import OMIT
from ._config import Replacer
from ._config import Space
from ._errors import CircularReferenceError
from ._profile import ProfileContext

CIRCULAR_PLACEHOLDER: Final = "[Circular]"

# Values left out of objects and nulled in arrays, like JavaScript functions
_FUNCTION_TYPES: Final = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    functools.partial,
    type,
)

_KEY_TYPES: Final = (str, int, float, type(None))

_ESCAPES: Final = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _encode_string(s: str) -> str:
    """Encode string with proper escape sequences."""
    result = ['"']
    for char in s:
        if char in _ESCAPES:
            result.append(_ESCAPES[char])
        elif char < " " or "\ud800" <= char <= "\udfff":
            # Control characters and lone surrogates
            result.append(f"\\u{ord(char):04x}")
        else:
            result.append(char)
    result.append('"')
    return "".join(result)


def _encode_number(n: int | float) -> str:
    """Encode numeric values; non-finite floats become null."""
    if isinstance(n, float):
        if math.isnan(n) or math.isinf(n):
            return "null"
        return float.__repr__(n)
    return int.__repr__(n)


def _key_text(key: Any) -> str:
    """Converts a mapping key to its JSON object key text."""
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int | float):
        return int.__repr__(key) if isinstance(key, int) else repr(key)
    msg = (
        "keys must be str, int, float, bool or None, "
        f"not {type(key).__name__}"
    )
    raise TypeError(msg)


def _indent_unit(space: Space) -> str:
    """Indentation string for one nesting level."""
    if space is None:
        return ""
    if isinstance(space, int):
        return " " * min(MAX_INDENT, space) if space > 0 else ""
    return space[:MAX_INDENT]


def _property_list(keys: Any) -> list[str]:
    """Key-list replacer as unique string keys, first occurrence wins."""
    names: list[str] = []
    for key in keys:
        if isinstance(key, bool) or not isinstance(key, str | int):
            continue
        name = key if isinstance(key, str) else str(key)
        if name not in names:
            names.append(name)
    return names


def _object_members(value: Any) -> dict[str, Any] | None:
    """
    Public data of a plain object, or None when it has none to offer.

    Dataclass instances contribute their fields; other objects their
    non-underscore instance attributes. Class identity is dropped.
    """
    if isinstance(value, types.ModuleType):
        return None
    if dataclasses.is_dataclass(value):
        return {
            field.name: getattr(value, field.name)
            for field in dataclasses.fields(value)
        }
    try:
        attributes = vars(value)
    except TypeError:
        return None
    return {
        name: attribute
        for name, attribute in attributes.items()
        if not name.startswith("_")
    }


class CircularSafeEncoder:
    """
    Serializes values to JSON text without recursing into cycles.

    Mirrors the standard JSON.stringify rules: a replacer function sees every
    member (the root under the empty key) before anything else happens to
    it, a key-list replacer selects and orders object members at every
    level, and members with no JSON form are left out of objects and become
    null inside arrays.
    """

    def __init__(
        self,
        replacer: Replacer | None = None,
        indent: Space = None,
        handle_circular: bool = True,
    ) -> None:
        self.replacer_function = replacer if callable(replacer) else None
        self.property_list = (
            _property_list(replacer)
            if replacer is not None and not callable(replacer)
            else None
        )
        self.indent_unit = _indent_unit(indent)
        self.handle_circular = handle_circular
        self._visiting: set[int] = set()
        self.containers_emitted = 0

    def encode(self, value: Any) -> str | None:
        """Returns the JSON text of ``value``, None if it has no JSON form."""
        self.containers_emitted = 0
        with ProfileContext("serialize") as profile:
            text = self._encode_member("", value, 0)
            profile.items = self.containers_emitted
        return text

    def _encode_member(  # noqa: PLR0911
        self, key: str, value: Any, level: int
    ) -> str | None:
        if self.replacer_function is not None:
            value = self.replacer_function(key, value)

        if value is None:
            return "null"
        elif value is True:
            return "true"
        elif value is False:
            return "false"
        elif isinstance(value, str):
            return _encode_string(value)
        elif isinstance(value, int | float):
            return _encode_number(value)
        elif value is OMIT or isinstance(value, _FUNCTION_TYPES):
            return None
        elif isinstance(value, Mapping):
            return self._encode_container(value, value, key, level)
        elif isinstance(value, list | tuple):
            return self._encode_container(value, value, key, level)

        members = _object_members(value)
        if members is None:
            msg = (
                f"Object of type {type(value).__name__} "
                "is not JSON serializable"
            )
            raise TypeError(msg)
        return self._encode_container(value, members, key, level)

    def _encode_container(
        self, identity: Any, content: Any, key: str, level: int
    ) -> str:
        """Emits a mapping or sequence unless it is already being emitted."""
        marker = id(identity)
        if marker in self._visiting:
            if not self.handle_circular:
                raise CircularReferenceError(key)
            return _encode_string(CIRCULAR_PLACEHOLDER)

        self._visiting.add(marker)
        self.containers_emitted += 1
        try:
            if isinstance(content, Mapping):
                return self._encode_mapping(content, level)
            return self._encode_array(content, level)
        finally:
            self._visiting.discard(marker)

    def _encode_mapping(self, mapping: Mapping[Any, Any], level: int) -> str:
        """Encode mapping members, filtered by the key list if there is one."""
        if self.property_list is None:
            pairs = [(_key_text(k), v) for k, v in mapping.items()]
        else:
            by_name = {
                _key_text(k): k for k in mapping if isinstance(k, _KEY_TYPES)
            }
            pairs = [
                (name, mapping[by_name[name]])
                for name in self.property_list
                if name in by_name
            ]

        separator = ": " if self.indent_unit else ":"
        entries = []
        for name, member in pairs:
            encoded = self._encode_member(name, member, level + 1)
            if encoded is not None:
                entries.append(f"{_encode_string(name)}{separator}{encoded}")

        return self._format_block("{", "}", entries, level)

    def _encode_array(
        self, items: list[Any] | tuple[Any, ...], level: int
    ) -> str:
        """Encode array members; members with no JSON form become null."""
        entries = []
        for index, item in enumerate(items):
            encoded = self._encode_member(str(index), item, level + 1)
            entries.append("null" if encoded is None else encoded)

        return self._format_block("[", "]", entries, level)

    def _format_block(
        self, opening: str, closing: str, entries: list[str], level: int
    ) -> str:
        """Format container entries with optional indentation."""
        if not entries:
            return opening + closing
        if not self.indent_unit:
            return opening + ",".join(entries) + closing

        indent_str = self.indent_unit * level
        inner_indent = self.indent_unit * (level + 1)

        lines = [opening]
        for i, entry in enumerate(entries):
            line = f"{inner_indent}{entry}"
            if i < len(entries) - 1:
                line += ","
            lines.append(line)

        lines.append(f"{indent_str}{closing}")
        return "\n".join(lines)


def serialize(
    value: Any,
    replacer: Replacer | None = None,
    indent: Space = None,
    handle_circular: bool = True,
) -> str | None:
    """
    Serializes a value graph to JSON text, tolerating cycles.

    Raises CircularReferenceError for a cycle only when ``handle_circular``
    is False; errors raised by the replacer or by attribute access propagate.
    """
    encoder = CircularSafeEncoder(replacer, indent, handle_circular)
    return encoder.encode(value)


__all__ = [
    "CIRCULAR_PLACEHOLDER",
    "CircularSafeEncoder",
    "serialize",
]
