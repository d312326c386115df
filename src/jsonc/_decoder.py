"""
Strict decoding on top of the standard library decoder.

Comments are blanked (not removed) before decoding so positions reported by
ParseError point into the caller's original text.
"""

import json
import re
from typing import Any

from ._config import OMIT
from ._config import ParseOptions
from ._config import Reviver
from ._errors import ParseError
from ._lexer import strip_comments
from ._profile import ProfileContext


_STRING_LITERAL = r'"(?:[^"\\]|\\.)*"'


def _literal_position(doc: str, name: str) -> int:
    """Offset of the first ``name`` outside string literals, else 0."""
    pattern = re.compile(f"{_STRING_LITERAL}|{re.escape(name)}", re.DOTALL)
    for match in pattern.finditer(doc):
        if match.group() == name:
            return match.start()
    return 0


def _reject_constant(doc: str) -> Any:
    def parse_constant(name: str) -> Any:
        pos = _literal_position(doc, name)
        raise ParseError(f"Invalid literal {name}", doc, pos)

    return parse_constant


def strict_decode(text: str) -> Any:
    """
    Decodes strict JSON text.

    Same grammar as ``json.loads`` minus the NaN/Infinity extensions.
    Raises ParseError on malformed input and TypeError on non-str input.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    with ProfileContext("strict_decode", len(text)):
        try:
            return json.loads(text, parse_constant=_reject_constant(text))
        except json.JSONDecodeError as e:
            raise ParseError.from_decode_error(e) from e


def _walk(key: str, value: Any, reviver: Reviver) -> Any:
    """Applies the reviver bottom-up, children before their container."""
    if isinstance(value, dict):
        for member_key in list(value):
            revived = _walk(member_key, value[member_key], reviver)
            if revived is OMIT:
                del value[member_key]
            else:
                value[member_key] = revived
    elif isinstance(value, list):
        value[:] = [
            revived
            for revived in (
                _walk(str(index), item, reviver)
                for index, item in enumerate(value)
            )
            if revived is not OMIT
        ]
    return reviver(key, value)


def revive(value: Any, reviver: Reviver) -> Any:
    """
    Runs ``reviver(key, value)`` over every member of a decoded value.

    Array members receive their index as a string key and the root receives
    the empty string. Returning OMIT drops the member; omitting the root
    yields None.
    """
    result = _walk("", value, reviver)
    return None if result is OMIT else result


def decode(text: str, config: ParseOptions) -> Any:
    """Strips comments when configured, decodes, then revives."""
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    source = text
    if config.strip_comments:
        source = strip_comments(text, whitespace=True)
    value = strict_decode(source)
    if config.reviver is not None:
        value = revive(value, config.reviver)
    return value


def is_structural_json(text: Any, allow_comments: bool = False) -> bool:
    """
    Checks whether text is a JSON object or array.

    Stricter than "does it decode": top-level primitives such as ``true``,
    ``5``, ``null`` or a quoted string are rejected. Never raises.
    """
    if not isinstance(text, str):
        return False

    if allow_comments:
        text = strip_comments(text, whitespace=True)

    try:
        value = strict_decode(text)
    except (ParseError, RecursionError):
        return False

    return isinstance(value, dict | list)
