"""
Option objects for parse, stringify, read and write operations.

Every operation accepts its options either as one of the frozen dataclasses
below or in a short form (a bare reviver, a bare replacer, a key list, an
indent). The short forms are resolved once, at the facade boundary, into a
single options object before any work starts.
"""

import sys
from collections.abc import Callable
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import replace
from typing import Any
from typing import Final
from typing import TextIO

# Type aliases for domain concepts - recursive definition
JsonValue = (
    str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)

Reviver = Callable[[str, Any], Any]
ReplacerFunction = Callable[[str, Any], Any]
KeyList = Sequence[str | int]
Replacer = ReplacerFunction | KeyList
Space = int | str | None

MAX_INDENT: Final = 10
DEFAULT_BEAUTIFY_SPACE: Final = 2


class _OmitType:
    """
    Marker returned by a reviver or replacer to drop a member.

    Plays the part ``undefined`` plays for JSON.parse/JSON.stringify hooks:
    the member disappears from its object, becomes null inside an array when
    stringifying, and makes the whole result None at the root.
    """

    _instance: "_OmitType | None" = None

    def __new__(cls) -> "_OmitType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "OMIT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "OMIT"


OMIT: Final = _OmitType()


def _check_replacer(replacer: Any) -> None:
    if replacer is None or callable(replacer):
        return
    if isinstance(replacer, str | bytes) or not isinstance(replacer, Sequence):
        raise TypeError("replacer must be a callable or a sequence of keys")


def _check_space(space: Any) -> None:
    if space is None or isinstance(space, str):
        return
    if isinstance(space, bool) or not isinstance(space, int):
        raise TypeError("space must be an int, a str or None")


@dataclass(frozen=True)
class ParseOptions:
    """
    Configures parsing with immutable settings.

    ``strip_comments`` removes comments before decoding; with it disabled,
    comment syntax is reported by the strict decoder like any other error.
    """

    reviver: Reviver | None = None
    strip_comments: bool = True

    def __post_init__(self) -> None:
        if self.reviver is not None and not callable(self.reviver):
            raise TypeError("reviver must be callable")
        if not isinstance(self.strip_comments, bool):
            raise TypeError("strip_comments must be a boolean")


ReadOptions = ParseOptions


@dataclass(frozen=True)
class StringifyOptions:
    """
    Configures serialization with immutable settings.

    Centralized configuration for replacer, indentation and circular
    reference handling.
    """

    replacer: Replacer | None = None
    space: Space = None
    handle_circular: bool = True

    def __post_init__(self) -> None:
        _check_replacer(self.replacer)
        _check_space(self.space)
        if not isinstance(self.handle_circular, bool):
            raise TypeError("handle_circular must be a boolean")


@dataclass(frozen=True)
class WriteOptions:
    """
    Configures file writes.

    ``mode`` is applied to files the write creates (subject to the umask);
    ``auto_path`` creates missing parent directories.
    """

    mode: int = 0o666
    auto_path: bool = True
    replacer: Replacer | None = None
    space: Space = None

    def __post_init__(self) -> None:
        if isinstance(self.mode, bool) or not isinstance(self.mode, int):
            raise TypeError("mode must be an integer")
        if self.mode < 0:
            raise ValueError("mode must be a non-negative integer")
        if not isinstance(self.auto_path, bool):
            raise TypeError("auto_path must be a boolean")
        _check_replacer(self.replacer)
        _check_space(self.space)

    def stringify_options(self) -> StringifyOptions:
        return StringifyOptions(replacer=self.replacer, space=self.space)


@dataclass(frozen=True)
class LogConfig:
    """
    Output streams used by log() and logp().

    None stands for the interpreter's current sys.stdout / sys.stderr, looked
    up at write time.
    """

    stream: TextIO | None = None
    stream_err: TextIO | None = None

    def __post_init__(self) -> None:
        for name in ("stream", "stream_err"):
            value = getattr(self, name)
            if value is not None and not hasattr(value, "write"):
                raise TypeError(f"{name} must have a write() method")

    def output(self, error: bool = False) -> TextIO:
        """Stream for a log line, the error stream if it logs an error."""
        if error:
            return sys.stderr if self.stream_err is None else self.stream_err
        return sys.stdout if self.stream is None else self.stream


def resolve_parse_options(
    options: ParseOptions | Reviver | None,
) -> ParseOptions:
    """Normalizes a bare reviver or None into ParseOptions."""
    if options is None:
        return ParseOptions()
    if isinstance(options, ParseOptions):
        return options
    if callable(options):
        return ParseOptions(reviver=options)
    raise TypeError(
        "options must be ParseOptions, a reviver callable or None, "
        f"not {type(options).__name__}"
    )


def resolve_stringify_options(
    options: StringifyOptions | Replacer | Space = None,
    space: Space = None,
) -> StringifyOptions:
    """
    Normalizes the second stringify argument into StringifyOptions.

    Accepts an options object (``space`` then overrides its indent when
    given), a replacer callable, a key list, or a bare indent, in which case
    the indent wins over ``space``.
    """
    if isinstance(options, StringifyOptions):
        if space is None:
            return options
        return replace(options, space=space)
    if options is None:
        return StringifyOptions(space=space)
    if callable(options):
        return StringifyOptions(replacer=options, space=space)
    if isinstance(options, int | str):
        return StringifyOptions(space=options)
    return StringifyOptions(replacer=options, space=space)


def resolve_write_options(options: WriteOptions | None) -> WriteOptions:
    if options is None:
        return WriteOptions()
    if not isinstance(options, WriteOptions):
        raise TypeError(
            "options must be WriteOptions or None, "
            f"not {type(options).__name__}"
        )
    return options
