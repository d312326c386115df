"""
Exception hierarchy for jsonc operations.

Every error the library raises on purpose derives from JsoncError and from
the builtin exception a caller would already expect for that failure, so
``except ValueError`` and ``except OSError`` keep working.
"""

from __future__ import annotations

import json
import os
from typing import TypeAlias

Position: TypeAlias = int


class JsoncError(Exception):
    """Base exception for jsonc."""


class ParseError(JsoncError, ValueError):
    """
    Handles JSON parsing failures with precise position and context information.

    Error state containing position, line/column numbers, and surrounding
    context to help users identify and fix JSON syntax issues. Positions refer
    to the text handed to the strict decoder; comments stripped in whitespace
    mode keep them aligned with the original source.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    @classmethod
    def from_decode_error(cls, err: json.JSONDecodeError) -> ParseError:
        """Builds a ParseError carrying the stdlib decoder's position."""
        return cls(err.msg, err.doc, err.pos)

    def __reduce__(self) -> tuple[type[ParseError], tuple[str, str, int]]:
        return self.__class__, (self.msg, self.doc, self.pos)


class CircularReferenceError(JsoncError, ValueError):
    """A value references itself and circular handling is disabled."""

    def __init__(self, key: str = "") -> None:
        self.key = key
        where = f" at key {key!r}" if key else ""
        super().__init__(f"Circular reference detected{where}")


class FileSystemError(JsoncError, OSError):
    """
    Wraps an OSError raised while reading or writing a JSON file.

    Keeps errno, strerror and filename of the original error so callers can
    branch on them exactly as they would on the OSError itself.
    """

    @classmethod
    def from_os_error(cls, err: OSError, path: str) -> FileSystemError:
        """Builds a FileSystemError from an OSError about ``path``."""
        if err.errno is None:
            return cls(str(err))
        filename = path if err.filename is None else err.filename
        return cls(err.errno, err.strerror, os.fspath(filename))


__all__ = [
    "CircularReferenceError",
    "FileSystemError",
    "JsoncError",
    "ParseError",
]
