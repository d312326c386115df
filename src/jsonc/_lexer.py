"""
Comment-aware lexer that turns JSON-with-comments into strict JSON text.

A single forward pass classifies every character into one of four lexical
states and either drops comment spans or blanks them to spaces. Nothing in
here decides whether the result is valid JSON; that is the strict decoder's
job.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from ._profile import ProfileContext

Position: TypeAlias = int


class LexState(Enum):
    """
    Lexical states of the comment scanner.

    Exactly one is active at any position; the transition from one to the
    next depends on the current character and at most one character ahead.
    """

    NORMAL = "normal"
    IN_STRING = "in_string"
    IN_LINE_COMMENT = "in_line_comment"
    IN_BLOCK_COMMENT = "in_block_comment"


@dataclass(frozen=True)
class CommentSpan:
    """
    Half-open character range [start, end) of one comment.

    Line comment spans stop before the terminating newline; block comment
    spans include the closing ``*/`` when there is one.
    """

    kind: LexState
    start: Position
    end: Position

    @property
    def length(self) -> int:
        return self.end - self.start


class CommentLexer:
    """
    Scans text for line and block comments outside string literals.

    Character-by-character scanning with an escape flag for string literals,
    so an escaped quote never closes a string and an escaped backslash never
    escapes the character after it.
    """

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise TypeError(
                f"the JSON text must be str, not {type(text).__name__}"
            )
        self.text = text
        self.length = len(text)
        self._reset()

    def _reset(self) -> None:
        self.pos = 0
        self.state = LexState.NORMAL
        self.escaped = False
        self.span_start = 0
        self.comment_spans: list[CommentSpan] = []

    def peek(self, offset: int = 0) -> str:
        """Returns the character ``offset`` places ahead without advancing."""
        index = self.pos + offset
        return self.text[index] if index < self.length else "\0"

    def strip(self, whitespace: bool = False) -> str:
        """
        Returns the text with every comment removed or blanked.

        In whitespace mode each comment character becomes a single space and
        newlines inside comments are kept, so line and column numbers of the
        output match the input.
        """
        self._reset()
        out: list[str] = []
        handlers = {
            LexState.NORMAL: self._scan_normal,
            LexState.IN_STRING: self._scan_string,
            LexState.IN_LINE_COMMENT: self._scan_line_comment,
            LexState.IN_BLOCK_COMMENT: self._scan_block_comment,
        }

        with ProfileContext("strip_comments", self.length) as profile:
            while self.pos < self.length:
                handlers[self.state](out, whitespace)

            # Unterminated comments run to the end of input
            if self.state in (
                LexState.IN_LINE_COMMENT,
                LexState.IN_BLOCK_COMMENT,
            ):
                self._close_comment(self.length)
            profile.items = len(self.comment_spans)

        return "".join(out)

    def spans(self) -> list[CommentSpan]:
        """Returns the comment spans of the text in left-to-right order."""
        self.strip()
        return list(self.comment_spans)

    def _open_comment(self, state: LexState) -> None:
        self.state = state
        self.span_start = self.pos
        self.pos += 2

    def _close_comment(self, end: Position) -> None:
        self.comment_spans.append(
            CommentSpan(self.state, self.span_start, end)
        )
        self.state = LexState.NORMAL

    def _scan_normal(self, out: list[str], whitespace: bool) -> None:
        char = self.text[self.pos]

        if char == "/" and self.peek(1) == "/":
            self._open_comment(LexState.IN_LINE_COMMENT)
        elif char == "/" and self.peek(1) == "*":
            self._open_comment(LexState.IN_BLOCK_COMMENT)
        else:
            if char == '"':
                self.state = LexState.IN_STRING
                self.escaped = False
            out.append(char)
            self.pos += 1
            return

        if whitespace:
            out.append("  ")

    def _scan_string(self, out: list[str], whitespace: bool) -> None:
        char = self.text[self.pos]
        out.append(char)
        self.pos += 1

        if self.escaped:
            self.escaped = False
        elif char == "\\":
            self.escaped = True
        elif char == '"':
            self.state = LexState.NORMAL

    def _scan_line_comment(self, out: list[str], whitespace: bool) -> None:
        char = self.text[self.pos]

        if char == "\n":
            self._close_comment(self.pos)
            out.append(char)
            self.pos += 1
        elif char == "\r" and self.peek(1) == "\n":
            self._close_comment(self.pos)
            out.append("\r\n")
            self.pos += 2
        else:
            if whitespace:
                out.append(" ")
            self.pos += 1

    def _scan_block_comment(self, out: list[str], whitespace: bool) -> None:
        char = self.text[self.pos]

        if char == "*" and self.peek(1) == "/":
            self.pos += 2
            self._close_comment(self.pos)
            if whitespace:
                out.append("  ")
        else:
            if whitespace:
                out.append(char if char in "\r\n" else " ")
            self.pos += 1


def strip_comments(text: str, whitespace: bool = False) -> str:
    """
    Removes line and block comments from JSON text.

    Comment delimiters inside string literals are left alone. With
    ``whitespace`` every comment character is replaced by a space instead of
    removed, keeping newlines.

    >>> strip_comments('// c\\n{"a":1}')
    '\\n{"a":1}'
    """
    return CommentLexer(text).strip(whitespace)


__all__ = [
    "CommentLexer",
    "CommentSpan",
    "LexState",
    "strip_comments",
]
