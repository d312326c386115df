"""
JSON with comments: parsing, circular-safe serialization and file helpers.

Parses JSON text containing ``//`` and ``/* */`` comments, stringifies value
graphs (cycles included) back to JSON, and offers comment stripping,
beautify and uglify transforms. Every operation also exists on ``safe``,
where failures come back as a ``Result(error, value)`` instead of being
raised.
"""

import logging

from ._config import OMIT
from ._config import JsonValue
from ._config import LogConfig
from ._config import ParseOptions
from ._config import ReadOptions
from ._config import StringifyOptions
from ._config import WriteOptions
from ._config import resolve_parse_options
from ._config import resolve_stringify_options
from ._decoder import is_structural_json
from ._encoder import CIRCULAR_PLACEHOLDER
from ._encoder import CircularSafeEncoder
from ._encoder import serialize
from ._errors import CircularReferenceError
from ._errors import FileSystemError
from ._errors import JsoncError
from ._errors import ParseError
from ._facade import Jsonc
from ._facade import Result
from ._facade import SafeJsonc
from ._lexer import CommentLexer
from ._lexer import CommentSpan
from ._lexer import LexState
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import enable_profiling
from ._profile import get_hot_path_stats
from ._profile import profiling_enabled

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

_default = Jsonc()

config = _default.config
log = _default.log
logp = _default.logp
parse = _default.parse
stringify = _default.stringify
is_json = _default.is_json
strip_comments = _default.strip_comments
uglify = _default.uglify
beautify = _default.beautify
normalize = _default.normalize
read = _default.read
read_sync = _default.read_sync
write = _default.write
write_sync = _default.write_sync
safe = _default.safe

__all__ = [
    "CIRCULAR_PLACEHOLDER",
    "OMIT",
    "CircularReferenceError",
    "CircularSafeEncoder",
    "CommentLexer",
    "CommentSpan",
    "FileSystemError",
    "HotPathStats",
    "JsonValue",
    "Jsonc",
    "JsoncError",
    "LexState",
    "LogConfig",
    "ParseError",
    "ParseOptions",
    "ReadOptions",
    "Result",
    "SafeJsonc",
    "StringifyOptions",
    "WriteOptions",
    "beautify",
    "clear_hot_path_stats",
    "config",
    "enable_profiling",
    "get_hot_path_stats",
    "is_json",
    "is_structural_json",
    "log",
    "logp",
    "normalize",
    "parse",
    "profiling_enabled",
    "read",
    "read_sync",
    "resolve_parse_options",
    "resolve_stringify_options",
    "safe",
    "serialize",
    "strip_comments",
    "stringify",
    "uglify",
    "write",
    "write_sync",
]
