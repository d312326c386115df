"""
Operation facade: parse, stringify, transforms, file I/O and the log sink.

Jsonc raises on failure. Its ``safe`` attribute exposes the same operations
returning Result(error, value) instead; every safe method is a thin adapter
over the raising one.
"""

import logging
import traceback
from collections.abc import Awaitable
from collections.abc import Callable
from typing import Any
from typing import NamedTuple
from typing import TextIO

from ._config import DEFAULT_BEAUTIFY_SPACE
from ._config import LogConfig
from ._config import ParseOptions
from ._config import Replacer
from ._config import Reviver
from ._config import Space
from ._config import StringifyOptions
from ._config import WriteOptions
from ._config import resolve_parse_options
from ._config import resolve_stringify_options
from ._config import resolve_write_options
from ._decoder import decode
from ._decoder import is_structural_json
from ._decoder import strict_decode
from ._encoder import serialize
from ._fileio import PathLike
from ._fileio import read_text
from ._fileio import read_text_async
from ._fileio import write_text
from ._fileio import write_text_async
from ._lexer import strip_comments

logger = logging.getLogger(__name__)


class Result(NamedTuple):
    """
    Outcome of a safe operation.

    Unpacks as ``err, value = ...``; exactly one of the two is meaningful.
    """

    error: Exception | None
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _capture(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Result:
    try:
        value = func(*args, **kwargs)
    except Exception as e:
        logger.debug("%s failed: %r", func.__name__, e)
        return Result(e)
    return Result(None, value)


async def _capture_async(
    func: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any
) -> Result:
    try:
        value = await func(*args, **kwargs)
    except Exception as e:
        logger.debug("%s failed: %r", func.__name__, e)
        return Result(e)
    return Result(None, value)


def _error_text(err: BaseException) -> str:
    """Traceback text of an error; ends in its type and message."""
    return "".join(traceback.format_exception(err)).rstrip("\n")


def _log_text(value: Any, pretty: bool) -> str:
    if isinstance(value, str):
        return value
    text = serialize(value, indent=2 if pretty else None)
    return str(value) if text is None else text


def _write_payload(data: Any, options: WriteOptions) -> str:
    text = serialize(data, options.replacer, options.space)
    if text is None:
        msg = f"Object of type {type(data).__name__} has no JSON representation"
        raise TypeError(msg)
    return text


class Jsonc:
    """
    JSON with comments: parsing, serialization and file helpers.

    Each instance owns its log configuration, so independent instances never
    share output streams. Module-level functions of the ``jsonc`` package
    are bound to a default instance.
    """

    def __init__(self, log_config: LogConfig | None = None) -> None:
        self.log_config = log_config if log_config is not None else LogConfig()
        self.safe = SafeJsonc(self)

    def config(
        self,
        log_config: LogConfig | None = None,
        *,
        stream: TextIO | None = None,
        stream_err: TextIO | None = None,
    ) -> None:
        """
        Replaces the log configuration.

        Streams given as keywords override those of ``log_config``; streams
        given neither way fall back to sys.stdout and sys.stderr.
        """
        base = log_config if log_config is not None else LogConfig()
        self.log_config = LogConfig(
            stream=base.stream if stream is None else stream,
            stream_err=base.stream_err if stream_err is None else stream_err,
        )

    def log(self, *args: Any) -> None:
        """Writes the arguments as compact JSON, space separated."""
        self._write_log(args, pretty=False)

    def logp(self, *args: Any) -> None:
        """Writes the arguments as JSON indented by two spaces."""
        self._write_log(args, pretty=True)

    def _write_log(self, args: tuple[Any, ...], pretty: bool) -> None:
        has_error = False
        parts = []
        for arg in args:
            if isinstance(arg, BaseException):
                has_error = True
                parts.append(_error_text(arg))
            else:
                parts.append(_log_text(arg, pretty))
        self.log_config.output(has_error).write(" ".join(parts) + "\n")

    def parse(
        self, text: str, options: ParseOptions | Reviver | None = None
    ) -> Any:
        """
        Parses JSON text that may contain comments.

        ``options`` is ParseOptions or a bare reviver. Raises ParseError on
        malformed JSON, and on any comment when ``strip_comments`` is off.
        """
        return decode(text, resolve_parse_options(options))

    def stringify(
        self,
        value: Any,
        options_or_replacer: StringifyOptions | Replacer | Space = None,
        space: Space = None,
    ) -> str | None:
        """
        Serializes a value to JSON text.

        Cycles become "[Circular]" unless ``handle_circular`` is off, in
        which case CircularReferenceError is raised. Returns None when the
        value has no JSON form (a function, or OMIT from the replacer).
        """
        options = resolve_stringify_options(options_or_replacer, space)
        return serialize(
            value, options.replacer, options.space, options.handle_circular
        )

    def is_json(self, text: Any, allow_comments: bool = False) -> bool:
        """True only for text holding a JSON object or array."""
        return is_structural_json(text, allow_comments)

    def strip_comments(self, text: str, whitespace: bool = False) -> str:
        return strip_comments(text, whitespace)

    def uglify(self, text: str) -> str:
        """Strips comments and re-encodes without any whitespace."""
        return self._reencode(text, None)

    def beautify(self, text: str, space: Space = DEFAULT_BEAUTIFY_SPACE) -> str:
        """Strips comments and re-encodes indented (two spaces if falsy)."""
        return self._reencode(text, space or DEFAULT_BEAUTIFY_SPACE)

    def _reencode(self, text: str, space: Space) -> str:
        value = decode(text, ParseOptions())
        return _write_payload(value, WriteOptions(space=space))

    def normalize(self, value: Any, replacer: Replacer | None = None) -> Any:
        """
        Round-trips a value through JSON text.

        The result holds only dicts, lists and JSON primitives: object
        attributes become dict members, functions disappear, cycles become
        "[Circular]".
        """
        text = self.stringify(value, replacer)
        return None if text is None else strict_decode(text)

    async def read(
        self, path: PathLike, options: ParseOptions | Reviver | None = None
    ) -> Any:
        """Reads and parses a JSON file with comments."""
        parse_options = resolve_parse_options(options)
        return decode(await read_text_async(path), parse_options)

    def read_sync(
        self, path: PathLike, options: ParseOptions | Reviver | None = None
    ) -> Any:
        parse_options = resolve_parse_options(options)
        return decode(read_text(path), parse_options)

    async def write(
        self, path: PathLike, data: Any, options: WriteOptions | None = None
    ) -> bool:
        """
        Serializes data and writes it to a file.

        Missing parent directories are created unless ``auto_path`` is off;
        then a missing parent raises FileSystemError.
        """
        write_options = resolve_write_options(options)
        text = _write_payload(data, write_options)
        await write_text_async(
            path, text, write_options.mode, write_options.auto_path
        )
        return True

    def write_sync(
        self, path: PathLike, data: Any, options: WriteOptions | None = None
    ) -> bool:
        write_options = resolve_write_options(options)
        text = _write_payload(data, write_options)
        write_text(path, text, write_options.mode, write_options.auto_path)
        return True


class SafeJsonc:
    """
    Non-raising view of a Jsonc instance.

    Operations that can fail return Result; is_json, config, log and logp
    behave exactly as on the owning instance.
    """

    def __init__(self, owner: Jsonc) -> None:
        self._owner = owner

    def config(
        self,
        log_config: LogConfig | None = None,
        *,
        stream: TextIO | None = None,
        stream_err: TextIO | None = None,
    ) -> None:
        self._owner.config(log_config, stream=stream, stream_err=stream_err)

    def log(self, *args: Any) -> None:
        self._owner.log(*args)

    def logp(self, *args: Any) -> None:
        self._owner.logp(*args)

    def parse(
        self, text: str, options: ParseOptions | Reviver | None = None
    ) -> Result:
        return _capture(self._owner.parse, text, options)

    def stringify(
        self,
        value: Any,
        options_or_replacer: StringifyOptions | Replacer | Space = None,
        space: Space = None,
    ) -> Result:
        return _capture(
            self._owner.stringify, value, options_or_replacer, space
        )

    def is_json(self, text: Any, allow_comments: bool = False) -> bool:
        return self._owner.is_json(text, allow_comments)

    def strip_comments(self, text: str, whitespace: bool = False) -> Result:
        return _capture(self._owner.strip_comments, text, whitespace)

    def uglify(self, text: str) -> Result:
        return _capture(self._owner.uglify, text)

    def beautify(
        self, text: str, space: Space = DEFAULT_BEAUTIFY_SPACE
    ) -> Result:
        return _capture(self._owner.beautify, text, space)

    def normalize(self, value: Any, replacer: Replacer | None = None) -> Result:
        return _capture(self._owner.normalize, value, replacer)

    async def read(
        self, path: PathLike, options: ParseOptions | Reviver | None = None
    ) -> Result:
        return await _capture_async(self._owner.read, path, options)

    def read_sync(
        self, path: PathLike, options: ParseOptions | Reviver | None = None
    ) -> Result:
        return _capture(self._owner.read_sync, path, options)

    async def write(
        self, path: PathLike, data: Any, options: WriteOptions | None = None
    ) -> Result:
        return await _capture_async(self._owner.write, path, data, options)

    def write_sync(
        self, path: PathLike, data: Any, options: WriteOptions | None = None
    ) -> Result:
        return _capture(self._owner.write_sync, path, data, options)
