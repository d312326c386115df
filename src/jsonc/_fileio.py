"""
UTF-8 file access for read() and write().

Blocking functions plus coroutine wrappers that run them in a worker thread.
OSError is re-raised as FileSystemError with the original chained.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Final
from typing import TypeAlias

from ._errors import FileSystemError

logger = logging.getLogger(__name__)

PathLike: TypeAlias = str | os.PathLike[str]

BOM: Final = "\ufeff"


def read_text(path: PathLike) -> str:
    """Reads a UTF-8 file, dropping a leading byte order mark."""
    try:
        with open(path, encoding="utf-8", newline="") as fp:
            text = fp.read()
    except OSError as e:
        raise FileSystemError.from_os_error(e, os.fspath(path)) from e

    logger.debug("Read %d characters from %s", len(text), path)
    return text.removeprefix(BOM)


def write_text(
    path: PathLike, text: str, mode: int = 0o666, auto_path: bool = True
) -> None:
    """
    Writes text to a UTF-8 file, replacing existing content.

    ``mode`` applies when the file is created. With ``auto_path`` missing
    parent directories are created first; without it a missing parent is a
    FileSystemError.
    """
    target = Path(path)
    try:
        if auto_path and not target.parent.is_dir():
            target.parent.mkdir(parents=True, exist_ok=True)
            logger.debug("Created directory %s", target.parent)

        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with open(fd, "w", encoding="utf-8", newline="") as fp:
            fp.write(text)
    except OSError as e:
        raise FileSystemError.from_os_error(e, os.fspath(path)) from e

    logger.debug("Wrote %d characters to %s", len(text), target)


async def read_text_async(path: PathLike) -> str:
    return await asyncio.to_thread(read_text, path)


async def write_text_async(
    path: PathLike, text: str, mode: int = 0o666, auto_path: bool = True
) -> None:
    await asyncio.to_thread(write_text, path, text, mode, auto_path)
