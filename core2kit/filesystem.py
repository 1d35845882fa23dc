"""Small file helpers: write, append, move, create directories and list them."""

from __future__ import annotations

import logging
import os
from typing import Iterator, Tuple, Union

from core2kit.clock import time_fmt

log = logging.getLogger(__name__)

Data = Union[bytes, bytearray, str]

TIME_SUFFIX_FORMAT = "%d%m%Y_%H%M%S"


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def file_write(filename: str, data: Data) -> None:
    """Replace the file's contents with data; raises OSError if it cannot be opened."""
    log.debug("file_write(%r)", filename)
    with open(filename, "wb") as f:
        f.write(_as_bytes(data))


def file_write_timesuffix(filename: str, data: Data) -> str:
    """Write data to a file whose name pattern holds one '%s' for the current time.

    Returns the name of the file written.
    """
    new_filename = filename % time_fmt(TIME_SUFFIX_FORMAT)
    file_write(new_filename, data)
    return new_filename


def file_append(filename: str, data: Data) -> None:
    """Append data to the file, creating it if needed."""
    log.debug("file_append(%r)", filename)
    with open(filename, "ab") as f:
        f.write(_as_bytes(data))


def file_move(full_file_path: str, new_directory: str) -> str:
    """Move a file into new_directory, keeping its base name.

    The destination is new_directory followed directly by the base name, so
    the directory is expected to end with a separator. Returns the new path.
    """
    destination = new_directory + os.path.basename(full_file_path)
    log.debug("file_move(%r) to %r", full_file_path, destination)
    os.rename(full_file_path, destination)
    return destination


def file_mkdir(dirname: str, mode: int = 0) -> bool:
    """Create a directory; returns False if the path already exists.

    A mode of 0 means 0o777. Raises OSError if the directory cannot be made.
    """
    if mode == 0:
        mode = 0o777
    if os.path.exists(dirname):
        log.debug("file_mkdir(%r): exists", dirname)
        return False
    os.mkdir(dirname, mode)
    return True


def file_list(dirname: str) -> Iterator[Tuple[str, str]]:
    """Yield (full path, base name) for each entry; nothing if the directory cannot be read."""
    try:
        names = os.listdir(dirname)
    except OSError:
        return
    for name in names:
        full = dirname + "/" + name
        yield full, os.path.basename(full)