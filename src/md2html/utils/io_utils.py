#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/io_utils.py
"""I/O utilities for reading input and writing output files.

Output is written through a temporary file in the destination directory and
renamed into place, so a failed run never leaves a truncated file behind.

"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Union

from md2html.exceptions import InputReadError, OutputWriteError

logger = logging.getLogger(__name__)


def format_size(size_bytes: int | float) -> str:
    """Format a byte count in human-readable form.

    Examples
    --------
    >>> format_size(512)
    '512.0 B'
    >>> format_size(12595)
    '12.3 KiB'

    """
    size = float(size_bytes)
    for unit in ["B", "KiB", "MiB", "GiB"]:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} TiB"


def read_text(path: Union[str, Path]) -> str:
    """Read a UTF-8 text file.

    Raises
    ------
    InputReadError
        If the file is missing or cannot be decoded

    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(str(path), original_error=e) from e
    logger.info(f"Read ({format_size(len(content.encode('utf-8')))}) from \"{path}\"")
    return content


def write_atomic(content: Union[str, bytes], path: Union[str, Path]) -> int:
    """Write ``content`` to ``path`` through a temporary file.

    Parameters
    ----------
    content : str or bytes
        Data to write; text is encoded as UTF-8
    path : str or Path
        Destination file; its directory must exist

    Returns
    -------
    int
        Number of bytes written

    Raises
    ------
    OutputWriteError
        If the temporary file cannot be written or renamed into place

    """
    path = Path(path)
    data = content.encode("utf-8") if isinstance(content, str) else content
    temp_path: Path | None = None

    try:
        fd, temp_path_str = tempfile.mkstemp(dir=path.parent, prefix=f"{path.name}.", suffix=".tmp")
        temp_path = Path(temp_path_str)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(temp_path, path)
    except OSError as e:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()
        raise OutputWriteError(str(path), original_error=e) from e

    return len(data)


def copy_file(source: Union[str, Path], destination: Union[str, Path]) -> int:
    """Copy ``source`` to ``destination`` and return the copied size in bytes.

    Raises
    ------
    InputReadError
        If ``source`` does not exist
    OutputWriteError
        If the copy fails

    """
    source = Path(source)
    destination = Path(destination)
    if not source.is_file():
        raise InputReadError(str(source), message=f"File not found: {source}")
    try:
        shutil.copyfile(source, destination)
    except OSError as e:
        raise OutputWriteError(str(destination), original_error=e) from e
    return destination.stat().st_size


def ensure_directory(path: Union[str, Path]) -> Path:
    """Create ``path`` and its parents when missing."""
    path = Path(path)
    if not path.is_dir():
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(str(path), message=f"Cannot create output directory: {path}", original_error=e) from e
        logger.info(f"Created output directory \"{path}\"")
    return path


__all__ = ["copy_file", "ensure_directory", "format_size", "read_text", "write_atomic"]
