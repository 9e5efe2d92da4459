"""Filesystem helpers that report failures as dit errors."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Iterator

from dit.errors import FsError

BUFFER_SIZE = 32768
"""Largest number of bytes read at once when copying or hashing files."""


def read_to_string(path: str | os.PathLike[str]) -> str:
    """Return the whole text of a file."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FsError(f"Failed to read from the file '{path}'") from exc


def write_to_file(path: str | os.PathLike[str], content: str) -> None:
    """Replace the contents of a file with the given text."""
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FsError(f"Failed to write to the file '{path}'") from exc


def remove_file(path: str | os.PathLike[str]) -> None:
    """Delete a file."""
    try:
        Path(path).unlink()
    except OSError as exc:
        raise FsError(f"Failed to remove the file '{path}'") from exc


def open_reader(path: str | os.PathLike[str]) -> BinaryIO:
    """Open an existing file for binary reading."""
    try:
        return open(path, "rb")
    except OSError as exc:
        raise FsError(f"Failed to open the file '{path}'") from exc


def open_writer(path: str | os.PathLike[str]) -> BinaryIO:
    """Open a file for binary writing, creating or truncating it."""
    try:
        return open(path, "wb")
    except OSError as exc:
        raise FsError(f"Failed to open the file '{path}'") from exc


def iter_chunks(stream: BinaryIO, path: str | os.PathLike[str]) -> Iterator[bytes]:
    """Yield the stream's contents in pieces of at most BUFFER_SIZE bytes."""
    while True:
        try:
            chunk = stream.read(BUFFER_SIZE)
        except OSError as exc:
            raise FsError(f"Failed to read from the file '{path}'") from exc
        if not chunk:
            return
        yield chunk


def resolve_absolute_path(path: str | os.PathLike[str]) -> Path:
    """Return the canonical absolute form of an existing path."""
    try:
        return Path(path).resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise FsError(f"Could not resolve the absolute path for '{path}'") from exc