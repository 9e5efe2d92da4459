"""Content-addressed storage of file contents.

Each blob is named by the SHA-256 of its contents, so files with identical
contents, in one commit or across commits, share one blob.
"""

from __future__ import annotations

import hashlib
import os
from typing import BinaryIO

from dit.errors import BlobError, FsError
from dit.helpers import iter_chunks, open_reader, open_writer
from dit.project import DitProject


class BlobStore:
    """Creates and opens the blobs of a dit project."""

    def __init__(self, project: DitProject) -> None:
        self.project = project

    def create_blob(self, path: str | os.PathLike[str]) -> str:
        """Store the file's contents as a blob and return its hash."""
        temp_path = self.project.blobs / ".temp"
        hasher = hashlib.sha256()

        with open_reader(path) as reader, open_writer(temp_path) as writer:
            for chunk in iter_chunks(reader, temp_path):
                hasher.update(chunk)
                try:
                    writer.write(chunk)
                except OSError as exc:
                    raise FsError(
                        f"Failed to write to the file '{temp_path}'"
                    ) from exc

        blob_hash = hasher.hexdigest()
        target = self.project.blobs / blob_hash

        if target.is_file():
            try:
                temp_path.unlink()
            except OSError as exc:
                raise BlobError(
                    f"Failed to delete the temporary blob file '{temp_path}'"
                ) from exc
        else:
            try:
                temp_path.replace(target)
            except OSError as exc:
                raise BlobError(
                    f"Failed to rename the temporary blob file "
                    f"'{temp_path}' to '{target}'"
                ) from exc

        return blob_hash

    def open_blob(self, blob_hash: str) -> BinaryIO:
        """Open the blob with the given hash for binary reading."""
        return open_reader(self.project.blobs / blob_hash)