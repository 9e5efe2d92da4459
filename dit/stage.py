"""The staging area: files waiting to be committed.

Staging a file copies its current contents into the stage directory under a
unique name. The stage file records, for each project-relative path, where
its copy lives, so a later commit knows which contents to store.
"""

from __future__ import annotations

import json
import os
import uuid
from dataclasses import dataclass, field
from pathlib import Path

from dit.errors import FsError, StagingError
from dit.helpers import (
    iter_chunks,
    open_reader,
    open_writer,
    read_to_string,
    remove_file,
    write_to_file,
)
from dit.project import DitProject


@dataclass
class StagedFiles:
    """Maps project-relative paths to their copies in the stage directory."""

    files: dict[Path, Path] = field(default_factory=dict)


def _dump(staged: StagedFiles) -> str:
    payload = {"files": {str(rel): str(copy) for rel, copy in staged.files.items()}}
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _load(text: str) -> StagedFiles:
    if not text:
        return StagedFiles()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StagingError("Failed to deserialize the stage file") from exc
    files = data.get("files") if isinstance(data, dict) else None
    if not isinstance(files, dict) or not all(
        isinstance(value, str) for value in files.values()
    ):
        raise StagingError("Failed to deserialize the stage file")
    return StagedFiles({Path(rel): Path(copy) for rel, copy in files.items()})


class StageManager:
    """Stages and unstages files of a dit project."""

    def __init__(self, project: DitProject) -> None:
        self.project = project
        self.staged_files = _load(read_to_string(project.stage_file))

    def stage_file(self, file_path: str | os.PathLike[str]) -> None:
        """Copy the file into the stage and record it."""
        relative = self.project.relative_path(file_path)
        target = self._unique_stage_path()

        with open_reader(file_path) as reader, open_writer(target) as writer:
            for chunk in iter_chunks(reader, file_path):
                try:
                    writer.write(chunk)
                except OSError as exc:
                    raise FsError(
                        f"Failed to write to the file '{file_path}'"
                    ) from exc

        self.staged_files.files[relative] = target
        self._save()

    def unstage_file(self, file_path: str | os.PathLike[str]) -> None:
        """Drop the file from the stage, deleting its staged copy."""
        relative = self.project.relative_path(file_path)
        staged_copy = self.staged_files.files.pop(relative, None)
        if staged_copy is not None:
            remove_file(staged_copy)
        self._save()

    def clear_stage(self) -> None:
        """Delete every staged copy and empty the stage file."""
        for staged_copy in self.staged_files.files.values():
            remove_file(staged_copy)
        self.staged_files.files.clear()
        self._save()

    def _unique_stage_path(self) -> Path:
        while True:
            candidate = self.project.stage / f"file-{uuid.uuid4()}"
            if not candidate.exists():
                return candidate

    def _save(self) -> None:
        write_to_file(self.project.stage_file, _dump(self.staged_files))