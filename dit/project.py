"""Layout of a dit project on disk."""

from __future__ import annotations

import os
from pathlib import Path

from dit.errors import ProjectError
from dit.helpers import resolve_absolute_path

DIT_ROOT = ".dit"
BLOBS_ROOT = ".dit/blobs"
TREES_ROOT = ".dit/trees"
COMMITS_ROOT = ".dit/commits"
BRANCHES_ROOT = ".dit/branches"
STAGE_ROOT = ".dit/stage"
STAGE_FILE = ".dit/stage/staged_files"
HEAD_FILE = ".dit/head"
DEFAULT_BRANCH = "main"


def _ensure_dir(path: Path) -> None:
    if path.is_dir():
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ProjectError(
            f"Failed to create .dit project subdirectory '{path}'"
        ) from exc


def _ensure_file(path: Path) -> None:
    if path.is_file():
        return
    try:
        path.touch()
    except OSError as exc:
        raise ProjectError(f"Failed to create .dit project file '{path}'") from exc


class DitProject:
    """Paths of the parts of a dit project, created on construction if missing."""

    def __init__(self, project_path: str | os.PathLike[str]) -> None:
        self.project_path = Path(project_path)
        if not self.project_path.is_dir():
            raise ProjectError(
                f"The given project path '{self.project_path}' is not a directory"
            )

        self.dit_root = self.project_path / DIT_ROOT
        self.blobs = self.project_path / BLOBS_ROOT
        self.trees = self.project_path / TREES_ROOT
        self.stage = self.project_path / STAGE_ROOT
        self.commits = self.project_path / COMMITS_ROOT
        self.branches = self.project_path / BRANCHES_ROOT
        for directory in (self.dit_root, self.blobs, self.trees, self.stage,
                          self.commits, self.branches):
            _ensure_dir(directory)

        # Files only after every directory exists.
        self.stage_file = self.project_path / STAGE_FILE
        self.head_file = self.project_path / HEAD_FILE
        _ensure_file(self.stage_file)
        _ensure_file(self.head_file)

    def relative_path(self, path: str | os.PathLike[str]) -> Path:
        """Return the path relative to the project root."""
        path = Path(path)
        if not self.includes_path(path):
            raise ProjectError(f"The file '{path}' is not inside the project")
        try:
            return path.relative_to(self.project_path)
        except ValueError:
            return resolve_absolute_path(path).relative_to(
                resolve_absolute_path(self.project_path)
            )

    def includes_path(self, path: str | os.PathLike[str]) -> bool:
        """Tell whether an existing path lies inside the project."""
        path = Path(path)
        if not path.exists():
            return False
        project = resolve_absolute_path(self.project_path)
        return resolve_absolute_path(path).is_relative_to(project)