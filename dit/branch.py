"""Branches and the head pointer of a dit project."""

from __future__ import annotations

from dit.errors import BranchError
from dit.helpers import read_to_string, write_to_file
from dit.project import DEFAULT_BRANCH, DitProject


class BranchManager:
    """Tracks the current branch and the commit it points at."""

    def __init__(self, project: DitProject) -> None:
        self.project = project
        self._current_branch: str | None = None
        self._head_commit: str | None = None

        self._load_head_commit()
        if self._current_branch is None:
            self.create_branch(DEFAULT_BRANCH)

    @property
    def current_branch(self) -> str | None:
        """Name of the current branch."""
        return self._current_branch

    @property
    def head_commit(self) -> str | None:
        """Hash of the commit the current branch points at."""
        return self._head_commit

    def create_branch(self, name: str) -> None:
        """Create a branch at the head commit and switch to it."""
        path = self.project.branches / name
        if path.exists():
            raise BranchError(f"A branch with name '{name}' already exists")
        write_to_file(path, self._head_commit or "")
        self._current_branch = name
        write_to_file(self.project.head_file, name)

    def set_head_commit(self, commit: str) -> None:
        """Point the current branch at the given commit."""
        self._head_commit = commit
        self._load_current_branch()
        if self._current_branch is not None:
            write_to_file(self.project.branches / self._current_branch, commit)

    def _load_current_branch(self) -> None:
        head = read_to_string(self.project.head_file)
        self._current_branch = head or None

    def _load_head_commit(self) -> None:
        self._load_current_branch()
        if self._current_branch is None:
            self._head_commit = None
            return
        commit = read_to_string(self.project.branches / self._current_branch)
        self._head_commit = commit or None