"""The main interface to a dit repository."""

from __future__ import annotations

import os
import sys

from dit.branch import BranchManager
from dit.commit import Commit, CommitStore
from dit.project import DitProject
from dit.stage import StagedFiles, StageManager


class Dit:
    """A dit repository rooted at a project directory, created there if missing."""

    def __init__(self, project_path: str | os.PathLike[str]) -> None:
        self.project = DitProject(project_path)
        self.commit_store = CommitStore(self.project)
        self.stage_manager = StageManager(self.project)
        self.branch_manager = BranchManager(self.project)

    def commit(self, author: str, message: str) -> None:
        """Commit the staged files on the current branch and empty the stage."""
        parent = self.branch_manager.head_commit
        commit_hash = self.commit_store.create_commit(
            author, message, self.stage_manager.staged_files, parent
        )
        self.branch_manager.set_head_commit(commit_hash)
        self.stage_manager.clear_stage()

    def stage(self, path: str | os.PathLike[str]) -> None:
        """Stage the file at the given path."""
        self.stage_manager.stage_file(path)

    def unstage(self, path: str | os.PathLike[str]) -> None:
        """Remove the file at the given path from the stage."""
        self.stage_manager.unstage_file(path)

    def create_branch(self, name: str) -> None:
        """Create a branch at the head commit and make it current."""
        self.branch_manager.create_branch(name)

    def branch(self) -> str | None:
        """Return the name of the current branch."""
        return self.branch_manager.current_branch

    def history(self, count: int) -> list[Commit]:
        """Return up to ``count`` commits, newest first; a negative count means all."""
        remaining = sys.maxsize if count < 0 else count
        commits: list[Commit] = []
        head = self.branch_manager.head_commit
        while head is not None and remaining > 0:
            commit = self.commit_store.get_commit(head)
            commits.append(commit)
            head = commit.parent
            remaining -= 1
        return commits

    def staged_files(self) -> StagedFiles:
        """Return the files currently staged."""
        return self.stage_manager.staged_files