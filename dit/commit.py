"""Commits: snapshots of the project with who, when and why."""

from __future__ import annotations

import hashlib
import json
import time
from dataclasses import dataclass

from dit.errors import CommitError, OtherError
from dit.helpers import read_to_string, write_to_file
from dit.project import DitProject
from dit.stage import StagedFiles
from dit.tree import TreeStore


@dataclass
class Commit:
    """A commit object; ``hash`` is its name on disk and is not stored inside it."""

    author: str
    message: str
    timestamp: int
    tree: str
    parent: str | None = None
    hash: str = ""


class CommitStore:
    """Creates and reads the commits of a dit project."""

    def __init__(self, project: DitProject) -> None:
        self.project = project
        self.tree_store = TreeStore(project)

    def create_commit(
        self,
        author: str,
        message: str,
        staged_files: StagedFiles,
        parent_commit_hash: str | None = None,
    ) -> str:
        """Store a commit of the staged files on top of the parent; return its hash."""
        parent_tree = (
            self.get_commit(parent_commit_hash).tree
            if parent_commit_hash is not None
            else None
        )
        tree_hash = self.tree_store.create_tree(staged_files, parent_tree)

        now = time.time()
        if now < 0:
            raise OtherError("Current system time is earlier then the unix epoch time.")
        timestamp = int(now)

        hasher = hashlib.sha256()
        hasher.update(author.encode("utf-8"))
        hasher.update(message.encode("utf-8"))
        hasher.update(timestamp.to_bytes(8, "little"))
        hasher.update(tree_hash.encode("utf-8"))
        hasher.update((parent_commit_hash if parent_commit_hash is not None else "\0").encode("utf-8"))

        commit = Commit(author, message, timestamp, tree_hash, parent_commit_hash,
                        hasher.hexdigest())
        self._write(commit)
        return commit.hash

    def get_commit(self, commit_hash: str) -> Commit:
        """Read the commit with the given hash."""
        text = read_to_string(self.project.commits / commit_hash)
        error = CommitError(
            f"Failed to deserialize the commit with hash '{commit_hash}'"
        )
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise error from exc
        if not isinstance(data, dict):
            raise error

        author = data.get("author")
        message = data.get("message")
        timestamp = data.get("timestamp")
        tree = data.get("tree")
        parent = data.get("parent")
        if not (
            isinstance(author, str)
            and isinstance(message, str)
            and isinstance(tree, str)
            and isinstance(timestamp, int)
            and not isinstance(timestamp, bool)
            and timestamp >= 0
            and (parent is None or isinstance(parent, str))
        ):
            raise error
        return Commit(author, message, timestamp, tree, parent, commit_hash)

    def _write(self, commit: Commit) -> None:
        payload = {
            "author": commit.author,
            "message": commit.message,
            "timestamp": commit.timestamp,
            "tree": commit.tree,
            "parent": commit.parent,
        }
        write_to_file(
            self.project.commits / commit.hash,
            json.dumps(payload, indent=2, ensure_ascii=False),
        )