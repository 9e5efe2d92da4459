"""Snapshots of the files of a commit.

A tree maps every project-relative path included in a commit to the hash of
the blob holding its contents. Each commit has exactly one tree, and a tree
inherits the entries of its parent's tree.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from pathlib import Path

from dit.blob import BlobStore
from dit.errors import TreeError
from dit.helpers import read_to_string, write_to_file
from dit.project import DitProject
from dit.stage import StagedFiles


def _sorted_files(files: dict[str, str]) -> dict[str, str]:
    # Order by path components, so the hash never depends on traversal order.
    return dict(sorted(files.items(), key=lambda item: Path(item[0]).parts))


@dataclass
class Tree:
    """Maps relative file paths to blob hashes."""

    files: dict[str, str] = field(default_factory=dict)
    hash: str = ""


class TreeStore:
    """Creates and reads the trees of a dit project."""

    def __init__(self, project: DitProject) -> None:
        self.project = project
        self.blob_store = BlobStore(project)

    def create_tree(
        self, staged_files: StagedFiles, parent_tree_hash: str | None = None
    ) -> str:
        """Store a tree of the parent's entries plus the staged files; return its hash."""
        files = (
            dict(self.get_tree(parent_tree_hash).files)
            if parent_tree_hash is not None
            else {}
        )
        for relative, staged_copy in staged_files.files.items():
            files[str(relative)] = self.blob_store.create_blob(staged_copy)
        files = _sorted_files(files)

        hasher = hashlib.sha256()
        for path, blob_hash in files.items():
            hasher.update(path.encode("utf-8", "surrogateescape"))
            hasher.update(blob_hash.encode("utf-8"))
        tree = Tree(files, hasher.hexdigest())

        serialized = json.dumps(
            {"files": tree.files}, separators=(",", ":"), ensure_ascii=False
        )
        write_to_file(self.project.trees / tree.hash, serialized)
        return tree.hash

    def get_tree(self, tree_hash: str) -> Tree:
        """Read the tree with the given hash."""
        text = read_to_string(self.project.trees / tree_hash)
        error = TreeError(f"Failed to deserialize the tree with hash '{tree_hash}'")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise error from exc
        files = data.get("files") if isinstance(data, dict) else None
        if not isinstance(files, dict) or not all(
            isinstance(value, str) for value in files.values()
        ):
            raise error
        return Tree(_sorted_files(files), tree_hash)