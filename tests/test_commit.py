import json
from pathlib import Path
from unittest import mock

import pytest

from dit.commit import Commit, CommitStore
from dit.errors import CommitError, FsError, OtherError
from dit.project import DitProject
from dit.stage import StagedFiles

AUTHOR = "Alice | alice@example.com"
NOW = 1_700_000_000


@pytest.fixture
def project(tmp_path):
    return DitProject(tmp_path / "repo" if (tmp_path / "repo").mkdir() is None else tmp_path)


@pytest.fixture
def store(project):
    return CommitStore(project)


def _staged(directory: Path, name: str, content: bytes) -> StagedFiles:
    copy = directory / f"copy-{name}"
    copy.write_bytes(content)
    return StagedFiles({Path(name): copy})


def _commit(store, author, message, staged, parent=None, now=NOW):
    with mock.patch("time.time", return_value=float(now)):
        return store.create_commit(author, message, staged, parent)


def test_commit_round_trip(store, tmp_path):
    commit_hash = _commit(store, AUTHOR, "initial commit", _staged(tmp_path, "a.txt", b"a"))
    commit = store.get_commit(commit_hash)

    assert commit.author == AUTHOR
    assert commit.message == "initial commit"
    assert commit.timestamp == NOW
    assert commit.parent is None
    assert commit.hash == commit_hash
    assert list(store.tree_store.get_tree(commit.tree).files) == ["a.txt"]


def test_commit_file_contents(store, project, tmp_path):
    commit_hash = _commit(store, AUTHOR, "msg", _staged(tmp_path, "a.txt", b"a"))
    text = (project.commits / commit_hash).read_text(encoding="utf-8")
    commit = store.get_commit(commit_hash)

    assert text.startswith('{\n  "author": ')
    assert json.loads(text) == {
        "author": AUTHOR,
        "message": "msg",
        "timestamp": NOW,
        "tree": commit.tree,
        "parent": None,
    }


def test_child_commit_links_parent_and_inherits_files(store, tmp_path):
    first = _commit(store, AUTHOR, "one", _staged(tmp_path, "a.txt", b"a"))
    second = _commit(store, AUTHOR, "two", _staged(tmp_path, "b.txt", b"b"), first)
    child = store.get_commit(second)

    assert child.parent == first
    assert set(store.tree_store.get_tree(child.tree).files) == {"a.txt", "b.txt"}


def test_hash_is_deterministic(store, tmp_path):
    first = _commit(store, AUTHOR, "same", _staged(tmp_path, "a.txt", b"a"))
    second = _commit(store, AUTHOR, "same", _staged(tmp_path, "a.txt", b"a"))
    assert first == second


@pytest.mark.parametrize(
    "author, message, now",
    [("Bob | bob@example.com", "same", NOW), (AUTHOR, "other", NOW), (AUTHOR, "same", NOW + 1)],
)
def test_hash_depends_on_metadata(store, tmp_path, author, message, now):
    base = _commit(store, AUTHOR, "same", _staged(tmp_path, "a.txt", b"a"))
    changed = _commit(store, author, message, _staged(tmp_path, "a.txt", b"a"), now=now)
    assert base != changed


def test_negative_time(store, tmp_path):
    with pytest.raises(OtherError):
        _commit(store, AUTHOR, "m", _staged(tmp_path, "a.txt", b"a"), now=-5)


def test_get_missing_commit(store):
    with pytest.raises(FsError):
        store.get_commit("f" * 64)


def test_missing_parent_commit(store, tmp_path):
    with pytest.raises(FsError):
        _commit(store, AUTHOR, "m", _staged(tmp_path, "a.txt", b"a"), "f" * 64)


def test_corrupt_commit(store, project):
    (project.commits / "bad").write_text("not json", encoding="utf-8")
    with pytest.raises(CommitError) as info:
        store.get_commit("bad")
    assert "'bad'" in str(info.value)


def test_commit_missing_field(store, project):
    (project.commits / "bad").write_text(
        json.dumps({"author": "a", "message": "m", "tree": "t"}), encoding="utf-8"
    )
    with pytest.raises(CommitError):
        store.get_commit("bad")


def test_commit_without_parent_key_loads(store, project):
    (project.commits / "ok").write_text(
        json.dumps({"author": "a", "message": "m", "timestamp": 3, "tree": "t"}),
        encoding="utf-8",
    )
    assert store.get_commit("ok") == Commit("a", "m", 3, "t", None, "ok")