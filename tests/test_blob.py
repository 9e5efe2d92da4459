import pytest

from dit.blob import BlobStore
from dit.errors import FsError
from dit.helpers import BUFFER_SIZE
from dit.project import DitProject

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


@pytest.fixture
def store(tmp_path):
    return BlobStore(DitProject(tmp_path))


def _write(path, data):
    path.write_bytes(data)
    return path


def test_empty_file_hash(store, tmp_path):
    source = _write(tmp_path / "empty.txt", b"")
    assert store.create_blob(source) == EMPTY_SHA256


def test_blob_named_by_hash_holds_content(store, tmp_path):
    source = _write(tmp_path / "main.py", b"print('hello')\n")
    blob_hash = store.create_blob(source)
    assert len(blob_hash) == 64
    assert (store.project.blobs / blob_hash).read_bytes() == b"print('hello')\n"


def test_temp_file_is_gone(store, tmp_path):
    source = _write(tmp_path / "a.txt", b"alpha")
    store.create_blob(source)
    store.create_blob(source)
    assert not (store.project.blobs / ".temp").exists()


def test_identical_content_shares_blob(store, tmp_path):
    first = _write(tmp_path / "a.txt", b"same content")
    second = _write(tmp_path / "b.txt", b"same content")
    assert store.create_blob(first) == store.create_blob(second)
    blobs = [p for p in store.project.blobs.iterdir()]
    assert len(blobs) == 1


def test_different_content_different_blobs(store, tmp_path):
    first = _write(tmp_path / "a.txt", b"one")
    second = _write(tmp_path / "b.txt", b"two")
    assert store.create_blob(first) != store.create_blob(second)
    assert len(list(store.project.blobs.iterdir())) == 2


def test_open_blob_round_trip_large(store, tmp_path):
    data = bytes(range(256)) * (BUFFER_SIZE // 256 * 3 + 7)
    source = _write(tmp_path / "big.bin", data)
    blob_hash = store.create_blob(source)
    with store.open_blob(blob_hash) as reader:
        assert reader.read() == data


def test_open_missing_blob_raises(store):
    with pytest.raises(FsError):
        store.open_blob("0" * 64)


def test_create_blob_from_missing_file_raises(store, tmp_path):
    with pytest.raises(FsError):
        store.create_blob(tmp_path / "absent.txt")