import os
from pathlib import Path

import pytest

from resizer.models.errors import FileSystemError
from resizer.services.path_service import PathService


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path / "tree"
    (root / "sub" / "deeper").mkdir(parents=True)
    for name in ("a.jpg", "b.jpeg", "c.png", "notes.txt", "upper.JPG", "noext"):
        (root / name).write_bytes(b"x")
    (root / "sub" / "d.png").write_bytes(b"x")
    (root / "sub" / "e.gif").write_bytes(b"x")
    (root / "sub" / "deeper" / "f.jpg").write_bytes(b"x")
    # каталог с "картиночным" именем не должен попасть в результат
    (root / "folder.png").mkdir()
    return root


def names(found):
    return sorted(item.path.name for item in found)


def test_non_recursive_skips_subdirectories(tree):
    found = PathService().collect(tree, recursive=False)
    assert names(found) == ["a.jpg", "b.jpeg", "c.png"]


def test_recursive_finds_every_depth(tree):
    found = PathService().collect(tree, recursive=True)
    assert names(found) == ["a.jpg", "b.jpeg", "c.png", "d.png", "f.jpg"]


def test_extension_and_relative_path(tree):
    found = {item.path.name: item for item in PathService().collect(tree, recursive=True)}
    assert found["b.jpeg"].ext == ".jpeg"
    assert found["f.jpg"].relative == Path("sub", "deeper", "f.jpg")
    assert found["a.jpg"].relative == Path("a.jpg")


def test_order_follows_directory_listing(tree):
    found = PathService().collect(tree, recursive=False)
    listed = [p.name for p in tree.iterdir() if p.name in {"a.jpg", "b.jpeg", "c.png"}]
    assert [item.path.name for item in found] == listed


def test_missing_root_raises(tmp_path):
    with pytest.raises(FileSystemError) as info:
        PathService().collect(tmp_path / "missing", recursive=False)
    assert info.value.stage == "collect"
    assert isinstance(info.value, OSError)


def test_file_as_root_raises(tmp_path):
    not_a_dir = tmp_path / "file.jpg"
    not_a_dir.write_bytes(b"x")
    with pytest.raises(FileSystemError):
        PathService().collect(not_a_dir, recursive=True)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlink_cycle_terminates(tree):
    os.symlink(tree, tree / "sub" / "loop", target_is_directory=True)
    found = PathService().collect(tree, recursive=True)
    assert names(found) == ["a.jpg", "b.jpeg", "c.png", "d.png", "f.jpg"]
