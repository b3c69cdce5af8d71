import os
import pytest
from filetree.models import FileNode
from filetree.provider import ChildProvider

@pytest.fixture
def test_dir(tmp_path):
    base = tmp_path / "ROOT"
    base.mkdir()
    (base / "Sub-Directory").mkdir()
    (base / "Sub-Directory" / "four").touch()
    for name in ("one", "two", "three"):
        (base / name).touch()
    return base

@pytest.fixture
def provider(test_dir):
    return ChildProvider(str(test_dir))

def test_roots_is_the_single_root(provider, test_dir):
    roots = provider.roots()
    assert len(roots) == 1
    assert roots[0].path == str(test_dir)

def test_root_accepts_a_node(test_dir):
    assert ChildProvider(FileNode(str(test_dir))).roots()[0].path == str(test_dir)

def test_roots_fixed_across_descendant_renames(provider, test_dir):
    first = provider.roots()
    child = provider.children(first[0])[0]
    assert child.rename("renamed").success
    assert provider.roots() == first

def test_roots_not_moved_by_renaming_a_returned_root(provider, test_dir):
    provider.roots()[0].rename("elsewhere")
    assert provider.roots()[0].path == str(test_dir)

def test_children_are_the_immediate_entries(provider, test_dir):
    children = provider.children(provider.roots()[0])
    assert {c.name for c in children} == {"Sub-Directory", "one", "two", "three"}
    assert all(os.path.dirname(c.path) == str(test_dir) for c in children)

def test_children_are_deterministic(provider):
    root = provider.roots()[0]
    assert provider.children(root) == provider.children(root)

def test_children_of_file_are_empty(provider, test_dir):
    assert provider.children(FileNode(str(test_dir / "one"))) == []

def test_children_of_missing_path_are_empty(provider, test_dir):
    assert provider.children(FileNode(str(test_dir / "nowhere"))) == []

def test_children_when_listing_fails(provider, monkeypatch):
    def failing_listdir(path):
        raise PermissionError(13, "Permission denied", path)
    monkeypatch.setattr(os, "listdir", failing_listdir)

    assert provider.children(provider.roots()[0]) == []

def test_children_see_external_changes(provider, test_dir):
    root = provider.roots()[0]
    assert len(provider.children(root)) == 4
    (test_dir / "five").touch()
    assert len(provider.children(root)) == 5

def test_nested_expansion(provider):
    root = provider.roots()[0]
    subdir = next(c for c in provider.children(root) if c.is_directory())
    assert [c.name for c in provider.children(subdir)] == ["four"]

def test_sorted_children(provider):
    names = [c.name for c in provider.sorted_children(provider.roots()[0])]
    assert names == ["Sub-Directory", "one", "three", "two"]

def test_contains(provider, test_dir, tmp_path):
    assert provider.contains(str(test_dir))
    assert provider.contains(str(test_dir / "Sub-Directory" / "four"))
    assert not provider.contains(str(tmp_path))
    assert not provider.contains(str(test_dir / ".." / "other"))
