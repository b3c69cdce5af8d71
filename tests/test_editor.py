import pytest
from filetree.editor import InlineEditor
from filetree.file_operations import RenameStatus
from filetree.models import FileNode

@pytest.fixture
def test_dir(tmp_path):
    (tmp_path / "one").write_text("1")
    (tmp_path / "two").write_text("2")
    return tmp_path

@pytest.fixture
def editor():
    return InlineEditor()

def test_begin_edit_starts_with_current_name(editor, test_dir):
    node = FileNode(str(test_dir / "one"))
    assert editor.begin_edit(node) == "one"
    assert editor.editing
    assert editor.item is node

def test_commit_renames(editor, test_dir):
    node = FileNode(str(test_dir / "one"))
    editor.begin_edit(node)
    result = editor.commit("uno")

    assert result.status is RenameStatus.SUCCESS
    assert node.name == "uno"
    assert (test_dir / "uno").exists()
    assert not editor.editing

def test_commit_collision_reports_and_closes(editor, test_dir):
    node = FileNode(str(test_dir / "one"))
    editor.begin_edit(node)
    result = editor.commit("two")

    assert result.status is RenameStatus.COLLISION
    assert node.name == "one"
    assert not editor.editing

def test_cancel_never_renames(editor, test_dir, monkeypatch):
    calls = []
    monkeypatch.setattr(FileNode, "rename", lambda self, name: calls.append(name))

    editor.begin_edit(FileNode(str(test_dir / "one")))
    editor.cancel()

    assert not editor.editing
    assert calls == []

def test_commit_after_cancel_is_ignored(editor, test_dir):
    editor.begin_edit(FileNode(str(test_dir / "one")))
    editor.cancel()

    assert editor.commit("uno") is None
    assert (test_dir / "one").exists()
    assert not (test_dir / "uno").exists()

def test_commit_unchanged_name_is_a_noop(editor, test_dir, monkeypatch):
    calls = []
    monkeypatch.setattr(FileNode, "rename", lambda self, name: calls.append(name))

    editor.begin_edit(FileNode(str(test_dir / "one")))
    assert editor.commit("one") is None
    assert calls == []
    assert not editor.editing

def test_begin_edit_replaces_open_edit(editor, test_dir):
    editor.begin_edit(FileNode(str(test_dir / "one")))
    second = FileNode(str(test_dir / "two"))
    editor.begin_edit(second)
    editor.commit("dos")

    assert second.name == "dos"
    assert (test_dir / "one").exists()
