import os
from functools import total_ordering
from typing import List
from .file_operations import RenameResult, list_entries, rename_entry

@total_ordering
class FileNode:
    """
    A handle on one filesystem entry, either a directory or a file.

    Nothing about the entry is cached: kind, existence and children are
    read from the filesystem on every call. The wrapped path is the node's
    identity and changes when a rename succeeds, so other FileNode objects
    for the old path go stale.
    """
    __slots__ = ['path']

    def __init__(self, path: str):
        self.path = os.path.normpath(path)

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def get_name(self) -> str:
        return self.name

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def is_directory(self) -> bool:
        return os.path.isdir(self.path)

    def list_children(self) -> List["FileNode"]:
        """Entries directly inside this directory, or [] if it can't be listed"""
        return [FileNode(path) for path in list_entries(self.path)]

    def rename(self, new_name: str) -> RenameResult:
        """Rename the entry within its directory, following it on success"""
        result = rename_entry(self.path, new_name)
        if result.success:
            self.path = os.path.normpath(result.new_path)
        return result

    def to_dict(self):
        return {
            "name": self.name,
            "path": self.path,
            "is_directory": self.is_directory(),
        }

    def __eq__(self, other):
        if not isinstance(other, FileNode):
            return NotImplemented
        return self.path == other.path

    def __lt__(self, other):
        if not isinstance(other, FileNode):
            return NotImplemented
        return self.path < other.path

    # Identity is mutable
    __hash__ = None

    def __repr__(self):
        return f"FileNode({self.path!r})"
