import os
from typing import List, Union
from .models import FileNode

class ChildProvider:
    """
    Supplies the nodes of a tree view rooted at one fixed directory.

    Children are listed from the filesystem each time they are asked for;
    re-expanding a branch shows whatever is on disk at that moment.
    """

    def __init__(self, root: Union[str, FileNode]):
        root_path = root.path if isinstance(root, FileNode) else root
        self._root_path = os.path.normpath(root_path)

    @property
    def root_path(self) -> str:
        return self._root_path

    def roots(self) -> List[FileNode]:
        # A fresh node each time so renames made through other nodes never move the root
        return [FileNode(self._root_path)]

    def children(self, node: FileNode) -> List[FileNode]:
        if not node.is_directory():
            return []
        return node.list_children()

    def sorted_children(self, node: FileNode) -> List[FileNode]:
        """Children in ascending natural order, as the tree column shows them"""
        return sorted(self.children(node))

    def contains(self, path: str) -> bool:
        """Whether path is the root or lies somewhere beneath it"""
        root = os.path.abspath(self._root_path)
        candidate = os.path.abspath(path)
        try:
            return os.path.commonpath([root, candidate]) == root
        except ValueError:
            # Different drives on Windows
            return False
