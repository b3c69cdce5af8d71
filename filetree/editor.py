import logging
from typing import Optional
from .file_operations import RenameResult
from .models import FileNode

class InlineEditor:
    """
    Tracks a single inline rename, from double-click to commit or cancel.

    Only commit() reaches FileNode.rename; a cancelled edit, or a commit
    that arrives when nothing is being edited, leaves the filesystem alone.
    """

    def __init__(self):
        self._item: Optional[FileNode] = None

    @property
    def item(self) -> Optional[FileNode]:
        return self._item

    @property
    def editing(self) -> bool:
        return self._item is not None

    def begin_edit(self, node: FileNode) -> str:
        """Open the editor on node and return the text it starts with"""
        if self._item is not None:
            logging.debug("Replacing open edit of %s", self._item.path)
        self._item = node
        return node.name

    def commit(self, text: str) -> Optional[RenameResult]:
        if self._item is None:
            logging.debug("Commit with no open edit ignored")
            return None

        node, self._item = self._item, None
        if text == node.name:
            return None
        return node.rename(text)

    def cancel(self):
        if self._item is not None:
            logging.debug("Edit of %s cancelled", self._item.path)
        self._item = None
