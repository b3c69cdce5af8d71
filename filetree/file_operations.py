import os
import logging
from enum import Enum
from typing import List, Optional

class RenameStatus(str, Enum):
    SUCCESS = "success"
    COLLISION = "collision"
    IO_FAILURE = "io_failure"

class RenameResult:
    """Outcome of a single rename attempt"""
    __slots__ = ['status', 'old_path', 'new_path', 'message', 'error']

    def __init__(self, status: RenameStatus, old_path: str, new_path: str,
                 message: str, error: Optional[OSError] = None):
        self.status = status
        self.old_path = old_path
        self.new_path = new_path
        self.message = message
        self.error = error

    @property
    def success(self) -> bool:
        return self.status is RenameStatus.SUCCESS

    def to_dict(self):
        return {
            "status": self.status.value,
            "success": self.success,
            "old_path": self.old_path,
            "new_path": self.new_path,
            "message": self.message,
        }

    def __repr__(self):
        return f"RenameResult({self.status.value}, {self.old_path!r} -> {self.new_path!r})"

def resolve_rename_target(path: str, new_name: str) -> str:
    """
    Work out where an entry ends up when it is renamed to new_name.

    The new name is appended to the entry's parent directory. An entry
    without a parent (a bare relative name, or a filesystem root) is
    renamed to new_name relative to the working directory.
    """
    parent = os.path.dirname(path)
    if not parent or parent == path:
        return new_name
    return os.path.normpath(parent + os.sep + new_name)

def rename_entry(old_path: str, new_name: str) -> RenameResult:
    """
    Rename the entry at old_path within its directory.

    Refuses to overwrite an existing entry. The OS rename is attempted
    exactly once. Every outcome is logged and returned; nothing is raised.
    """
    new_path = resolve_rename_target(old_path, new_name)
    old_abs = os.path.abspath(old_path)
    new_abs = os.path.abspath(new_path)

    # lexists so a dangling symlink still counts as occupying the name
    if os.path.lexists(new_path):
        message = f"File already exists: Could not rename '{old_abs}' to '{new_abs}'."
        logging.warning(message)
        return RenameResult(RenameStatus.COLLISION, old_path, new_path, message)

    try:
        os.rename(old_path, new_path)
    except OSError as e:
        message = f"Could not rename '{old_abs}' to '{new_abs}': {e}"
        logging.error(message)
        return RenameResult(RenameStatus.IO_FAILURE, old_path, new_path, message, e)

    message = f"Successfully renamed '{old_abs}' to '{new_abs}'."
    logging.info(message)
    return RenameResult(RenameStatus.SUCCESS, old_path, new_path, message)

def list_entries(directory: str) -> List[str]:
    """Full paths of the entries directly inside directory, sorted. [] if it can't be read."""
    try:
        entries = os.listdir(directory)
    except OSError as e:
        logging.debug("Could not list %s: %s", directory, e)
        return []
    return [os.path.join(directory, entry) for entry in sorted(entries)]

def create_file(path: str, content: str = "") -> bool:
    """Create a file (and its parent directories) unless it already exists"""
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        if not os.path.exists(path):
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
        return True
    except OSError as e:
        logging.error("Error creating file: %s", e)
        return False
