import os
import logging
from typing import Optional
from .config import Settings
from .file_operations import create_file

SUB_DIRECTORY = "Sub-Directory"
NESTED_FILE = "four"
ROOT_FILES = ("one", "two", "three")

def provision_demo_tree(root: Optional[str] = None) -> str:
    """
    Lay down the example tree for users to browse.

        ROOT/
            Sub-Directory/
                four
            one
            two
            three

    The sub-directory is only made when ROOT itself is new, so a user who
    renamed or removed it keeps their change across restarts. The three
    top-level files are recreated if missing; existing files are left as
    they are. Failures are logged and never raised.
    """
    root = root or Settings().root
    try:
        created_root = False
        if not os.path.isdir(root):
            os.makedirs(root)
            created_root = True

        if created_root:
            subdir = os.path.join(root, SUB_DIRECTORY)
            os.makedirs(subdir, exist_ok=True)
            create_file(os.path.join(subdir, NESTED_FILE))

        for name in ROOT_FILES:
            create_file(os.path.join(root, name))
    except OSError as e:
        logging.error("Could not provision demo tree at %s: %s", root, e, exc_info=True)
    return root
