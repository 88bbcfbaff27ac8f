from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user directory holding the client configuration and logs.
"""

import os

APP_DIR_NAME = "near-socialdb"
UNIX_APP_DIR_NAME = ".near-socialdb"
ENV_HOME_OVERRIDE = "NEAR_SOCIALDB_HOME"


def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent client data.

    Standards:
    - $NEAR_SOCIALDB_HOME when set
    - Windows: %LOCALAPPDATA%/near-socialdb
    - Linux/Mac: ~/.near-socialdb

    Returns:
        str: Absolute path to the data directory.
    """
    path = os.environ.get(ENV_HOME_OVERRIDE, "")

    if not path and os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy of a target file."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
