from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation and directory listing helpers.
Acts as an abstraction over the 'os' module so the tree builder sees a
uniform view of entries on Windows and Unix-like systems.
"""

import os
from typing import List, Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "treeify"
UNIX_APP_DIR_NAME = ".treeify"

# (name, full path, is_directory)
Entry = Tuple[str, str, bool]

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/treeify
    - Linux/Mac: ~/.treeify

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def root_display_name(path: str) -> str:
    """
    Derive the bare display name of a walk root from its last component.

    Trailing separators and '.' components are ignored. Returns an empty
    string when the path ends at a filesystem or drive root, or in '..'.
    """
    _, rest = os.path.splitdrive(str(path))
    if os.altsep:
        rest = rest.replace(os.altsep, os.sep)
    components = [c for c in rest.split(os.sep) if c not in ("", ".")]
    if not components or components[-1] == "..":
        return ""
    return components[-1]

# -----------------------------------------------------------------------------
# DIRECTORY LISTING API
# -----------------------------------------------------------------------------

def list_entries(path: str, follow_symlinks: bool = True, sort: bool = False) -> List[Entry]:
    """
    Read the immediate entries of a directory.

    The directory stream is fully consumed and closed before returning, so
    callers may recurse without holding it open. OSError propagates.

    Args:
        path: Directory to list.
        follow_symlinks: Resolve symlinks when checking for directories.
        sort: Return entries ordered by name.

    Returns:
        List[Entry]: (name, full path, is_directory) tuples.
    """
    with os.scandir(path) as it:
        entries = [
            (e.name, e.path, _is_dir(e, follow_symlinks))
            for e in it
        ]
    if sort:
        entries.sort(key=lambda item: item[0])
    return entries


def real_path(path: str) -> str:
    """Return the canonical path used to detect directory cycles."""
    return os.path.normcase(os.path.realpath(path))


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_dir(entry: os.DirEntry, follow_symlinks: bool) -> bool:
    # Broken symlinks and vanished entries classify as files
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False
