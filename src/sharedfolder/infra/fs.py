from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Maps paths between the platform-dependent local filesystem and the
Unix-style, shared-folder-relative representation used by the remote IDE
client. Acts as an abstraction over the 'os.path' module so that Windows
and Unix-like systems expose the same external identifiers.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "SharedFolder"
UNIX_APP_DIR_NAME = ".sharedfolder"

# -----------------------------------------------------------------------------
# PATH MAPPING API
# -----------------------------------------------------------------------------

def normalize_path(path: str) -> str:
    """
    Convert a native path into its canonical forward-slash form.

    Only backslash-separator platforms (Windows) are rewritten. On POSIX a
    backslash is a legal filename character and the input is returned
    untouched.

    Args:
        path: Native path string.

    Returns:
        str: Forward-slash representation of the path.
    """
    if os.name == "nt":
        return path.replace("\\", "/")
    return path


def absolute_path(path: str, shared_folder: str) -> str:
    """
    Resolve a path against the shared folder into a native absolute path.

    Accepts either a Unix-style path relative to the shared folder or a path
    that is already rooted at the shared folder. Rooted input is returned
    as-is, which keeps the operation idempotent.

    Args:
        path: Relative (Unix style) or already absolute path.
        shared_folder: Absolute shared root, platform dependent representation.

    Returns:
        str: Platform dependent absolute path.
    """
    path = normalize_path(path)
    if not _is_rooted_at(path, normalize_path(shared_folder)):
        path = os.path.abspath(os.path.join(shared_folder, path))
    return path


def relative_path(path: str, shared_folder: str) -> str:
    """
    Express an absolute native path relative to the shared folder.

    Entries outside the shared folder are expressed with '..' segments.

    Args:
        path: Absolute, platform dependent path.
        shared_folder: Absolute shared root, platform dependent representation.

    Returns:
        str: Unix-style relative path.
    """
    return normalize_path(os.path.relpath(path, shared_folder))


# -----------------------------------------------------------------------------
# USER DATA RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/SharedFolder
    - Linux/Mac: ~/.sharedfolder

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def expand_path(path: Optional[str], fallback: str) -> str:
    """
    Expand a user-supplied directory string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use when the input is empty.

    Returns:
        str: Expanded absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_rooted_at(path: str, root: str) -> bool:
    """Check containment on a segment boundary ('/a/b2' is not under '/a/b')."""
    root = root.rstrip("/")
    if not root:
        # Filesystem root ('/'); every absolute path lives under it
        return path.startswith("/")
    return path == root or path.startswith(root + "/")
