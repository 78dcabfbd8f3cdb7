from __future__ import annotations

"""
Shared Folder Scanning Service.

Traverses directories below the shared folder and reports their content
keyed by Unix-style relative paths. Symbolic links are invisible to both
operations: they are neither listed, followed, nor classified.

Filesystem errors are not handled here. A path that vanishes between the
listing and the stat, or a directory that cannot be read, aborts the scan
and surfaces to the caller unchanged.
"""

import logging
import os
import stat
from typing import Optional

from sharedfolder.core.components.reader import is_binary_file
from sharedfolder.domain.listing_models import (
    DirectoryEntry,
    DirectoryListing,
    FileListing,
)
from sharedfolder.infra.fs import relative_path

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (SCANNING SERVICES)
# ==============================================================================

def walk_sync(
        dir_path: str,
        shared_folder: str,
        file_list: Optional[FileListing] = None,
) -> FileListing:
    """
    Recursively collect every regular file below a directory.

    Descends depth-first, threading a single accumulator through the
    recursive calls. Directories contribute no keys of their own.

    Args:
        dir_path: Absolute native path of the directory to scan.
        shared_folder: Absolute shared root used to compute the keys.
        file_list: Accumulator to populate; a new one is created if omitted.

    Returns:
        FileListing: Mapping of relative path to binary classification.
    """
    if file_list is None:
        file_list = {}
        logger.debug(f"Walking '{dir_path}' (shared folder: '{shared_folder}')")

    for name in os.listdir(dir_path):
        sub_element = os.path.join(dir_path, name)
        mode = os.lstat(sub_element).st_mode

        if stat.S_ISLNK(mode):
            continue

        if stat.S_ISDIR(mode):
            walk_sync(sub_element, shared_folder, file_list)
        elif stat.S_ISREG(mode):
            file_list[relative_path(sub_element, shared_folder)] = is_binary_file(sub_element)
        else:
            # FIFOs, sockets and devices cannot be sniffed without blocking
            logger.debug(f"Skipping special file '{sub_element}'")

    return file_list


def resolve_directory(dir_path: str, shared_folder: str) -> DirectoryListing:
    """
    List the immediate children of a directory.

    Args:
        dir_path: Absolute native path of the directory to list.
        shared_folder: Absolute shared root used to compute the keys.

    Returns:
        DirectoryListing: Mapping of relative path to directory entry.
    """
    listing: DirectoryListing = {}

    for name in os.listdir(dir_path):
        sub_element = os.path.join(dir_path, name)
        mode = os.lstat(sub_element).st_mode

        if stat.S_ISLNK(mode):
            continue

        listing[relative_path(sub_element, shared_folder)] = DirectoryEntry(
            is_directory=stat.S_ISDIR(mode)
        )

    return listing
