from __future__ import annotations

"""
Directory Listing Data Models.

Result types returned by the scanner. Keys are always Unix-style paths
relative to the shared folder; a key appears at most once per listing.
"""

from dataclasses import dataclass
from typing import Dict

# -----------------------------------------------------------------------------
# LISTING COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryEntry:
    """
    Classification of an immediate child of a listed directory.

    Attributes:
        is_directory: True for sub-directories, False for any other entry.
    """
    is_directory: bool

    def to_dict(self) -> Dict[str, bool]:
        """Wire form consumed by the remote client."""
        return {"isDirectory": self.is_directory}


# Relative path -> is_binary, for every regular file under a scanned root
FileListing = Dict[str, bool]

# Relative path -> entry, for the immediate children of a directory
DirectoryListing = Dict[str, DirectoryEntry]
