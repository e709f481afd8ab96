"""Filesystem-backed resolvers.

The scan iterators read one directory lazily, the edge resolver pairs
contexts with scans, and FilesystemGraphAdapter ties both to the schema.
"""

from .scan import (
    OriginIterator,
    DirectoryScanIterator,
    DirectoryContainsFileIterator,
    SubdirectoryIterator,
)
from .resolver import EdgeResolverIterator
from .filesystem import FilesystemGraphAdapter

__all__ = [
    "OriginIterator",
    "DirectoryScanIterator",
    "DirectoryContainsFileIterator",
    "SubdirectoryIterator",
    "EdgeResolverIterator",
    "FilesystemGraphAdapter",
]
