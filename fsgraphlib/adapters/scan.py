"""Lazy directory scans that turn filesystem entries into vertices.

Each scan opens its directory with os.scandir when it is constructed and
reads entries only as the consumer pulls. Opening is the one eager step:
a missing or unreadable directory raises OSError before any vertex is
produced. Entries whose metadata can't be read are skipped.

Scans are single-use iterators. The directory handle is released when the
scan is exhausted, closed, used as a context manager, or garbage collected
part way through.
"""

import logging
import os
import stat
from typing import Iterator, Optional

from ..config import ScanConfig
from ..core.vertex import DirectoryVertex, FileVertex, Vertex, file_extension
from ..errors import ContractViolationError

logger = logging.getLogger(__name__)


class OriginIterator:
    """Yield the origin directory vertex exactly once."""

    def __init__(self, vertex: DirectoryVertex):
        self.origin_vertex = vertex
        self.produced = False

    def __iter__(self) -> "OriginIterator":
        return self

    def __next__(self) -> Vertex:
        if self.produced:
            raise StopIteration
        self.produced = True
        return self.origin_vertex


class DirectoryScanIterator:
    """Base class for scans over the direct children of one directory.

    Subclasses decide which entries become vertices by implementing
    _convert(). Listing order is whatever os.scandir returns; nothing is
    sorted.
    """

    def __init__(self,
                 origin: str,
                 directory: DirectoryVertex,
                 config: Optional[ScanConfig] = None):
        """Open the directory for scanning.

        Args:
            origin: Filesystem path of the traversal root
            directory: Vertex whose children are listed
            config: Scan policy (defaults to ScanConfig())

        Raises:
            OSError: If the directory cannot be opened
        """
        self._entries = None
        self.origin = origin
        self.directory = directory
        self.config = config if config is not None else ScanConfig()

        target = os.path.join(origin, directory.path)
        self._entries = os.scandir(target)
        logger.debug("Opened %s for %s", target, self.__class__.__name__)

    def __iter__(self) -> "DirectoryScanIterator":
        return self

    def __next__(self) -> Vertex:
        entries = self._entries
        if entries is None:
            raise StopIteration

        try:
            for entry in entries:
                try:
                    mode = entry.stat(follow_symlinks=False).st_mode
                except OSError as e:
                    logger.debug("Skipping unreadable entry %s: %s", entry.path, e)
                    continue

                vertex = self._convert(entry.name, mode)
                if vertex is not None:
                    return vertex
        except OSError:
            self.close()
            raise

        self.close()
        raise StopIteration

    def _convert(self, name: str, mode: int) -> Optional[Vertex]:
        """Turn a directory entry into a vertex, or None to skip it."""
        raise NotImplementedError

    @property
    def closed(self) -> bool:
        return self._entries is None

    def close(self) -> None:
        """Release the directory handle. Safe to call more than once."""
        entries, self._entries = self._entries, None
        if entries is not None:
            entries.close()

    def __enter__(self) -> "DirectoryScanIterator":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return None

    def __del__(self):
        # __init__ may have failed before the handle was assigned
        if getattr(self, "_entries", None) is not None:
            self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(directory={self.directory.path!r})"


class DirectoryContainsFileIterator(DirectoryScanIterator):
    """Yield a FileVertex for each regular file directly inside a directory."""

    def _convert(self, name: str, mode: int) -> Optional[Vertex]:
        if not stat.S_ISREG(mode):
            return None
        return FileVertex(
            name=name,
            extension=file_extension(name),
            path=self.directory.child_path(name),
        )


class SubdirectoryIterator(DirectoryScanIterator):
    """Yield a DirectoryVertex for each subdirectory not excluded by config."""

    def _convert(self, name: str, mode: int) -> Optional[Vertex]:
        if not stat.S_ISDIR(mode):
            return None
        if self.config.is_excluded(name):
            logger.debug("Excluding directory %s", self.directory.child_path(name))
            return None
        return DirectoryVertex(name=name, path=self.directory.child_path(name))


def _as_directory(vertex: Vertex) -> DirectoryVertex:
    if not isinstance(vertex, DirectoryVertex):
        raise ContractViolationError(
            f"edge requires a Directory vertex, got {type(vertex).__name__}: {vertex!r}"
        )
    return vertex


def directory_contains_file_handler(origin: str,
                                    vertex: Vertex,
                                    config: Optional[ScanConfig] = None) -> Iterator[Vertex]:
    """Resolve out_Directory_ContainsFile for a single vertex."""
    return DirectoryContainsFileIterator(origin, _as_directory(vertex), config)


def directory_subdirectory_handler(origin: str,
                                   vertex: Vertex,
                                   config: Optional[ScanConfig] = None) -> Iterator[Vertex]:
    """Resolve out_Directory_Subdirectory for a single vertex."""
    return SubdirectoryIterator(origin, _as_directory(vertex), config)
