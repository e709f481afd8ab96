"""fsgraphlib - a directory tree as a lazily resolved, typed graph.

fsgraphlib exposes one rooted directory tree to a graph-query interpreter.
The interpreter asks for starting vertices, property values and neighbors
over streams of contexts; the adapter answers by scanning directories on
demand, one pull at a time.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from fsgraphlib import FilesystemGraphAdapter, iter_vertices

    adapter = FilesystemGraphAdapter("/srv/project")
    for file in iter_vertices(adapter, "out_Directory_ContainsFile"):
        print(file.path, file.extension)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .config import ScanConfig, DEFAULT_EXCLUDED_DIRECTORIES
from .errors import (
    FilesystemGraphError,
    ContractViolationError,
    UnsupportedOperationError,
    VertexDecodeError,
    ConfigurationError,
)
from .core import (
    GraphAdapter,
    DataContext,
    DirectoryVertex,
    FileVertex,
    Vertex,
    vertex_to_dict,
    vertex_from_dict,
    vertex_to_json,
    vertex_from_json,
)
from .adapters import (
    FilesystemGraphAdapter,
    OriginIterator,
    DirectoryContainsFileIterator,
    SubdirectoryIterator,
    EdgeResolverIterator,
)
from .api import iter_vertices, collect_properties, walk
from . import schema

__all__ = [
    "__version__",
    # Config
    "ScanConfig",
    "DEFAULT_EXCLUDED_DIRECTORIES",
    # Errors
    "FilesystemGraphError",
    "ContractViolationError",
    "UnsupportedOperationError",
    "VertexDecodeError",
    "ConfigurationError",
    # Core
    "GraphAdapter",
    "DataContext",
    "DirectoryVertex",
    "FileVertex",
    "Vertex",
    "vertex_to_dict",
    "vertex_from_dict",
    "vertex_to_json",
    "vertex_from_json",
    # Adapters
    "FilesystemGraphAdapter",
    "OriginIterator",
    "DirectoryContainsFileIterator",
    "SubdirectoryIterator",
    "EdgeResolverIterator",
    # API
    "iter_vertices",
    "collect_properties",
    "walk",
    "schema",
]
