"""Core abstractions for fsgraphlib.

This package holds the vertex model, the interpreter-side context contract
and the GraphAdapter base class. None of it touches the filesystem.
"""

from .vertex import (
    DirectoryVertex,
    FileVertex,
    Vertex,
    file_extension,
    vertex_to_dict,
    vertex_from_dict,
    vertex_to_json,
    vertex_from_json,
)
from .context import DataContext, FieldValue, EdgeParameters
from .adapter import GraphAdapter

__all__ = [
    "DirectoryVertex",
    "FileVertex",
    "Vertex",
    "file_extension",
    "vertex_to_dict",
    "vertex_from_dict",
    "vertex_to_json",
    "vertex_from_json",
    "DataContext",
    "FieldValue",
    "EdgeParameters",
    "GraphAdapter",
]
