"""Vertex model for fsgraphlib.

A vertex is a snapshot of one filesystem entry taken at scan time. The
union is closed: a vertex is either a DirectoryVertex or a FileVertex.
Vertices are frozen value records, so equality and hashing are structural
and sharing a vertex between contexts is the same as copying it.

Serialized vertices use an externally tagged mapping:

    {"Directory": {"name": "src", "path": "src"}}
    {"File": {"name": "x.txt", "extension": "txt", "path": "src/x.txt"}}
"""

import json
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional, Union

from ..errors import VertexDecodeError
from ..schema import DIRECTORY_TYPE, FILE_TYPE, ORIGIN_NAME


@dataclass(frozen=True)
class DirectoryVertex:
    """A directory, addressed by its path relative to the origin.

    The origin itself carries the sentinel name ``<origin>`` and an
    empty path.
    """

    name: str
    path: str

    type_name = DIRECTORY_TYPE

    @classmethod
    def origin(cls) -> "DirectoryVertex":
        """Build the root vertex of a traversal."""
        return cls(name=ORIGIN_NAME, path="")

    def child_path(self, name: str) -> str:
        """Join this directory's path with a child entry name."""
        return os.path.join(self.path, name)


@dataclass(frozen=True)
class FileVertex:
    """A regular file, addressed by its path relative to the origin."""

    name: str
    extension: Optional[str]
    path: str

    type_name = FILE_TYPE


Vertex = Union[DirectoryVertex, FileVertex]

_VARIANTS = {
    DIRECTORY_TYPE: DirectoryVertex,
    FILE_TYPE: FileVertex,
}


def file_extension(name: str) -> Optional[str]:
    """Return the extension of a file name, or None if it has none.

    The extension is the text after the final dot. A name whose only dot
    is the leading one (``.bashrc``) has no extension, and neither does
    ``..``. A trailing dot yields an empty extension.

    Examples:
        >>> file_extension("a.b.c")
        'c'
        >>> file_extension("README") is None
        True
    """
    if name == "..":
        return None
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return extension


def vertex_to_dict(vertex: Vertex) -> Dict[str, Dict[str, Any]]:
    """Serialize a vertex to an externally tagged mapping."""
    if not isinstance(vertex, (DirectoryVertex, FileVertex)):
        raise TypeError(f"not a vertex: {vertex!r}")
    return {vertex.type_name: asdict(vertex)}


def vertex_from_dict(data: Dict[str, Any]) -> Vertex:
    """Rebuild a vertex from the mapping produced by vertex_to_dict.

    Raises:
        VertexDecodeError: If the tag is unknown or the fields don't match
            the variant exactly.
    """
    if not isinstance(data, dict) or len(data) != 1:
        raise VertexDecodeError(f"expected a single-key mapping, got {data!r}")

    (tag, payload), = data.items()
    variant = _VARIANTS.get(tag)
    if variant is None:
        raise VertexDecodeError(f"unknown vertex type {tag!r}")
    if not isinstance(payload, dict):
        raise VertexDecodeError(f"{tag} payload must be a mapping, got {payload!r}")

    expected = {f.name for f in fields(variant)}
    if set(payload) != expected:
        raise VertexDecodeError(
            f"{tag} fields must be {sorted(expected)}, got {sorted(payload)}"
        )

    for key, value in payload.items():
        if key == "extension" and value is None:
            continue
        if not isinstance(value, str):
            raise VertexDecodeError(f"{tag}.{key} must be a string, got {value!r}")

    return variant(**payload)


def vertex_to_json(vertex: Vertex) -> str:
    return json.dumps(vertex_to_dict(vertex), sort_keys=True)


def vertex_from_json(text: str) -> Vertex:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise VertexDecodeError(f"invalid vertex JSON: {e}") from e
    return vertex_from_dict(data)
