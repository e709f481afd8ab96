"""Filesystem adapter for fsgraphlib.

FilesystemGraphAdapter exposes one rooted directory tree as a graph with
two vertex types (Directory, File) and two edges, both leaving Directory:

    out_Directory_ContainsFile   Directory -> File        (direct children)
    out_Directory_Subdirectory   Directory -> Directory   (direct children)

Nothing is cached between calls. Every neighbor request opens a fresh scan
of the directory it needs.
"""

import os
from operator import attrgetter
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple, Type, Union

from ..config import ScanConfig
from ..core.adapter import GraphAdapter
from ..core.context import (
    ContextAndNeighbors,
    ContextAndValue,
    EdgeParameters,
    FieldValue,
    VertexIterator,
)
from ..core.vertex import DirectoryVertex, FileVertex, Vertex
from ..errors import ConfigurationError, ContractViolationError, UnsupportedOperationError
from ..schema import (
    CONTAINS_FILE_EDGE,
    DIRECTORY_TYPE,
    FILE_TYPE,
    START_EDGE,
    SUBDIRECTORY_EDGE,
    TYPENAME_PROPERTY,
    is_known_type,
)
from .resolver import EdgeHandler, EdgeResolverIterator
from .scan import OriginIterator, directory_contains_file_handler, directory_subdirectory_handler

PropertyExtractor = Callable[[Any], FieldValue]


def _typename(type_name: str) -> PropertyExtractor:
    return lambda vertex: type_name


_PROPERTY_TABLES: Dict[str, Tuple[Type, Dict[str, PropertyExtractor]]] = {
    DIRECTORY_TYPE: (DirectoryVertex, {
        "name": attrgetter("name"),
        "path": attrgetter("path"),
        TYPENAME_PROPERTY: _typename(DIRECTORY_TYPE),
    }),
    FILE_TYPE: (FileVertex, {
        "name": attrgetter("name"),
        "path": attrgetter("path"),
        "extension": attrgetter("extension"),
        TYPENAME_PROPERTY: _typename(FILE_TYPE),
    }),
}

_EDGE_HANDLERS: Dict[Tuple[str, str], EdgeHandler] = {
    (DIRECTORY_TYPE, CONTAINS_FILE_EDGE): directory_contains_file_handler,
    (DIRECTORY_TYPE, SUBDIRECTORY_EDGE): directory_subdirectory_handler,
}


class FilesystemGraphAdapter(GraphAdapter):
    """Adapter answering graph queries against a directory tree.

    The origin is fixed for the adapter's lifetime and shared by every scan
    it creates. Vertex paths are relative to it.

    Example:
        >>> adapter = FilesystemGraphAdapter("/srv/project")
        >>> root = next(adapter.resolve_starting_vertices("OriginDirectory", {}))
        >>> root.path
        ''
    """

    def __init__(self,
                 origin: Union[str, "os.PathLike[str]"],
                 config: Optional[ScanConfig] = None):
        """Initialize filesystem graph adapter.

        Args:
            origin: Filesystem path of the directory to expose as the root
            config: Scan policy (defaults to ScanConfig())

        Raises:
            ConfigurationError: If config fails validation
        """
        self._origin = os.fspath(origin)
        self._config = config if config is not None else ScanConfig()

        config_errors = self._config.validate()
        if config_errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(config_errors)}")

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def config(self) -> ScanConfig:
        return self._config

    def resolve_starting_vertices(self,
                                  edge_name: str,
                                  parameters: EdgeParameters,
                                  resolve_info: Optional[Any] = None) -> VertexIterator:
        """Start a traversal at the origin directory.

        ``OriginDirectory`` is the only entry point into the graph and takes
        no parameters.

        Raises:
            ContractViolationError: For any other edge name or non-empty parameters
        """
        if edge_name != START_EDGE:
            raise ContractViolationError(
                f"unknown starting edge {edge_name!r}, expected {START_EDGE!r}"
            )
        if parameters:
            raise ContractViolationError(
                f"{START_EDGE} takes no parameters, got {dict(parameters)!r}"
            )
        return OriginIterator(DirectoryVertex.origin())

    def resolve_property(self,
                         contexts: Iterable,
                         type_name: str,
                         property_name: str,
                         resolve_info: Optional[Any] = None) -> Iterator[ContextAndValue]:
        """Resolve a property of the active vertex of each context.

        The property is looked up before any context is pulled, so an unknown
        type or property fails immediately. Contexts without an active vertex
        resolve to None.

        Raises:
            UnsupportedOperationError: For unknown type or property names
            ContractViolationError: (while iterating) if an active vertex is
                not of the declared type
        """
        try:
            variant, table = _PROPERTY_TABLES[type_name]
        except KeyError:
            raise UnsupportedOperationError(f"unknown vertex type {type_name!r}") from None

        try:
            extractor = table[property_name]
        except KeyError:
            raise UnsupportedOperationError(
                f"property {property_name!r} is not implemented for {type_name}"
            ) from None

        return _resolve_values(contexts, type_name, variant, extractor)

    def resolve_neighbors(self,
                          contexts: Iterable,
                          type_name: str,
                          edge_name: str,
                          parameters: EdgeParameters,
                          resolve_info: Optional[Any] = None) -> Iterator[ContextAndNeighbors]:
        """Resolve an edge from the active vertex of each context.

        Parameters are accepted for contract compatibility; neither supported
        edge takes any.

        Raises:
            UnsupportedOperationError: For any (type, edge) pair not in the schema
        """
        if not is_known_type(type_name):
            raise UnsupportedOperationError(f"unknown vertex type {type_name!r}")

        handler = _EDGE_HANDLERS.get((type_name, edge_name))
        if handler is None:
            raise UnsupportedOperationError(
                f"edge {edge_name!r} is not implemented for {type_name!r}"
            )
        return EdgeResolverIterator(self._origin, contexts, handler, self._config)

    def resolve_coercion(self,
                         contexts: Iterable,
                         type_name: str,
                         coerce_to_type: str,
                         resolve_info: Optional[Any] = None) -> Iterator[Tuple[Any, bool]]:
        """Not supported: Directory and File have no subtype relationship."""
        raise UnsupportedOperationError(
            f"coercion from {type_name!r} to {coerce_to_type!r} is not supported"
        )

    def __repr__(self) -> str:
        return f"FilesystemGraphAdapter(origin={self._origin!r})"


def _resolve_values(contexts: Iterable,
                    type_name: str,
                    variant: Type,
                    extractor: PropertyExtractor) -> Iterator[ContextAndValue]:
    for context in contexts:
        vertex: Optional[Vertex] = context.active_vertex
        if vertex is None:
            yield context, None
            continue
        if not isinstance(vertex, variant):
            raise ContractViolationError(
                f"context declared as {type_name} holds {type(vertex).__name__}: {vertex!r}"
            )
        yield context, extractor(vertex)
