"""High-level API for fsgraphlib.

These helpers play the interpreter's role for simple cases: they build
contexts, call the adapter's resolve_* methods and unpack the results.
Like the adapter itself, they are lazy wherever they return an iterator.
"""

from typing import Any, Dict, Iterable, Iterator, List

from .core.adapter import GraphAdapter
from .core.context import DataContext
from .core.vertex import Vertex
from .errors import UnsupportedOperationError
from .schema import CONTAINS_FILE_EDGE, DIRECTORY_TYPE, START_EDGE, SUBDIRECTORY_EDGE, edge_target


def iter_vertices(adapter: GraphAdapter, *edges: str) -> Iterator[Vertex]:
    """Follow a chain of edges from the origin directory.

    Edge names are checked against the schema before anything is read from
    disk. Vertices come out depth-first along the chain, each level in
    listing order.

    Args:
        adapter: Adapter to query
        *edges: Edge names to follow, starting from the origin Directory

    Returns:
        Iterator yielding the vertices reached by the last edge (the origin
        itself if no edges are given)

    Raises:
        UnsupportedOperationError: If an edge is not declared for the type
            reached so far

    Example:
        >>> for file in iter_vertices(adapter, "out_Directory_Subdirectory",
        ...                           "out_Directory_ContainsFile"):
        ...     print(file.path)
    """
    contexts: Iterable[DataContext] = (
        DataContext(vertex)
        for vertex in adapter.resolve_starting_vertices(START_EDGE, {})
    )

    current_type = DIRECTORY_TYPE
    for edge in edges:
        target = edge_target(current_type, edge)
        if target is None:
            raise UnsupportedOperationError(
                f"edge {edge!r} is not implemented for {current_type!r}"
            )
        pairs = adapter.resolve_neighbors(contexts, current_type, edge, {})
        contexts = _expand(pairs)
        current_type = target

    return (context.active_vertex for context in contexts)


def collect_properties(adapter: GraphAdapter,
                       vertices: Iterable[Vertex],
                       type_name: str,
                       *property_names: str) -> List[Dict[str, Any]]:
    """Resolve several properties for a batch of vertices.

    Args:
        adapter: Adapter to query
        vertices: Vertices of type type_name (None entries resolve to None)
        type_name: Declared type of the vertices
        *property_names: Properties to resolve

    Returns:
        One dict per vertex mapping property name to value, in input order
    """
    contexts = [DataContext(vertex) for vertex in vertices]
    for property_name in property_names:
        for context, value in adapter.resolve_property(contexts, type_name, property_name):
            context.values[property_name] = value
    return [context.values for context in contexts]


def walk(adapter: GraphAdapter) -> Iterator[Vertex]:
    """Yield every vertex reachable from the origin, depth-first pre-order.

    Each directory is followed by its files and then by its subdirectories'
    subtrees. Excluded directories and everything below them are skipped.
    """
    stack: List[Vertex] = list(adapter.resolve_starting_vertices(START_EDGE, {}))

    while stack:
        directory = stack.pop()
        yield directory

        context = DataContext(directory)
        for _, files in adapter.resolve_neighbors([context], DIRECTORY_TYPE, CONTAINS_FILE_EDGE, {}):
            yield from _drain(files)

        for _, subdirectories in adapter.resolve_neighbors([context], DIRECTORY_TYPE, SUBDIRECTORY_EDGE, {}):
            # Reverse so the first listed subdirectory is visited first
            stack.extend(reversed(list(_drain(subdirectories))))


def _expand(pairs: Iterable) -> Iterator[DataContext]:
    for context, neighbors in pairs:
        for neighbor in _drain(neighbors):
            yield context.move_to(neighbor)


def _drain(neighbors: Iterator[Vertex]) -> Iterator[Vertex]:
    try:
        yield from neighbors
    finally:
        close = getattr(neighbors, "close", None)
        if close is not None:
            close()
