"""The interpreter-side contract consumed by the adapter.

The query interpreter owns the real context machinery. The adapter only
relies on a context exposing ``active_vertex`` (a vertex or None when an
earlier query stage already excluded the row). DataContext is a minimal
implementation of that contract for hosts and tests.

Scalar property values are plain Python values: None stands for null and
str for string. Edge parameters are any mapping; an empty mapping means
"no parameters".
"""

from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple, TypeVar

from .vertex import Vertex


FieldValue = Optional[str]
EdgeParameters = Mapping[str, Any]

ContextT = TypeVar("ContextT")

VertexIterator = Iterator[Vertex]
ContextIterator = Iterable[ContextT]
ContextAndValue = Tuple[ContextT, FieldValue]
ContextAndNeighbors = Tuple[ContextT, VertexIterator]


class DataContext:
    """One in-flight row of a query.

    Attributes:
        active_vertex: The vertex the query is currently positioned at,
            or None if the row no longer has one.
        values: Arbitrary per-row state carried through the pipeline.
    """

    __slots__ = ("active_vertex", "values")

    def __init__(self,
                 active_vertex: Optional[Vertex] = None,
                 values: Optional[Dict[str, Any]] = None):
        self.active_vertex = active_vertex
        self.values = dict(values) if values else {}

    def move_to(self, vertex: Optional[Vertex]) -> "DataContext":
        """Return a new context positioned at another vertex, keeping row state."""
        return DataContext(vertex, self.values)

    def __repr__(self) -> str:
        return f"DataContext(active_vertex={self.active_vertex!r})"
