"""GraphAdapter abstraction for fsgraphlib.

The GraphAdapter is the resolver contract a graph-query interpreter drives.
The interpreter owns filtering, projection and ordering; the adapter only
answers three kinds of question, each over a lazy stream of contexts, and
must never materialize more of the underlying data than the interpreter
pulls.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional, Tuple

from .context import (
    ContextAndNeighbors,
    ContextAndValue,
    ContextIterator,
    EdgeParameters,
    VertexIterator,
)


class GraphAdapter(ABC):
    """Abstract resolver for a typed, navigable graph.

    Every resolve_* method that takes contexts must yield exactly one
    output per input context, in input order. Interpreters rely on that
    correspondence to stitch results back onto their rows.
    """

    @abstractmethod
    def resolve_starting_vertices(self,
                                  edge_name: str,
                                  parameters: EdgeParameters,
                                  resolve_info: Optional[Any] = None) -> VertexIterator:
        """Produce the vertices a query starts from.

        Args:
            edge_name: Name of the entry edge
            parameters: Edge parameters
            resolve_info: Interpreter hints; adapters may ignore them

        Returns:
            Iterator yielding starting vertices
        """
        pass

    @abstractmethod
    def resolve_property(self,
                         contexts: ContextIterator,
                         type_name: str,
                         property_name: str,
                         resolve_info: Optional[Any] = None) -> Iterator[ContextAndValue]:
        """Resolve a property for the active vertex of each context.

        Args:
            contexts: Contexts whose active vertices are of type type_name
            type_name: Declared vertex type
            property_name: Property to resolve
            resolve_info: Interpreter hints; adapters may ignore them

        Returns:
            Iterator yielding (context, value) pairs
        """
        pass

    @abstractmethod
    def resolve_neighbors(self,
                          contexts: ContextIterator,
                          type_name: str,
                          edge_name: str,
                          parameters: EdgeParameters,
                          resolve_info: Optional[Any] = None) -> Iterator[ContextAndNeighbors]:
        """Resolve an edge from the active vertex of each context.

        Neighbor iterators must not be expanded until the interpreter
        pulls from them.

        Args:
            contexts: Contexts whose active vertices are of type type_name
            type_name: Declared source vertex type
            edge_name: Edge to follow
            parameters: Edge parameters
            resolve_info: Interpreter hints; adapters may ignore them

        Returns:
            Iterator yielding (context, neighbor iterator) pairs
        """
        pass

    @abstractmethod
    def resolve_coercion(self,
                         contexts: ContextIterator,
                         type_name: str,
                         coerce_to_type: str,
                         resolve_info: Optional[Any] = None) -> Iterator[Tuple[Any, bool]]:
        """Check whether each context's active vertex can be narrowed to a subtype.

        Returns:
            Iterator yielding (context, can_coerce) pairs
        """
        pass

    # Capability flags - adapters declare what they support

    def supports_coercion(self) -> bool:
        """Check if adapter implements type coercion.

        Returns:
            True if resolve_coercion is implemented
        """
        return False

    def supports_modification(self) -> bool:
        """Check if adapter supports modifying the underlying data.

        Returns:
            True if modification is supported
        """
        return False
