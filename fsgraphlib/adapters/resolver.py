"""Per-context neighbor resolution.

The interpreter hands the adapter a stream of contexts and expects back a
stream of (context, neighbors) pairs: one pair per context, in the same
order. EdgeResolverIterator produces those pairs lazily. Each pull takes
one context and builds its neighbor iterator; the neighbors themselves
are not read until the interpreter pulls from that iterator.
"""

from typing import Callable, Iterable, Iterator, Optional, Tuple

from ..config import ScanConfig
from ..core.vertex import Vertex

EdgeHandler = Callable[[str, Vertex, Optional[ScanConfig]], Iterator[Vertex]]


class EdgeResolverIterator:
    """Pair each incoming context with the neighbors of its active vertex.

    Contexts without an active vertex are paired with an empty iterator
    rather than dropped.
    """

    def __init__(self,
                 origin: str,
                 contexts: Iterable,
                 edge_handler: EdgeHandler,
                 config: Optional[ScanConfig] = None):
        """Initialize the resolver.

        Args:
            origin: Filesystem path of the traversal root
            contexts: Contexts exposing an ``active_vertex`` attribute
            edge_handler: Builds the neighbor iterator for one vertex
            config: Scan policy passed through to the edge handler
        """
        self.origin = origin
        self.contexts = iter(contexts)
        self.edge_handler = edge_handler
        self.config = config

    def __iter__(self) -> "EdgeResolverIterator":
        return self

    def __next__(self) -> Tuple[object, Iterator[Vertex]]:
        context = next(self.contexts)
        vertex = context.active_vertex
        if vertex is None:
            return context, iter(())
        return context, self.edge_handler(self.origin, vertex, self.config)
