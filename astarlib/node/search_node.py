from abc import ABC, abstractmethod
from typing import Hashable, Iterable, TypeVar

N = TypeVar("N", bound="SearchNode")


class SearchNode(ABC):
    """
    Represents a node of a graph that can be searched with ``AStarSearch``.

    Nodes are owned by the caller's graph. The search never mutates them; all the
    per-search bookkeeping (costs, predecessors, hop counts) lives in the search object.
    """

    @property
    def available(self) -> bool:
        """
        Whether the node can be traversed. Unavailable nodes are never expanded into.
        """
        return True

    @abstractmethod
    def distance(self, other: N) -> float:
        """
        The exact cost of the edge between this node and ``other``. Only called
        on nodes returned by ``successors``, so adjacency can be assumed.
        """

    @abstractmethod
    def heuristic(self, goal: N) -> float:
        """
        Estimated cost from this node to ``goal``. Must never overestimate the true
        remaining cost, or the returned path may not be optimal.
        """

    @abstractmethod
    def successors(self, graph) -> Iterable[N]:
        """
        The nodes this node has outgoing edges to. Must not include the node itself.

        :param graph: The node collection the search was constructed with.
        """

    @abstractmethod
    def identity(self) -> Hashable:
        """
        A hashable key identifying this node, e.g., its grid coordinates. Two node
        objects with the same identity are treated as the same node.
        """

    def identity_equals(self, other: N) -> bool:
        """
        Return True iff ``other`` represents the same node as this one.
        """
        return self.identity() == other.identity()
