import heapq
import itertools
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple

from astarlib.node.search_node import SearchNode
from astarlib.utils.documentation import internal_only


class EmptyFrontierError(IndexError):
    """
    Raised when popping from a frontier with no live entries.
    """


@dataclass(order=True)
@internal_only
class FrontierEntry:
    """
    An entry of the frontier heap. Entries are ordered by ``f``, then by the order
    they were inserted in, so nodes with equal ``f`` come out first-in first-out.

    :param f: Total estimated cost of the node.
    :param order: Insertion counter used to break ties.
    :param identity: Identity of the node.
    :param node: The node itself.
    :param removed: Whether this entry has been invalidated by ``Frontier.remove``.
    """

    f: float
    order: int
    identity: Hashable = field(compare=False)
    node: SearchNode = field(compare=False)
    removed: bool = field(default=False, compare=False)


class Frontier:
    """
    The open set of an A* search: discovered nodes that have not been expanded yet,
    ordered by total estimated cost.

    There is no decrease-key operation. To change the priority of a queued node,
    ``remove`` it and ``insert`` it again. Removed entries stay in the heap and are
    skipped when they reach the top.
    """

    def __init__(self):
        self._heap: List[FrontierEntry] = []
        self._live: Dict[Hashable, FrontierEntry] = {}
        self._counter = itertools.count()

    def __len__(self):
        return len(self._live)

    def __bool__(self):
        return bool(self._live)

    def __contains__(self, identity):
        return identity in self._live

    def insert(self, identity: Hashable, node: SearchNode, f: float):
        """
        Add a node to the frontier with the given total estimated cost.

        :raises ValueError: If the identity is already queued.
        """
        if identity in self._live:
            raise ValueError(f"Node {identity!r} is already in the frontier")
        entry = FrontierEntry(f, next(self._counter), identity, node)
        self._live[identity] = entry
        heapq.heappush(self._heap, entry)

    def pop_min(self) -> Tuple[Hashable, SearchNode]:
        """
        Remove and return the ``(identity, node)`` pair with the smallest ``f``.

        :raises EmptyFrontierError: If the frontier is empty.
        """
        while self._heap:
            entry = heapq.heappop(self._heap)
            if entry.removed:
                continue
            del self._live[entry.identity]
            return entry.identity, entry.node
        raise EmptyFrontierError("pop from an empty frontier")

    def find(self, identity: Hashable) -> Optional[FrontierEntry]:
        """
        The live entry for the given identity, or None if it is not queued.
        """
        return self._live.get(identity)

    def remove(self, identity: Hashable):
        """
        Invalidate the entry for the given identity.

        :raises KeyError: If the identity is not queued.
        """
        entry = self._live.pop(identity)
        entry.removed = True
        if not self._live:
            # nothing live is left, so every remaining heap entry is stale
            self._heap.clear()
