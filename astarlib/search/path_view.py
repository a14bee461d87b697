from typing import Dict, Hashable, Iterator, List, Optional

from astarlib.node.search_node import SearchNode
from astarlib.search.node_record import NodeRecord


class PathView:
    """
    A lazy view of the path found by a search, from the start node to the goal node.

    Iterating walks the forward links established once the search succeeded, so nothing
    is materialized up front and the view can be iterated any number of times. An empty
    view is returned for searches that did not reach the goal.

    :param records: The search's per-node records, keyed by identity.
    :param forward_links: Maps each identity on the path to the next one.
    :param start: Identity of the start node, or None for an empty view.
    :param goal: Identity of the goal node, or None for an empty view.
    """

    def __init__(
        self,
        records: Dict[Hashable, NodeRecord],
        forward_links: Dict[Hashable, Hashable],
        start: Optional[Hashable],
        goal: Optional[Hashable],
    ):
        assert (start is None) == (goal is None)
        self._records = records
        self._forward_links = forward_links
        self._start = start
        self._goal = goal

    @classmethod
    def empty(cls) -> "PathView":
        """A view with no nodes, for searches that did not reach the goal."""
        return cls({}, {}, None, None)

    def identities(self) -> Iterator[Hashable]:
        """
        Iterate over the identities of the nodes on the path, start to goal.
        """
        if self._start is None:
            return
        identity = self._start
        while True:
            yield identity
            if identity == self._goal:
                return
            identity = self._forward_links[identity]

    def __iter__(self) -> Iterator[SearchNode]:
        for identity in self.identities():
            yield self._records[identity].node

    def __reversed__(self) -> Iterator[SearchNode]:
        identity = self._goal
        while identity is not None:
            record = self._records[identity]
            yield record.node
            identity = record.predecessor

    def __len__(self):
        if self._goal is None:
            return 0
        return self._records[self._goal].step + 1

    def __bool__(self):
        return self._goal is not None

    def to_list(self) -> List[SearchNode]:
        """The nodes on the path, start to goal."""
        return list(self)
