from typing import Dict, Hashable, Iterator


class VisitedSet:
    """
    The closed set of an A* search: identities of nodes whose cost is final.
    Membership is permanent for the lifetime of the search.
    """

    def __init__(self):
        # dict rather than set to keep insertion order
        self._members: Dict[Hashable, None] = {}

    def __len__(self):
        return len(self._members)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._members)

    def __contains__(self, identity):
        return self.contains(identity)

    def contains(self, identity: Hashable) -> bool:
        """Return True iff the node with the given identity was finalized."""
        return identity in self._members

    def insert(self, identity: Hashable):
        """
        Mark a node as finalized.

        :raises ValueError: If the node was already finalized.
        """
        if identity in self._members:
            raise ValueError(f"Node {identity!r} was already visited")
        self._members[identity] = None
