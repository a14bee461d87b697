from dataclasses import dataclass
from typing import Hashable, Optional

from astarlib.node.search_node import SearchNode
from astarlib.utils.documentation import internal_only


@dataclass
class NodeRecord:
    """
    Per-search state of a discovered node.

    :param node: The node this record describes.
    :param g: Best known cost from the start node.
    :param h: Heuristic estimate to the goal. Computed once, when the node is first
        discovered.
    :param f: ``g + h``, the key the frontier is ordered by.
    :param step: Number of edges between the start node and this node along the
        current best path.
    :param predecessor: Identity of the node this one was last relaxed from, None
        for the start node.
    """

    node: SearchNode
    g: float
    h: float
    f: float
    step: int = 0
    predecessor: Optional[Hashable] = None

    @internal_only
    def relax(self, predecessor: Hashable, g: float, step: int):
        """
        Point this record at a cheaper path through ``predecessor``.
        """
        self.predecessor = predecessor
        self.g = g
        self.f = self.h + g
        self.step = step
