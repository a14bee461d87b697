import dataclasses
import enum
import logging
import sys
from typing import Dict, Hashable, Iterable, Optional

from frozendict import frozendict

from astarlib.node.search_node import SearchNode
from astarlib.search.frontier import Frontier
from astarlib.search.node_record import NodeRecord
from astarlib.search.path_view import PathView
from astarlib.search.visited_set import VisitedSet
from astarlib.utils.logging import log

COST_TOLERANCE = sys.float_info.epsilon
"""
Two costs closer than this are considered equal. A relaxation whose new cost is equal
to the old one under this tolerance is not an improvement and is never applied.
"""


class NodeNotInGraphError(ValueError):
    """
    Raised when the start or goal node of a search is not part of the searched graph.
    """


class SearchState(enum.Enum):
    """
    The state of an ``AStarSearch``.
    """

    RUNNING = "running"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


class AStarSearch:
    """
    Finds a minimum-cost path between two nodes of a graph using A*.

    The search runs to completion when the object is constructed. Afterwards, check
    ``successful`` before reading the cost or the path: when the goal is unreachable
    the search ends in the ``EXHAUSTED`` state, which is not an error.

    The path is optimal as long as every node's ``heuristic`` is admissible. An
    inadmissible heuristic is not detected and may lead to a suboptimal path.

    :param graph: A re-iterable collection of ``SearchNode`` objects. It is passed
        as-is to each node's ``successors`` method.
    :param start: The node to search from.
    :param goal: The node to search for.
    :param tolerance: Cost differences smaller than this are treated as ties, and ties
        never replace the path already found to a queued node.

    :raises NodeNotInGraphError: If ``start`` or ``goal`` is not in ``graph``.
    """

    def __init__(
        self,
        graph: Iterable[SearchNode],
        start: SearchNode,
        goal: SearchNode,
        *,
        tolerance: float = COST_TOLERANCE,
    ):
        assert tolerance >= 0, "Cannot have a negative tolerance."
        identities = {node.identity() for node in graph}
        for role, node in (("start", start), ("goal", goal)):
            if node.identity() not in identities:
                raise NodeNotInGraphError(
                    f"The {role} node {node.identity()!r} is not in the graph"
                )

        self.graph = graph
        self.start = start
        self.goal = goal
        self.tolerance = tolerance

        self._frontier = Frontier()
        self._visited = VisitedSet()
        self._records: Dict[Hashable, NodeRecord] = {}
        self._forward_links: Dict[Hashable, Hashable] = {}
        self._last: Optional[Hashable] = None
        self._state = SearchState.RUNNING

        log(
            f"Searching from {start.identity()!r} to {goal.identity()!r}",
            level=logging.DEBUG,
        )
        self._calculate()
        if self._state is SearchState.SUCCEEDED:
            self._backlink()
        log(
            f"Search from {start.identity()!r} to {goal.identity()!r} ended in state"
            f" {self._state.value} after expanding {len(self._visited)} nodes",
            level=logging.DEBUG,
        )

    def _calculate(self):
        start_h = self.start.heuristic(self.goal)
        start_identity = self.start.identity()
        self._records[start_identity] = NodeRecord(
            self.start, g=0, h=start_h, f=start_h
        )
        self._frontier.insert(start_identity, self.start, start_h)

        while self._frontier:
            identity, current = self._frontier.pop_min()
            self._visited.insert(identity)
            self._last = identity

            if current.identity_equals(self.goal):
                self._state = SearchState.SUCCEEDED
                return

            for successor in current.successors(self.graph):
                self._expand(identity, current, successor)

        self._state = SearchState.EXHAUSTED

    def _expand(
        self, current_identity: Hashable, current: SearchNode, successor: SearchNode
    ):
        """
        Relax the edge from ``current`` to ``successor``.
        """
        identity = successor.identity()
        if identity in self._visited or not successor.available:
            return
        current_record = self._records[current_identity]
        g = current_record.g + current.distance(successor)
        step = current_record.step + 1
        entry = self._frontier.find(identity)
        if entry is not None:
            record = self._records[identity]
            if g > record.g or abs(g - record.g) < self.tolerance:
                return
            self._frontier.remove(identity)
            record.relax(current_identity, g, step)
        else:
            h = successor.heuristic(self.goal)
            record = self._records[identity] = NodeRecord(
                successor, g=g, h=h, f=g + h, step=step, predecessor=current_identity
            )

        self._frontier.insert(identity, successor, record.f)

    def _backlink(self):
        identity = self._last
        while True:
            predecessor = self._records[identity].predecessor
            if predecessor is None:
                return
            self._forward_links[predecessor] = identity
            identity = predecessor

    @property
    def state(self) -> SearchState:
        """The current state of the search."""
        return self._state

    def successful(self) -> bool:
        """
        Return True iff a path from the start node to the goal node was found.
        """
        return self._state is SearchState.SUCCEEDED

    def total_cost(self) -> float:
        """
        The cost of the path found. Only meaningful if the search was successful;
        otherwise this is the cost of the last node expanded.
        """
        return self._records[self._last].g

    def steps(self) -> int:
        """
        The number of edges on the path found. Only meaningful if the search was
        successful; otherwise this is the hop count of the last node expanded.
        """
        return self._records[self._last].step

    def expanded(self) -> int:
        """
        The number of nodes taken off the frontier during the search.
        """
        return len(self._visited)

    def record(self, node: SearchNode) -> NodeRecord:
        """
        A copy of the search's record for the given node.

        :raises KeyError: If the node was never discovered.
        """
        return dataclasses.replace(self._records[node.identity()])

    def finalized_costs(self) -> frozendict:
        """
        The final cost from the start node of every expanded node, keyed by identity.
        """
        return frozendict(
            (identity, self._records[identity].g) for identity in self._visited
        )

    def path(self) -> PathView:
        """
        The path from the start node to the goal node. Empty if the search was not
        successful.
        """
        if not self.successful():
            return PathView.empty()
        return PathView(
            self._records,
            self._forward_links,
            self.start.identity(),
            self._last,
        )

    def __iter__(self):
        return iter(self.path())
