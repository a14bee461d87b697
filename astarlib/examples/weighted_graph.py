from typing import Callable, Dict, Hashable, Iterable, List

from astarlib.node.search_node import SearchNode
from astarlib.search.astar_search import AStarSearch


class WeightedNode(SearchNode):
    """
    A named node of a ``WeightedGraph``.
    """

    def __init__(self, name: Hashable, graph: "WeightedGraph", available: bool = True):
        self.name = name
        self.graph = graph
        self._available = available

    @property
    def available(self) -> bool:
        return self._available

    def distance(self, other: "WeightedNode") -> float:
        return self.graph.edges[self.name][other.name]

    def heuristic(self, goal: "WeightedNode") -> float:
        return self.graph.heuristic(self.name, goal.name)

    def successors(self, graph) -> List["WeightedNode"]:
        return [self.graph[name] for name in self.graph.edges[self.name]]

    def identity(self) -> Hashable:
        return self.name

    def __repr__(self):
        return f"WeightedNode({self.name!r})"


class WeightedGraph:
    """
    A directed graph given as an explicit adjacency list with non-negative edge weights.

    :param heuristic: Estimate of the cost between two node names. Must be admissible
        for the path found to be optimal. Defaults to 0 everywhere, which makes the
        search equivalent to Dijkstra's algorithm.
    """

    def __init__(
        self, heuristic: Callable[[Hashable, Hashable], float] = lambda node, goal: 0
    ):
        self.heuristic = heuristic
        self.nodes: Dict[Hashable, WeightedNode] = {}
        self.edges: Dict[Hashable, Dict[Hashable, float]] = {}

    def add_node(self, name: Hashable, available: bool = True) -> WeightedNode:
        """
        Add a node, or update the availability of an existing one.
        """
        if name in self.nodes:
            self.nodes[name]._available = available
        else:
            self.nodes[name] = WeightedNode(name, self, available)
            self.edges[name] = {}
        return self.nodes[name]

    def add_edge(
        self,
        source: Hashable,
        target: Hashable,
        weight: float,
        bidirectional: bool = False,
    ):
        """
        Add an edge, creating its endpoints if needed.

        :raises ValueError: If the weight is negative or the edge is a self-loop.
        """
        if weight < 0:
            raise ValueError(
                f"Edge {source!r} -> {target!r} has negative weight {weight}"
            )
        if source == target:
            raise ValueError(f"Self-loop on {source!r}")
        for name in (source, target):
            if name not in self.nodes:
                self.add_node(name)
        self.edges[source][target] = weight
        if bidirectional:
            self.edges[target][source] = weight

    def __getitem__(self, name: Hashable) -> WeightedNode:
        return self.nodes[name]

    def __iter__(self) -> Iterable[WeightedNode]:
        return iter(self.nodes.values())

    def __len__(self):
        return len(self.nodes)

    def search(self, start: Hashable, goal: Hashable, **kwargs) -> AStarSearch:
        """
        Search for a path between two named nodes.

        :param kwargs: Passed on to ``AStarSearch``.
        """
        return AStarSearch(list(self), self[start], self[goal], **kwargs)
