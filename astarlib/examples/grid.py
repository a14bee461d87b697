import math
from typing import Iterable, List, Tuple

import numpy as np

from astarlib.node.search_node import SearchNode
from astarlib.search.astar_search import AStarSearch

_ORTHOGONAL_MOVES = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL_MOVES = ((1, 1), (1, -1), (-1, 1), (-1, -1))


class GridNode(SearchNode):
    """
    A cell of a ``Grid``, identified by its ``(x, y)`` position.

    Cells hold no references to their neighbors, which are computed from the position
    and the grid dimensions.
    """

    def __init__(self, x: int, y: int, grid: "Grid"):
        self.x = x
        self.y = y
        self.grid = grid

    @property
    def available(self) -> bool:
        return not bool(self.grid.blocked[self.y, self.x])

    def distance(self, other: "GridNode") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def heuristic(self, goal: "GridNode") -> float:
        # straight-line distance never exceeds the length of a path of unit or
        # diagonal moves
        return self.distance(goal)

    def successors(self, graph) -> List["GridNode"]:
        # neighbors come from the owning grid, whatever collection is searched
        moves = _ORTHOGONAL_MOVES
        if self.grid.diagonal:
            moves = moves + _DIAGONAL_MOVES
        result = []
        for dx, dy in moves:
            x, y = self.x + dx, self.y + dy
            if 0 <= x < self.grid.width and 0 <= y < self.grid.height:
                result.append(self.grid[x, y])
        return result

    def identity(self) -> Tuple[int, int]:
        return self.x, self.y

    def __repr__(self):
        return f"GridNode({self.x}, {self.y})"


class Grid:
    """
    A rectangular grid graph. Each cell is connected to its orthogonal neighbors (and
    its diagonal neighbors if ``diagonal`` is set), with edge costs equal to the
    Euclidean distance between cell centers.

    :param blocked: 2D boolean array of shape ``(height, width)``; True marks cells
        that cannot be entered.
    :param diagonal: Whether cells are also connected diagonally.
    """

    def __init__(self, blocked, *, diagonal: bool = False):
        blocked = np.asarray(blocked, dtype=bool)
        if blocked.ndim != 2 or blocked.size == 0:
            raise ValueError(
                "Expected a non-empty 2D array of blocked cells,"
                f" got shape {blocked.shape}"
            )
        self.blocked = blocked
        self.height, self.width = blocked.shape
        self.diagonal = diagonal
        self.nodes = [
            GridNode(x, y, self) for y in range(self.height) for x in range(self.width)
        ]

    @classmethod
    def open(cls, width: int, height: int, **kwargs) -> "Grid":
        """
        A grid with no blocked cells.
        """
        return cls(np.zeros((height, width), dtype=bool), **kwargs)

    def __getitem__(self, position: Tuple[int, int]) -> GridNode:
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Position {position} is outside of a {self.width}x{self.height} grid"
            )
        return self.nodes[x + self.width * y]

    def __iter__(self) -> Iterable[GridNode]:
        return iter(self.nodes)

    def __len__(self):
        return len(self.nodes)

    def search(self, start: Tuple[int, int], goal: Tuple[int, int], **kwargs):
        """
        Search for a path between two positions of this grid.

        :param kwargs: Passed on to ``AStarSearch``.
        """
        return AStarSearch(self.nodes, self[start], self[goal], **kwargs)


DEMO_BLOCKED = np.array(
    [
        [0, 0, 1, 0, 1],
        [1, 0, 1, 0, 0],
        [1, 0, 0, 1, 1],
        [1, 1, 0, 0, 1],
        [0, 0, 0, 0, 0],
        [0, 1, 1, 0, 0],
        [0, 0, 0, 0, 0],
        [0, 0, 0, 0, 1],
        [0, 1, 0, 1, 0],
        [0, 1, 0, 0, 0],
    ],
    dtype=bool,
)


def demo_grid() -> Grid:
    """
    A 5x10 demonstration world with scattered obstacles. The cheapest path from the
    top left cell ``(0, 0)`` to the bottom right cell ``(4, 9)`` has cost 15; several
    paths achieve it.
    """
    return Grid(DEMO_BLOCKED)
