from astarlib.node.search_node import SearchNode
from astarlib.search.astar_search import (
    COST_TOLERANCE,
    AStarSearch,
    NodeNotInGraphError,
    SearchState,
)
from astarlib.search.path_view import PathView

from . import examples, search
