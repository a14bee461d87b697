from .astar_search import COST_TOLERANCE, AStarSearch, NodeNotInGraphError, SearchState
from .frontier import EmptyFrontierError, Frontier, FrontierEntry
from .node_record import NodeRecord
from .path_view import PathView
from .visited_set import VisitedSet
