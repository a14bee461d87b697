from .grid import DEMO_BLOCKED, Grid, GridNode, demo_grid
from .weighted_graph import WeightedGraph, WeightedNode
