from .search_node import SearchNode
