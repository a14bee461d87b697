import heapq
import math

import numpy as np


def grid_shortest_cost(blocked, start, goal, diagonal=False):
    """
    Dijkstra over a blocked-cell mask, independent of the library. Returns ``math.inf``
    if the goal cannot be reached. The start cell may be blocked, matching the search,
    which only refuses to move into blocked cells.
    """
    blocked = np.asarray(blocked, dtype=bool)
    height, width = blocked.shape
    moves = [(1, 0), (-1, 0), (0, 1), (0, -1)]
    if diagonal:
        moves += [(1, 1), (1, -1), (-1, 1), (-1, -1)]
    best = {start: 0.0}
    fringe = [(0.0, start)]
    while fringe:
        cost, (x, y) = heapq.heappop(fringe)
        if (x, y) == goal:
            return cost
        if cost > best[(x, y)]:
            continue
        for dx, dy in moves:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height) or blocked[ny, nx]:
                continue
            new_cost = cost + math.hypot(dx, dy)
            if new_cost < best.get((nx, ny), math.inf):
                best[(nx, ny)] = new_cost
                heapq.heappush(fringe, (new_cost, (nx, ny)))
    return math.inf


def path_cost(nodes):
    return sum(a.distance(b) for a, b in zip(nodes, nodes[1:]))


def weighted_shortest_cost(edges, start, goal):
    """
    Dijkstra over an adjacency dict ``{source: {target: weight}}``.
    """
    best = {start: 0.0}
    fringe = [(0.0, start)]
    while fringe:
        cost, node = heapq.heappop(fringe)
        if node == goal:
            return cost
        if cost > best[node]:
            continue
        for target, weight in edges.get(node, {}).items():
            if cost + weight < best.get(target, math.inf):
                best[target] = cost + weight
                heapq.heappush(fringe, (cost + weight, target))
    return math.inf
