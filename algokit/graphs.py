"""Breadth-first searches over adjacency lists and grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def bfs(adj: Sequence[Sequence[int]]) -> list[int]:
    """Breadth-first visiting order of the graph from vertex 0."""
    if not adj:
        return []
    visited = {0}
    queue = deque([0])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def flood_fill(image: list[list[int]], sr: int, sc: int, color: int) -> list[list[int]]:
    """Recolour, in place, the 4-connected region around ``(sr, sc)``; return the image."""
    rows = len(image)
    cols = len(image[0]) if rows else 0
    if not (0 <= sr < rows and 0 <= sc < cols):
        raise IndexError("start pixel lies outside the image")
    initial = image[sr][sc]
    if initial == color:
        return image
    image[sr][sc] = color
    queue = deque([(sr, sc)])
    while queue:
        row, col = queue.popleft()
        for r, c in _neighbours(row, col, rows, cols):
            if image[r][c] == initial:
                image[r][c] = color
                queue.append((r, c))
    return image


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected regions of ``'1'`` cells in the grid."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    visited: set[tuple[int, int]] = set()
    count = 0
    for i in range(rows):
        for j in range(cols):
            if grid[i][j] != "1" or (i, j) in visited:
                continue
            count += 1
            visited.add((i, j))
            queue = deque([(i, j)])
            while queue:
                row, col = queue.popleft()
                for r, c in _neighbours(row, col, rows, cols):
                    if grid[r][c] == "1" and (r, c) not in visited:
                        visited.add((r, c))
                        queue.append((r, c))
    return count