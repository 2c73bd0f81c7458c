# ──────────────────────────────────────────────────────────────────────────────
# File: gamma/core/board.py
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np
from typing import Iterator, List, Tuple

from .types import FREE

# Neighbour order matters for area counting: left, up, right, down
_DIRS = [(-1, 0), (0, -1), (1, 0), (0, 1)]


@dataclass
class Board:
    width: int
    height: int
    # owner per cell, indexed [y, x]; 0 = free
    grid: np.ndarray = field(init=False)
    # BFS scratch, only meaningful inside a single reachability query
    visited: np.ndarray = field(init=False)
    _marked: List[Tuple[int, int]] = field(init=False, default_factory=list, repr=False, compare=False)

    def __post_init__(self):
        self.grid = np.zeros((self.height, self.width), dtype=np.uint32)
        self.visited = np.zeros((self.height, self.width), dtype=bool)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_owner(self, x: int, y: int) -> int:
        return int(self.grid[y, x])

    def set_owner(self, x: int, y: int, owner: int) -> None:
        assert self.in_bounds(x, y), "out of bounds"
        self.grid[y, x] = owner

    def is_free(self, x: int, y: int) -> bool:
        return self.grid[y, x] == FREE

    def neighbours(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        for dx, dy in _DIRS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield nx, ny

    # —— visited scratch ——
    def clear_visited(self) -> None:
        """Reset every cell marked since the last clear; cost follows the number of marks, not the board size."""
        for x, y in self._marked:
            self.visited[y, x] = False
        self._marked.clear()

    def mark_visited(self, x: int, y: int) -> None:
        self.visited[y, x] = True
        self._marked.append((x, y))

    def is_visited(self, x: int, y: int) -> bool:
        return bool(self.visited[y, x])

    def clone(self) -> "Board":
        b = Board(self.width, self.height)
        b.grid = self.grid.copy()
        return b
