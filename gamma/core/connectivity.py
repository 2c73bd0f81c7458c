# ──────────────────────────────────────────────────────────────────────────────
# File: gamma/core/connectivity.py
# Reachability oracle over one player's cells:
#   - reachable(): bounded BFS between two cells through cells of a single owner
#   - adjacent_area_count(): how many distinct areas of a player touch a cell,
#     using reachability to deduplicate neighbours that share an area
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations
from collections import deque
from typing import List, Tuple
import numpy as np

from .board import Board
from .types import FREE


def reachable(board: Board, player: int, start: Tuple[int, int], target: Tuple[int, int]) -> bool:
    """
    True iff `target` can be reached from `start` by 4-connected steps that only
    enter cells owned by `player`. The start cell itself is not checked.
    The board's visited scratch is reset before the search and again on return,
    whatever the outcome.
    """
    board.clear_visited()
    board.mark_visited(*start)
    q = deque([start])
    try:
        while q:
            cur = q.popleft()
            if cur == target:
                return True
            for nx, ny in board.neighbours(*cur):
                if board.is_visited(nx, ny) or board.get_owner(nx, ny) != player:
                    continue
                board.mark_visited(nx, ny)
                q.append((nx, ny))
        return False
    finally:
        board.clear_visited()


def adjacent_area_count(board: Board, player: int, x: int, y: int) -> int:
    """
    Number of distinct areas of `player` among the neighbours of (x, y).
    A neighbour only counts if no already counted neighbour can reach it.
    """
    candidates: List[Tuple[int, int]] = []
    for n in board.neighbours(x, y):
        if board.get_owner(*n) != player:
            continue
        if any(reachable(board, player, n, c) for c in candidates):
            continue
        candidates.append(n)
    return len(candidates)


def adjacent_owned_by(board: Board, x: int, y: int, player: int) -> bool:
    return any(board.get_owner(nx, ny) == player for nx, ny in board.neighbours(x, y))


def fields_adjacent_to(board: Board, player: int) -> int:
    """Free cells with at least one 4-neighbour owned by `player`."""
    own = board.grid == player
    near = np.zeros_like(own)
    near[1:, :] |= own[:-1, :]
    near[:-1, :] |= own[1:, :]
    near[:, 1:] |= own[:, :-1]
    near[:, :-1] |= own[:, 1:]
    return int(np.count_nonzero(near & (board.grid == FREE)))
