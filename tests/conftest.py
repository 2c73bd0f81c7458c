"""Shared helpers for the gamma test suite."""

from collections import deque
from typing import List

import numpy as np
import pytest

from gamma.core.engine import Engine
from gamma.core.state import GameState, new_game


def count_components(state: GameState, player: int) -> int:
    """Full flood fill, independent of the incremental bookkeeping."""
    grid = state.board.grid.tolist()
    h, w = len(grid), len(grid[0])
    seen = [[False] * w for _ in range(h)]
    components = 0
    for y in range(h):
        for x in range(w):
            if grid[y][x] != player or seen[y][x]:
                continue
            components += 1
            seen[y][x] = True
            q = deque([(x, y)])
            while q:
                cx, cy = q.popleft()
                for nx, ny in ((cx - 1, cy), (cx + 1, cy), (cx, cy - 1), (cx, cy + 1)):
                    if 0 <= nx < w and 0 <= ny < h and not seen[ny][nx] and grid[ny][nx] == player:
                        seen[ny][nx] = True
                        q.append((nx, ny))
    return components


def assert_invariants(state: GameState) -> None:
    cfg = state.cfg
    grid = state.board.grid
    total_busy = 0
    for player in range(1, cfg.players + 1):
        rec = state.record(player)
        assert rec.occupied_fields == int(np.count_nonzero(grid == player))
        assert rec.occupied_areas == count_components(state, player)
        assert rec.occupied_areas <= cfg.areas
        total_busy += rec.occupied_fields
    assert state.free_fields + total_busy == cfg.width * cfg.height
    assert not state.board.visited.any()


def decode_board(text: str, players: int) -> List[List[int]]:
    """Inverse of BoardEncoder.encode; rows are returned bottom (y = 0) first."""
    rows = []
    for line in text.split("\n")[:-1]:
        if players <= 9:
            cells = list(line)
        else:
            cells = line.split()
        rows.append([0 if c == "." else int(c) for c in cells])
    return rows[::-1]


@pytest.fixture
def engine() -> Engine:
    return Engine()


@pytest.fixture
def game_10x10() -> GameState:
    g = new_game(10, 10, 2, 3)
    assert g is not None
    return g
