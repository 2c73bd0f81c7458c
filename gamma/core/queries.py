from __future__ import annotations
from typing import Optional
import numpy as np

from .types import FREE
from .state import GameState
from .engine import golden_check
from .connectivity import adjacent_owned_by, fields_adjacent_to


def busy_fields(s: GameState, player: int) -> int:
    rec = s.record(player)
    return rec.occupied_fields if rec is not None else 0


def free_fields(s: GameState, player: int) -> int:
    """
    Cells the player could take with an ordinary move. At the area cap only
    cells next to an existing area qualify.
    """
    rec = s.record(player)
    if rec is None:
        return 0
    if rec.occupied_areas == s.cfg.areas:
        return fields_adjacent_to(s.board, player)
    return s.free_fields


def golden_possible(s: GameState, player: int) -> bool:
    rec = s.record(player)
    if rec is None or rec.golden_used:
        return False
    if s.occupied_by_others(player) == 0:
        return False
    grid = s.board.grid
    ys, xs = np.where((grid != FREE) & (grid != player))
    for y, x in zip(ys.tolist(), xs.tolist()):
        if golden_check(s, player, x, y) is not None:
            return True
    return False


def areas_of(s: GameState, player: int) -> int:
    rec = s.record(player)
    return rec.occupied_areas if rec is not None else 0


def owner_at(s: GameState, x: int, y: int) -> Optional[int]:
    if not s.board.in_bounds(x, y):
        return None
    return s.board.get_owner(x, y)


def adjacent_to_player(s: GameState, x: int, y: int, player: int) -> bool:
    if not s.board.in_bounds(x, y) or not s.valid_player(player):
        return False
    return adjacent_owned_by(s.board, x, y, player)
