# ──────────────────────────────────────────────────────────────────────────────
# File: gamma/core/engine.py
# Notes:
#   - move: a free cell touching k areas of the player merges them (areas -= k-1);
#     touching none opens a new area, which needs a spare slot under the cap.
#   - golden move: the cell is cleared for the duration of the check, then
#       k_prev = areas of the previous owner around it (pieces after removal)
#       k_new  = areas of the mover around it
#     and rejected if the previous owner would end up with more than the cap
#     (disintegration), or the mover would need a new area it cannot open.
#   - every rejection leaves the state exactly as it was.
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations
from typing import Optional, Tuple
import logging

from .types import FREE, PlayerRecord
from .state import GameState
from .connectivity import adjacent_area_count

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Golden move validation
# ──────────────────────────────────────────────────────────────────────────────
def golden_check(s: GameState, player: int, x: int, y: int) -> Optional[Tuple[int, int]]:
    """
    Two-sided simulation of a golden move by `player` on (x, y), ignoring whether the
    golden move was already used. Returns (k_prev, k_new) when allowed, else None.
    The cell's owner is the same on return as on entry.
    """
    board = s.board
    if not s.valid_player(player) or not board.in_bounds(x, y):
        return None
    prev_owner = board.get_owner(x, y)
    if prev_owner == FREE or prev_owner == player:
        return None

    max_areas = s.cfg.areas
    prev = s.record(prev_owner)
    new = s.record(player)

    board.set_owner(x, y, FREE)
    try:
        k_prev = adjacent_area_count(board, prev_owner, x, y)
        # removal splits one area into k_prev pieces
        if k_prev > 0 and k_prev - 1 > max_areas - prev.occupied_areas:
            return None
        k_new = adjacent_area_count(board, player, x, y)
        if k_new == 0 and new.occupied_areas == max_areas:
            return None
        return k_prev, k_new
    finally:
        board.set_owner(x, y, prev_owner)


# ──────────────────────────────────────────────────────────────────────────────
# Engine
# ──────────────────────────────────────────────────────────────────────────────
class Engine:

    def move(self, s: GameState, player: int, x: int, y: int) -> bool:
        """Ordinary placement; returns False (state untouched) if the move is illegal."""
        rec = s.record(player)
        if rec is None or not s.board.in_bounds(x, y):
            return False
        if not s.board.is_free(x, y):
            return False

        k = adjacent_area_count(s.board, player, x, y)
        if k == 0:
            if rec.occupied_areas >= s.cfg.areas:
                logger.debug("move %d@(%d,%d) rejected: area cap %d reached", player, x, y, s.cfg.areas)
                return False
            rec.occupied_areas += 1
        else:
            rec.occupied_areas -= k - 1

        self._claim(s, rec, player, x, y)
        return True

    def golden_move(self, s: GameState, player: int, x: int, y: int) -> bool:
        """One-time seizure of an opponent cell; returns False (state untouched) if not allowed."""
        rec = s.record(player)
        if rec is None or rec.golden_used or not s.board.in_bounds(x, y):
            return False
        prev_owner = s.board.get_owner(x, y)

        res = golden_check(s, player, x, y)
        if res is None:
            logger.debug("golden move %d@(%d,%d) rejected", player, x, y)
            return False
        k_prev, k_new = res

        prev = s.record(prev_owner)
        s.board.set_owner(x, y, player)

        if k_new > 0:
            rec.occupied_areas -= k_new - 1
        else:
            rec.occupied_areas += 1
        rec.occupied_fields += 1
        rec.golden_used = True

        prev.occupied_fields -= 1
        if k_prev > 0:
            prev.occupied_areas += k_prev - 1
        else:
            # the cell was a whole single-cell area
            prev.occupied_areas -= 1
        return True

    def golden_possible_on_field(self, s: GameState, player: int, x: int, y: int) -> bool:
        rec = s.record(player)
        if rec is None or rec.golden_used:
            return False
        return golden_check(s, player, x, y) is not None

    # ──────────────────────────────────────────────────────────────────────────
    # helpers
    # ──────────────────────────────────────────────────────────────────────────
    def _claim(self, s: GameState, rec: PlayerRecord, player: int, x: int, y: int) -> None:
        s.board.set_owner(x, y, player)
        rec.occupied_fields += 1
        s.free_fields -= 1
