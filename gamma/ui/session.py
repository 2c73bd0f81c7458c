# ──────────────────────────────────────────────────────────────────────────────
# File: gamma/ui/session.py  (interactive game flow without any drawing)
#   - cursor on the board, moved with arrows and clamped to the edges
#   - turn order: players in id order, skipping those who cannot move
#   - cell highlights and prompt data for the current player
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional
import logging

from ..core.state import GameState
from ..core.engine import Engine
from ..core import queries

logger = logging.getLogger(__name__)


class Action(Enum):
    LEFT = auto()
    RIGHT = auto()
    UP = auto()       # towards higher y, i.e. up on screen
    DOWN = auto()
    MOVE = auto()
    GOLDEN = auto()
    SKIP = auto()
    END = auto()


class Highlight(Enum):
    NONE = auto()
    GOLDEN = auto()     # golden move allowed here
    OWN = auto()        # current player's cell
    REACHABLE = auto()  # free cell next to one of the player's areas


@dataclass
class Prompt:
    player: int
    busy: int
    total: int
    areas: int
    max_areas: int
    free: int
    golden_used: bool
    golden_possible: bool


@dataclass
class Summary:
    scores: List[int]            # busy fields, index = player id - 1
    winners: List[int] = field(default_factory=list)


class InteractiveSession:
    def __init__(self, state: GameState, engine: Optional[Engine] = None):
        self.state = state
        self.engine = engine or Engine()
        self.cursor_x = state.cfg.width // 2
        self.cursor_y = state.cfg.height // 2
        self.finished = False
        self.player = 1

    # —— turn order ——
    def can_move(self, player: int) -> bool:
        return queries.free_fields(self.state, player) > 0 or queries.golden_possible(self.state, player)

    def _next_moving_player(self, prev: int) -> int:
        """Next player (cyclically after `prev`) able to move, or 0 if nobody can."""
        n = self.state.cfg.players
        p = prev
        while True:
            p = 1 if p == n else p + 1
            if self.can_move(p):
                return p
            if p == prev:
                return 0

    def _end_turn(self) -> None:
        nxt = self._next_moving_player(self.player)
        if nxt == 0:
            logger.info("no player can move, game over")
            self.finished = True
        else:
            self.player = nxt

    # —— input ——
    def handle(self, action: Action) -> bool:
        """Apply one key action; True when it ended the current turn."""
        if self.finished:
            return False
        w, h = self.state.cfg.width, self.state.cfg.height
        if action is Action.LEFT:
            self.cursor_x = max(0, self.cursor_x - 1)
        elif action is Action.RIGHT:
            self.cursor_x = min(w - 1, self.cursor_x + 1)
        elif action is Action.UP:
            self.cursor_y = min(h - 1, self.cursor_y + 1)
        elif action is Action.DOWN:
            self.cursor_y = max(0, self.cursor_y - 1)
        elif action is Action.END:
            self.finished = True
            return True
        elif action is Action.SKIP:
            self._end_turn()
            return True
        elif action is Action.MOVE:
            if self.engine.move(self.state, self.player, self.cursor_x, self.cursor_y):
                self._end_turn()
                return True
        elif action is Action.GOLDEN:
            if self.engine.golden_move(self.state, self.player, self.cursor_x, self.cursor_y):
                self._end_turn()
                return True
        return False

    # —— view data ——
    def highlight(self, x: int, y: int) -> Highlight:
        s, p = self.state, self.player
        if self.engine.golden_possible_on_field(s, p, x, y):
            return Highlight.GOLDEN
        owner = queries.owner_at(s, x, y)
        if owner == p:
            return Highlight.OWN
        if owner == 0 and queries.adjacent_to_player(s, x, y, p):
            return Highlight.REACHABLE
        return Highlight.NONE

    def prompt(self) -> Prompt:
        s, p = self.state, self.player
        rec = s.record(p)
        return Prompt(
            player=p,
            busy=queries.busy_fields(s, p),
            total=s.cfg.total_fields,
            areas=queries.areas_of(s, p),
            max_areas=s.cfg.areas,
            free=queries.free_fields(s, p),
            golden_used=rec.golden_used,
            golden_possible=queries.golden_possible(s, p),
        )

    def summary(self) -> Summary:
        scores = [queries.busy_fields(self.state, p) for p in range(1, self.state.cfg.players + 1)]
        best = max(scores)
        return Summary(scores=scores, winners=[i + 1 for i, v in enumerate(scores) if v == best])
