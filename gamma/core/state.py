from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional
import logging

from .types import PlayerRecord
from .board import Board
from .rules import RulesConfig

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    cfg: RulesConfig
    board: Board

    # player id -> record; a record is created the first time a valid id is looked up,
    # so games with a huge player count cost nothing until those players act
    players: Dict[int, PlayerRecord] = field(default_factory=dict)

    # number of unclaimed cells on the whole board
    free_fields: int = field(init=False)

    def __post_init__(self):
        self.free_fields = self.cfg.total_fields

    def copy(self) -> "GameState":
        s = GameState(
            cfg=self.cfg,
            board=self.board.clone(),
            players={pid: rec.copy() for pid, rec in self.players.items()},
        )
        s.free_fields = self.free_fields
        return s

    # —— player lookup ——
    def valid_player(self, player: int) -> bool:
        return 1 <= player <= self.cfg.players

    def record(self, player: int) -> Optional[PlayerRecord]:
        if not self.valid_player(player):
            return None
        rec = self.players.get(player)
        if rec is None:
            rec = self.players[player] = PlayerRecord()
        return rec

    def occupied_by_others(self, player: int) -> int:
        rec = self.record(player)
        mine = rec.occupied_fields if rec is not None else 0
        return self.cfg.total_fields - self.free_fields - mine


def new_game(width: int, height: int, players: int, areas: int) -> Optional[GameState]:
    """Fresh game, or None when the parameters are invalid or the board does not fit in memory."""
    cfg = RulesConfig(width=width, height=height, players=players, areas=areas)
    if not cfg.is_valid():
        logger.debug("rejected game parameters %s", cfg)
        return None
    try:
        board = Board(width, height)
    except (MemoryError, ValueError) as e:
        logger.warning("cannot allocate a %dx%d board: %s", width, height, e)
        return None
    return GameState(cfg=cfg, board=board)
