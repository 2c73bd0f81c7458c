from __future__ import annotations
import logging
import sys
from typing import Iterator, Optional, TextIO, Tuple

from ..core.state import GameState, new_game
from ..core.engine import Engine
from ..core.encoding import BoardEncoder
from ..core import queries
from .parsing import (
    Command, CommandType, GameSetup, InputLine,
    is_ignored, parse_command, parse_setup,
)

logger = logging.getLogger(__name__)


class BatchInterpreter:
    """
    Line oriented front-end. Results go to `out`, "ERROR <line>" reports to `err`.
    The same line iterator is used for the setup line and the commands after it,
    so line numbers keep counting across both.
    """

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None,
                 engine: Optional[Engine] = None, encoder: Optional[BoardEncoder] = None):
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.engine = engine or Engine()
        self.encoder = encoder or BoardEncoder()

    def error(self, line_no: int) -> None:
        print(f"ERROR {line_no}", file=self.err)

    def ok(self, line_no: int) -> None:
        print(f"OK {line_no}", file=self.out)

    # ──────────────────────────────────────────────────────────────────────────
    # setup
    # ──────────────────────────────────────────────────────────────────────────
    def read_game(self, lines: Iterator[InputLine]) -> Optional[Tuple[GameSetup, GameState]]:
        """Consume lines until a game is created; None if input ends first."""
        for line in lines:
            if is_ignored(line):
                continue
            setup = parse_setup(line)
            state = None
            if setup is not None:
                state = new_game(setup.width, setup.height, setup.players, setup.areas)
            if state is None:
                self.error(line.number)
                continue
            self.ok(line.number)
            logger.info("game %dx%d, %d players, %d areas (mode %s)",
                        setup.width, setup.height, setup.players, setup.areas, setup.mode)
            return setup, state
        return None

    # ──────────────────────────────────────────────────────────────────────────
    # commands
    # ──────────────────────────────────────────────────────────────────────────
    def run(self, s: GameState, lines: Iterator[InputLine]) -> None:
        for line in lines:
            if is_ignored(line):
                continue
            cmd = parse_command(line)
            if cmd is None:
                self.error(line.number)
                continue
            self.execute(s, cmd, line.number)

    def execute(self, s: GameState, cmd: Command, line_no: int) -> None:
        if cmd.type is CommandType.MOVE:
            print(int(self.engine.move(s, cmd.player, cmd.x, cmd.y)), file=self.out)
        elif cmd.type is CommandType.GOLDEN:
            print(int(self.engine.golden_move(s, cmd.player, cmd.x, cmd.y)), file=self.out)
        elif cmd.type is CommandType.BUSY:
            print(queries.busy_fields(s, cmd.player), file=self.out)
        elif cmd.type is CommandType.FREE:
            print(queries.free_fields(s, cmd.player), file=self.out)
        elif cmd.type is CommandType.POSSIBLE:
            print(int(queries.golden_possible(s, cmd.player)), file=self.out)
        elif cmd.type is CommandType.BOARD:
            image = self.encoder.encode(s)
            if image is None:
                self.error(line_no)
            else:
                self.out.write(image)
        else:
            raise RuntimeError(f"unknown command: {cmd.type}")
