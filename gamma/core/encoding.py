from __future__ import annotations
from typing import List, Optional
import logging

from .state import GameState
from .types import FREE

logger = logging.getLogger(__name__)

# symbol for an unclaimed cell
FREE_SYMBOL = "."


class BoardEncoder:
    """
    Text image of the board: one line per row, top row (highest y) first.

    Layout:
      - every player id is one digit: cells are concatenated, "." for free cells
      - otherwise: each cell right-aligned to the width of the largest id,
        cells separated by one space, "\\n" after the last cell of a row
    """

    def encode(self, s: GameState) -> Optional[str]:
        """Board text, or None if there is not enough memory to build it."""
        try:
            width = s.cfg.field_width
            if width == 1:
                return self._encode_compact(s)
            return self._encode_padded(s, width)
        except MemoryError:
            logger.error("not enough memory to render a %dx%d board", s.cfg.width, s.cfg.height)
            return None

    def label(self, owner: int, width: int = 1) -> str:
        """Single cell as it appears in the board text (without separator)."""
        txt = FREE_SYMBOL if owner == FREE else str(owner)
        return txt.rjust(width)

    def _encode_compact(self, s: GameState) -> str:
        lines: List[str] = []
        for row in s.board.grid[::-1]:
            lines.append("".join(FREE_SYMBOL if v == FREE else str(v) for v in row.tolist()))
            lines.append("\n")
        return "".join(lines)

    def _encode_padded(self, s: GameState, width: int) -> str:
        lines: List[str] = []
        for row in s.board.grid[::-1]:
            lines.append(" ".join(self.label(v, width) for v in row.tolist()))
            lines.append("\n")
        return "".join(lines)
