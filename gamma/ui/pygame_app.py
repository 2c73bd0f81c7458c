# ──────────────────────────────────────────────────────────────────────────────
# File: gamma/ui/pygame_app.py  (minimal interactive UI: arrows move the cursor,
#   Space places, G golden move, C skips, Esc ends the game)
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations
import logging
import os
from typing import Optional, Tuple

# keep pygame's import banner out of the game's stdout
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from ..core.state import GameState
from ..core.encoding import BoardEncoder
from .session import Action, Highlight, InteractiveSession, Summary

logger = logging.getLogger(__name__)

# colours and layout
BG = (245, 245, 245)
GRID = (180, 180, 180)
BLACK = (30, 30, 30)
BOARD_BG = (230, 230, 230)
RED = (200, 60, 60)
MAGENTA = (190, 70, 190)
YELLOW = (235, 200, 40)
CURSOR = (70, 100, 220)

MAX_CELL = 48        # pixels per cell on small boards
MIN_CELL = 10
MAX_BOARD_PX = 720   # the board is scaled down to fit in this square
MARGIN = 32
INFO_H = 150         # prompt area above the board
MAX_WINDOW_PX = 16384  # SDL refuses larger windows

HIGHLIGHT_COLOURS = {
    Highlight.GOLDEN: YELLOW,
    Highlight.OWN: RED,
    Highlight.REACHABLE: MAGENTA,
}

KEYMAP = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.UP,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_SPACE: Action.MOVE,
    pygame.K_g: Action.GOLDEN,
    pygame.K_c: Action.SKIP,
    pygame.K_ESCAPE: Action.END,
}


def action_for_key(event) -> Optional[Action]:
    # Ctrl-D ends the game like EOF on a terminal
    if event.key == pygame.K_d and event.mod & pygame.KMOD_CTRL:
        return Action.END
    return KEYMAP.get(event.key)


def cell_size(width: int, height: int) -> int:
    return max(MIN_CELL, min(MAX_CELL, MAX_BOARD_PX // max(width, height)))


def window_size(width: int, height: int, cell: int) -> Tuple[int, int]:
    return MARGIN * 2 + max(width * cell, 560), INFO_H + MARGIN * 2 + height * cell


def draw(screen, session: InteractiveSession, encoder: BoardEncoder, cell: int) -> None:
    screen.fill(BG)
    s = session.state
    w, h = s.cfg.width, s.cfg.height
    font = pygame.font.SysFont(None, 26)
    cell_font = pygame.font.SysFont(None, max(12, int(cell * 0.6)))

    # prompt / summary
    lines = []
    if session.finished:
        summ = session.summary()
        if len(summ.winners) == 1:
            lines.append(f"Game over. Player {summ.winners[0]} wins!")
        else:
            lines.append(f"Game over. {len(summ.winners)} players tie for the best score.")
        best = max(summ.scores)
        lines.append("  ".join(f"P{i + 1}: {v}{'*' if v == best else ''}" for i, v in enumerate(summ.scores[:12])))
        lines.append("[Esc] quit")
    else:
        pr = session.prompt()
        lines.append(f"Player {pr.player} to move")
        lines.append(f"Fields: {pr.busy}/{pr.total}   Areas: {pr.areas}/{pr.max_areas}")
        if pr.free == 0:
            lines.append("No free field this player can move to")
        else:
            lines.append(f"Can move to {pr.free} field{'s' if pr.free != 1 else ''}")
        if pr.golden_used:
            lines.append("Golden move already used")
        elif pr.golden_possible:
            lines.append("Golden move possible (yellow fields)")
        else:
            lines.append("Golden move not possible")
        lines.append("[Arrows] cursor  [Space] move  [G] golden  [C] skip  [Esc] end")
    for i, txt in enumerate(lines):
        screen.blit(font.render(txt, True, BLACK), (MARGIN, MARGIN // 2 + i * 24))

    # board
    board_x0 = MARGIN
    board_y0 = INFO_H + MARGIN
    pygame.draw.rect(screen, BOARD_BG, (board_x0, board_y0, w * cell, h * cell))
    for i in range(w + 1):
        pygame.draw.line(screen, GRID, (board_x0 + i * cell, board_y0), (board_x0 + i * cell, board_y0 + h * cell), 1)
    for i in range(h + 1):
        pygame.draw.line(screen, GRID, (board_x0, board_y0 + i * cell), (board_x0 + w * cell, board_y0 + i * cell), 1)

    grid = s.board.grid
    for y in range(h):
        row = h - 1 - y       # highest y is drawn at the top
        for x in range(w):
            px = board_x0 + x * cell
            py = board_y0 + row * cell
            if not session.finished:
                colour = HIGHLIGHT_COLOURS.get(session.highlight(x, y))
                if colour is not None:
                    pygame.draw.rect(screen, colour, (px + 1, py + 1, cell - 1, cell - 1))
            owner = int(grid[y, x])
            if owner:
                img = cell_font.render(encoder.label(owner), True, BLACK)
                screen.blit(img, img.get_rect(center=(px + cell // 2, py + cell // 2)))

    if not session.finished:
        cx = board_x0 + session.cursor_x * cell
        cy = board_y0 + (h - 1 - session.cursor_y) * cell
        pygame.draw.rect(screen, CURSOR, (cx, cy, cell + 1, cell + 1), 2)

    pygame.display.flip()


def run(state: GameState) -> Optional[Summary]:
    """
    Play `state` in a window until the window is closed; returns the final scores,
    or None when the board does not fit in a window or no window can be opened.
    """
    session = InteractiveSession(state)
    encoder = BoardEncoder()
    cell = cell_size(state.cfg.width, state.cfg.height)
    W, H = window_size(state.cfg.width, state.cfg.height, cell)
    if W > MAX_WINDOW_PX or H > MAX_WINDOW_PX:
        logger.error("a %dx%d board needs a %dx%d window", state.cfg.width, state.cfg.height, W, H)
        return None

    pygame.init()
    try:
        screen = pygame.display.set_mode((W, H))
    except pygame.error as e:
        logger.error("cannot open the game window: %s", e)
        pygame.quit()
        return None
    pygame.display.set_caption("gamma")
    clock = pygame.time.Clock()
    logger.info("interactive mode, window %dx%d, cell %dpx", W, H, cell)

    running = True
    dirty = True
    while running:
        for event in pygame.event.get():
            if event.type != pygame.MOUSEMOTION:
                dirty = True
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if session.finished:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    continue
                action = action_for_key(event)
                if action is not None:
                    session.handle(action)
        # redraw only after events, the highlight pass runs a golden check per cell
        if dirty:
            draw(screen, session, encoder, cell)
            dirty = False
        clock.tick(60)

    pygame.quit()
    return session.summary()
