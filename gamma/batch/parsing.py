# ──────────────────────────────────────────────────────────────────────────────
# File: gamma/batch/parsing.py
# Line level input rules shared by the game setup line and batch commands:
#   - lines are numbered from 1, every line counts
#   - an empty line or a line starting with '#' is skipped silently
#   - a line starting with whitespace, holding a NUL, or missing its final
#     newline is an error; so is any line that does not parse
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional
import re

from ..core.types import UINT32_MAX

# C isspace() set, minus the newline that ends the line
_WHITESPACE = " \t\n\v\f\r"
_SPLIT = re.compile(r"[ \t\n\v\f\r]+")
_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class InputLine:
    number: int
    text: str          # without the trailing newline
    terminated: bool   # False only for a last line cut off by EOF


class CommandType(Enum):
    MOVE = "m"
    GOLDEN = "g"
    BUSY = "b"
    FREE = "f"
    POSSIBLE = "q"
    BOARD = "p"


# number of arguments after the command letter
_ARITY = {
    CommandType.MOVE: 3,
    CommandType.GOLDEN: 3,
    CommandType.BUSY: 1,
    CommandType.FREE: 1,
    CommandType.POSSIBLE: 1,
    CommandType.BOARD: 0,
}


@dataclass(frozen=True)
class Command:
    type: CommandType
    player: int = 0
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class GameSetup:
    mode: str          # "B" batch, "I" interactive
    width: int
    height: int
    players: int
    areas: int


def numbered_lines(stream: Iterable[str]) -> Iterator[InputLine]:
    for i, raw in enumerate(stream, start=1):
        if raw.endswith("\n"):
            yield InputLine(i, raw[:-1], True)
        else:
            yield InputLine(i, raw, False)


def is_ignored(line: InputLine) -> bool:
    return line.terminated and (line.text == "" or line.text.startswith("#"))


def tokenize(line: InputLine) -> Optional[List[str]]:
    """Tokens of a non-ignored line, or None if the line is malformed as a whole."""
    text = line.text
    if not line.terminated or not text or "\0" in text:
        return None
    if text[0] in _WHITESPACE:
        return None
    return [t for t in _SPLIT.split(text) if t]


def parse_number(token: str) -> Optional[int]:
    """Non-negative decimal (leading zeros allowed) fitting in 32 bits."""
    if not _DIGITS.fullmatch(token):
        return None
    value = int(token)
    if value > UINT32_MAX:
        return None
    return value


def parse_setup(line: InputLine) -> Optional[GameSetup]:
    tokens = tokenize(line)
    if tokens is None or len(tokens) != 5 or tokens[0] not in ("B", "I"):
        return None
    nums = [parse_number(t) for t in tokens[1:]]
    if any(n is None for n in nums):
        return None
    return GameSetup(tokens[0], *nums)


def parse_command(line: InputLine) -> Optional[Command]:
    tokens = tokenize(line)
    if not tokens:
        return None
    try:
        kind = CommandType(tokens[0])
    except ValueError:
        return None
    args = tokens[1:]
    if len(args) != _ARITY[kind]:
        return None
    nums = [parse_number(t) for t in args]
    if any(n is None for n in nums):
        return None
    return Command(kind, *nums)
