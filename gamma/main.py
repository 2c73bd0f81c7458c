from __future__ import annotations
import argparse
import io
import logging
import sys
from typing import List, Optional

from .batch.parsing import numbered_lines
from .batch.batch_mode import BatchInterpreter


def _open_input(path: Optional[str]):
    # latin-1 keeps every byte; only "\n" ends a line
    if path is None or path == "-":
        return io.TextIOWrapper(sys.stdin.buffer, encoding="latin-1", newline="\n")
    return open(path, "r", encoding="latin-1", newline="\n")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="gamma board game (batch or interactive mode)")
    parser.add_argument('--input', type=str, default=None, help='read commands from this file instead of stdin')
    parser.add_argument('--log-level', type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help='stderr log level')
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr,
                        format="[%(name)s] %(levelname)s: %(message)s")

    stream = _open_input(args.input)
    try:
        lines = numbered_lines(stream)
        interp = BatchInterpreter()
        started = interp.read_game(lines)
        if started is None:
            return 0
        setup, state = started
        sys.stdout.flush()

        if setup.mode == "B":
            interp.run(state, lines)
        else:
            # pygame is only needed for interactive games
            from .ui.pygame_app import run
            summary = run(state)
            if summary is None:
                print("Cannot open a window big enough to start the game.")
                return 0
            if len(summary.winners) == 1:
                print(f"Game over. Player {summary.winners[0]} wins!")
            else:
                print(f"Game over. {len(summary.winners)} players tie for the best score.")
            winners = set(summary.winners)
            for i, score in enumerate(summary.scores, start=1):
                mark = " - winner" if i in winners else ""
                print(f"Player {i}: {score} field{'s' if score != 1 else ''}{mark}")
    finally:
        if args.input is not None and args.input != "-":
            stream.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
