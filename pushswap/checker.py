"""Replaying a list of moves and telling whether they sort stack ``a``."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

from .parsing import ParseError, parse_arguments
from .stacks import Board

ERROR_MESSAGE = "Error\n"

# Every prefix is tried in turn, so one line may set off more than one move:
# a line starting with "rra" matches both "rr" and "rra".
_MOVES: tuple[tuple[str, Callable[[Board], None]], ...] = (
    ("ra", lambda board: board.rotate(board.a, announce=False)),
    ("rb", lambda board: board.rotate(board.b, announce=False)),
    ("rr", lambda board: board.rotate_both()),
    ("rra", lambda board: board.reverse_rotate(board.a, announce=False)),
    ("rrb", lambda board: board.reverse_rotate(board.b, announce=False)),
    ("rrr", lambda board: board.reverse_rotate_both()),
    ("pa", lambda board: board.push(board.b, board.a)),
    ("pb", lambda board: board.push(board.a, board.b)),
    ("sa", lambda board: board.swap(board.a)),
    ("sb", lambda board: board.swap(board.b)),
)


def apply_move(board: Board, line: str) -> None:
    """Carry out every move whose name ``line`` starts with.

    Lines that start with no known move leave the board as it is.
    """
    for prefix, action in _MOVES:
        if line.startswith(prefix):
            action(board)


def main(argv: Sequence[str] | None = None) -> int:
    """Read moves from standard input and print ``OK`` or ``KO``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except ParseError:
        sys.stdout.write(ERROR_MESSAGE)
        return 0
    board = Board(values, sys.stdout)
    if board.a.is_sorted():
        return 0
    for line in sys.stdin:
        apply_move(board, line)
    sys.stdout.write("OK\n" if board.a.is_sorted() else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())