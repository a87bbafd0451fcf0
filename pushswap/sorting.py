"""Choosing and printing the moves that sort stack ``a``."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import islice

from .cost import calculate_cost, cheapest, closest, index_of
from .parsing import ParseError, parse_arguments, sorted_values
from .stacks import Board, Stack

ERROR_MESSAGE = "Error\n"


@dataclass(frozen=True)
class Pivots:
    """Quartile values used to split the input between the two stacks."""

    first: int
    median: int
    last: int


def pivots(sorted_values: Sequence[int]) -> Pivots:
    """Return the pivots of an ascending sequence of values."""
    count = len(sorted_values)
    if not count:
        raise ValueError("no values to take pivots from")
    quarter = (count - 1) // 4
    return Pivots(
        first=sorted_values[quarter],
        median=sorted_values[(count - 1) // 2],
        last=sorted_values[quarter * 3],
    )


def _rotate_by(board: Board, stack: Stack, count: int, sign: int) -> None:
    for _ in range(count):
        if sign < 0:
            board.reverse_rotate(stack)
        else:
            board.rotate(stack)


def small_sort(board: Board, stack: Stack) -> None:
    """Order the top three values of ``stack`` with at most two moves.

    The order (2, 3, 1) is already a rotation of sorted order and is left
    as it is.
    """
    if stack.is_sorted():
        return
    if len(stack) == 2:
        board.swap(stack)
        return
    first, second, third = islice(stack, 3)
    if first < second and second > third and first < third:
        board.swap(stack)
        board.rotate(stack)
    elif first > second and second < third and first < third:
        board.swap(stack)
    elif first > second and second < third and first > third:
        board.rotate(stack)
    elif first > second and second > third:
        board.swap(stack)
        board.reverse_rotate(stack)


def put_smallest_on_top(board: Board, stack: Stack) -> None:
    """Rotate ``stack`` the short way until its smallest value is on top."""
    if not len(stack):
        return
    sign = calculate_cost(index_of(stack, min(stack)), len(stack))
    _rotate_by(board, stack, abs(sign), sign)


def _bring_into_place(board: Board, source: Stack, target: Stack, value: int) -> None:
    """Rotate so ``value`` tops ``source`` and its slot in ``target`` is on top."""
    source_sign = calculate_cost(index_of(source, value), len(source))
    neighbour = closest(target, value)
    target_sign = calculate_cost(index_of(target, neighbour), len(target))
    if value > neighbour:
        target_sign += 1
    source_count = abs(source_sign)
    target_count = abs(target_sign)
    same_direction = (source_sign < 0 and target_sign < 0) or (
        source_sign > 0 and target_sign > 0
    )
    while same_direction and source_count and target_count:
        if target_sign < 0:
            board.reverse_rotate_both()
        else:
            board.rotate_both()
        source_count -= 1
        target_count -= 1
    _rotate_by(board, source, source_count, source_sign)
    _rotate_by(board, target, target_count, target_sign)


def _push_back(board: Board) -> None:
    while len(board.b):
        value = cheapest(board.b, board.a)
        if value is None:
            return
        _bring_into_place(board, board.b, board.a, value)
        board.push(board.b, board.a)


def sort_board(board: Board, pivots: Pivots) -> None:
    """Sort stack ``a`` of ``board``, leaving ``b`` empty."""
    a, b = board.a, board.b
    limit = len(a) // 2 - 1
    pushed = 0
    while pushed < limit:
        if a.top() > pivots.median:
            pushed += 1
            board.push(a, b)
            if b.top() <= pivots.last:
                board.rotate(b)
            continue
        board.reverse_rotate(a)
    while len(a) > 3:
        board.push(a, b)
        if b.top() < pivots.first:
            board.rotate(b)
    small_sort(board, a)
    _push_back(board)
    put_smallest_on_top(board, a)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves that sort the numbers given as arguments."""
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
    if len(args) == 3:
        small_sort(board, board.a)
    else:
        sort_board(board, pivots(sorted_values(args)))
    return 0


if __name__ == "__main__":
    sys.exit(main())