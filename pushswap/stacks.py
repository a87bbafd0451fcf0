"""The two stacks of the puzzle and the moves that act on them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Iterator
from itertools import pairwise
from typing import TextIO


class Stack:
    """A named stack of integers whose top is its first element."""

    def __init__(self, letter: str, values: Iterable[int] = ()) -> None:
        self.letter = letter
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.letter!r}, {list(self._items)!r})"

    def top(self) -> int:
        """Return the value on top of the stack."""
        self._require(1)
        return self._items[0]

    def is_sorted(self) -> bool:
        """Tell whether the values rise from the top down."""
        return all(upper <= lower for upper, lower in pairwise(self._items))

    def _require(self, count: int) -> None:
        if len(self._items) < count:
            raise IndexError(
                f"stack {self.letter} holds {len(self._items)} value(s), "
                f"at least {count} needed"
            )

    def _swap_top(self) -> None:
        self._require(2)
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.extendleft((first, second))

    def _pop_top(self) -> int:
        self._require(1)
        return self._items.popleft()

    def _push_top(self, value: int) -> None:
        self._items.appendleft(value)

    def _rotate_up(self) -> None:
        self._require(1)
        self._items.rotate(-1)

    def _rotate_down(self) -> None:
        self._require(1)
        self._items.rotate(1)


class Board:
    """Stacks ``a`` and ``b``; every move is written to ``out`` as it is made."""

    def __init__(self, values: Iterable[int], out: TextIO | None = None) -> None:
        self.a = Stack("a", values)
        self.b = Stack("b")
        self.out = out if out is not None else sys.stdout

    def _announce(self, move: str) -> None:
        self.out.write(move + "\n")

    def swap(self, stack: Stack) -> None:
        """Exchange the two top values of ``stack``."""
        stack._swap_top()
        self._announce(f"s{stack.letter}")

    def push(self, source: Stack, target: Stack) -> None:
        """Move the top value of ``source`` onto ``target``."""
        target._push_top(source._pop_top())
        self._announce(f"p{target.letter}")

    def rotate(self, stack: Stack, announce: bool = True) -> None:
        """Move the top value of ``stack`` to its bottom."""
        stack._rotate_up()
        if announce:
            self._announce(f"r{stack.letter}")

    def reverse_rotate(self, stack: Stack, announce: bool = True) -> None:
        """Move the bottom value of ``stack`` to its top."""
        stack._rotate_down()
        if announce:
            self._announce(f"rr{stack.letter}")

    def rotate_both(self) -> None:
        """Rotate both stacks as a single move."""
        self.rotate(self.a, announce=False)
        self.rotate(self.b, announce=False)
        self._announce("rr")

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks as a single move."""
        self.reverse_rotate(self.a, announce=False)
        self.reverse_rotate(self.b, announce=False)
        self._announce("rrr")