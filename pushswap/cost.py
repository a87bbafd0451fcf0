"""Move costs used to choose which value to bring across next."""

from __future__ import annotations

from .stacks import Stack


def calculate_cost(index: int, size: int) -> int:
    """Return the signed rotations that bring position ``index`` to the top.

    A positive result counts rotations, a negative one reverse rotations.
    """
    if index >= size // 2:
        return index - size
    return index


def index_of(stack: Stack, value: int) -> int:
    """Return the position of ``value`` in ``stack``, or its length if absent."""
    for position, candidate in enumerate(stack):
        if candidate == value:
            return position
    return len(stack)


def closest(stack: Stack, value: int) -> int:
    """Return the value of ``stack`` nearest to ``value``; the first wins ties."""
    try:
        return min(stack, key=lambda candidate: abs(candidate - value))
    except ValueError:
        raise ValueError(f"stack {stack.letter} is empty") from None


def cheapest(source: Stack, target: Stack) -> int | None:
    """Return the value of ``source`` cheapest to bring next to its match in ``target``.

    Returns ``None`` when ``source`` is empty.
    """
    source_size = len(source)
    target_size = len(target)

    def cost(entry: tuple[int, int]) -> int:
        position, value = entry
        target_position = index_of(target, closest(target, value))
        return abs(calculate_cost(position, source_size)) + abs(
            calculate_cost(target_position, target_size)
        )

    best = min(enumerate(source), key=cost, default=None)
    return None if best is None else best[1]