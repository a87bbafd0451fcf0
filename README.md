# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a fixed set of
instructions. A second command replays an instruction sequence and reports
whether it leaves stack `a` sorted.

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`  | swap the two top values of `a` / `b` |
| `pa`, `pb`  | push the top of `b` onto `a` / the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b` or both upward (the top goes to the bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b` or both downward (the bottom goes to the top) |

## Installation

```
pip install .
```

## Sorting

Pass the integers as separate arguments. The first argument is the top of
stack `a`. The sorter prints one instruction per line:

```
push-swap 3 1 2
```

Every argument must consist of decimal digits only (no sign, no blanks), be
at most eleven characters long and be no larger than 2147483647, and the
values must all be different. If any argument fails these checks, the
program prints `Error`. An empty argument counts as 2147483647. If the input
is already sorted, nothing is printed.

With exactly three arguments only a short fixed sequence of at most two
instructions is used; the order `2 3 1` is left as it is.

## Checking

The checker takes the same arguments. If they are invalid it prints `Error`;
if they are already sorted it prints nothing and reads no input. Otherwise it
reads instructions from standard input, one per line, applies them and
prints `OK` if stack `a` ends up sorted and `KO` if it does not:

```
push-swap 5 4 3 2 1 | push-swap-checker 5 4 3 2 1
```

Lines are matched by prefix, and every instruction a line starts with is
carried out: a line `rra` performs `rr` and then `rra`. Lines matching no
instruction are ignored. While replaying, the checker echoes the `pa`, `pb`,
`sa`, `sb`, `rr` and `rrr` instructions it performs to standard output
before the final verdict.

## Library use

```python
import sys

from pushswap.stacks import Board
from pushswap.parsing import parse_arguments, sorted_values
from pushswap.sorting import pivots, sort_board

args = ["5", "4", "3", "2", "1"]
board = Board(parse_arguments(args), sys.stdout)
sort_board(board, pivots(sorted_values(args)))
print(list(board.a))
```

`Board` writes each instruction it performs to the stream it is given
(standard output by default); `Board.rotate` and `Board.reverse_rotate` take
`announce=False` to stay silent. `parse_arguments` raises
`pushswap.parsing.ParseError` for invalid input. `pushswap.checker.apply_move`
applies one instruction line to a board, and `pushswap.cost` holds the helpers
the sorter uses to pick its next move.

## Tests

```
pip install .[test]
pytest
```