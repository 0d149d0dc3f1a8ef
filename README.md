# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of moves, printing the moves used. A checker replays a list of moves and
reports whether they sort the input, and a small generator produces random
test input.

## Moves

| Move  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

The first number given is the top of stack `a`. Swaps and rotations on a
stack with fewer than two elements, and pushes from an empty stack, do
nothing.

## Install

    pip install .

## Commands

Print the moves that sort the numbers, one per line:

    push-swap 3 2 1 5 4
    push-swap "3 2 1 5 4"

Numbers may be given as separate arguments or as one space-separated
argument. Non-numeric input, values outside the 32-bit signed range and
repeated values print `Error` on standard error. Already sorted input, or no
arguments at all, prints nothing.

Check a sequence of moves read from standard input, one per line:

    push-swap 3 2 1 | push-swap-checker 3 2 1

The checker prints `OK` when the moves leave `a` sorted in ascending order
from the top and `b` empty, `KO` otherwise, and `Error` on standard error for
bad numbers, repeated numbers or an unknown move. Every line, the last one
included, must end with a newline. With no arguments it prints nothing.

Generate distinct random integers in the range -99999 to 99999, separated by
spaces (at most 100000 of them):

    push-swap-randnums 100

## Library use

    from pushswap.cli import solve
    from pushswap.checker import check

    moves = solve([3, 2, 1, 5, 4])
    assert check([3, 2, 1, 5, 4], moves)

`solve` raises `pushswap.parsing.InputError` on repeated values;
`pushswap.parsing.parse_args` turns command-line arguments into integers and
raises the same error for invalid input.

- `pushswap.stack.Stack` holds a stack and performs the moves, appending each
  move's name to a shared log.
- `pushswap.sorting` contains the strategies: `sort_two`, `sort_three`,
  `sort_five` (four or five values) and `sort_big`, which works chunk by
  chunk.
- `pushswap.chunks.get_chunks` divides sorted values into `Chunk` value
  ranges for `sort_big`: 2 chunks below 50 values, 6 below 250, 16 below
  2000 and 100 from there on.
- `pushswap.checker` offers `read_moves`, `apply_move`, `apply_moves` and
  `check`.
- `pushswap.randnums.generate` returns distinct random integers and accepts
  a `random.Random` for reproducible output.

## Tests

    pip install ".[test]"
    pytest