# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. It prints the operations it performs, one per line.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb`                                       |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb`                                       |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb`                                     |

An operation on a stack with too few elements does nothing.

## Command line

```
pip install .
push-swap 3 2 1
```

prints

```
ra
sa
```

The same entry point can be started with `python -m pushswap.cli`.

The numbers may be given as separate arguments or as one argument of
space-separated numbers (`push-swap "4 67 3" 87 23`). A list that is already
sorted, or a single number, prints nothing.

`Error` is written to standard error and the exit status is 1 when an
argument is empty, holds anything other than digits, `+`, `-` and spaces,
has a sign that is not directly followed by a digit or not at the start of a
number, when no number is given at all, when two numbers are equal (`0`,
`+0` and `-0` count as equal), or when a value lies outside the 32-bit
signed range. With no arguments the command exits with status 1 and prints
nothing.

## Library

```python
from pushswap.cli import solve
from pushswap.parsing import parse_args, InputError
from pushswap.stacks import Stacks

numbers = parse_args(["3 2", "1"])  # [3, 2, 1]
moves = solve(numbers)              # ["ra", "sa"]

stacks = Stacks(numbers)
for name in moves:
    stacks.apply(name)
print(list(stacks.a))               # [1, 2, 3]
```

- `pushswap.parsing.parse_args` turns command-line arguments into a list of
  integers and raises `InputError` on bad input. The steps are also
  available on their own: `check_allowed`, `split_words`, `to_int`,
  `validate_input`, `check_duplicates`, `check_overflow`.
- `pushswap.stacks.Stacks` holds the stacks `a` and `b` (as deques, top at
  the left) and records every operation run on it in `ops`. `apply(name)`
  runs an operation by name and raises `ValueError` for an unknown one.
- `pushswap.sorting.sort_stacks` sorts a `Stacks` in place. Stacks of 2 to 5
  elements use dedicated short sequences (`sort_two` … `sort_five`). Larger
  stacks (`sort_big`) are pushed to `b` in chunks by rank (chunks of 20 up
  to 150 elements, 35 above), then brought back to `a` largest first.
- `pushswap.cli.solve` returns the list of operations that sort a list of
  numbers; an already sorted list gives an empty list.

## What it does not do

There is no checker: the package does not read a list of operations from
standard input to verify that they sort a given list. `Stacks.apply` can be
used to replay operations in code.