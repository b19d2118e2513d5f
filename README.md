# pushswap

A solver for the push_swap puzzle. It takes a list of distinct integers
as stack `a`, with an empty stack `b` beside it, and prints a sequence
of stack operations. Applied in order, the operations leave `a` sorted
in ascending order, with the smallest value on top.

## Operations

| Move  | Effect                                               |
|-------|------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                     |
| `sb`  | swap the top two elements of `b`                     |
| `ss`  | `sa` and `sb` together                               |
| `pa`  | move the top of `b` onto `a`                         |
| `pb`  | move the top of `a` onto `b`                         |
| `ra`  | rotate `a` up, so the top element becomes the last   |
| `rb`  | rotate `b` up                                        |
| `rr`  | `ra` and `rb` together                               |
| `rra` | rotate `a` down, so the last element becomes the top |
| `rrb` | rotate `b` down                                      |
| `rrr` | `rra` and `rrb` together                             |

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments:

```
pushswap 3 2 1
```

Or pass them as one argument, separated by spaces (quote characters
inside it are ignored):

```
pushswap "4 67 3 87 23"
```

The same command is available as `python -m pushswap.cli`.

Each operation is printed on its own line to standard output.

- With no arguments, or with input that is already sorted, nothing is
  printed and the exit status is 0.
- The input must hold at least two distinct integers, each an optional
  `+` or `-` followed by digits, within the 32-bit signed range.
  Anything else makes the command exit with status 1.
- On such a failure `Error` is written to standard error only when the
  first command-line argument contains the letter `a` or is not itself a
  plain number. Otherwise (for example a duplicate value, an
  out-of-range value, or a single number) the command exits with status
  1 silently.

## Library use

`pushswap.sorting.solve` returns the list of moves instead of printing
them. It raises `ValueError` if the values are not distinct.

```python
from pushswap.sorting import solve

print(solve([3, 2, 1]))   # ['sa', 'rra']
print(solve([1, 2, 3]))   # []
```

`pushswap.stacks.Stacks` holds the two stacks as deques of `Node`
objects (`value` and `index`, the value's rank) in `a` and `b`, with
`values_a` and `values_b` giving the plain values. Each operation is a
method (`sa`, `pb`, `rra`, ...). The optional `emit` callback receives
the name of every move; without it, moves are printed to standard
output.

```python
from pushswap.stacks import Stacks
from pushswap.sorting import sort_large_stack

log = []
stacks = Stacks([5, 1, 4, 2, 3, 9, 0], emit=log.append)
sort_large_stack(stacks)
assert stacks.values_a == [0, 1, 2, 3, 4, 5, 9]
```

Other functions in `pushswap.sorting`: `sort_small_stack`,
`handle_sorting(stacks, count)` (small routine up to six elements, large
routine above), `is_sorted`, `find_position` and `get_sqrt`.

Inputs of up to five numbers are sorted by moving the smallest values
to `b`, sorting the last three, and pushing back. Larger inputs are
pushed to `b` in chunks whose width is derived from the square root of
the input length, then brought back to `a` largest first.

`pushswap.parsing` holds the argument checks used by the command
(`validate_args`, `parse_int`, `split_arguments`, and others); they
raise `InputError` where input cannot form a stack.

## Helper library

`pushswap.libft` contains small standalone helpers:

- `chars`: ASCII classification and case conversion
- `memory`: `bytearray` fill, compare, search and copy
- `strings`: `atoi`, `itoa` and C-style string search and comparison
- `lists`: a singly linked list, `LinkedList`
- `transform`: split, trim, substring, join and bounded copy/concatenate
- `output`: writing characters, numbers and a small `printf`
- `lines`: `LineReader`, reading a stream line by line through a
  fixed-size buffer

## Running the tests

```
pip install .[test]
pytest
```