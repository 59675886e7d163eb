# pushswap

Two stacks, `a` and `b`, and eleven instructions to move numbers between them.
Given a list of integers on stack `a`, `push-swap` prints a list of
instructions that leaves `a` sorted in ascending order (smallest on top) and
`b` empty. `pushswap-checker` reads such a list and says whether it works.

## Instructions

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up: the top element goes to the end |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down: the last element goes on top  |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

An instruction on a stack with too few elements leaves that stack unchanged.

## Installing

```
pip install .
```

## Sorting

Pass the numbers as separate arguments, or as one space-separated string:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

One instruction is printed per line. Nothing is printed for input that is
already sorted, or when no arguments are given.

By default the strategy is chosen from the input: two to five numbers use a
small dedicated routine; otherwise the disorder (the share of out-of-order
pairs, in percent, truncated to a whole number) decides: below 20 a selection
sort, below 50 a chunk sort, and a radix sort from 50 on. A strategy can be
forced with a leading flag, followed by the numbers as separate arguments:

```
push-swap --simple 5 1 4 2 3 9
push-swap --medium 5 1 4 2 3 9
push-swap --complex 5 1 4 2 3 9
```

Any other argument starting with `--` in first place is taken as a flag and
falls back to the adaptive choice.

Each number is read as optional white space, an optional sign and a run of
digits; anything after the digits is ignored, and an argument with no digits
reads as 0. A value outside the 32-bit signed range, or a duplicate, makes
`push-swap` print `overflow` or `duplicate` and then `Error` on standard error
and exit with status 1.

## Checking

The checker takes the starting numbers as arguments and reads instructions
from standard input, one per line:

```
push-swap 3 2 1 | pushswap-checker 3 2 1
```

It prints `OK` when `a` ends sorted and `b` empty, and `KO` otherwise. An
unknown instruction (an empty line included) makes it write `Error` on
standard error and exit with status 1. Lines longer than 127 characters are
read in pieces of at most 127. The checker does not reject duplicates; values
outside the 32-bit range wrap around. With no arguments it prints nothing.

## Using it from Python

```python
from pushswap.stacks import Stacks, disorder_metric
from pushswap.algorithms import sort_adaptive
from pushswap.parsing import format_operations
from pushswap.checker import run_checker

values = [5, 1, 4, 2, 3, 9]
stacks = Stacks(values, [])
sort_adaptive(stacks)
print(format_operations(stacks.ops), end="")
print(stacks.is_solved())
print(run_checker(values, stacks.ops))
print(disorder_metric(values))
```

- `pushswap.stacks`: `Stacks` with one method per instruction, `apply(name)`
  (raises `InvalidInstruction` for an unknown name), `is_solved()` and the
  `ops` log; helpers `is_sorted`, `find_min_index`, `find_max_index`, `ranks`
  and `disorder_metric`.
- `pushswap.algorithms`: `sort_two`, `sort_three`, `sort_five`,
  `sort_simple`, `sort_medium`, `sort_complex`, `sort_adaptive`, and
  `sort_with_flag(stacks, flag)`, which returns the operations it added.
- `pushswap.parsing`: `parse_long`, `split_words`, `validate_arguments`,
  `parse_arguments` (these raise `InputError`, whose `reason` is `overflow` or
  `duplicate`) and `format_operations`.
- `pushswap.checker`: `read_instructions(stream)` and
  `run_checker(values, lines)`.
- `pushswap.cli`: `solve(args)` returns the operations `push-swap` would print.

## What it does not do

There is no benchmark mode: neither command reports operation counts, the
chosen strategy or the disorder figure. `disorder_metric` and `len(stacks.ops)`
give these from Python.