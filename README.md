# algodrills

A collection of small, classic algorithm exercises. Each lives in its own
module with a plain function to call and a command that demonstrates it.

## Installation

```
pip install algodrills
```

To run the test suite:

```
pip install "algodrills[test]"
pytest
```

## What is inside

| Module                  | Public names                                                      | Command                 |
|-------------------------|-------------------------------------------------------------------|-------------------------|
| `algodrills.linkedlist` | `ListNode`, `from_values`, `add_two_numbers`, `remove_duplicates` | `algodrills-linkedlist` |
| `algodrills.binary`     | `binary_add`                                                      | `algodrills-binary`     |
| `algodrills.stairs`     | `climb_stairs`                                                    | `algodrills-stairs`     |
| `algodrills.search`     | `find_first`                                                      | `algodrills-search`     |
| `algodrills.roman`      | `roman_to_int`                                                    | `algodrills-roman`      |
| `algodrills.sqrt`       | `square_root`                                                     | `algodrills-sqrt`       |
| `algodrills.hanoi`      | `hanoi_moves`                                                     | `algodrills-hanoi`      |

## Using the library

### Linked lists

`ListNode` is a dataclass with `val` and `next`; iterating over a node yields
its value and those of every node after it. `from_values` builds a list from
an iterable and returns `None` for an empty one.

`add_two_numbers` adds two numbers stored least significant digit first and
returns a new list. `remove_duplicates` unlinks, in place, every node whose
value equals the one kept before it, so runs of equal values collapse to one.

```python
from algodrills.linkedlist import from_values, add_two_numbers, remove_duplicates

total = add_two_numbers(from_values([9, 5, 5]), from_values([5, 5]))
print(list(total))            # [4, 1, 6]   (559 + 55 = 614)

deduped = remove_duplicates(from_values([1, 1, 2, 3, 3]))
print(list(deduped))          # [1, 2, 3]
```

### Binary addition

The result is as wide as the longer operand, plus one digit if there is a
final carry. Any character other than `0` or `1` raises `ValueError`.

```python
from algodrills.binary import binary_add

binary_add("1", "11")         # "100"
```

### Climbing stairs

The number of ways to climb `n` stairs taking one or two steps at a time.

```python
from algodrills.stairs import climb_stairs

climb_stairs(5)               # 8
```

### First occurrence of a substring

Returns the index of the first match, or `-1` when there is none.

```python
from algodrills.search import find_first

find_first("11pfhspp", "fh")  # 2
```

### Roman numerals

The numeral is read from the right, treating `IV`, `IX`, `XL`, `XC`, `CD` and
`CM` as subtractive pairs. An unknown symbol raises `ValueError`; the
numeral's form is not otherwise checked.

```python
from algodrills.roman import roman_to_int

roman_to_int("MCDIX")         # 1409
```

### Integer square root

Found by bisection between zero and the number itself; a negative number
raises `ValueError`.

```python
from algodrills.sqrt import square_root

square_root(16)               # 4
```

### Tower of Hanoi

`hanoi_moves(n, source="s", auxiliary="a", destination="d")` returns an
iterator of `(from, to)` pairs that carry `n` disks from the source rod to the
destination rod; there are always `2**n - 1` of them. `n` below 1 raises
`ValueError`.

```python
from algodrills.hanoi import hanoi_moves

list(hanoi_moves(2))          # [('s', 'a'), ('s', 'd'), ('a', 'd')]
```

## Commands

Each module has a command that runs a short demonstration:

```
algodrills-linkedlist              # adds 559 + 55 and deduplicates 1 1 2 3 3
algodrills-binary [A B]            # defaults: 1 and 11
algodrills-stairs [N]
algodrills-search [HAYSTACK NEEDLE]  # defaults: 11pfhspp and fh
algodrills-roman [NUMERAL]         # default: MCDIX
algodrills-sqrt [X]
algodrills-hanoi [N]
```

`algodrills-stairs`, `algodrills-sqrt` and `algodrills-hanoi` ask for the
number on standard input when it is not given. `algodrills-hanoi` prints each
move as `from->to` followed by the total number of moves.