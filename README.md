# aoc2015

This package solves days 1 to 10 of the 2015 Advent of Code. Each day is its own module, from `aoc2015.day01` to `aoc2015.day10`. Each module provides that day's parsing and solving functions. It also provides a `main` entry point that prints the answers to both parts of the puzzle.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Each day is installed as its own command. Most of the commands take the path of a puzzle input file. If you leave the path out, the command reads `./data/input.txt`.

```
aoc2015-day01 path/to/input.txt
aoc2015-day02 path/to/input.txt
aoc2015-day03 path/to/input.txt
aoc2015-day05 path/to/input.txt
aoc2015-day06 path/to/input.txt
aoc2015-day07 path/to/input.txt
aoc2015-day08 path/to/input.txt
aoc2015-day09 path/to/input.txt
```

Days 4 and 10 do not read a file. Their puzzle input is a short string that you give on the command line.

- Day 4 requires the secret key.
- Day 10 takes an optional starting sequence. Its default is `1113122113`.

```
aoc2015-day04 iwrupvqb
aoc2015-day10 1113122113
```

## Library use

```python
from aoc2015.day01 import find_final_floor
from aoc2015.day02 import calc_ribb_and_wrap
from aoc2015.day03 import GridDir, count_visited_houses
from aoc2015.day04 import valid_md5_hash, find_valid_hash
from aoc2015.day05 import is_nice, is_nice2
from aoc2015.day10 import look_and_say

find_final_floor("()())", True)                             # 5
calc_ribb_and_wrap((2, 3, 4))                               # (34, 58): ribbon, paper
count_visited_houses([GridDir.NORTH, GridDir.SOUTH], True)  # 3
valid_md5_hash("abcdef", 609043, 5)                         # True
is_nice("ugknbfddgicrmopn")                                 # True
is_nice2("qjhvhtzxzqqjkmpb")                                # True
look_and_say("1211")                                        # "111221"
```

The other days work the same way:

| Module | Names |
| --- | --- |
| `aoc2015.day06` | `Command`, `Instruct`, `read_instrucs`, `cnt_on_lights`, `sum_nord_lights` |
| `aoc2015.day07` | `Operation`, `Instruction`, `parse_wire_id`, `read_booklet`, `final_signals`, `resolve_value` |
| `aoc2015.day08` | `parse_data`, `str_len`, `raw_str_len`, `encoded_str_len` |
| `aoc2015.day09` | `read_dist_data`, `find_minmax_path` |

Notes on day 7:

- A signal is either a wire name (`str`) or a 16-bit number (`int`).
- Binary gates store their inputs with the right operand first.
- Passing a value other than `None` as `b_val` to `read_booklet` overrides the input of wire `b`.

## Errors

Invalid input raises `ValueError`. For example:

- an unknown direction character (day 1)
- a light instruction with the wrong number of coordinates, or a rectangle that falls outside the 1000x1000 grid (day 6)
- a circuit in which some wire never receives a signal (day 7)
- a distance table with no route that visits every location (day 9)
- an empty string passed to `look_and_say` (day 10)

## Limits

The package covers days 1 to 10 only. It does not download puzzle inputs. You supply each input file yourself.