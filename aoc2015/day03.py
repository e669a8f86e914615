"""Day 3: Perfectly Spherical Houses in a Vacuum - count visited houses."""

import argparse
import enum
from pathlib import Path

DEFAULT_INPUT = "./data/input.txt"


class GridDir(enum.Enum):
    """A single move on the house grid, valued by its (dx, dy) step."""

    NORTH = (0, 1)
    SOUTH = (0, -1)
    WEST = (-1, 0)
    EAST = (1, 0)


_SYMBOLS = {
    "^": GridDir.NORTH,
    "v": GridDir.SOUTH,
    "<": GridDir.WEST,
    ">": GridDir.EAST,
}


def read_directions(path):
    """Read *path* and return its moves, ignoring any other characters."""
    text = Path(path).read_text()
    return [_SYMBOLS[char] for char in text if char in _SYMBOLS]


def count_visited_houses(directions, robot):
    """Count houses receiving at least one present.

    With *robot* set, Robo-Santa takes the even-numbered moves and Santa the
    odd-numbered ones; both start at the same house.
    """
    santa = (0, 0)
    robo = (0, 0)
    visited = {santa}

    for index, direction in enumerate(directions):
        dx, dy = direction.value
        if robot and index % 2 == 0:
            robo = (robo[0] + dx, robo[1] + dy)
            visited.add(robo)
        else:
            santa = (santa[0] + dx, santa[1] + dy)
            visited.add(santa)

    return len(visited)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Day 3: Perfectly Spherical Houses in a Vacuum")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    directions = read_directions(args.path)
    print(f"The answer to part 1 = {count_visited_houses(directions, False)}")
    print(f"The answer to part 2 = {count_visited_houses(directions, True)}")


if __name__ == "__main__":
    main()