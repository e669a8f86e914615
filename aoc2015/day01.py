"""Day 1: Not Quite Lisp - follow parenthesis directions between floors."""

import argparse
from pathlib import Path

DEFAULT_INPUT = "./data/input.txt"


def read_building_directions(path):
    """Return the directions stored in *path*, without surrounding whitespace."""
    return Path(path).read_text().strip()


def find_final_floor(directions, find_basement):
    """Return the floor reached after all directions.

    With *find_basement* set, return instead the 1-based position of the
    first direction that takes Santa to floor -1. If that never happens, the
    final floor is returned.
    """
    floor = 0
    for position, direction in enumerate(directions, start=1):
        if direction == "(":
            floor += 1
        elif direction == ")":
            floor -= 1
        else:
            raise ValueError(f"Unknown direction: {direction!r}")

        if find_basement and floor == -1:
            return position
    return floor


def main(argv=None):
    parser = argparse.ArgumentParser(description="Day 1: Not Quite Lisp")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    directions = read_building_directions(args.path)
    print(f"Part 1 answer = {find_final_floor(directions, False)}")
    print(f"Part 2 answer = {find_final_floor(directions, True)}")


if __name__ == "__main__":
    main()