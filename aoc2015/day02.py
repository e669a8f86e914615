"""Day 2: I Was Told There Would Be No Math - wrapping paper and ribbon."""

import argparse
import re
from pathlib import Path

DEFAULT_INPUT = "./data/input.txt"

_DIMENSIONS = re.compile(r"(\d+)x(\d+)x(\d+)")


def read_instructions(path):
    """Parse every ``LxWxH`` line of *path* into a tuple of three ints.

    Lines without dimensions are skipped.
    """
    boxes = []
    with open(path) as handle:
        for line in handle:
            match = _DIMENSIONS.search(line)
            if match:
                boxes.append(tuple(int(group) for group in match.groups()))
    return boxes


def calc_ribb_and_wrap(box_dims):
    """Return ``(ribbon_length, paper_area)`` needed for one box."""
    length, width, height = box_dims
    bow = length * width * height
    surface = 2 * length * width + 2 * width * height + 2 * height * length

    small_a, small_b, _ = sorted(box_dims)
    ribbon = bow + 2 * small_a + 2 * small_b
    paper = surface + small_a * small_b
    return ribbon, paper


def main(argv=None):
    parser = argparse.ArgumentParser(description="Day 2: I Was Told There Would Be No Math")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    results = [calc_ribb_and_wrap(box) for box in read_instructions(args.path)]
    print(f"Answer to part 1 = {sum(paper for _, paper in results)}")
    print(f"Answer to part 2 = {sum(ribbon for ribbon, _ in results)}")


if __name__ == "__main__":
    main()