"""Day 9: All in a Single Night - shortest and longest routes through every place."""

import argparse
import itertools
import re

DEFAULT_INPUT = "./data/input.txt"

_DISTANCE = re.compile(r"([A-Za-z]+) to ([A-Za-z]+) = (\d+)")


def read_dist_data(path):
    """Parse ``A to B = N`` lines into a symmetric mapping of distances.

    The first distance given for a pair is kept.
    """
    distances = {}
    with open(path) as handle:
        for line in handle:
            match = _DISTANCE.search(line)
            if match is None:
                raise ValueError(f"Invalid distance line: {line!r}")
            start, end, dist = match.group(1), match.group(2), int(match.group(3))
            distances.setdefault(start, {}).setdefault(end, dist)
            distances.setdefault(end, {}).setdefault(start, dist)
    return distances


def _route_length(data, route):
    total = 0
    for here, there in zip(route, route[1:]):
        step = data[there].get(here)
        if step is None:
            return None
        total += step
    return total


def find_minmax_path(data):
    """Return ``(shortest, longest)`` over routes visiting every location once."""
    lengths = [
        length
        for route in itertools.permutations(data)
        if (length := _route_length(data, route)) is not None
    ]
    if not lengths:
        raise ValueError("No route visits every location")
    return min(lengths), max(lengths)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Day 9: All in a Single Night")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    shortest, longest = find_minmax_path(read_dist_data(args.path))
    print(f"Part 1 = {shortest}\nPart 2 = {longest}")


if __name__ == "__main__":
    main()