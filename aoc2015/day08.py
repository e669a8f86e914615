"""Day 8: Matchsticks - compare code, in-memory and encoded string lengths."""

import argparse
import re

DEFAULT_INPUT = "./data/input.txt"

_HEX_ESCAPE = re.compile(r"\\x[0-9,a-f][0-9,a-f]")


def str_len(value):
    """Number of characters held in memory by the string literal *value*."""
    unescaped = value.replace('\\"', "B").replace("\\\\", "C")
    unescaped = _HEX_ESCAPE.sub("A", unescaped)
    return len(unescaped) - 2


def raw_str_len(value):
    """Number of characters of code in the string literal *value*."""
    return len(value)


def encoded_str_len(value):
    """Length of *value* once encoded again as a quoted, escaped literal."""
    return raw_str_len(value) + 2 + value.count('"') + value.count("\\")


def parse_data(path):
    """Return ``(code - memory, encoded - code)`` totals over the lines of *path*."""
    memory_total = 0
    code_total = 0
    encoded_total = 0
    with open(path) as handle:
        for line in handle:
            literal = line.rstrip("\n")
            memory_total += str_len(literal)
            code_total += raw_str_len(literal)
            encoded_total += encoded_str_len(literal)
    return code_total - memory_total, encoded_total - code_total


def main(argv=None):
    parser = argparse.ArgumentParser(description="Day 8: Matchsticks")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    part1, part2 = parse_data(args.path)
    print(f"Part 1 = {part1}\nPart 2 = {part2}")


if __name__ == "__main__":
    main()