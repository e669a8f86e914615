"""Day 5: Doesn't He Have Intern-Elves For This? - naughty or nice strings."""

import argparse

DEFAULT_INPUT = "./data/input.txt"

VOWELS = frozenset("aeiou")
FORBIDDEN_PAIRS = frozenset({"ab", "cd", "pq", "xy"})


def is_nice(sample):
    """Nice under the first rules: three vowels, a doubled letter, no bad pairs."""
    pairs = [first + second for first, second in zip(sample, sample[1:])]
    if any(pair in FORBIDDEN_PAIRS for pair in pairs):
        return False
    vowel_count = sum(1 for char in sample if char in VOWELS)
    has_double = any(pair[0] == pair[1] for pair in pairs)
    return has_double and vowel_count >= 3


def is_nice2(sample):
    """Nice under the second rules: a repeated non-overlapping pair and an a?a pattern."""
    repeating_pair = any(
        sample[index:index + 2] in sample[index + 2:]
        for index in range(len(sample) - 1)
    )
    alternate_letter = any(first == third for first, third in zip(sample, sample[2:]))
    return repeating_pair and alternate_letter


def count_nice_strings(path, nice_fn):
    """Count the lines of *path* that *nice_fn* accepts."""
    with open(path) as handle:
        return sum(1 for line in handle if nice_fn(line.rstrip("\n")))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Day 5: Doesn't He Have Intern-Elves For This?")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    print(f"Part 1 = {count_nice_strings(args.path, is_nice)}")
    print(f"Part 2 = {count_nice_strings(args.path, is_nice2)}")


if __name__ == "__main__":
    main()