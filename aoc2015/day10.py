"""Day 10: Elves Look, Elves Say - the look-and-say sequence."""

import argparse
import itertools

DEFAULT_SEED = "1113122113"


def look_and_say(value):
    """Return the look-and-say reading of the non-empty digit string *value*."""
    if not value:
        raise ValueError("look_and_say needs at least one character")
    return "".join(
        f"{sum(1 for _ in run)}{char}" for char, run in itertools.groupby(value)
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Day 10: Elves Look, Elves Say")
    parser.add_argument("seed", nargs="?", default=DEFAULT_SEED)
    args = parser.parse_args(argv)

    sequence = args.seed
    for step in range(50):
        sequence = look_and_say(sequence)
        if step == 39:
            print(f"Part 1 = {len(sequence)}")
    print(f"Part 2 = {len(sequence)}")


if __name__ == "__main__":
    main()