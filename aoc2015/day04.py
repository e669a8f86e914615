"""Day 4: The Ideal Stocking Stuffer - mine MD5 hashes with leading zeroes."""

import argparse
import hashlib
import itertools


def valid_md5_hash(secret_key, answer, num_zeros):
    """Whether the MD5 hex digest of key+answer starts with *num_zeros* zeroes.

    A digest is at most 32 characters long; asking for more zeroes only
    checks the whole digest.
    """
    digest = hashlib.md5(f"{secret_key}{answer}".encode()).hexdigest()
    return all(char == "0" for char in digest[:num_zeros])


def find_valid_hash(secret_key, num_zeros):
    """Return the lowest positive number giving a digest with *num_zeros* zeroes."""
    return next(
        answer
        for answer in itertools.count(1)
        if valid_md5_hash(secret_key, answer, num_zeros)
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Day 4: The Ideal Stocking Stuffer")
    parser.add_argument("key", help="the puzzle input prefix")
    args = parser.parse_args(argv)

    print(f"The answer to part 1 = {find_valid_hash(args.key, 5)}")
    print(f"The answer to part 2 = {find_valid_hash(args.key, 6)}")


if __name__ == "__main__":
    main()