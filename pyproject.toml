[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2015"
version = "0.1.0"
description = "Solutions to the first ten puzzles of the 2015 Advent of Code"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["advent-of-code", "puzzles", "aoc", "2015"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aoc2015-day01 = "aoc2015.day01:main"
aoc2015-day02 = "aoc2015.day02:main"
aoc2015-day03 = "aoc2015.day03:main"
aoc2015-day04 = "aoc2015.day04:main"
aoc2015-day05 = "aoc2015.day05:main"
aoc2015-day06 = "aoc2015.day06:main"
aoc2015-day07 = "aoc2015.day07:main"
aoc2015-day08 = "aoc2015.day08:main"
aoc2015-day09 = "aoc2015.day09:main"
aoc2015-day10 = "aoc2015.day10:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2015"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
