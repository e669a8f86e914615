"""Day 6: Probably a Fire Hazard - switch and dim a grid of lights."""

import argparse
import enum
import re
from dataclasses import dataclass

import numpy as np

DEFAULT_INPUT = "./data/input.txt"
GRID_SIZE = 1000
_BRIGHTNESS_MAX = 2**32 - 1

_NUMBER = re.compile(r"\d+")


class Command(enum.Enum):
    """What an instruction does to its rectangle of lights."""

    TURN_ON = "turn on"
    TURN_OFF = "turn off"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class Instruct:
    """A command applied to the inclusive rectangle between two corners."""

    cmd: Command
    srt_x: int
    srt_y: int
    end_x: int
    end_y: int

    @property
    def region(self):
        """The numpy index selecting this instruction's rectangle."""
        if self.srt_x > self.end_x or self.srt_y > self.end_y:
            raise ValueError(f"Inverted rectangle in {self}")
        if self.end_x >= GRID_SIZE or self.end_y >= GRID_SIZE:
            raise ValueError(f"Rectangle outside the grid in {self}")
        return (
            slice(self.srt_x, self.end_x + 1),
            slice(self.srt_y, self.end_y + 1),
        )


def _parse_line(line):
    for command in Command:
        if command.value in line:
            break
    else:
        raise ValueError(f"Invalid line: {line!r}")

    numbers = [int(number) for number in _NUMBER.findall(line)]
    if len(numbers) != 4:
        raise ValueError(f"Invalid amount of numbers on line: {line!r}")
    return Instruct(command, *numbers)


def read_instrucs(path):
    """Parse every line of *path* into an :class:`Instruct`."""
    with open(path) as handle:
        return [_parse_line(line) for line in handle]


def cnt_on_lights(instrucs, init_state):
    """Count the lights that are on after running *instrucs* as on/off switches."""
    grid = np.full((GRID_SIZE, GRID_SIZE), bool(init_state), dtype=bool)
    for instruct in instrucs:
        region = instruct.region
        if instruct.cmd is Command.TURN_ON:
            grid[region] = True
        elif instruct.cmd is Command.TURN_OFF:
            grid[region] = False
        else:
            grid[region] = ~grid[region]
    return int(np.count_nonzero(grid))


def sum_nord_lights(instrucs, init_state):
    """Total brightness after running *instrucs* as brightness adjustments."""
    grid = np.full((GRID_SIZE, GRID_SIZE), init_state, dtype=np.int64)
    for instruct in instrucs:
        region = instruct.region
        if instruct.cmd is Command.TURN_ON:
            grid[region] = np.minimum(grid[region] + 1, _BRIGHTNESS_MAX)
        elif instruct.cmd is Command.TURN_OFF:
            grid[region] = np.maximum(grid[region] - 1, 0)
        else:
            grid[region] = np.minimum(grid[region] + 2, _BRIGHTNESS_MAX)
    return int(grid.sum())


def main(argv=None):
    parser = argparse.ArgumentParser(description="Day 6: Probably a Fire Hazard")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    instrucs = read_instrucs(args.path)
    print(f"Part 1 = {cnt_on_lights(instrucs, False)}")
    print(f"Part 2 = {sum_nord_lights(instrucs, 0)}")


if __name__ == "__main__":
    main()