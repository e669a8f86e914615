"""Day 7: Some Assembly Required - simulate a circuit of 16-bit wires."""

import argparse
import enum
from dataclasses import dataclass

DEFAULT_INPUT = "./data/input.txt"
_MASK = 0xFFFF


class Operation(enum.Enum):
    """The gate that drives an output wire."""

    ASSIGN = "ASSIGN"
    AND = "AND"
    OR = "OR"
    LSHIFT = "LSHIFT"
    RSHIFT = "RSHIFT"
    NOT = "NOT"


_BINARY = (Operation.AND, Operation.OR, Operation.LSHIFT, Operation.RSHIFT)


@dataclass(frozen=True)
class Instruction:
    """One booklet line: a gate, its inputs and the wire it drives.

    Signals are wire names (``str``) or 16-bit numbers (``int``). Binary gates
    keep their inputs right operand first.
    """

    output: object
    operation: Operation
    inputs: tuple


def parse_wire_id(raw):
    """Return *raw* as a 16-bit number when it is all digits, else as a wire name."""
    if raw.isdigit():
        value = int(raw)
        if value > _MASK:
            raise ValueError(f"Signal out of 16-bit range: {raw}")
        return value
    return raw


def _parse_line(line, b_val):
    parts = line.split()
    if len(parts) < 3 or parts[-2] != "->":
        raise ValueError(f"Invalid booklet line: {line!r}")
    output = parse_wire_id(parts[-1])
    operands = parts[:-2]

    for operation in _BINARY:
        if operation.value in line:
            if len(operands) != 3:
                raise ValueError(f"Invalid booklet line: {line!r}")
            inputs = (parse_wire_id(operands[2]), parse_wire_id(operands[0]))
            break
    else:
        operation = Operation.NOT if "NOT" in line else Operation.ASSIGN
        inputs = (parse_wire_id(operands[-1]),)

    if output == "b" and b_val is not None:
        inputs = (b_val,)
    return Instruction(output, operation, inputs)


def read_booklet(path, b_val):
    """Parse the booklet at *path*; a non-None *b_val* overrides wire b's input."""
    with open(path) as handle:
        return [_parse_line(line, b_val) for line in handle]


def resolve_value(raw, lookup):
    """Value of a signal: the number itself or the wire's entry in *lookup*."""
    if isinstance(raw, int):
        return raw
    return lookup[raw]


def _evaluate(instruction, signals):
    values = [resolve_value(signal, signals) for signal in instruction.inputs]
    operation = instruction.operation
    if operation is Operation.AND:
        return values[0] & values[1]
    if operation is Operation.OR:
        return values[0] | values[1]
    if operation is Operation.LSHIFT:
        return (values[1] << (values[0] % 16)) & _MASK
    if operation is Operation.RSHIFT:
        return values[1] >> (values[0] % 16)
    if operation is Operation.NOT:
        return ~values[0] & _MASK
    return values[0]


def final_signals(instructions):
    """Run every instruction once its inputs are known; return all wire signals."""
    signals = {}
    pending = list(instructions)
    for instruction in pending:
        if not isinstance(instruction.output, str):
            raise ValueError(f"Outputs cannot be numbers: {instruction}")

    while pending:
        waiting = []
        for instruction in pending:
            ready = all(
                isinstance(signal, int) or signal in signals
                for signal in instruction.inputs
            )
            if ready:
                signals[instruction.output] = _evaluate(instruction, signals)
            else:
                waiting.append(instruction)
        if len(waiting) == len(pending):
            raise ValueError("Circuit has wires that never receive a signal")
        pending = waiting

    return signals


def main(argv=None):
    parser = argparse.ArgumentParser(description="Day 7: Some Assembly Required")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    a_signal = resolve_value("a", final_signals(read_booklet(args.path, None)))
    print(f"Part 1 = {a_signal}")
    a_signal_2 = resolve_value("a", final_signals(read_booklet(args.path, a_signal)))
    print(f"Part 2 = {a_signal_2}")


if __name__ == "__main__":
    main()