import pytest

from aoc2015.day07 import (
    Instruction,
    Operation,
    final_signals,
    main,
    parse_wire_id,
    read_booklet,
    resolve_value,
)

EXAMPLE_01 = """123 -> x
456 -> y
x AND y -> d
x OR y -> e
x LSHIFT 2 -> f
y RSHIFT 2 -> g
NOT x -> h
NOT y -> i
"""


@pytest.fixture
def example_01(tmp_path):
    path = tmp_path / "example_01.txt"
    path.write_text(EXAMPLE_01)
    return path


def test_read_booklet_example_01(example_01):
    assert read_booklet(example_01, None) == [
        Instruction("x", Operation.ASSIGN, (123,)),
        Instruction("y", Operation.ASSIGN, (456,)),
        Instruction("d", Operation.AND, ("y", "x")),
        Instruction("e", Operation.OR, ("y", "x")),
        Instruction("f", Operation.LSHIFT, (2, "x")),
        Instruction("g", Operation.RSHIFT, (2, "y")),
        Instruction("h", Operation.NOT, ("x",)),
        Instruction("i", Operation.NOT, ("y",)),
    ]


def test_final_signals_example_01(example_01):
    assert final_signals(read_booklet(example_01, None)) == {
        "y": 456,
        "d": 72,
        "i": 65079,
        "x": 123,
        "h": 65412,
        "f": 492,
        "g": 114,
        "e": 507,
    }


def test_final_signals_out_of_order(tmp_path):
    path = tmp_path / "booklet.txt"
    path.write_text("b -> a\nc AND 255 -> b\n7 -> c\n")
    assert final_signals(read_booklet(path, None)) == {"c": 7, "b": 7, "a": 7}


def test_b_override(tmp_path):
    path = tmp_path / "booklet.txt"
    path.write_text("b -> a\n1 -> b\n")
    instructions = read_booklet(path, 42)
    assert instructions[1] == Instruction("b", Operation.ASSIGN, (42,))
    assert resolve_value("a", final_signals(instructions)) == 42


def test_lshift_truncates_to_16_bits(tmp_path):
    path = tmp_path / "booklet.txt"
    path.write_text("65535 -> x\nx LSHIFT 4 -> y\n")
    assert final_signals(read_booklet(path, None))["y"] == 0xFFF0


@pytest.mark.parametrize(
    "raw, expected",
    [("123", 123), ("0", 0), ("65535", 65535), ("ab", "ab"), ("x", "x")],
)
def test_parse_wire_id(raw, expected):
    assert parse_wire_id(raw) == expected


def test_parse_wire_id_out_of_range():
    with pytest.raises(ValueError):
        parse_wire_id("65536")


def test_resolve_value():
    assert resolve_value(5, {}) == 5
    assert resolve_value("a", {"a": 9}) == 9


def test_resolve_value_missing_wire():
    with pytest.raises(KeyError):
        resolve_value("a", {})


def test_unresolvable_circuit_raises():
    with pytest.raises(ValueError):
        final_signals([Instruction("a", Operation.ASSIGN, ("b",))])


def test_numeric_output_raises():
    with pytest.raises(ValueError):
        final_signals([Instruction(3, Operation.ASSIGN, (1,))])


def test_invalid_line_raises(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("123 x\n")
    with pytest.raises(ValueError):
        read_booklet(path, None)


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("b -> a\n3 -> c\nc LSHIFT 1 -> b\n")
    main([str(path)])
    assert capsys.readouterr().out == "Part 1 = 6\nPart 2 = 6\n"