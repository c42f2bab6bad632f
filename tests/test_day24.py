import pytest

from advent2024.day24 import (
    Gate,
    Operation,
    describe_feeding,
    execute,
    load_circuit,
    main,
    parse_circuit,
    run_with_registers,
)

SMALL_EXAMPLE = [
    "x00: 1",
    "x01: 1",
    "x02: 1",
    "y00: 0",
    "y01: 1",
    "y02: 0",
    "",
    "x00 AND y00 -> z00",
    "x01 XOR y01 -> z01",
    "x02 OR y02 -> z02",
]


def test_small_example():
    gates, registers = parse_circuit(SMALL_EXAMPLE)
    assert run_with_registers(gates, registers) == 4


def test_parse_circuit():
    gates, registers = parse_circuit(SMALL_EXAMPLE)
    assert registers == {
        "x00": True,
        "x01": True,
        "x02": True,
        "y00": False,
        "y01": True,
        "y02": False,
    }
    assert gates[0] == Gate("x00", Operation.AND, "y00", "z00")
    assert gates[2].operation is Operation.OR


def test_parse_rejects_unknown_operation():
    with pytest.raises(ValueError, match="unexpected operation"):
        parse_circuit(["x00: 1", "", "x00 NAND y00 -> z00"])


def test_parse_requires_blank_line():
    with pytest.raises(ValueError):
        parse_circuit(["x00: 1", "x00 AND y00 -> z00"])


@pytest.mark.parametrize(
    "operation, left, right, expected",
    [
        (Operation.AND, True, True, True),
        (Operation.AND, True, False, False),
        (Operation.OR, False, True, True),
        (Operation.OR, False, False, False),
        (Operation.XOR, True, True, False),
        (Operation.XOR, True, False, True),
    ],
)
def test_operations(operation, left, right, expected):
    assert operation.apply(left, right) is expected


def test_gates_resolve_out_of_order():
    gates = [
        Gate("a", Operation.XOR, "y00", "z00"),
        Gate("x00", Operation.AND, "x00", "a"),
    ]
    assert run_with_registers(gates, {"x00": True, "y00": False}) == 1


@pytest.mark.parametrize(
    "x, y, expected",
    [(False, False, 0), (True, False, 1), (False, True, 1), (True, True, 2)],
)
def test_half_adder(x, y, expected):
    gates = [
        Gate("x00", Operation.XOR, "y00", "z00"),
        Gate("x00", Operation.AND, "y00", "z01"),
    ]
    assert run_with_registers(gates, {"x00": x, "y00": y}) == expected


def test_execute_does_not_change_input():
    gates, registers = parse_circuit(SMALL_EXAMPLE)
    original = dict(registers)
    values = execute(gates, registers)
    assert registers == original
    assert values["z02"] is True


def test_execute_stops_when_stalled():
    gates = [Gate("x00", Operation.AND, "missing", "z00")]
    values = execute(gates, {"x00": True})
    assert "z00" not in values
    assert run_with_registers(gates, {"x00": True}) == 0


def test_describe_feeding():
    gates = [Gate("x00", Operation.AND, "q", "z00")]
    text = describe_feeding({"x00": True}, gates, "z00", 0)
    assert text.startswith("z00x00 AND q -> z00")
    assert "\nleft in registers x00 with value true" in text
    assert "\nright(\n q Not found\n)" in text


def test_describe_feeding_unknown_wire():
    assert describe_feeding({}, [], "z05", 2) == "  z05  Not found"


def test_load_circuit_and_main(tmp_path, capsys):
    path = tmp_path / "circuit"
    path.write_text("\n".join(SMALL_EXAMPLE) + "\n")
    gates, registers = load_circuit(path)
    assert len(gates) == 3
    assert registers["x00"] is True
    main([str(path)])
    assert capsys.readouterr().out.strip() == "4"