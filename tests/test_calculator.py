import threading

import pytest

from core import (
    Calculator, ConstantTable, EvaluationError, ExpressionSyntaxError, StoredConstant,
    calculate, evaluate, parse_export
)
from utils.formatting import format_rpn


@pytest.fixture
def constants():
    return ConstantTable()


@pytest.mark.parametrize("expression, expected", [
    ("3 + 5 * 2", 13.0),
    ("3 + 4 * (2 - 5)", -9.0),
    ("2^3^2", 512.0),
    ("-5 + 3", -2.0),
    ("3 - -5", 8.0),
    ("3--5", 8.0),
    ("3 - - 5", 8.0),
    ("10 / 4", 2.5),
    ("(1 + 2) * (3 + 4)", 21.0),
    ("2 ^ -1", 0.5),
    ("-(2 + 3) * 2", -10.0),
    ("2 * -(1 + 1)", -4.0),
    ("2 ^ -(1 + 1)", 0.25),
    ("-2 ^ 2", 4.0),
    ("  7  ", 7.0),
])
def test_arithmetic(constants, expression, expected):
    assert evaluate(expression, constants) == pytest.approx(expected)


@pytest.mark.parametrize("expression, expected", [
    ("sin(30)", 0.5),
    ("cos(30)", 0.8660254037844387),
    ("tg(45)", 1.0),
    ("ctg(45)", 1.0),
    ("sin(45) ^ 2", 0.5),
    ("-sin(30)", -0.5),
    ("cos(sin(30) * 120)", 0.5),
])
def test_trigonometry_in_degrees(constants, expression, expected):
    assert evaluate(expression, constants) == pytest.approx(expected, abs=1e-9)


def test_export_and_overwrite(constants):
    assert evaluate("export pi = 3.14159", constants) == StoredConstant("pi", 3.14159)
    assert evaluate("2 * pi", constants) == pytest.approx(6.28318)

    evaluate("export pi = 3.0", constants)
    assert evaluate("2*pi", constants) == 6.0
    assert len(constants) == 1


def test_export_evaluates_right_hand_side(constants):
    evaluate("export two = 1 + 1", constants)
    stored = evaluate("export four = two ^ 2", constants)
    assert stored.name == "four"
    assert stored.value == 4.0
    assert constants["four"] == 4.0


def test_constants_are_case_sensitive(constants):
    evaluate("export PI = 3.1415", constants)
    with pytest.raises(ExpressionSyntaxError, match="'pi'"):
        evaluate("pi", constants)


def test_table_starts_empty(constants):
    with pytest.raises(ExpressionSyntaxError, match="pi"):
        evaluate("2 * pi", constants)


@pytest.mark.parametrize("line", [
    "export sin = 3", "export export = 1", "export 2x = 3", "export = 3", "export a b = 3",
])
def test_export_rejects_invalid_names(constants, line):
    with pytest.raises(ExpressionSyntaxError):
        evaluate(line, constants)
    assert len(constants) == 0


def test_export_without_assignment(constants):
    with pytest.raises(ExpressionSyntaxError, match="export NAME = EXPRESSION"):
        evaluate("export x", constants)


def test_failed_export_stores_nothing(constants):
    with pytest.raises(EvaluationError):
        evaluate("export x = 1 / 0", constants)
    assert "x" not in constants


def test_parse_export():
    assert parse_export("export  x =  1 + 2 ") == ("x", "1 + 2")
    assert parse_export("exporter + 1") is None
    assert parse_export("3 + 4") is None


@pytest.mark.parametrize("expression", ["(3 + 5", "3 + 5)", "2 * unknownVar", "--5", "", "   "])
def test_syntax_errors(constants, expression):
    with pytest.raises(ExpressionSyntaxError):
        evaluate(expression, constants)


@pytest.mark.parametrize("expression", ["5 / 0", "ctg(0)", "1 / (2 - 2)", "tg(90)"])
def test_evaluation_errors(constants, expression):
    with pytest.raises(EvaluationError):
        evaluate(expression, constants)


def test_idempotent(constants):
    evaluate("export k = 1.5", constants)
    first = evaluate("k * sin(30) + 2 ^ 0.5", constants)
    second = evaluate("k * sin(30) + 2 ^ 0.5", constants)
    assert first == second


def test_calculate_without_constants():
    assert calculate("1 + 1") == 2.0


def test_calculator_session():
    calc = Calculator()
    calc.evaluate("export r = 2")
    assert calc.evaluate("r * r") == 4.0
    assert format_rpn(calc.to_rpn("r ^ 3 ^ 2")) == "2 3 2 ^ ^"
    assert format_rpn(calc.to_rpn("export y = 1 + r")) == "1 2 +"


def test_sessions_do_not_share_constants():
    a, b = Calculator(), Calculator()
    a.evaluate("export x = 1")
    with pytest.raises(ExpressionSyntaxError):
        b.evaluate("x")


def test_constant_table_concurrent_exports():
    table = ConstantTable()

    def worker(i):
        for j in range(50):
            evaluate(f"export v{i} = {j}", table)
            evaluate(f"v{i} + 1", table)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert dict(table) == {f"v{i}": 49.0 for i in range(4)}
