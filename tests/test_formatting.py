import pytest

from core import StoredConstant
from utils.formatting import format_error, format_number, format_outcome


@pytest.mark.parametrize("value, expected", [
    (13.0, "13"),
    (-9.0, "-9"),
    (0.5, "0.5"),
    (6.28318, "6.28318"),
    (1e20, "1e+20"),
    (float("inf"), "inf"),
    (float("-inf"), "-inf"),
    (float("nan"), "NaN"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_outcome():
    assert format_outcome(512.0) == "Result = 512"
    assert format_outcome(StoredConstant("pi", 3.14159)) == "Variable: pi, Value: 3.14159"


def test_format_error():
    assert format_error(ValueError("boom")) == "Error: boom"
