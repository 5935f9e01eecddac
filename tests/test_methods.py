from decimal import Decimal

import pytest

from exercises_app.rules.conversions import (
    concat_as_text,
    convert_and_multiply,
    parse_and_add,
    to_single_precision,
    try_parse_int,
)
from exercises_app.rules.methods import (
    MathUtils,
    calculate_average,
    double_each,
    double_value,
    greet,
    multiply,
    sum_all,
    try_parse_number,
    validate_password,
)
from exercises_app.rules.text import hyphenate, reverse_words
from exercises_app.ui import conversions_view, methods_view, strings_view


@pytest.mark.parametrize(
    "password, expected",
    [
        ("MyPass123!", True),
        ("short1A", False),
        ("alllowercase1", False),
        ("ALLUPPERCASE1", False),
        ("NoDigitsHere", False),
        ("Abcdefg1", True),
        ("Password\u00b2x", False),
    ],
)
def test_validate_password(password, expected):
    assert validate_password(password) is expected


def test_multiply_dispatches_on_argument_type():
    assert multiply.dispatch(int) is not multiply.dispatch(float)
    assert multiply(3, 4) == 12
    assert isinstance(multiply(3, 4), int)
    assert multiply(3.5, 2.0) == 7.0
    assert isinstance(multiply(3.5, 2.0), float)
    assert multiply(3, 2.5) == 7.5
    assert multiply(2.5, 3) == 7.5
    with pytest.raises(TypeError):
        multiply("3", "4")


def test_greet_forms():
    assert greet() == "Hello!"
    assert greet("Eric") == "Hello, Eric!"
    assert greet("Eric", 3) == "Hi Eric! Hi Eric! Hi Eric!"


def test_aggregates():
    assert calculate_average([88, 92, 79, 93, 84]) == pytest.approx(87.2)
    assert calculate_average([]) == 0.0
    assert sum_all(double_each([2, 4, 6, 8])) == 40
    assert double_value(10) == 20
    assert MathUtils.square(5) == 25
    assert MathUtils.cube(3) == 27
    assert MathUtils.is_even(10)


def test_try_parse():
    assert try_parse_number("42") == (True, 42)
    assert try_parse_int("abc") == (False, 0)
    assert try_parse_int(None) == (False, 0)


def test_conversions():
    assert str(to_single_precision(Decimal("1.23456789"))) == "1.2345679"
    assert concat_as_text(5, 7) == "57"
    assert parse_and_add("5", "7") == 12
    assert convert_and_multiply("5", "7") == 35


def test_text_helpers():
    assert reverse_words("C# is powerful and flexible") == "flexible and powerful is C#"
    assert hyphenate("a b c") == "a-b-c"


def test_method_exercises_output(capsys):
    methods_view.exercise_24()
    methods_view.exercise_25()
    methods_view.exercise_26()
    methods_view.exercise_27()
    methods_view.exercise_28()
    out = capsys.readouterr().out

    assert "[24] Calling multiply(3, 4) => 12" in out
    assert "[24] Calling multiply(3.5, 2.0) => 7.0" in out
    assert "[25] After doubling: x = 20" in out
    assert "[25] Successfully parsed: 42" in out
    assert "[26] 'MyPass123!' is a strong password." in out
    assert "[27] Average score: 87.20" in out
    assert "[28] Doubled sum = 40" in out


def test_string_and_conversion_exercises_output(capsys):
    strings_view.exercise_4()
    strings_view.exercise_9()
    conversions_view.exercise_13()
    conversions_view.exercise_14()
    out = capsys.readouterr().out

    assert "[4] Words array length: 9" in out
    assert "[4] Contains 'fox'? True" in out
    assert "[4] New sentence: The quick brown fox jumps over the lazy cat" in out
    assert "[9] Sorted fruits: Apple, Cherry" in out
    assert "[9] We have apples!" in out
    assert "[13] Float  : 1.2345679" in out
    assert "[14] Concatenated: 57" in out
