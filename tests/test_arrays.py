import pytest

from exercises_app.data import samples
from exercises_app.domain.product import Product
from exercises_app.rules.arrays import (
    clear_range,
    index_of,
    join,
    matrix_dims,
    matrix_sum,
    matrix_sum_by_dims,
    resize,
    sort_and_flag,
)
from exercises_app.ui import arrays_view


def test_matrix_sum_of_fixed_matrix_is_78():
    assert matrix_sum(samples.MATRIX_3X4) == 78
    assert matrix_sum_by_dims(samples.MATRIX_3X4) == 78
    assert matrix_dims(samples.MATRIX_3X4) == (3, 4)


def test_sort_and_flag_orders_lexicographically_and_flags_bad_lengths():
    lines = sort_and_flag(samples.ORDER_STREAM, 4)
    tokens = [line.split("\t")[0] for line in lines]

    assert tokens == sorted(samples.ORDER_STREAM.split(","))
    for token, line in zip(tokens, lines):
        if len(token) == 4:
            assert line == token
        else:
            assert line == f"{token}\t- Error"
    assert "C15\t- Error" in lines
    assert "G3003\t- Error" in lines


def test_resize_keeps_prefix_and_defaults_the_tail():
    assert resize([10, 20, 30], 5) == [10, 20, 30, 0, 0]
    assert resize(["Sword", "Shield", "Potion"], 5) == [
        "Sword",
        "Shield",
        "Potion",
        None,
        None,
    ]
    assert resize([1, 2, 3], 2) == [1, 2]


def test_resize_rejects_negative_length():
    with pytest.raises(ValueError):
        resize([1], -1)


def test_clear_range_zeroes_the_middle():
    assert clear_range([10, 20, 30, 40, 50], 1, 3) == [10, 0, 0, 0, 50]
    with pytest.raises(IndexError):
        clear_range([1, 2], 1, 5)


def test_clear_range_resets_non_numeric_items_to_none():
    pen = Product.create(1, "Pen", "1.50")
    assert clear_range(["Sword", "Shield", "Potion"], 0, 2) == [None, None, "Potion"]
    assert clear_range([pen, pen], 1, 1) == [pen, None]
    assert clear_range([1.5, 2.5], 0, 1) == [0.0, 2.5]


def test_empty_matrix_has_no_dims_and_sums_to_zero():
    assert matrix_dims([]) == (0, 0)
    assert matrix_sum_by_dims([]) == 0


def test_index_of_and_join():
    assert index_of([1, 2, 5, 8, 9], 8) == 3
    assert index_of([1, 2], 7) == -1
    assert join([98.5, 89.0, 50.1]) == "98.5, 89, 50.1"
    assert join(["a", None]) == "a, "


def test_array_exercises_output(capsys):
    arrays_view.exercise_1()
    arrays_view.exercise_3()
    arrays_view.exercise_7()
    arrays_view.exercise_8()
    arrays_view.exercise_10()
    arrays_view.exercise_11()
    out = capsys.readouterr().out

    assert "[1] Sum of matrix elements: 78" in out
    assert "[3] Index of 8 after sort: 3" in out
    assert "[3] Reversed array: 9, 8, 5, 2, 1" in out
    assert "[7] Total sum: 78" in out
    assert "[8] Original Length: 3" in out
    assert "[8] Elements: 10, 20, 30, 40, 50" in out
    assert "[10] Inventory: Sword, Shield, Potion, Gold Coin, Map" in out
    assert "[11] After clear: 10, 0, 0, 0, 50" in out


def test_exercise_7_prints_only_the_total(capsys):
    arrays_view.exercise_7()
    assert capsys.readouterr().out == "[7] Total sum: 78\n"


def test_exercise_2_prints_header_then_items(capsys):
    arrays_view.exercise_2()
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "[2] Sorted items (flagging errors):"
    assert lines[1] == "A345"
    assert "C15\t- Error" in lines[1:]


def test_exercise_12_sorts_scores(capsys):
    arrays_view.exercise_12()
    out = capsys.readouterr().out
    assert "[12] After sort: 50.1, 76.2, 89, 98.5, 99.9" in out
