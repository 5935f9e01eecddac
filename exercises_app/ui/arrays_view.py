# exercises_app/ui/arrays_view.py
"""Array and matrix exercises: 1, 2, 3, 7, 8, 10, 11 and 12."""

from exercises_app.data import samples
from exercises_app.rules.arrays import (
    clear_range,
    index_of,
    join,
    matrix_sum,
    matrix_sum_by_dims,
    resize,
    sort_and_flag,
)


def exercise_1():
    """Sum the elements of a 3x4 matrix."""
    total = matrix_sum(samples.MATRIX_3X4)
    print(f"[1] Sum of matrix elements: {total}")


def exercise_2():
    """Split the order stream, sort it and flag the malformed ids."""
    print("[2] Sorted items (flagging errors):")
    for line in sort_and_flag(samples.ORDER_STREAM, samples.ORDER_ID_LENGTH):
        print(line)


def exercise_3():
    numbers = sorted(samples.UNSORTED_NUMBERS)
    print(f"[3] Index of 8 after sort: {index_of(numbers, 8)}")
    numbers.reverse()
    print("[3] Reversed array: " + join(numbers))


def exercise_7():
    total = matrix_sum_by_dims(samples.MATRIX_3X4)
    print(f"[7] Total sum: {total}")


def exercise_8():
    data = list(samples.RESIZE_NUMBERS)
    print(f"[8] Original Length: {len(data)}")
    data = resize(data, 5)
    data[3] = 40
    data[4] = 50
    print(f"[8] New Length: {len(data)}")
    print("[8] Elements: " + join(data))


def exercise_10():
    inventory = list(samples.RESIZE_INVENTORY)
    print(f"[10] Original Length: {len(inventory)}")
    inventory = resize(inventory, 5)
    inventory[3] = "Gold Coin"
    inventory[4] = "Map"
    print(f"[10] New Length: {len(inventory)}")
    print("[10] Inventory: " + join(inventory))


def exercise_11():
    numbers = list(samples.CLEAR_NUMBERS)
    print("[11] Original: " + join(numbers))
    numbers = clear_range(numbers, 1, 3)
    print("[11] After clear: " + join(numbers))


def exercise_12():
    scores = list(samples.SCORES)
    print("[12] Before sort: " + join(scores))
    scores.sort()
    print("[12] After sort: " + join(scores))
