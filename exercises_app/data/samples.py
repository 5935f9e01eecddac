# exercises_app/data/samples.py
"""
Hardcoded inputs of the array, string and conversion exercises.

Tuples rather than lists: the routines copy what they mutate.
"""

from decimal import Decimal
from typing import Tuple

MATRIX_3X4: Tuple[Tuple[int, ...], ...] = (
    (1, 2, 3, 4),
    (5, 6, 7, 8),
    (9, 10, 11, 12),
)

ORDER_STREAM = "B123,C234,A345,C15,B177,G3003,C235,B179"
ORDER_ID_LENGTH = 4

UNSORTED_NUMBERS = (5, 2, 8, 1, 9)

SENTENCE = "The quick brown fox jumps over the lazy dog"

CHARACTERS = (
    "Bugs Bunny",
    "Willie Coyote",
    "Daffy Duck",
    "Yosemite Sam",
    "Elmer Fudd",
)
PHRASE = "C# is powerful and flexible"

RESIZE_NUMBERS = (10, 20, 30)
RESIZE_INVENTORY = ("Sword", "Shield", "Potion")

FRUITS = ("Apple", "Banana", "Cherry")

CLEAR_NUMBERS = (10, 20, 30, 40, 50)

SCORES = (98.5, 76.2, 89.0, 99.9, 50.1)

DECIMAL_VALUE = Decimal("1.23456789")

INT_PAIR = (5, 7)
STRING_PAIR = ("5", "7")

EXAM_SCORES = (88, 92, 79, 93, 84)
DOUBLE_INPUT = (2, 4, 6, 8)

SAMPLE_PASSWORD = "MyPass123!"
