"""
Array and matrix helpers used by the array exercises.
"""

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np


def matrix_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Sum every element of a rectangular matrix."""
    return int(np.asarray(matrix).sum())


def matrix_dims(matrix: Sequence[Sequence[int]]) -> Tuple[int, int]:
    shape = np.asarray(matrix).shape
    if len(shape) < 2:
        return 0, 0
    rows, cols = shape
    return int(rows), int(cols)


def matrix_sum_by_dims(matrix: Sequence[Sequence[int]]) -> int:
    """Same total as `matrix_sum`, walking the matrix row by row."""
    rows, cols = matrix_dims(matrix)
    total = 0
    for i in range(rows):
        for j in range(cols):
            total += matrix[i][j]
    return total


def sort_and_flag(
    stream: str, expected_length: int, separator: str = ","
) -> List[str]:
    """Split `stream`, sort the tokens (ordinal order) and flag bad lengths.

    Tokens whose length differs from `expected_length` get a
    ``"\\t- Error"`` suffix.
    """
    items = sorted(stream.split(separator))
    return [
        item if len(item) == expected_length else f"{item}\t- Error"
        for item in items
    ]


def index_of(values: Sequence[Any], target: Any) -> int:
    """Position of `target` in `values`, or -1 when absent."""
    try:
        return list(values).index(target)
    except ValueError:
        return -1


def resize(values: Sequence[Any], new_length: int, fill: Optional[Any] = None) -> List[Any]:
    """Return a copy of `values` truncated or padded with `fill` to `new_length`.

    Without an explicit `fill`, numeric sequences are padded with zeros of the
    element type and anything else with None.
    """
    if new_length < 0:
        raise ValueError("new_length must be >= 0")
    if fill is None and values and isinstance(values[0], (int, float)):
        fill = type(values[0])()
    resized = list(values[:new_length])
    resized.extend([fill] * (new_length - len(resized)))
    return resized


def clear_range(values: Sequence[Any], start: int, length: int) -> List[Any]:
    """Reset `length` items from `start`: numbers to zero, anything else to None."""
    if start < 0 or length < 0 or start + length > len(values):
        raise IndexError("range out of bounds")
    cleared = list(values)
    for i in range(start, start + length):
        item = cleared[i]
        cleared[i] = type(item)() if isinstance(item, (int, float)) else None
    return cleared


def join(values: Sequence[Any], separator: str = ", ") -> str:
    """Join items as text; None renders as an empty string."""
    return separator.join("" if v is None else format_number(v) for v in values)


def format_number(value: Any) -> str:
    """Shortest round-trip text of a number (89.0 -> "89"), str() otherwise."""
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)
