"""
Type conversion helpers (exercises 13 to 16 and 25).
"""

from decimal import Decimal
from typing import Optional, Tuple

import numpy as np


def to_single_precision(value: Decimal) -> np.float32:
    """Narrow a Decimal to a 32-bit float (1.23456789 -> 1.2345679)."""
    return np.float32(float(value))


def concat_as_text(first: int, second: int) -> str:
    return str(first) + str(second)


def parse_and_add(first: str, second: str) -> int:
    return int(first) + int(second)


def convert_and_multiply(first: str, second: str) -> int:
    return int(first) * int(second)


def try_parse_int(text: Optional[str]) -> Tuple[bool, int]:
    """Return (True, value) when `text` is an integer literal, (False, 0) otherwise."""
    if text is None:
        return False, 0
    try:
        return True, int(text.strip())
    except ValueError:
        return False, 0
