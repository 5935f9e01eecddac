"""
Small functions demonstrating definitions, parameters, overloading and
results passed back through return values (exercises 21 to 30).
"""

from functools import singledispatch
from typing import List, Optional, Sequence, Tuple

from exercises_app.rules.conversions import try_parse_int

MIN_PASSWORD_LENGTH = 8


def greeting_text() -> str:
    return "Hello! Welcome to the methods demo."


def add_numbers(a: int, b: int) -> int:
    return a + b


def build_greeting(name: str, year: int) -> str:
    return f"Hello, {name}! The current year is {year}."


# -------- Overloading: one name, one implementation per argument type --------


@singledispatch
def multiply(a, b):
    raise TypeError(f"multiply() does not support {type(a).__name__}")


@multiply.register
def _multiply_int(a: int, b: int) -> int:
    if isinstance(b, float):
        return _multiply_float(a, b)
    return a * b


@multiply.register
def _multiply_float(a: float, b: float) -> float:
    return float(a * b)


def greet(name: Optional[str] = None, times: Optional[int] = None) -> str:
    """Three greetings behind one signature.

    - no argument: "Hello!"
    - a name: "Hello, <name>!"
    - a name and a count: "Hi <name>!" repeated `times` times
    """
    if name is None:
        return "Hello!"
    if times is None:
        return f"Hello, {name}!"
    return " ".join([f"Hi {name}!"] * times)


# -------- Results handed back instead of mutated arguments --------


def double_value(number: int) -> int:
    """Python ints are immutable: the doubled value is returned to the caller."""
    return number * 2


def try_parse_number(text: str) -> Tuple[bool, int]:
    return try_parse_int(text)


# -------- Validation / aggregates --------


def validate_password(password: str) -> bool:
    """At least 8 characters with an uppercase, a lowercase and a digit."""
    return (
        len(password) >= MIN_PASSWORD_LENGTH
        and any(c.isupper() for c in password)
        and any(c.islower() for c in password)
        and any(c.isdecimal() for c in password)
    )


def calculate_average(numbers: Sequence[int]) -> float:
    if not numbers:
        return 0.0
    total = 0
    for n in numbers:
        total += n
    return total / len(numbers)


def double_each(numbers: Sequence[int]) -> List[int]:
    return [n * 2 for n in numbers]


def sum_all(numbers: Sequence[int]) -> int:
    total = 0
    for n in numbers:
        total += n
    return total


class MathUtils:
    """Stateless helpers grouped under one name."""

    @staticmethod
    def square(n: int) -> int:
        return n * n

    @staticmethod
    def cube(n: int) -> int:
        return n * n * n

    @staticmethod
    def is_even(n: int) -> bool:
        return n % 2 == 0
