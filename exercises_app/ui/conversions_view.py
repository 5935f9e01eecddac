from exercises_app.data import samples
from exercises_app.rules.conversions import (
    concat_as_text,
    convert_and_multiply,
    parse_and_add,
    to_single_precision,
)


def exercise_13():
    value = samples.DECIMAL_VALUE
    print(f"[13] Decimal: {value}")
    print(f"[13] Float  : {to_single_precision(value)!s}")


def exercise_14():
    first, second = samples.INT_PAIR
    print(f"[14] Concatenated: {concat_as_text(first, second)}")


def exercise_15():
    first, second = samples.STRING_PAIR
    print(f"[15] Parsed sum: {parse_and_add(first, second)}")


def exercise_16():
    first, second = samples.STRING_PAIR
    print(f"[16] Converted product: {convert_and_multiply(first, second)}")
