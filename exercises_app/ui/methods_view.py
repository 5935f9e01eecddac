# exercises_app/ui/methods_view.py
"""Method exercises: 21 to 30."""

from exercises_app.data import samples
from exercises_app.rules.methods import (
    MathUtils,
    add_numbers,
    build_greeting,
    calculate_average,
    double_each,
    double_value,
    greet,
    greeting_text,
    multiply,
    sum_all,
    try_parse_number,
    validate_password,
)


def greet_user():
    print(greeting_text())


def exercise_21():
    print("[21] Calling greet_user()...")
    greet_user()


def exercise_22():
    print("[22] Calling add_numbers(5, 7)...")
    print(f"[22] Result = {add_numbers(5, 7)}")


def exercise_23():
    print("[23] " + build_greeting("Eric", 2025))


def exercise_24():
    print(f"[24] Calling multiply(3, 4) => {multiply(3, 4)}")
    print(f"[24] Calling multiply(3.5, 2.0) => {multiply(3.5, 2.0)}")


def exercise_25():
    x = 10
    print(f"[25] Before doubling: x = {x}")
    x = double_value(x)
    print(f"[25] After doubling: x = {x}")

    number_string = "42"
    ok, parsed = try_parse_number(number_string)
    if ok:
        print(f"[25] Successfully parsed: {parsed}")
    else:
        print(f"[25] Failed to parse '{number_string}'")


def exercise_26():
    print("[26] Checking password validity...")
    password = samples.SAMPLE_PASSWORD
    if validate_password(password):
        print(f"[26] '{password}' is a strong password.")
    else:
        print(f"[26] '{password}' is too weak.")


def exercise_27():
    avg = calculate_average(samples.EXAM_SCORES)
    print(f"[27] Average score: {avg:.2f}")


def exercise_28():
    print("[28] Starting nested calls...")
    doubled_sum = sum_all(double_each(samples.DOUBLE_INPUT))
    print(f"[28] Doubled sum = {doubled_sum}")


def exercise_29():
    print("[29] Utility class demo:")
    print(f"Square(5) = {MathUtils.square(5)}")
    print(f"Cube(3) = {MathUtils.cube(3)}")
    print(f"IsEven(10) = {MathUtils.is_even(10)}")


def exercise_30():
    print(greet())
    print(greet("Eric"))
    print(greet("Eric", 3))
