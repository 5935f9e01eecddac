"""
Selector -> routine table.

The table is built per run because the network exercise takes its URL and
timeout from the settings.
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Optional

from exercises_app.config import AppSettings
from exercises_app.ui import (
    arrays_view,
    classes_view,
    conversions_view,
    methods_view,
    network_view,
    offers_view,
    shop_view,
    strings_view,
)


@dataclass(frozen=True)
class Exercise:
    key: str
    title: str
    run: Callable[[], None]


_TITLES: Dict[int, str] = {
    1: "Sum a 3x4 matrix",
    2: "Split, sort and flag order ids",
    3: "Sort, find and reverse an array",
    4: "Split, replace and join a sentence",
    5: "Print an array, reverse word order",
    6: "HTTP GET a JSON todo",
    7: "Matrix sum with dimensions",
    8: "Resize an int array",
    9: "List basics",
    10: "Resize a string array",
    11: "Clear part of an array",
    12: "Sort a float array",
    13: "Decimal to float",
    14: "Int to string concatenation",
    15: "Parse and add",
    16: "Convert and multiply",
    17: "Class definition (Phone)",
    18: "Constructors",
    19: "Default field values",
    20: "Parameterless constructor",
    21: "Method definition and call",
    22: "Method with parameters",
    23: "Method returning a string",
    24: "Overloading by argument type",
    25: "Results through return values",
    26: "Password validation",
    27: "Average score",
    28: "Nested calls",
    29: "Utility class",
    30: "Overloaded greetings",
    31: "Inventory listing",
    32: "Place an order",
    33: "Cart component",
    34: "Clock abstraction",
    35: "Validated factory",
    36: "Repository-style lookup",
}

_VIEWS = (
    arrays_view,
    strings_view,
    conversions_view,
    classes_view,
    methods_view,
    shop_view,
    offers_view,
)


def _find_routine(number: int) -> Callable[[], None]:
    name = f"exercise_{number}"
    for view in _VIEWS:
        routine = getattr(view, name, None)
        if routine is not None:
            return routine
    raise LookupError(f"No routine named {name}")


def build_registry(settings: Optional[AppSettings] = None) -> Dict[str, Exercise]:
    """Map every selector ("1".."36") to its exercise."""
    settings = settings or AppSettings()
    registry: Dict[str, Exercise] = {}
    for number, title in _TITLES.items():
        if number == 6:
            routine = partial(
                network_view.exercise_6,
                url=settings.todo_url,
                timeout=settings.http_timeout,
            )
        else:
            routine = _find_routine(number)
        registry[str(number)] = Exercise(key=str(number), title=title, run=routine)
    return registry
