"""
Person variants used by the construction exercises (18 to 20).
"""

from dataclasses import dataclass
from typing import Optional


class Person18:
    """Built three ways: no argument, a name, or a name and an age.

    Each form announces itself, which makes the chosen path visible.
    """

    def __init__(self, name: Optional[str] = None, age: Optional[int] = None):
        if name is None:
            print("Person18(): parameterless constructor invoked.")
            name, age = "Unknown", 0
        elif age is None:
            print(f"Person18(name): name = {name}")
            age = 0
        else:
            print(f"Person18(name, age): name = {name}, age = {age}")
        self._name = name
        self._age = age

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age


@dataclass
class Person19:
    # no explicit constructor: field defaults only
    age: int = 0
    name: str = "unknown"


class Person20:
    def __init__(self):
        pass
