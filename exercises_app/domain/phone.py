from dataclasses import dataclass
from typing import Optional


@dataclass
class Phone:
    brand: Optional[str] = None
    model: Optional[str] = None
    year: int = 0

    def call(self, phone_number: str) -> None:
        print(f"Calling {phone_number}...")

    def text(self, phone_number: str, message: str) -> None:
        print(f"Texting {phone_number}: {message}")
