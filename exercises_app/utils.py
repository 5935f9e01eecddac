import json
from pathlib import Path
from typing import Type

from pydantic import BaseModel


def read_choice(input_message: str) -> str:
    """Read one line from stdin and return it stripped.

    An exhausted stdin (EOF) counts as an empty answer, so a piped run
    without trailing input still reaches the end of the program.
    """
    try:
        return input(input_message).strip()
    except EOFError:
        return ""


def load_and_validate(data_path: Path, model: Type[BaseModel]) -> BaseModel:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Settings file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
        return model.model_validate(raw_data)
