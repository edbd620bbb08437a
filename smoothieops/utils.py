import json
from pathlib import Path
from typing import Union

from pydantic import BaseModel, RootModel


def load_and_validate(data_path: Path, model: Union[RootModel, BaseModel]) -> BaseModel:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
        return model.model_validate(raw_data)
