# tuning_loader.py
from __future__ import annotations
import json
import math
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict

from errors import TuningError
from settings import SimulationConfig, config_field_names


def load_tuning(path: str | Path, base: SimulationConfig | None = None) -> SimulationConfig:
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise TuningError(f"Failed to read tuning file {p}: {e}") from e
    return apply_tuning(data, base)


def apply_tuning(data: Dict[str, Any], base: SimulationConfig | None = None) -> SimulationConfig:
    # basic validation
    if not isinstance(data, dict):
        raise TuningError("Tuning JSON must be an object")
    known = set(config_field_names())
    unknown = sorted(set(data) - known)
    if unknown:
        raise TuningError(f"Unknown tuning keys: {', '.join(unknown)}")

    overrides: Dict[str, float] = {}
    for key, value in data.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TuningError(f"{key} must be a number")
        try:
            number = float(value)
        except OverflowError as e:
            raise TuningError(f"{key} is out of range: {e}") from e
        if not math.isfinite(number):
            raise TuningError(f"{key} must be a finite number")
        overrides[key] = number

    return replace(base or SimulationConfig(), **overrides).validate()
