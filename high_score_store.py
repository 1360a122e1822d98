# high_score_store.py
from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Protocol

from errors import HighScoreSaveError

logger = logging.getLogger(__name__)

_KEY = "best_score"


class HighScoreStore(Protocol):
    def get(self) -> int:
        ...

    def set(self, value: int) -> None:
        ...


class MemoryHighScoreStore:
    def __init__(self, value: int = 0):
        self.value = value
        self.writes = 0

    def get(self) -> int:
        return self.value

    def set(self, value: int) -> None:
        self.value = int(value)
        self.writes += 1


def _coerce_score(raw: Any) -> int | None:
    # bool is an int subclass; reject it along with fractional floats and negatives
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw >= 0 else None
    if isinstance(raw, float) and raw.is_integer() and raw >= 0:
        return int(raw)
    if isinstance(raw, str):
        text = raw.strip()
        # isdigit() alone admits characters like "²" that int() rejects
        if not (text.isascii() and text.isdigit()):
            return None
        try:
            return int(text)
        except ValueError:
            # past the interpreter's int string-conversion digit limit
            return None
    return None


class JsonHighScoreStore:
    """
    Single best-score slot in a small JSON file: {"best_score": <int>}.
    Reads fail safe to 0; writes go through a temp file and os.replace.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get(self) -> int:
        if not self.path.exists():
            return 0
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable high score file %s: %s", self.path, e)
            return 0

        raw = data.get(_KEY) if isinstance(data, dict) else data
        score = _coerce_score(raw)
        if score is None:
            logger.warning("ignoring malformed best score %r in %s", raw, self.path)
            return 0
        return score

    def set(self, value: int) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps({_KEY: int(value)}), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                pass
            raise HighScoreSaveError(f"Failed to save best score to {self.path}: {e}") from e
