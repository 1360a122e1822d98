# collision.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, TypeVar


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height


class HasRect(Protocol):
    @property
    def rect(self) -> Rect:
        ...


T = TypeVar("T", bound=HasRect)


def overlaps(a: Rect, b: Rect) -> bool:
    """True iff both rectangles share a region of positive area (touching edges do not count)."""
    return (a.left < b.right and a.right > b.left
            and a.top < b.bottom and a.bottom > b.top)


def first_hit(rect: Rect, others: Iterable[T]) -> Optional[T]:
    for other in others:
        if overlaps(rect, other.rect):
            return other
    return None
