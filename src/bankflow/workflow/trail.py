"""
Decision trail: the ordered checkpoints one evaluation passed through.
"""

from enum import Enum
from typing import Generic, Iterator, List, Tuple, TypeVar

D = TypeVar("D", bound=Enum)


class DecisionTrail(Generic[D]):
    """
    Append-only log of decision points. Owned by a single evaluation.
    """

    __slots__ = ("_points",)

    def __init__(self) -> None:
        self._points: List[D] = []

    def record(self, point: D) -> "DecisionTrail[D]":
        if not isinstance(point, Enum):
            raise TypeError(f"decision points must be Enum members, got {type(point).__name__}")
        self._points.append(point)
        return self

    def snapshot(self) -> Tuple[D, ...]:
        return tuple(self._points)

    def __iter__(self) -> Iterator[D]:
        return iter(tuple(self._points))

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, point: object) -> bool:
        return point in self._points

    def __repr__(self) -> str:
        return "DecisionTrail([" + ", ".join(p.name for p in self._points) + "])"
