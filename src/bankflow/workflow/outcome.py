"""
Outcome model for banking workflows.

An Outcome is the terminal result of one evaluation. It is one of four kinds
(success, invalid input, empty result, failure) and always carries the
decision trail that produced it. Outcomes are built through an
OutcomeBuilder, which records checkpoints and terminates exactly once.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Tuple, TypeVar

from .errors import WorkflowDefect
from .trail import DecisionTrail

P = TypeVar("P")
D = TypeVar("D", bound=Enum)


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    INVALID_INPUT = "invalid_input"
    EMPTY_RESULT = "empty_result"
    FAILURE = "failure"


@dataclass(frozen=True)
class Outcome(Generic[P, D]):
    kind: OutcomeKind
    status: int
    trail: Tuple[D, ...]
    payload: Optional[P] = None
    message: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is OutcomeKind.SUCCESS and self.payload is None:
            raise WorkflowDefect("a success outcome must carry a payload")

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    def trail_names(self) -> Tuple[str, ...]:
        return tuple(point.name for point in self.trail)


class OutcomeBuilder(Generic[P, D]):
    """
    Mutable accumulator for one evaluation.

    Checkpoints are recorded with ``record``; one of the ``build_*`` methods
    then freezes the trail into an Outcome. Any further ``record`` or
    ``build_*`` call raises WorkflowDefect.
    """

    def __init__(self) -> None:
        self._trail: DecisionTrail[D] = DecisionTrail()
        self._built: Optional[OutcomeKind] = None

    @classmethod
    def begin(cls) -> "OutcomeBuilder[P, D]":
        return cls()

    @property
    def trail(self) -> Tuple[D, ...]:
        return self._trail.snapshot()

    @property
    def is_open(self) -> bool:
        return self._built is None

    def record(self, point: D) -> "OutcomeBuilder[P, D]":
        if self._built is not None:
            raise WorkflowDefect(
                f"cannot record {point!r}: builder already produced a {self._built.value} outcome"
            )
        self._trail.record(point)
        return self

    def build_success(self, payload: P, status: int) -> Outcome[P, D]:
        if payload is None:
            raise WorkflowDefect("build_success requires a payload")
        return self._terminate(OutcomeKind.SUCCESS, status, payload=payload)

    def build_invalid(self, status: int, message: Optional[str] = None) -> Outcome[P, D]:
        return self._terminate(OutcomeKind.INVALID_INPUT, status, message=message)

    def build_empty(
        self, status: int, message: Optional[str] = None, payload: Optional[P] = None
    ) -> Outcome[P, D]:
        return self._terminate(OutcomeKind.EMPTY_RESULT, status, payload=payload, message=message)

    def build_failure(
        self, status: int, message: Optional[str] = None, payload: Optional[P] = None
    ) -> Outcome[P, D]:
        return self._terminate(OutcomeKind.FAILURE, status, payload=payload, message=message)

    def _terminate(
        self,
        kind: OutcomeKind,
        status: int,
        payload: Optional[P] = None,
        message: Optional[str] = None,
    ) -> Outcome[P, D]:
        if self._built is not None:
            raise WorkflowDefect(
                f"builder already produced a {self._built.value} outcome; cannot build {kind.value}"
            )
        self._built = kind
        return Outcome(
            kind=kind,
            status=int(status),
            trail=self._trail.snapshot(),
            payload=payload,
            message=message,
        )


def log_outcome(logger: logging.Logger, outcome: Outcome, context: str) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Outcome for %s -> kind=%s, status=%s, trail=%s",
            context,
            outcome.kind.value,
            outcome.status,
            list(outcome.trail_names()),
        )
