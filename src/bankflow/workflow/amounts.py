"""
Monetary amount normalization and validation.

Every transfer, withdrawal and deposit amount passes through
AmountValidator.validate before any collaborator is called. Checks run in a
fixed order: format, rounding to cents (half-up), minimum, maximum. Bounds are
compared against the rounded value.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union

from bankflow.config import AmountLimits

CENTS = Decimal("0.01")

# wide enough to quantize any finite float to cents
_MONEY_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)

RawAmount = Union[float, int, Decimal]


class AmountRejection(str, Enum):
    INVALID_NUMBER = "invalid_number"
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"


@dataclass(frozen=True)
class AmountValidationResult:
    valid: bool
    normalized_amount: Optional[Decimal] = None
    reason: Optional[AmountRejection] = None
    sanitized: bool = False

    @classmethod
    def accept(cls, normalized: Decimal, sanitized: bool) -> "AmountValidationResult":
        return cls(valid=True, normalized_amount=normalized, sanitized=sanitized)

    @classmethod
    def reject(cls, reason: AmountRejection, sanitized: bool = False) -> "AmountValidationResult":
        return cls(valid=False, reason=reason, sanitized=sanitized)


def _to_decimal(amount: RawAmount) -> Optional[Decimal]:
    """
    Exact decimal form of a raw amount, or None if it is not a finite number.

    Floats go through their shortest repr so 10.555 becomes Decimal("10.555")
    rather than the binary expansion.
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        return None
    if isinstance(amount, Decimal):
        return amount if amount.is_finite() else None
    if isinstance(amount, int):
        return Decimal(amount)
    if math.isnan(amount) or math.isinf(amount):
        return None
    return Decimal(repr(amount))


def normalize_amount(amount: Decimal) -> Decimal:
    """
    Round to exactly two fractional digits, half-up.
    """
    try:
        return amount.quantize(CENTS, context=_MONEY_CONTEXT)
    except InvalidOperation:
        # beyond working precision; only reachable for huge Decimals, which
        # the bounds check rejects anyway
        return amount


class AmountValidator:
    """
    Pure amount validator. Holds only its limits, so one instance can be
    shared by any number of concurrent evaluations.
    """

    def __init__(self, limits: Optional[AmountLimits] = None):
        self.limits = limits or AmountLimits()

    def validate(self, amount: RawAmount) -> AmountValidationResult:
        raw = _to_decimal(amount)
        if raw is None:
            return AmountValidationResult.reject(AmountRejection.INVALID_NUMBER)

        normalized = normalize_amount(raw)
        sanitized = normalized != raw

        if normalized <= 0 or normalized < self.limits.minimum:
            return AmountValidationResult.reject(AmountRejection.BELOW_MINIMUM, sanitized)

        if normalized > self.limits.maximum:
            return AmountValidationResult.reject(AmountRejection.ABOVE_MAXIMUM, sanitized)

        return AmountValidationResult.accept(normalized, sanitized)


def validate_amount(amount: RawAmount, limits: Optional[AmountLimits] = None) -> AmountValidationResult:
    return AmountValidator(limits).validate(amount)
