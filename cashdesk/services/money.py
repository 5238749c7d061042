"""Money / rounding helpers.

Centralized so payment previews, the self-check harness, and future
endpoints use identical rounding semantics.

Two threshold rules live here and are easy to confuse:

- ``apply_rounding`` snaps an amount onto the 0.10 grid. A fractional part
  above 0.05 rounds up to the next dime, anything at or below 0.05 rounds
  down. This is the rule applied to cash settlements.
- ``round_amount`` uses the same 0.05 decision but only moves to the next
  or previous cent.

Floats are taken at their shortest repr via ``Decimal(str(value))``, so
150.07 is exactly 150.07 rather than 150.0699999... Noise that survives repr
is kept: ``0.1 + 0.2`` arrives as 0.30000000000000004 and rounds up to 0.4.
Callers adding amounts should use ``sum_and_round`` or pass ``Decimal``.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP
from typing import Union

from cashdesk.models.constants import CASH_PAYMENT_METHOD, PAYMENT_METHODS

Number = Union[int, float, Decimal, str]

ROUNDING_THRESHOLD = Decimal("0.05")
DIME = Decimal("0.1")
CENT = Decimal("0.01")


class InvalidAmountError(ValueError):
    """Raised when an amount is not a finite, non-negative number."""


@dataclass(frozen=True)
class CashSettlement:
    amount: float
    rounded: float
    adjustment: float
    payment_method: str


def to_decimal(value: Number) -> Decimal:
    """Convert a user-supplied amount into a validated ``Decimal``."""
    # bool is an int subclass; True must not silently become 1.00
    if isinstance(value, bool):
        raise InvalidAmountError(f"amount must be numeric, got {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation as e:
            raise InvalidAmountError(f"amount is not a number: {value!r}") from e
    else:
        raise InvalidAmountError(
            f"amount must be numeric, got {type(value).__name__}"
        )
    if not amount.is_finite():
        raise InvalidAmountError(f"amount must be finite, got {value!r}")
    if amount < 0:
        raise InvalidAmountError(f"amount must not be negative, got {value!r}")
    # -0.0 passes the check above; results must never carry the sign
    return amount.copy_abs()


def _threshold_round(amount: Decimal, step: Decimal) -> Decimal:
    try:
        fractional = amount % 1
        rounding = ROUND_CEILING if fractional > ROUNDING_THRESHOLD else ROUND_FLOOR
        return amount.quantize(step, rounding=rounding)
    except InvalidOperation as e:
        # exceeds the decimal context precision
        raise InvalidAmountError(f"amount out of range: {amount}") from e


def apply_rounding(amount: Number) -> float:
    """Snap ``amount`` onto the 0.10 grid using the 0.05 threshold rule.

    >>> apply_rounding(150.07)
    150.1
    >>> apply_rounding(150.05)
    150.0
    """
    return float(_threshold_round(to_decimal(amount), DIME))


def round_amount(amount: Number) -> float:
    """Cent-level variant of the threshold rule (ceil/floor to 0.01)."""
    return float(_threshold_round(to_decimal(amount), CENT))


def sum_and_round(amount1: Number, amount2: Number) -> float:
    return round_amount(to_decimal(amount1) + to_decimal(amount2))


def round2(value: float) -> float:
    return float(Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP))


def settle_cash_amount(amount: Number, payment_method: str = CASH_PAYMENT_METHOD) -> CashSettlement:
    """Compute the amount actually collected for a payment.

    Cash is snapped to the 0.10 grid and the difference is reported as
    ``adjustment`` (positive when the customer pays a little more). Other
    payment methods are collected as-is.
    """
    if payment_method not in PAYMENT_METHODS:
        raise ValueError(
            f"Unsupported payment method '{payment_method}'. Allowed: {PAYMENT_METHODS}"
        )
    original = to_decimal(amount)
    if payment_method != CASH_PAYMENT_METHOD:
        value = float(original)
        return CashSettlement(value, value, 0.0, payment_method)
    rounded = _threshold_round(original, DIME)
    return CashSettlement(
        amount=float(original),
        rounded=float(rounded),
        adjustment=round2(float(rounded - original)),
        payment_method=payment_method,
    )
