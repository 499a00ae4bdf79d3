# -*- coding: utf-8 -*-
"""
Money Handling Utilities.

Purpose:
- Enforces that all monetary values on Account are handled as `Decimal`,
  never binary float, so amounts like 0.01 are exact.
- Provides helpers to normalize and validate amounts before use.
- Unlike a fixed 2dp ledger, amounts are NOT quantized: whatever precision the
  caller supplies is kept, and comparisons are exact (zero tolerance).
"""

from decimal import Context, Decimal, DivisionByZero, Inexact, InvalidOperation, Overflow

from .config import DECIMAL_PRECISION, DECIMAL_ROUNDING, MAX_BALANCE
from .errors import BalanceOverflow, InvalidAmount

# Balance arithmetic never reads the thread's current context. Inexact is
# trapped so a result that would need rounding is refused instead of stored.
MONEY_CONTEXT = Context(
    prec=DECIMAL_PRECISION,
    rounding=DECIMAL_ROUNDING,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
)
# Same precision, rounding allowed; for reported values that are never stored.
REPORT_CONTEXT = Context(prec=DECIMAL_PRECISION, rounding=DECIMAL_ROUNDING)


def as_decimal(value) -> Decimal:
    """
    Normalize Decimal, int, float or numeric str input to a finite Decimal.

    Floats go through str() first, so 0.1 becomes Decimal("0.1") and not the
    binary expansion of 0.1. Anything that is not a finite number raises
    InvalidAmount.
    """
    if value is None or isinstance(value, bool):
        raise InvalidAmount(f"Amount must be a number, got {value!r}")
    if isinstance(value, Decimal):
        amt = value
    else:
        try:
            amt = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidAmount(f"Amount must be a number, got {value!r}") from exc
    if not amt.is_finite():
        raise InvalidAmount(f"Amount must be a finite number, got {value!r}")
    return amt


def validate_amount_positive(amount) -> Decimal:
    """
    Validate that the amount is strictly positive and return it as Decimal.

    Raises InvalidAmount for zero, negative or non-numeric input.
    """
    amt = as_decimal(amount)
    if amt <= 0:
        raise InvalidAmount(f"Amount must be greater than zero, got {amt}")
    return amt


def max_balance() -> Decimal:
    return Decimal(MAX_BALANCE)


def check_balance_limit(balance: Decimal) -> Decimal:
    """Return `balance` unchanged, or raise BalanceOverflow past MAX_BALANCE."""
    if balance > max_balance():
        raise BalanceOverflow(f"Balance would exceed {MAX_BALANCE}")
    return balance


def add_money(balance: Decimal, amount: Decimal) -> Decimal:
    """Exact balance + amount, or InvalidAmount if the sum needs rounding."""
    try:
        return MONEY_CONTEXT.add(balance, amount)
    except Inexact as exc:
        raise InvalidAmount(
            f"{balance} + {amount} needs more than {DECIMAL_PRECISION} significant digits") from exc


def subtract_money(balance: Decimal, amount: Decimal) -> Decimal:
    """Exact balance - amount, or InvalidAmount if the difference needs rounding."""
    try:
        return MONEY_CONTEXT.subtract(balance, amount)
    except Inexact as exc:
        raise InvalidAmount(
            f"{balance} - {amount} needs more than {DECIMAL_PRECISION} significant digits") from exc
