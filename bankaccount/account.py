# -*- coding: utf-8 -*-
"""
Account - exact decimal balance.

- Balance is a Decimal; amounts are validated centrally via money.py.
- deposit/withdraw either succeed completely or raise without touching the
  balance.
- No locking: an Account shared between threads needs external
  synchronization.
"""

import re
from decimal import Decimal

from . import config
from .errors import BankAccountError, InvalidAmount
from .log import get_logger
from .money import REPORT_CONTEXT, add_money, check_balance_limit, subtract_money, validate_amount_positive

log = get_logger(__name__)

_ACCOUNT_NUMBER_RE = re.compile(config.ACCOUNT_NUMBER_PATTERN)


def is_valid_account_number(value) -> bool:
    """
    True if `value` matches the documented account number format,
    e.g. "1234-ABCDE". Account never calls this itself.
    """
    return isinstance(value, str) and _ACCOUNT_NUMBER_RE.fullmatch(value) is not None


class Account:
    """
    Represents an individual bank account.

    `account_number` should be 4 digits, a dash and 5 letters A-Z (any case),
    but the format is not enforced.
    """

    def __init__(self, account_number: str):
        self.account_number = account_number
        self._balance = Decimal("0")

    def __repr__(self) -> str:
        return f"Account({self.account_number!r}, balance={self._balance!r})"

    @property
    def balance(self) -> Decimal:
        """The current balance of the account."""
        return self._balance

    def deposit(self, amount) -> Decimal:
        """
        Add `amount` to the balance.

        Returns the new balance PLUS `amount` again, so depositing 1.00 into
        an empty account stores 1.00 and returns 2.00. This double count is
        suspected to be a bug but is kept for backward compatibility; read
        `balance` for the stored value. The returned value is rounded to
        config.DECIMAL_PRECISION digits if needed; the stored balance never is.

        Raises InvalidAmount if amount <= 0 or if the exact sum needs more
        than config.DECIMAL_PRECISION significant digits (e.g. 1E+28 + 1E-10),
        and BalanceOverflow if the new balance would exceed config.MAX_BALANCE.
        """
        try:
            amt = validate_amount_positive(amount)
            new_balance = check_balance_limit(add_money(self._balance, amt))
        except BankAccountError as exc:
            log.warning("deposit rejected on %s: %s", self.account_number, exc)
            raise
        self._balance = new_balance
        log.debug("deposit %s on %s, balance now %s", amt, self.account_number, new_balance)
        return REPORT_CONTEXT.add(self._balance, amt)

    def withdraw(self, amount) -> Decimal:
        """
        Withdraws a specified amount from the account balance.

        `amount` must satisfy 0 < amount <= balance, otherwise InvalidAmount
        is raised. Returns the updated balance.
        """
        try:
            amt = validate_amount_positive(amount)
            if amt > self._balance:
                raise InvalidAmount("Cannot withdraw negative or more than current balance")
            new_balance = subtract_money(self._balance, amt)
        except InvalidAmount as exc:
            log.warning("withdraw rejected on %s (balance %s): %s",
                        self.account_number, self._balance, exc)
            raise
        self._balance = new_balance
        log.debug("withdraw %s on %s, balance now %s", amt, self.account_number, new_balance)
        return self._balance
