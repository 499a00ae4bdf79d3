# -*- coding: utf-8 -*-
"""
FloatBankAccount - binary float balance, no deposit validation.

An older, independent variant of Account kept for callers that depend on its
behaviour. Deposits are not validated at all: negative, NaN and infinite
amounts go straight into the balance under IEEE 754 rules, and adding past
the largest float overflows to inf.
"""

from .errors import InsufficientFunds
from .log import get_logger

log = get_logger(__name__)


class FloatBankAccount:
    def __init__(self):
        self._balance = 0.0

    def __repr__(self) -> str:
        return f"FloatBankAccount(balance={self._balance!r})"

    @property
    def balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> float:
        self._balance += amount
        return self._balance

    def withdraw(self, amount: float) -> float:
        """
        Withdraws `amount` and returns the new balance.

        Raises InsufficientFunds if the account is empty (balance <= 0) or
        the amount exceeds the balance.
        """
        if self._balance <= 0:
            log.warning("withdraw of %r rejected: account is empty", amount)
            raise InsufficientFunds("Cannot withdraw from an empty account")
        if amount > self._balance:
            log.warning("withdraw of %r rejected: balance is %r", amount, self._balance)
            raise InsufficientFunds("Cannot withdraw more than the current balance")
        self._balance -= amount
        return self._balance
