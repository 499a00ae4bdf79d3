# -*- coding: utf-8 -*-
"""
Custom Exception Classes for the Account Domain.

Purpose:
- Provide clear, domain-specific errors for balance operations.
- Let calling code handle rule violations explicitly instead of catching
  generic Exception.
- A failed operation never leaves a partially updated balance behind.
"""


class BankAccountError(Exception):
    """Base class for every error raised by this package."""


class InvalidAmount(BankAccountError, ValueError):
    """
    Raised when a transaction amount is invalid:
    - Zero or negative value.
    - More than the current balance on withdrawal.
    - Not a finite number at all.
    """


class InsufficientFunds(InvalidAmount):
    """
    Raised when a withdrawal cannot be completed because the account
    balance is empty or smaller than the requested amount.
    """


class BalanceOverflow(BankAccountError, ArithmeticError):
    """Raised when a deposit would push the balance past config.MAX_BALANCE."""
