# -*- coding: utf-8 -*-
"""
Account-balance primitives: an exact decimal Account, a legacy
FloatBankAccount and a numeric range Validator.

Importing the package sets the global `Decimal` context used by every
balance calculation.
"""
import logging
from decimal import getcontext

from . import config

getcontext().prec = config.DECIMAL_PRECISION
getcontext().rounding = config.DECIMAL_ROUNDING

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .account import Account, is_valid_account_number  # noqa: E402
from .errors import (  # noqa: E402
    BalanceOverflow,
    BankAccountError,
    InsufficientFunds,
    InvalidAmount,
)
from .float_account import FloatBankAccount  # noqa: E402
from .validator import Validator  # noqa: E402

__all__ = [
    "Account",
    "BalanceOverflow",
    "BankAccountError",
    "FloatBankAccount",
    "InsufficientFunds",
    "InvalidAmount",
    "Validator",
    "is_valid_account_number",
]
