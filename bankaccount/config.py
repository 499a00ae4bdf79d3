"""
Central Configuration File (SSOT).
"""

from decimal import ROUND_HALF_EVEN

# --- Decimal Arithmetic ---
# 34 significant digits (IEEE decimal128) keeps every whole/cent amount up to
# MAX_BALANCE exact.
DECIMAL_PRECISION: int = 34
DECIMAL_ROUNDING = ROUND_HALF_EVEN

# --- Business Rules ---
# Largest balance an Account may hold (2**96 - 1, the ceiling of a 96-bit
# decimal mantissa).
MAX_BALANCE = "79228162514264337593543950335"

# Documented format only: 4 digits, a dash, 5 letters (case-insensitive).
# Account does not enforce it; see account.is_valid_account_number().
ACCOUNT_NUMBER_PATTERN = r"^\d{4}-[A-Za-z]{5}$"

# --- Logging ---
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
