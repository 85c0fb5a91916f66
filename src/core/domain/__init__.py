"""
Domain models and value objects.

Contains the monetary Decimal value type, its decode errors and the Wallet entity.
"""

from src.core.domain.errors import (
    DecimalError,
    DecimalErrorKind,
    ExponentOutOfRangeError,
    FractionOutOfRangeError,
    InvalidExponentError,
    InvalidFractionError,
    MultipleDelimitersError,
)
from src.core.domain.money import (
    EXPONENT_MAX,
    EXPONENT_MIN,
    MAX_VALUE,
    MIN_VALUE,
    SCALE,
    Decimal,
    format_decimal,
    parse_decimal,
)
from src.core.domain.wallet import Wallet

__all__ = [
    # Money module
    "SCALE",
    "EXPONENT_MIN",
    "EXPONENT_MAX",
    "MIN_VALUE",
    "MAX_VALUE",
    "Decimal",
    "format_decimal",
    "parse_decimal",
    # Errors
    "DecimalError",
    "DecimalErrorKind",
    "MultipleDelimitersError",
    "InvalidExponentError",
    "InvalidFractionError",
    "FractionOutOfRangeError",
    "ExponentOutOfRangeError",
    # Wallet model
    "Wallet",
]
