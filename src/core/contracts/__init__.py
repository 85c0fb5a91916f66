"""
Contract Validation Module

Модуль для валидации JSON контрактов кошелька.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    WalletValidator,
    validate_wallet,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "WalletValidator",
    # Functions
    "validate_wallet",
]
