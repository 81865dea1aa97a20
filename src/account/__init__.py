"""
Account Layer: Account variants, validation, and transaction outcomes.
"""
from .base import Account, TransactionResult
from .basic import BasicAccount, HISTORY_UNAVAILABLE
from .transactional import TransactionalAccount

__all__ = [
    "Account",
    "TransactionResult",
    "BasicAccount",
    "HISTORY_UNAVAILABLE",
    "TransactionalAccount",
]
