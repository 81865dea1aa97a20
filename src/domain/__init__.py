"""
Domain Layer: Asset kinds, transaction records and account errors.
"""
from .asset import AssetKind, TransactionAction, STOCK_PRICE, MAX_SHARE_UNITS
from .transaction import TransactionRecord
from .errors import (
    AccountError,
    InvalidAmountError,
    UnsupportedAssetKindError,
    InsufficientFundsError,
    InsufficientSharesError,
    UnitOverflowError,
)

__all__ = [
    "AssetKind",
    "TransactionAction",
    "STOCK_PRICE",
    "MAX_SHARE_UNITS",
    "TransactionRecord",
    "AccountError",
    "InvalidAmountError",
    "UnsupportedAssetKindError",
    "InsufficientFundsError",
    "InsufficientSharesError",
    "UnitOverflowError",
]
