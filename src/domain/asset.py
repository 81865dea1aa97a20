"""
Asset kinds and transaction actions.
"""
from enum import Enum

STOCK_PRICE = 5.00  # Fixed ACME share price
MAX_SHARE_UNITS = 2**31 - 1  # Largest representable unit count


class AssetKind(Enum):
    """Category of value moved in a transaction."""
    CASH = "Cash"
    STOCK = "Stock"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def is_supported(cls, kind) -> bool:
        """
        Check whether a kind is handled by the account system.
        Accepts any object so callers can probe unknown kinds safely.
        """
        return kind in (cls.CASH, cls.STOCK)


class TransactionAction(Enum):
    """Direction of a transaction."""
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"

    @property
    def label(self) -> str:
        return self.value
