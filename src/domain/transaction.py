"""
Transaction record - one completed deposit or withdrawal.
"""
from dataclasses import dataclass
from typing import Union

from .asset import AssetKind, TransactionAction, STOCK_PRICE


@dataclass(frozen=True)
class TransactionRecord:
    """Immutable entry in an account's session history."""
    kind: AssetKind
    action: TransactionAction
    amount: Union[float, int]  # Cash amount or number of shares

    def __str__(self) -> str:
        return self.format()

    @property
    def value(self) -> float:
        """Monetary value of the transaction."""
        if self.kind is AssetKind.STOCK:
            return int(self.amount) * STOCK_PRICE
        return float(self.amount)

    def format(self) -> str:
        """
        Render as "{kind} - {action} - {amount}".
        Cash shows as $xx.xx, stock as a whole share count.
        """
        if self.kind is AssetKind.CASH:
            amount_str = f"${self.amount:.2f}"
        else:
            amount_str = str(int(self.amount))  # truncate for display
        return f"{self.kind.label} - {self.action.label} - {amount_str}"
