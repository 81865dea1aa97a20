"""
Basic account - cash only, no transaction history.
"""
from typing import Optional, Tuple

from ..domain.asset import AssetKind, TransactionAction
from ..domain.transaction import TransactionRecord
from ..domain.errors import InsufficientFundsError
from .base import Account, opening_balance
from .validation import (
    require_positive,
    require_supported,
    require_finite_balance,
    to_cash_amount,
)

HISTORY_UNAVAILABLE = "Transactional history not available."


class BasicAccount(Account):
    """Cash-only account. Rejects overdrafts and keeps no history."""

    def __init__(self, initial_balance: float = 0.0):
        self._balance = opening_balance(initial_balance)

    def __repr__(self) -> str:
        return f"BasicAccount(balance={self._balance:.2f})"

    @property
    def balance(self) -> float:
        return self._balance

    def _execute(
        self,
        action: TransactionAction,
        amount: float,
        kind: AssetKind
    ) -> Tuple[str, Optional[TransactionRecord]]:
        noun = "deposits" if action is TransactionAction.DEPOSIT else "withdrawals"
        require_supported(kind, (AssetKind.CASH,), f"Only cash {noun} are supported.")
        amount = to_cash_amount(require_positive(amount, action), action)

        if action is TransactionAction.WITHDRAWAL:
            if amount > self._balance:
                raise InsufficientFundsError("Insufficient balance.")
            self._balance -= amount
            return f"Withdrawn: ${amount:.2f}", None

        self._balance = require_finite_balance(self._balance + amount)
        return f"Deposited: ${amount:.2f}", None

    def get_balance(self) -> float:
        return self._balance

    def get_history(self) -> str:
        return HISTORY_UNAVAILABLE
